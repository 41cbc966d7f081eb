import io
from configparser import ConfigParser

import pytest

from utils.config import Config
from wordcount import CountedWord, FrequencyStore, WordCounter, count_words


SAMPLES = [
    "",
    "...,,,",
    "I like cookies. Mmm... Cookies.",
    "a,,,,b",
    "The the THE tHe end",
    "mixed 123 numbers 123 and words, and more words",
]


def _config(**overrides):
    config = Config(ConfigParser())
    for key, value in overrides.items():
        setattr(config, key, value)
    return config


def test_cookies():
    assert count_words("I like cookies. Mmm... Cookies.") == [
        CountedWord("cookies", 2),
        CountedWord("i", 1),
        CountedWord("like", 1),
        CountedWord("mmm", 1),
    ]


def test_normalization_merges_case():
    assert count_words(b"HELLO hello HeLLo") == [("hello", 3)]


def test_separator_collapsing():
    assert dict(count_words(b"a,,,,b")) == {"a": 1, "b": 1}


def test_flush_on_end():
    assert dict(count_words(b"cat dog")) == {"cat": 1, "dog": 1}


@pytest.mark.parametrize("text", SAMPLES)
def test_result_invariants(text):
    words = count_words(text)
    runs = len([w for w in "".join(
        c if c.isascii() and c.isalnum() else " " for c in text).split()])
    assert sum(w.count for w in words) == runs
    assert len({w.word for w in words}) == len(words)
    for a, b in zip(words, words[1:]):
        assert a.count > b.count or (a.count == b.count and a.word < b.word)


@pytest.mark.parametrize("chunk_size", [1, 4, 1 << 16])
def test_chunk_size_does_not_change_result(chunk_size):
    text = b"one two two three three three " * 50
    stream = io.BytesIO(text)
    assert count_words(stream, chunk_size) == [
        ("three", 150), ("two", 100), ("one", 50)]


def test_word_counter_uses_config():
    counter = WordCounter(_config(chunk_size=2))
    assert counter.count(io.BytesIO(b"Spam spam eggs")) == [("spam", 2), ("eggs", 1)]


def test_word_counter_markup():
    html = b"""<html><head><title>T</title><style>p { color: red }</style></head>
    <body><nav>Home About</nav><p>Hello <b>world</b>, hello!</p>
    <script>var hello = 1;</script></body></html>"""
    counter = WordCounter(_config(markup=True))
    assert counter.count(io.BytesIO(html)) == [("hello", 2), ("world", 1)]


def test_word_counter_factories():
    created = []

    class RecordingStore(FrequencyStore):
        def __init__(self):
            super().__init__()
            created.append(self)

    def shouting_tokenizer(source, chunk_size):
        for word in source.split():
            yield word.upper()

    counter = WordCounter(_config(), store_factory=RecordingStore,
                          tokenizer=shouting_tokenizer)
    assert counter.count("b a b") == [("B", 2), ("A", 1)]
    assert counter.count("c") == [("C", 1)]
    assert len(created) == 2
    assert all(store.finalized for store in created)


def test_word_counter_logs_totals(caplog):
    counter = WordCounter(_config())
    with caplog.at_level("INFO", logger="WORDCOUNT"):
        counter.count(b"x y x")
    assert "Counted 3 words, 2 distinct" in caplog.text

"""
wordcount/__init__.py - Word Count Pipeline

Coordinates one counting pass by:
- Reading the source through the tokenizer (optionally after the
  HTML visible-text pass)
- Feeding every token into a fresh FrequencyStore
- Finalizing the store into the ranked result

Key role: High-level coordinator that ties together tokenizer and store
"""

import time

from utils import get_logger
from wordcount.tokenizer import DEFAULT_CHUNK_SIZE, iter_chunks, tokenize
from wordcount.store import CountedWord, FrequencyStore, StoreFinalizedError
from wordcount.markup import extract_visible_text


__all__ = [
    "CountedWord",
    "FrequencyStore",
    "StoreFinalizedError",
    "WordCounter",
    "count_words",
    "tokenize",
]


def count_words(source, chunk_size=DEFAULT_CHUNK_SIZE):
    """
    Count the words of a byte source in a single pass.

    >>> count_words("I like cookies. Mmm... Cookies.")[0]
    CountedWord(word='cookies', count=2)

    Returns:
        list of CountedWord, highest count first, ties by word
    """
    store = FrequencyStore()
    for token in tokenize(source, chunk_size):
        store.add(token)
    return store.finalize()


class WordCounter(object):
    """
    Configured word counter.

    Each call to count() runs one complete pass with its own store; the
    counter itself keeps nothing between calls.
    """

    def __init__(self, config, store_factory=FrequencyStore, tokenizer=tokenize):
        """
        Args:
            config: Config object (chunk_size, markup, log_dir)
            store_factory: Factory for creating stores (for testing)
            tokenizer: Token generator function (for testing)
        """
        self.config = config
        self.logger = get_logger("WORDCOUNT", log_dir=config.log_dir)
        self.store_factory = store_factory
        self.tokenizer = tokenizer

    def count(self, source):
        """Consume the whole source and return the ranked CountedWord list."""
        started = time.perf_counter()

        if self.config.markup:
            source = self._visible_text(source)

        store = self.store_factory()
        for token in self.tokenizer(source, self.config.chunk_size):
            store.add(token)
        total = store.total
        words = store.finalize()

        self.logger.info(
            f"Counted {total} words, {len(words)} distinct, "
            f"in {time.perf_counter() - started:.3f}s.")
        return words

    def _visible_text(self, source):
        # the parser needs the whole document at once
        content = b"".join(iter_chunks(source, self.config.chunk_size))
        text = extract_visible_text(content)
        self.logger.info(
            f"Extracted {len(text)} characters of visible text "
            f"from {len(content)} bytes of markup.")
        return text

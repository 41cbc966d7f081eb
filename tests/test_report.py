import io
import json

import pytest

from wordcount.report import format_line, format_lines, write_report
from wordcount.store import CountedWord


WORDS = [
    CountedWord("cookies", 2),
    CountedWord("i", 1),
    CountedWord("like", 1),
    CountedWord("mmm", 1),
]


def test_tab_lines():
    assert list(format_lines(WORDS[:2])) == ["cookies\t2", "i\t1"]


def test_count_lines():
    assert list(format_lines(WORDS[:2], "count")) == ["2\tcookies", "1\ti"]


def test_quoted_alignment():
    assert format_line(CountedWord("cookies", 2), "quoted") == "'cookies':\t2"
    assert format_line(CountedWord("hello", 9), "quoted") == "'hello':\t9"
    assert format_line(CountedWord("mmm", 1), "quoted") == "'mmm':\t\t1"


def test_unknown_line_style():
    with pytest.raises(ValueError):
        format_line(WORDS[0], "json")


def test_write_report_top():
    out = io.StringIO()
    write_report(WORDS, out, "tab", top=2)
    assert out.getvalue() == "cookies\t2\ni\t1\n"


def test_write_report_all_when_top_is_zero():
    out = io.StringIO()
    write_report(WORDS, out, "count", top=0)
    assert out.getvalue().splitlines() == ["2\tcookies", "1\ti", "1\tlike", "1\tmmm"]


def test_write_report_json():
    out = io.StringIO()
    write_report(WORDS, out, "json", top=1)
    assert json.loads(out.getvalue()) == [{"word": "cookies", "count": 2}]


def test_write_report_empty():
    out = io.StringIO()
    write_report([], out)
    assert out.getvalue() == ""


def test_write_report_unknown_style():
    with pytest.raises(ValueError):
        write_report(WORDS, io.StringIO(), "xml")

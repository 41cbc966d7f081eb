"""
report.py - Ranked Word Output

Formats a finalized word list for people or for other programs:
- tab:    "<word>\t<count>"
- count:  "<count>\t<word>"
- quoted: "'<word>':\t<count>", extra tab for words under 5 characters
- json:   array of {"word": ..., "count": ...}
"""

import json
from itertools import islice


LINE_STYLES = ("tab", "count", "quoted")
STYLES = LINE_STYLES + ("json",)

# words at least this long already push the count past the first tab stop
QUOTED_ALIGN_WIDTH = 5


def format_line(counted_word, style="tab"):
    word, count = counted_word
    if style == "tab":
        return f"{word}\t{count}"
    if style == "count":
        return f"{count}\t{word}"
    if style == "quoted":
        if len(word) >= QUOTED_ALIGN_WIDTH:
            return f"'{word}':\t{count}"
        return f"'{word}':\t\t{count}"
    raise ValueError(
        f"unknown line style {style!r}, expected one of {', '.join(LINE_STYLES)}")


def format_lines(words, style="tab"):
    """Yield one formatted line (no newline) per CountedWord."""
    for counted_word in words:
        yield format_line(counted_word, style)


def write_report(words, stream, style="tab", top=None):
    """
    Write the ranked words to a text stream.

    Args:
        words: ordered CountedWord list from FrequencyStore.finalize()
        stream: writable text stream
        style: one of STYLES
        top: only write the first `top` records (None or 0 for all)
    """
    if style not in STYLES:
        raise ValueError(
            f"unknown report style {style!r}, expected one of {', '.join(STYLES)}")
    if top:
        words = islice(words, top)

    if style == "json":
        data = [{"word": word, "count": count} for word, count in words]
        json.dump(data, stream, indent=2)
        stream.write("\n")
        return

    for line in format_lines(words, style):
        stream.write(line + "\n")

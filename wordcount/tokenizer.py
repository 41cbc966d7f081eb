"""
tokenizer.py - Streaming ASCII Word Tokenizer

Turns a byte source into a lazy sequence of lowercase words:
- A word is a maximal run of ASCII letters and digits
- Every other byte separates words, including each byte of a
  multi-byte UTF-8 sequence ("café" -> "caf")
- Input is read in fixed-size chunks; a word split across two chunks
  is still emitted once, whole

Key role: feeds normalized tokens to the FrequencyStore
"""

import re
from collections.abc import Iterable


DEFAULT_CHUNK_SIZE = 1 << 16

WORD_RE = re.compile(rb"[A-Za-z0-9]+")


def iter_chunks(source, chunk_size=DEFAULT_CHUNK_SIZE):
    """
    Yield the source as a sequence of bytes chunks.

    Accepts bytes-like objects, str (encoded as UTF-8, lone surrogates
    included), readable streams (binary or text) and iterables of bytes
    chunks or of ints in 0..255.

    Raises:
        TypeError: for any other kind of source
    """
    if isinstance(source, (bytes, bytearray, memoryview)):
        yield bytes(source)
    elif isinstance(source, str):
        yield source.encode("utf-8", "surrogatepass")
    elif hasattr(source, "read"):
        while True:
            chunk = source.read(chunk_size)
            if not chunk:
                break
            if isinstance(chunk, str):
                chunk = chunk.encode("utf-8", "surrogatepass")
            yield chunk
    elif isinstance(source, Iterable):
        for item in source:
            if isinstance(item, int):
                if not 0 <= item <= 255:
                    raise TypeError(f"expected ints in 0..255, got {item}")
                yield bytes((item,))
            elif isinstance(item, (bytes, bytearray, memoryview)):
                yield bytes(item)
            else:
                raise TypeError(
                    f"expected bytes or int items, got {type(item).__name__}")
    else:
        raise TypeError(f"cannot tokenize {type(source).__name__}")


def tokenize(source, chunk_size=DEFAULT_CHUNK_SIZE):
    """
    Runtime Complexity: O(n)
    where n is the total number of bytes in the source. Each chunk is
    scanned once by WORD_RE and each word is folded once.

    The generator is either between words or inside one. `pending` holds
    the part of a word seen so far when a chunk ends in the middle of it,
    and is flushed when the next separator (or end of input) shows up.
    """
    pending = bytearray()

    for chunk in iter_chunks(source, chunk_size):
        if not chunk:
            continue
        end_of_chunk = len(chunk)
        for match in WORD_RE.finditer(chunk):
            start, end = match.span()
            if pending and start > 0:
                # the carried word ended right at the previous chunk
                yield _fold(pending)
                pending.clear()
            pending += match.group()
            if end < end_of_chunk:
                yield _fold(pending)
                pending.clear()

        # chunk held only separators after a carried word
        if pending and not WORD_RE.match(chunk, end_of_chunk - 1):
            yield _fold(pending)
            pending.clear()

    # flush-on-end
    if pending:
        yield _fold(pending)


def _fold(buffer):
    # lower() returns a new object so the str never aliases the buffer
    return buffer.lower().decode("ascii")

"""
store.py - Word Frequency Store

Deduplicates normalized words and counts how often each one appears:
- One dict entry per distinct word, counter starting at 1
- finalize() turns the mapping into a ranked list, once

Key role: the accumulator between the tokenizer and the report
"""

from typing import NamedTuple


class CountedWord(NamedTuple):
    """A word and the number of times it appeared."""
    word: str
    count: int


class StoreFinalizedError(RuntimeError):
    """Raised when a FrequencyStore is used after finalize()."""


def ranking_key(item):
    """
    Runtime Complexity: O(1)
    Sort key for (word, count) pairs: highest count first, then words
    in ascending order so ties come out the same on every run.
    """
    word, count = item
    return (-count, word)


class FrequencyStore(object):
    """
    Accumulates occurrence counts keyed by normalized word.

    The store is single-use: finalize() consumes it, and any later call
    raises StoreFinalizedError.
    """

    def __init__(self):
        self._counts = {}
        self._total = 0

    def add(self, word):
        """
        Runtime Complexity: O(1) amortized, one dict lookup and store.

        Raises:
            ValueError: if word is empty
        """
        counts = self._live()
        if not word:
            raise ValueError("cannot count an empty word")
        if word in counts:
            counts[word] += 1
        else:
            counts[word] = 1
        self._total += 1

    def update(self, words):
        """Add every word of an iterable, in order."""
        for word in words:
            self.add(word)

    def finalize(self):
        """
        Runtime Complexity: O(U log U) where U is the number of distinct
        words; sorting dominates.

        Returns:
            list of CountedWord ordered by descending count, ties by word
        """
        counts = self._live()
        self._counts = None
        self._total = 0
        return [CountedWord(word, count)
                for word, count in sorted(counts.items(), key=ranking_key)]

    @property
    def total(self):
        """Number of words added so far (0 once finalized)."""
        return self._total

    @property
    def finalized(self):
        return self._counts is None

    def __len__(self):
        return 0 if self._counts is None else len(self._counts)

    def __contains__(self, word):
        return word in self._live()

    def _live(self):
        if self._counts is None:
            raise StoreFinalizedError("FrequencyStore has already been finalized")
        return self._counts

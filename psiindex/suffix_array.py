"""Suffix array construction and substring search."""

from __future__ import annotations

from collections.abc import Sequence

INT_SIZE = 4


def build_suffix_array(text: str) -> list[int]:
    """Build the suffix array of ``text`` by prefix doubling.

    Suffixes are ordered by character code; a suffix that runs out compares
    as if followed by rank zero.
    """
    n = len(text)
    rank = [ord(c) for c in text]
    step = 1
    while step < n:

        def pair(i: int, rank: list[int] = rank, step: int = step) -> tuple[int, int]:
            return rank[i], (rank[i + step] if i + step < n else 0)

        order = sorted(range(n), key=pair)
        next_rank = [0] * n
        current = 0
        previous = None
        for i in order:
            key = pair(i)
            if key != previous:
                current += 1
                previous = key
            next_rank[i] = current
        rank = next_rank
        if current == n:
            break
        step *= 2
    return sorted(range(n), key=rank.__getitem__)


def compare_suffix(text: str, suffix_pos: int, query: str) -> int:
    """Compare the suffix of ``text`` at ``suffix_pos`` with ``query``.

    Returns 0 if the suffix matches the query and ends at (or one before)
    the end of the text, 2 if the query is a prefix of a longer suffix,
    -1 if the suffix is smaller and 1 if it is greater.
    """
    suffix = text[suffix_pos:suffix_pos + len(query)]
    for have, want in zip(suffix, query):
        if have != want:
            return -1 if have < want else 1
    if len(suffix) < len(query):
        return -1
    if suffix_pos + len(query) < len(text) - 1:
        return 2
    return 0


class SuffixArray:
    """A text together with its suffix array."""

    def __init__(self, text: str, suffix_array: Sequence[int] | None = None) -> None:
        self.text = text
        if suffix_array is None:
            self.suffix_array = build_suffix_array(text)
        else:
            if len(suffix_array) != len(text):
                raise ValueError("Suffix array size must match string size.")
            self.suffix_array = list(suffix_array)

    def find(self, query: str) -> int | None:
        """Return a text position where ``query`` occurs, or None."""
        left, right = 0, len(self.suffix_array) - 1
        partial = None
        while left <= right:
            mid = (left + right) // 2
            position = self.suffix_array[mid]
            cmp = compare_suffix(self.text, position, query)
            if cmp == 0:
                return position
            if cmp < 0:
                left = mid + 1
            else:
                right = mid - 1
            if cmp == 2:
                partial = position
        return partial

    def memory_size(self) -> int:
        """Return the size in bytes of the suffix array as 32-bit integers."""
        return len(self.suffix_array) * INT_SIZE
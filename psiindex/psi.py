"""Compressed suffix array built on the psi function."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import islice

from psiindex.gamma import GammaBlock
from psiindex.suffix_array import INT_SIZE

SAMPLE_CHAR_STEP = 128

_ALPHABET = 256
_REGION_BYTES = 8
_VECTOR_BYTES = 24
_BLOCK_BYTES = 32


@dataclass
class Region:
    """The inclusive range of suffix-array rows whose suffixes start with one character."""

    start: int = 0
    end: int = 0

    def __contains__(self, index: int) -> bool:
        return self.start <= index <= self.end


@dataclass(frozen=True)
class MemoryReport:
    """Estimated memory use of a psi index, in bytes."""

    total: int
    compressed: int
    sampled_suffix_array: int

    def __str__(self) -> str:
        return f"{self.total} {self.compressed} {self.sampled_suffix_array}"


class PsiSuffixArray:
    """A suffix array stored as gamma-compressed psi values plus samples.

    The text must end with a unique character that is smaller than every
    other character, so that the last suffix comes first in the suffix array.
    """

    def __init__(
        self,
        text: str,
        suffix_array: Sequence[int],
        compress_step: int,
        sample_step: int,
    ) -> None:
        if compress_step < 1 or sample_step < 1:
            raise ValueError("compress_step and sample_step must be positive")
        n = len(text)
        if n == 0:
            raise ValueError("text must not be empty")
        if len(suffix_array) != n:
            raise ValueError("Suffix array size must match string size.")
        if sorted(suffix_array) != list(range(n)):
            raise ValueError("suffix array is not a permutation of text positions")

        self.compress_step = compress_step
        self.sample_step = sample_step
        self.size = n
        self._sampled_suffix_array = list(suffix_array[::sample_step])
        self._sampled_chars = [
            text[suffix_array[i]] for i in range(0, n, SAMPLE_CHAR_STEP)
        ]
        self.regions = self._find_regions(text, suffix_array)
        self._region_chars = sorted(self.regions)
        psi = self._build_psi(suffix_array)
        self._blocks = {
            char: [
                GammaBlock(psi, i, min(i + compress_step, region.end + 1))
                for i in range(region.start, region.end + 1, compress_step)
            ]
            for char, region in self.regions.items()
            if not (region.start == 0 and region.end == 0)
        }

    @staticmethod
    def _find_regions(text: str, suffix_array: Sequence[int]) -> dict[str, Region]:
        firsts = [text[position] for position in suffix_array]
        regions: dict[str, Region] = {firsts[0]: Region()}
        for i, (previous, current) in enumerate(zip(firsts, firsts[1:]), start=1):
            if current != previous:
                regions.setdefault(current, Region()).start = i
                regions[previous].end = i - 1
        regions[firsts[-1]].end = len(firsts) - 1
        return regions

    @staticmethod
    def _build_psi(suffix_array: Sequence[int]) -> list[int]:
        n = len(suffix_array)
        inverse = [0] * n
        for rank, position in enumerate(suffix_array):
            inverse[position] = rank
        psi = [-1] * n
        for i, position in enumerate(suffix_array[1:], start=1):
            following = position + 1
            if following >= n:
                raise ValueError(
                    "the text must end with its unique smallest character"
                )
            psi[i] = inverse[following]
        return psi

    def _check_index(self, psi_index: int) -> None:
        if not 0 <= psi_index < self.size:
            raise IndexError(f"psi index {psi_index} out of range")

    def first_char(self, psi_index: int) -> str:
        """Return the first character of the suffix at row ``psi_index``."""
        self._check_index(psi_index)
        floor = self._sampled_chars[psi_index // SAMPLE_CHAR_STEP]
        candidates = islice(
            self._region_chars, bisect_left(self._region_chars, floor), None
        )
        for char in candidates:
            if psi_index in self.regions[char]:
                return char
        raise IndexError(f"no character region holds psi index {psi_index}")

    def psi_value(self, char: str, psi_index: int) -> int:
        """Return psi at row ``psi_index``, whose suffix starts with ``char``."""
        region = self.regions.get(char)
        blocks = self._blocks.get(char)
        if region is None or not blocks or psi_index not in region:
            raise IndexError(f"psi index {psi_index} is not in the region of {char!r}")
        offset = psi_index - region.start
        return blocks[offset // self.compress_step].value_at(
            offset % self.compress_step
        )

    def find_psi_index(self, query: str) -> int | None:
        """Return a suffix-array row whose suffix starts with ``query``, or None.

        A suffix that equals the query up to the final character of the text
        is returned at once; otherwise the leftmost partial match is kept.
        """
        if not query:
            return None
        left, right = 1, self.size - 1
        found = None
        while left <= right:
            mid = (left + right) // 2
            cursor = mid
            for wanted in query:
                if cursor < 0:
                    left = mid + 1
                    break
                char = self.first_char(cursor)
                if char < wanted:
                    left = mid + 1
                    break
                if char > wanted:
                    right = mid - 1
                    break
                cursor = self.psi_value(char, cursor) if cursor else -1
            else:
                if cursor <= 0:
                    return mid
                right = mid - 1
                found = mid
        return found

    def text_index(self, psi_index: int) -> int:
        """Return the text position of the suffix at row ``psi_index``."""
        self._check_index(psi_index)
        cursor = psi_index
        count = 0
        while cursor != 0:
            if cursor % self.sample_step == 0:
                return self._sampled_suffix_array[cursor // self.sample_step] - count
            cursor = self.psi_value(self.first_char(cursor), cursor)
            count += 1
        return self.size - count - 1

    def memory_size(self) -> MemoryReport:
        """Estimate the memory held by the index."""
        compressed = _ALPHABET * _VECTOR_BYTES
        for blocks in self._blocks.values():
            compressed += len(blocks) * _BLOCK_BYTES
            compressed += sum(block.heap_size() for block in blocks)
        sampled = len(self._sampled_suffix_array) * INT_SIZE
        total = _ALPHABET * _REGION_BYTES + sampled + len(self._sampled_chars) + compressed
        return MemoryReport(total=total, compressed=compressed, sampled_suffix_array=sampled)
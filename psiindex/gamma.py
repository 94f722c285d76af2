"""Elias-gamma coded blocks of increasing integers."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


class GammaBlock:
    """A run of strictly increasing integers stored as gamma-coded gaps.

    The first value is kept as is; every following value is stored as the
    gap to its predecessor, written with Elias-gamma coding.  Bits are packed
    least significant first into successive bytes.
    """

    __slots__ = ("first_value", "_data")

    def __init__(self, values: Sequence[int], start: int, end: int) -> None:
        if not 0 <= start < end <= len(values):
            raise ValueError(
                f"invalid block range [{start}, {end}) for {len(values)} values"
            )
        self.first_value = values[start]
        gaps = [values[i] - values[i - 1] for i in range(start + 1, end)]
        self._data = self._encode(gaps)

    @staticmethod
    def _encode(gaps: Sequence[int]) -> bytes:
        bits = 0
        pos = 0
        for gap in gaps:
            if gap <= 0:
                raise ValueError(f"values must be strictly increasing (gap {gap})")
            length = gap.bit_length()
            # length - 1 zero bits, then the number itself from its top bit down.
            pos += length - 1
            for shift in range(length - 1, -1, -1):
                if (gap >> shift) & 1:
                    bits |= 1 << pos
                pos += 1
        return bits.to_bytes((pos + 7) // 8, "little")

    def _bits(self) -> Iterator[int]:
        for byte in self._data:
            for shift in range(8):
                yield (byte >> shift) & 1

    def value_at(self, index: int) -> int:
        """Return the value at ``index`` within the block."""
        if index < 0:
            raise IndexError(f"block index {index} is negative")
        bits = self._bits()
        value = self.first_value
        try:
            for _ in range(index):
                length = 1
                while not next(bits):
                    length += 1
                gap = 1
                for _ in range(length - 1):
                    gap = (gap << 1) | next(bits)
                value += gap
        except StopIteration:
            raise IndexError(f"block index {index} out of range") from None
        return value

    def heap_size(self) -> int:
        """Return the number of bytes used by the coded gaps."""
        return len(self._data)
"""SAM/BAM helpers: CIGAR operations and the BAM binning scheme."""

from __future__ import annotations

import enum

_CIGAR_CHARS = "MIDNSHP=X"
_MIN_SHIFT = 14
_LEVELS = 5


class CigarOp(enum.IntEnum):
    """CIGAR operation codes as stored in BAM records."""

    MATCH = 0
    INS = 1
    DEL = 2
    REF_SKIP = 3
    SOFT_CLIP = 4
    HARD_CLIP = 5
    PAD = 6
    BASE_MATCH = 7
    BASE_MISMATCH = 8

    @classmethod
    def from_char(cls, char: str) -> "CigarOp":
        """Return the operation written as ``char`` in a CIGAR string."""
        index = _CIGAR_CHARS.find(char) if len(char) == 1 else -1
        if index < 0:
            raise ValueError(f"unknown CIGAR operation {char!r}")
        return cls(index)

    def char(self) -> str:
        """Return the CIGAR string letter for this operation."""
        return _CIGAR_CHARS[self.value]


def reg2bin(beg: int, end: int) -> int:
    """Return the BAM index bin of the zero-based half-open region [beg, end)."""
    end -= 1
    shift = _MIN_SHIFT
    offset = ((1 << (3 * _LEVELS)) - 1) // 7
    for level in range(_LEVELS, 0, -1):
        if beg >> shift == end >> shift:
            return offset + (beg >> shift)
        shift += 3
        offset -= 1 << (3 * (level - 1))
    return 0
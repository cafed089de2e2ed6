from enum import IntEnum
from types import MappingProxyType
from typing import Mapping, Tuple


class SegmentType(IntEnum):
    L = 0  # left arc (counter-clockwise)
    S = 1  # straight
    R = 2  # right arc (clockwise)


class DubinsWord(IntEnum):
    """Path families, numbered in solver evaluation order."""

    LSL = 0
    LSR = 1
    RSL = 2
    RSR = 3
    RLR = 4
    LRL = 5

    def __str__(self) -> str:
        return self.name

    @property
    def segments(self) -> Tuple[SegmentType, SegmentType, SegmentType]:
        return WORD_SEGMENTS[self]


_L, _S, _R = SegmentType.L, SegmentType.S, SegmentType.R

WORD_SEGMENTS: Mapping[DubinsWord, Tuple[SegmentType, SegmentType, SegmentType]] = MappingProxyType(
    {
        DubinsWord.LSL: (_L, _S, _L),
        DubinsWord.LSR: (_L, _S, _R),
        DubinsWord.RSL: (_R, _S, _L),
        DubinsWord.RSR: (_R, _S, _R),
        DubinsWord.RLR: (_R, _L, _R),
        DubinsWord.LRL: (_L, _R, _L),
    }
)

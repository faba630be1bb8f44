"""
Segment model - which of the eight display elements are lit.

Segment layout:
    _top_
   |     |
   TL    TR
   |_ctr_|
   |     |
   BL    BR
   |_bot_| .

Bits: top=1, topRight=2, bottomRight=4, bottom=8,
      bottomLeft=16, topLeft=32, center=64, period=128

A DisplayState is the set of lit segments, stored as an 8-bit mask.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Tuple

ALL_SEGMENTS_MASK = 0xFF


class Kind(Enum):
    """Shape category of a segment."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DOT = "dot"


class Segment(Enum):
    """One of the eight light-up elements, valued by its bit."""
    TOP = 0b00000001
    TOP_RIGHT = 0b00000010
    BOTTOM_RIGHT = 0b00000100
    BOTTOM = 0b00001000
    BOTTOM_LEFT = 0b00010000
    TOP_LEFT = 0b00100000
    CENTER = 0b01000000
    PERIOD = 0b10000000

    @property
    def bit(self) -> int:
        return self.value

    @property
    def kind(self) -> Kind:
        return _SEGMENT_KINDS[self]

    @property
    def display_state(self) -> DisplayState:
        """Singleton set holding only this segment."""
        return DisplayState(self.value)


_SEGMENT_KINDS = {
    Segment.TOP: Kind.HORIZONTAL,
    Segment.CENTER: Kind.HORIZONTAL,
    Segment.BOTTOM: Kind.HORIZONTAL,
    Segment.TOP_RIGHT: Kind.VERTICAL,
    Segment.BOTTOM_RIGHT: Kind.VERTICAL,
    Segment.BOTTOM_LEFT: Kind.VERTICAL,
    Segment.TOP_LEFT: Kind.VERTICAL,
    Segment.PERIOD: Kind.DOT,
}


@dataclass(frozen=True)
class DisplayState:
    """Immutable set of lit segments for one character position.

    Equality and hashing are by mask, so states work as cache keys.
    """
    mask: int = 0

    def __post_init__(self):
        if not isinstance(self.mask, int) or isinstance(self.mask, bool):
            raise ValueError(f"DisplayState mask must be an int, got {self.mask!r}")
        if not 0 <= self.mask <= ALL_SEGMENTS_MASK:
            raise ValueError(f"DisplayState mask out of range 0..255: {self.mask}")

    # -- construction --------------------------------------------------------

    @classmethod
    def empty(cls) -> DisplayState:
        return cls(0)

    @classmethod
    def of(cls, *segments: Segment) -> DisplayState:
        """Build a state from individual segments."""
        return cls.from_segments(segments)

    @classmethod
    def from_segments(cls, segments: Iterable[Segment]) -> DisplayState:
        mask = 0
        for seg in segments:
            mask |= seg.bit
        return cls(mask)

    # -- set operations ------------------------------------------------------

    def union(self, other: DisplayState) -> DisplayState:
        return DisplayState(self.mask | other.mask)

    def intersection(self, other: DisplayState) -> DisplayState:
        return DisplayState(self.mask & other.mask)

    def contains(self, segment: Segment) -> bool:
        return bool(self.mask & segment.bit)

    def __or__(self, other):
        if isinstance(other, Segment):
            other = other.display_state
        if not isinstance(other, DisplayState):
            return NotImplemented
        return self.union(other)

    __ror__ = __or__

    def __and__(self, other):
        if isinstance(other, Segment):
            other = other.display_state
        if not isinstance(other, DisplayState):
            return NotImplemented
        return self.intersection(other)

    __rand__ = __and__

    def __contains__(self, segment) -> bool:
        return isinstance(segment, Segment) and self.contains(segment)

    def __iter__(self) -> Iterator[Segment]:
        # Enum definition order is ascending bit order
        return (seg for seg in Segment if self.mask & seg.bit)

    def __len__(self) -> int:
        return bin(self.mask).count("1")

    def __bool__(self) -> bool:
        return self.mask != 0

    def __repr__(self) -> str:
        names = "|".join(seg.name for seg in self) or "BLANK"
        return f"DisplayState({names})"

    # -- period --------------------------------------------------------------

    @property
    def has_period(self) -> bool:
        return self.contains(Segment.PERIOD)

    def with_period(self, has_period: bool = True) -> DisplayState:
        """Copy of this state with the period turned on (or off)."""
        if has_period:
            return DisplayState(self.mask | Segment.PERIOD.bit)
        return DisplayState(self.mask & ~Segment.PERIOD.bit)


def blank_display_state() -> DisplayState:
    """State with no segments lit."""
    return DisplayState.empty()


def segments_of(state: DisplayState) -> Tuple[Segment, ...]:
    """Lit segments of ``state`` in ascending bit order."""
    return tuple(state)

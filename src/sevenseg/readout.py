"""
Readout composer - a left-to-right row of displays built from text.

Every character gets one display; characters that can't be shown render
blank rather than failing. 5% of the readout's width is shared out as
the gaps between displays.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from .display import DEFAULT_COLOR, Color, RenderedSegment, Skew, parse_color, render_display
from .encoding import encode
from .geometry import Rect, Size
from .segments import DisplayState

log = logging.getLogger(__name__)

DEFAULT_HEIGHT = 64.0

# Preview cells are 9 units wide by 16 tall
DEFAULT_CHARACTER_ASPECT_RATIO = 9 / 16

# Fraction of the total width given to inter-display gaps
GAP_FRACTION = 1 / 20


@dataclass(frozen=True)
class ReadoutCell:
    """One character position: where it goes and what it shows."""
    frame: Rect
    state: DisplayState


@dataclass(frozen=True)
class Readout:
    text: str
    frame: Rect
    color: Color
    skew: Skew
    spacing: float
    cells: Tuple[ReadoutCell, ...]

    @property
    def states(self) -> Tuple[DisplayState, ...]:
        return tuple(cell.state for cell in self.cells)

    def __len__(self) -> int:
        return len(self.cells)


def readout_spacing(total_width: float, count: int) -> float:
    """Gap between adjacent displays; zero for a single display."""
    if count <= 1:
        return 0.0
    return (total_width * GAP_FRACTION) / max(1, count - 1)


def readout_aspect_ratio(per_character: float = DEFAULT_CHARACTER_ASPECT_RATIO,
                         count: int = 1) -> float:
    """Width/height ratio of a readout of ``count`` characters."""
    if count > 0:
        return per_character * count
    return per_character


def states_for(text: Iterable[str], allow_case_toggle: bool = True) -> List[DisplayState]:
    """One DisplayState per character, blank where a character can't be shown."""
    states = []
    for ch in text:
        state = encode(ch, allow_case_toggle)
        if state is None:
            log.debug("Rendering %r as blank", ch)
            state = DisplayState.empty()
        states.append(state)
    return states


def layout_readout(text: Iterable[str],
                   frame: Optional[Union[Rect, Size]] = None,
                   color=DEFAULT_COLOR,
                   skew=Skew.NONE,
                   allow_case_toggle: bool = True) -> Readout:
    """Split ``frame`` into one equal cell per character of ``text``.

    Args:
        text: Characters to show, in order.
        frame: Area of the whole readout. Defaults to a 64-unit-high box
            sized by :func:`readout_aspect_ratio`.
        color: Lit color for every display.
        skew: Slant applied to each display.
        allow_case_toggle: Passed to the character encoder.
    """
    text = "".join(text)
    states = states_for(text, allow_case_toggle)
    count = len(states)

    if frame is None:
        frame = Size(DEFAULT_HEIGHT * readout_aspect_ratio(count=count), DEFAULT_HEIGHT)
    if isinstance(frame, Size):
        frame = Rect.from_size(frame)

    spacing = readout_spacing(frame.width, count)
    cell_width = (frame.width - spacing * (count - 1)) / count if count else 0.0

    cells = tuple(
        ReadoutCell(
            frame=Rect(frame.x + i * (cell_width + spacing), frame.y,
                       cell_width, frame.height),
            state=state,
        )
        for i, state in enumerate(states)
    )
    return Readout(
        text=text,
        frame=frame,
        color=parse_color(color),
        skew=Skew.parse(skew),
        spacing=spacing,
        cells=cells,
    )


def render_readout(readout: Readout) -> List[List[RenderedSegment]]:
    """Composed segments for every display of ``readout``, left to right."""
    return [
        render_display(cell.state, cell.frame, readout.color, readout.skew)
        for cell in readout.cells
    ]

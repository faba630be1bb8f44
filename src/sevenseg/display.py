"""
Display composer - eight positioned, colored segments for one character.

Colors are RGBA tuples. Unlit segments keep the display color at 10%
opacity so the full "8." ghost stays visible, like a real LED display.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Tuple, Union

from PIL import ImageColor

from .geometry import Rect, SegmentShape, Shear, Size, frame_for, shape_for
from .segments import DisplayState, Segment

log = logging.getLogger(__name__)

Color = Tuple[int, int, int, int]

DIM_OPACITY = 0.1
DEFAULT_COLOR: Color = (255, 0, 0, 255)


# =========================================================================
# Colors
# =========================================================================

def parse_color(value) -> Color:
    """Normalize a color to an RGBA tuple.

    Accepts RGB/RGBA tuples, '#rrggbb', bare 'rrggbb' hex, or any color
    name Pillow knows ('red', 'orange', ...).

    Raises:
        ValueError: if the value is not a color.
    """
    if isinstance(value, (tuple, list)):
        if len(value) not in (3, 4) or not all(
                isinstance(c, int) and 0 <= c <= 255 for c in value):
            raise ValueError(f"Invalid color tuple: {value!r}")
        r, g, b = value[:3]
        a = value[3] if len(value) == 4 else 255
        return (r, g, b, a)

    if not isinstance(value, str):
        raise ValueError(f"Invalid color: {value!r}")

    text = value.strip()
    if len(text) in (6, 8) and all(c in "0123456789abcdefABCDEF" for c in text):
        text = "#" + text
    rgba = ImageColor.getrgb(text)  # ValueError for unknown names
    if len(rgba) == 3:
        return (*rgba, 255)
    return tuple(rgba)


def with_opacity(color: Color, opacity: float) -> Color:
    """Same color with its alpha scaled by ``opacity`` (0..1)."""
    r, g, b, a = color
    opacity = min(1.0, max(0.0, opacity))
    return (r, g, b, int(round(a * opacity)))


def color_to_hex(color: Color) -> str:
    r, g, b, a = color
    if a == 255:
        return f"#{r:02x}{g:02x}{b:02x}"
    return f"#{r:02x}{g:02x}{b:02x}{a:02x}"


# =========================================================================
# Skew
# =========================================================================

@dataclass(frozen=True)
class Skew:
    """Horizontal shear factor for a slanted display (0 = upright)."""
    factor: float = 0.0

    NONE = None         # type: Skew
    TRADITIONAL = None  # type: Skew

    def __post_init__(self):
        if not math.isfinite(self.factor):
            raise ValueError(f"Skew factor must be finite, got {self.factor!r}")

    @classmethod
    def custom(cls, factor: float) -> Skew:
        return cls(float(factor))

    @classmethod
    def parse(cls, value) -> Skew:
        """Skew from a preset name ('none', 'traditional') or a number."""
        if isinstance(value, Skew):
            return value
        if isinstance(value, (int, float)):
            return cls.custom(value)
        text = str(value).strip().lower()
        if text in ("", "none"):
            return cls.NONE
        if text == "traditional":
            return cls.TRADITIONAL
        try:
            return cls.custom(float(text))
        except ValueError:
            raise ValueError(f"Unknown skew: {value!r}") from None

    @property
    def is_none(self) -> bool:
        return self.factor == 0

    def padding(self, frame_width: float) -> float:
        """Horizontal room kept free on each side so the slant stays inside."""
        return abs(self.factor) * frame_width

    def __str__(self) -> str:
        if self == Skew.NONE:
            return "none"
        if self == Skew.TRADITIONAL:
            return "traditional"
        return f"{self.factor:g}"


Skew.NONE = Skew(0.0)
Skew.TRADITIONAL = Skew(-0.1)


# =========================================================================
# Composition
# =========================================================================

@dataclass(frozen=True)
class RenderedSegment:
    """One segment ready to paint: its outline and fill color."""
    segment: Segment
    shape: SegmentShape
    fill: Color
    lit: bool


def _as_rect(frame: Union[Rect, Size]) -> Rect:
    if isinstance(frame, Size):
        return Rect.from_size(frame)
    return frame


def segment_fill(state: DisplayState, segment: Segment, color: Color) -> Color:
    """Full color for a lit segment, dimmed color otherwise."""
    return color if state.contains(segment) else with_opacity(color, DIM_OPACITY)


def render_display(state: DisplayState,
                   frame: Union[Rect, Size],
                   color=DEFAULT_COLOR,
                   skew: Skew = Skew.NONE) -> List[RenderedSegment]:
    """Compose all eight segments of a display inside ``frame``.

    Args:
        state: Which segments are lit.
        frame: Rect (or Size at the origin) the display occupies.
        color: Lit color; anything :func:`parse_color` accepts.
        skew: Optional slant, sheared about the frame's vertical centre.

    Returns:
        Eight RenderedSegments in ascending segment-bit order.
    """
    rect = _as_rect(frame)
    color = parse_color(color)
    skew = Skew.parse(skew)

    inner = rect.inset(skew.padding(rect.width))
    shear = Shear(skew.factor, rect.mid_y)

    rendered = []
    for segment in Segment:
        local = frame_for(segment, inner.size)
        shape = shape_for(segment.kind, local).translated(inner.x, inner.y)
        if not skew.is_none:
            shape = shape.sheared(shear)
        rendered.append(RenderedSegment(
            segment=segment,
            shape=shape,
            fill=segment_fill(state, segment, color),
            lit=state.contains(segment),
        ))
    return rendered

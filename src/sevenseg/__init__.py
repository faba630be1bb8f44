"""
sevenseg - Seven-segment display rendering

Turns text into seven-segment displays: which segments light up for each
character, and the polygon outlines to paint them in any frame.

Features:
- 8-segment bit model (seven strokes + period)
- Character table with case-toggle fallback
- Resolution-independent segment geometry with optional skew
- Multi-character readouts with automatic spacing
- PIL image rendering and PyQt6 widgets

Usage:
    # As a library
    from sevenseg import layout_readout, render_readout
    readout = layout_readout("12.5", Size(180, 80))
    for segments in render_readout(readout):
        ...  # paint segment.shape.outline() with segment.fill

    # Command line
    sevenseg render "HELLO" -o hello.png
"""

from sevenseg.__version__ import __version__

# Core model
from sevenseg.segments import (
    DisplayState,
    Kind,
    Segment,
    blank_display_state,
    segments_of,
)
from sevenseg.encoding import (
    CHARACTER_ENCODINGS,
    display_state_resembling,
    encode,
)
from sevenseg.geometry import (
    Point,
    Rect,
    SegmentGeometry,
    SegmentShape,
    Size,
    frame_for,
    geometry,
    shape_for,
    stroke_thickness,
)

# Composition
from sevenseg.display import RenderedSegment, Skew, parse_color, render_display, with_opacity
from sevenseg.readout import (
    Readout,
    ReadoutCell,
    layout_readout,
    readout_aspect_ratio,
    readout_spacing,
    render_readout,
)

__all__ = [
    # Version
    "__version__",
    # Model
    "DisplayState",
    "Kind",
    "Segment",
    "blank_display_state",
    "segments_of",
    # Encoding
    "CHARACTER_ENCODINGS",
    "display_state_resembling",
    "encode",
    # Geometry
    "Point",
    "Rect",
    "SegmentGeometry",
    "SegmentShape",
    "Size",
    "frame_for",
    "geometry",
    "shape_for",
    "stroke_thickness",
    # Composition
    "RenderedSegment",
    "Skew",
    "parse_color",
    "render_display",
    "with_opacity",
    "Readout",
    "ReadoutCell",
    "layout_readout",
    "readout_aspect_ratio",
    "readout_spacing",
    "render_readout",
]

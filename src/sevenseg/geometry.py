"""
Segment geometry - where each segment sits in a frame and what it looks like.

Placement is derived from the stroke thickness ``t = max(1, 10% of the
shorter side)``, so displays scale to any frame without pixel constants:

    left verticals     x = 0        .. t
    bars               x = t/2      .. W - 2t
    right verticals    x = W - 2.5t .. W - 1.5t
    period             x = W - t    .. W         (y = H - t .. H)

    upper verticals    y = t/2 .. H/2
    lower verticals    y = H/2 .. H - t/2

On frames with a side shorter than 1 unit the minimum thickness wins, so
vertical and period rects can extend past that side of the frame.

Bars are hexagons with pointed ends (the classic LED look); the period
is an ellipse inscribed in its square.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .segments import Kind, Segment

log = logging.getLogger(__name__)

# Stroke thickness as a fraction of the frame's shorter side
THICKNESS_RATIO = 0.1
MIN_THICKNESS = 1.0

# Horizontal bars are this many strokes shorter than the frame
# (half-stroke inset left, right verticals + period column on the right)
HORIZONTAL_INSET = 2.5


# =========================================================================
# Value types
# =========================================================================

@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Size:
    width: float
    height: float

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle: origin (x, y) plus width and height."""
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_size(cls, size: Size, origin: Point = Point(0.0, 0.0)) -> Rect:
        return cls(origin.x, origin.y, size.width, size.height)

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2

    def translated(self, dx: float, dy: float) -> Rect:
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    def inset(self, dx: float, dy: float = 0.0) -> Rect:
        """Shrink by ``dx`` on the left and right, ``dy`` top and bottom."""
        return Rect(self.x + dx, self.y + dy,
                    max(0.0, self.width - 2 * dx),
                    max(0.0, self.height - 2 * dy))

    def contains_rect(self, other: Rect, tolerance: float = 1e-9) -> bool:
        return (other.min_x >= self.min_x - tolerance
                and other.min_y >= self.min_y - tolerance
                and other.max_x <= self.max_x + tolerance
                and other.max_y <= self.max_y + tolerance)


@dataclass(frozen=True)
class Shear:
    """Horizontal shear ``(x, y) -> (x + factor * (y - pivot_y), y)``."""
    factor: float = 0.0
    pivot_y: float = 0.0

    @property
    def is_identity(self) -> bool:
        return self.factor == 0

    def apply(self, point: Point) -> Point:
        return Point(point.x + self.factor * (point.y - self.pivot_y), point.y)


IDENTITY = Shear()


@dataclass(frozen=True)
class SegmentShape:
    """Drawable outline of one segment.

    ``points`` holds the closed hexagon for bars and is empty for dots,
    which are ellipses inscribed in ``rect``. ``shear`` is applied when the
    outline is materialized.
    """
    kind: Kind
    rect: Rect
    points: Tuple[Point, ...] = ()
    shear: Shear = field(default=IDENTITY)

    @property
    def is_ellipse(self) -> bool:
        return self.kind is Kind.DOT

    def outline(self, ellipse_steps: int = 32) -> List[Point]:
        """Polygon vertices with the shear applied.

        Ellipses are sampled with ``ellipse_steps`` points, starting at
        the rightmost point and running the same way as the bar outlines.
        """
        if self.is_ellipse:
            r = self.rect
            rx, ry = r.width / 2, r.height / 2
            pts = [
                Point(r.mid_x + rx * math.cos(2 * math.pi * i / ellipse_steps),
                      r.mid_y + ry * math.sin(2 * math.pi * i / ellipse_steps))
                for i in range(ellipse_steps)
            ]
        else:
            pts = list(self.points)
        if self.shear.is_identity:
            return pts
        return [self.shear.apply(p) for p in pts]

    def sheared(self, shear: Shear) -> SegmentShape:
        return SegmentShape(self.kind, self.rect, self.points, shear)

    def translated(self, dx: float, dy: float) -> SegmentShape:
        shear = Shear(self.shear.factor, self.shear.pivot_y + dy)
        return SegmentShape(
            self.kind,
            self.rect.translated(dx, dy),
            tuple(Point(p.x + dx, p.y + dy) for p in self.points),
            shear,
        )

    def bounds(self) -> Rect:
        """Bounding box of the (sheared) outline."""
        if self.shear.is_identity:
            return self.rect
        pts = self.outline()
        if not pts:
            return self.rect
        xs = [p.x for p in pts]
        ys = [p.y for p in pts]
        return Rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))


@dataclass(frozen=True)
class SegmentGeometry:
    """Where a segment goes in its parent frame, and its outline there."""
    segment: Segment
    origin: Point
    size: Size
    shape: SegmentShape

    @property
    def frame(self) -> Rect:
        return Rect.from_size(self.size, self.origin)


# =========================================================================
# Placement
# =========================================================================

def stroke_thickness(parent: Size) -> float:
    """Segment stroke width for a frame: 10% of the shorter side, at least 1."""
    return max(MIN_THICKNESS, min(parent.width, parent.height) * THICKNESS_RATIO)


def segment_size(kind: Kind, parent: Size) -> Size:
    """Size of a segment of ``kind`` inside a frame of ``parent`` size."""
    if parent.is_empty:
        return Size(0.0, 0.0)

    t = stroke_thickness(parent)
    if kind is Kind.HORIZONTAL:
        return Size(max(0.0, parent.width - HORIZONTAL_INSET * t), t)
    if kind is Kind.VERTICAL:
        return Size(t, max(0.0, (parent.height - t) / 2))
    return Size(t, t)


def segment_origin(segment: Segment, parent: Size) -> Point:
    """Top-left corner of ``segment`` inside a frame of ``parent`` size."""
    if parent.is_empty:
        return Point(0.0, 0.0)

    t = stroke_thickness(parent)
    w, h = parent.width, parent.height
    right = max(0.0, w - HORIZONTAL_INSET * t)

    if segment is Segment.TOP:
        return Point(t / 2, 0.0)
    if segment is Segment.CENTER:
        return Point(t / 2, max(0.0, (h - t) / 2))
    if segment is Segment.BOTTOM:
        return Point(t / 2, max(0.0, h - t))
    if segment is Segment.TOP_LEFT:
        return Point(0.0, t / 2)
    if segment is Segment.BOTTOM_LEFT:
        return Point(0.0, h / 2)
    if segment is Segment.TOP_RIGHT:
        return Point(right, t / 2)
    if segment is Segment.BOTTOM_RIGHT:
        return Point(right, h / 2)
    # period: flush with the bottom-right corner
    return Point(max(0.0, w - t), max(0.0, h - t))


def frame_for(segment: Segment, parent: Size, kind: Optional[Kind] = None) -> Rect:
    """Sub-rectangle of ``parent`` that ``segment`` is drawn in.

    ``kind`` overrides the segment's own kind for sizing.
    """
    if parent.is_empty:
        log.debug("Degenerate frame %sx%s for %s", parent.width, parent.height, segment.name)
    size = segment_size(kind or segment.kind, parent)
    return Rect.from_size(size, segment_origin(segment, parent))


# =========================================================================
# Outlines
# =========================================================================

def _horizontal_bar(rect: Rect) -> Tuple[Point, ...]:
    half = min(rect.width, rect.height) / 2
    return (
        Point(rect.max_x, rect.mid_y),
        Point(rect.max_x - half, rect.max_y),
        Point(rect.min_x + half, rect.max_y),
        Point(rect.min_x, rect.mid_y),
        Point(rect.min_x + half, rect.min_y),
        Point(rect.max_x - half, rect.min_y),
    )


def _vertical_bar(rect: Rect) -> Tuple[Point, ...]:
    half = min(rect.width, rect.height) / 2
    return (
        Point(rect.mid_x, rect.max_y),
        Point(rect.max_x, rect.max_y - half),
        Point(rect.max_x, rect.min_y + half),
        Point(rect.mid_x, rect.min_y),
        Point(rect.min_x, rect.min_y + half),
        Point(rect.min_x, rect.max_y - half),
    )


def shape_for(kind: Kind, rect: Rect) -> SegmentShape:
    """Outline of a ``kind`` segment filling ``rect``."""
    if kind is Kind.HORIZONTAL:
        return SegmentShape(kind, rect, _horizontal_bar(rect))
    if kind is Kind.VERTICAL:
        return SegmentShape(kind, rect, _vertical_bar(rect))
    return SegmentShape(kind, rect)


def geometry(segment: Segment, parent: Size) -> SegmentGeometry:
    """Frame and outline of ``segment`` in a frame of ``parent`` size."""
    frame = frame_for(segment, parent)
    return SegmentGeometry(
        segment=segment,
        origin=frame.origin,
        size=frame.size,
        shape=shape_for(segment.kind, frame),
    )

"""
ImageRenderer - rasterizes displays and readouts into PIL images.

Segments are drawn on a transparent overlay and alpha-composited onto the
background, so dimmed (10% opacity) segments blend instead of replacing
the background pixels.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

from PIL import Image, ImageDraw

from .display import DEFAULT_COLOR, RenderedSegment, Skew, parse_color, render_display
from .geometry import Size
from .readout import (
    DEFAULT_CHARACTER_ASPECT_RATIO,
    DEFAULT_HEIGHT,
    layout_readout,
    readout_aspect_ratio,
    render_readout,
)
from .segments import DisplayState

log = logging.getLogger(__name__)


class ImageRenderer:
    """
    Renders seven-segment displays to RGBA images.

    Supports:
    - Single displays from a DisplayState
    - Readouts from text (unrepresentable characters render blank)
    - Any lit color; dim segments use the same color at 10% opacity
    - Optional skew
    """

    # Points per ellipse when rasterizing the period
    ELLIPSE_STEPS = 32

    def __init__(self, background=(0, 0, 0, 255),
                 aspect_ratio: float = DEFAULT_CHARACTER_ASPECT_RATIO,
                 height: float = DEFAULT_HEIGHT):
        """
        Initialize renderer.

        Args:
            background: Background color (anything parse_color accepts)
            aspect_ratio: Width/height of one character cell
            height: Default image height when no size is given
        """
        self.background = parse_color(background)
        self.aspect_ratio = aspect_ratio
        self.height = height

    def _canvas(self, size: Tuple[int, int]) -> Image.Image:
        return Image.new('RGBA', size, self.background)

    def _paint(self, img: Image.Image, segments: Iterable[RenderedSegment]) -> Image.Image:
        """Composite segments onto ``img`` and return the result."""
        overlay = Image.new('RGBA', img.size, (0, 0, 0, 0))
        draw = ImageDraw.Draw(overlay)
        for rendered in segments:
            shape = rendered.shape
            if shape.is_ellipse and shape.shear.is_identity:
                r = shape.rect
                if r.width <= 0 or r.height <= 0:
                    continue
                draw.ellipse([r.min_x, r.min_y, r.max_x, r.max_y], fill=rendered.fill)
                continue
            points = [(p.x, p.y) for p in shape.outline(self.ELLIPSE_STEPS)]
            if len(points) < 3:
                continue
            draw.polygon(points, fill=rendered.fill)
        return Image.alpha_composite(img, overlay)

    def default_size(self, count: int = 1) -> Tuple[int, int]:
        """Image size for ``count`` characters at the configured height."""
        width = self.height * readout_aspect_ratio(self.aspect_ratio, count)
        return (max(1, int(round(width))), max(1, int(round(self.height))))

    def render_display(self, state: DisplayState,
                       size: Optional[Tuple[int, int]] = None,
                       color=DEFAULT_COLOR,
                       skew=Skew.NONE) -> Image.Image:
        """Render one display.

        Args:
            state: Segments to light.
            size: (width, height) in pixels; defaults to one character cell.
            color: Lit segment color.
            skew: Optional slant.

        Returns:
            RGBA PIL Image.
        """
        size = size or self.default_size(1)
        img = self._canvas(size)
        segments = render_display(state, Size(*size), color, skew)
        return self._paint(img, segments)

    def render_readout(self, text: str,
                       size: Optional[Tuple[int, int]] = None,
                       color=DEFAULT_COLOR,
                       skew=Skew.NONE) -> Image.Image:
        """Render a row of displays spelling ``text``."""
        size = size or self.default_size(len(text))
        img = self._canvas(size)
        readout = layout_readout(text, Size(*size), color, skew)
        log.debug("Readout %r: %d cells, spacing %.2f", text, len(readout), readout.spacing)
        for segments in render_readout(readout):
            img = self._paint(img, segments)
        return img

    @staticmethod
    def save(img: Image.Image, path: Union[str, Path]) -> Path:
        """Write ``img`` to ``path`` (format from the extension)."""
        path = Path(path)
        if path.suffix.lower() in ('.jpg', '.jpeg', '.bmp'):
            img = img.convert('RGB')
        img.save(path)
        log.info("Saved %s (%dx%d)", path, img.width, img.height)
        return path

#!/usr/bin/env python3
"""
7-segment display widgets.

Custom QPainter widgets that paint the composer's segment outlines.
State is a plain value set from outside (set_state / set_text);
the widget only repaints, it never owns change notification.
"""

from typing import List, Optional

try:
    from PyQt6.QtCore import QPointF, QRectF, Qt
    from PyQt6.QtGui import QBrush, QColor, QPainter, QPolygonF
    from PyQt6.QtWidgets import QWidget
    PYQT6_AVAILABLE = True
except ImportError:
    PYQT6_AVAILABLE = False

from ..display import DEFAULT_COLOR, RenderedSegment, Skew, parse_color, render_display
from ..geometry import Size
from ..readout import DEFAULT_CHARACTER_ASPECT_RATIO, layout_readout, render_readout
from ..segments import DisplayState


if PYQT6_AVAILABLE:

    def paint_segments(painter: 'QPainter', segments: List[RenderedSegment]) -> None:
        """Fill each segment outline with its color."""
        painter.setPen(Qt.PenStyle.NoPen)
        for rendered in segments:
            painter.setBrush(QBrush(QColor(*rendered.fill)))
            shape = rendered.shape
            if shape.is_ellipse and shape.shear.is_identity:
                r = shape.rect
                painter.drawEllipse(QRectF(r.x, r.y, r.width, r.height))
            else:
                painter.drawPolygon(QPolygonF(
                    [QPointF(p.x, p.y) for p in shape.outline()]))

    class _SegmentWidget(QWidget):
        """Shared color/skew/background handling."""

        def __init__(self, parent=None, color=DEFAULT_COLOR, skew=Skew.NONE):
            super().__init__(parent)
            self._color = parse_color(color)
            self._skew = Skew.parse(skew)
            self._background: Optional[QColor] = None

        def color(self):
            return self._color

        def set_color(self, color) -> None:
            """Set lit segment color (tuple, hex string, or color name)."""
            self._color = parse_color(color)
            self.update()

        def skew(self) -> Skew:
            return self._skew

        def set_skew(self, skew) -> None:
            self._skew = Skew.parse(skew)
            self.update()

        def set_background(self, color) -> None:
            """Fill behind the segments; None leaves the widget transparent."""
            self._background = None if color is None else QColor(*parse_color(color))
            self.update()

        def _segments(self) -> List[List[RenderedSegment]]:
            """Rendered segments per character cell. Subclasses must override."""
            raise NotImplementedError

        def paintEvent(self, event):
            painter = QPainter(self)
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            if self._background is not None:
                painter.fillRect(self.rect(), self._background)
            for segments in self._segments():
                paint_segments(painter, segments)
            painter.end()

    class UCSevenSegment(_SegmentWidget):
        """Single seven-segment display."""

        def __init__(self, parent=None, state: Optional[DisplayState] = None,
                     color=DEFAULT_COLOR, skew=Skew.NONE):
            super().__init__(parent, color, skew)
            self._state = state or DisplayState.empty()
            self.setMinimumSize(9, 16)

        def state(self) -> DisplayState:
            return self._state

        def set_state(self, state: Optional[DisplayState]) -> None:
            """Show ``state``; None shows a blank display."""
            self._state = state or DisplayState.empty()
            self.update()

        def _segments(self) -> List[List[RenderedSegment]]:
            size = Size(self.width(), self.height())
            return [render_display(self._state, size, self._color, self._skew)]

    class UCSevenSegmentReadout(_SegmentWidget):
        """Row of seven-segment displays spelling a string."""

        def __init__(self, parent=None, text: str = "", color=DEFAULT_COLOR,
                     skew=Skew.NONE,
                     aspect_ratio: float = DEFAULT_CHARACTER_ASPECT_RATIO):
            super().__init__(parent, color, skew)
            self._text = text
            self._aspect_ratio = aspect_ratio

        def text(self) -> str:
            return self._text

        def set_text(self, text: str) -> None:
            self._text = text
            self.updateGeometry()
            self.update()

        def states(self):
            return layout_readout(self._text, Size(self.width(), self.height())).states

        def sizeHint(self):
            hint = super().sizeHint()
            height = max(hint.height(), 64)
            count = max(1, len(self._text))
            hint.setWidth(int(height * self._aspect_ratio * count))
            hint.setHeight(height)
            return hint

        def _segments(self) -> List[List[RenderedSegment]]:
            readout = layout_readout(self._text, Size(self.width(), self.height()),
                                     self._color, self._skew)
            return render_readout(readout)

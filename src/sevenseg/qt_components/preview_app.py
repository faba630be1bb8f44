"""Standalone window showing a readout (``sevenseg gui``)."""

import os
import sys

from PyQt6.QtWidgets import QApplication

from ..conf import Settings
from .uc_seven_segment import UCSevenSegmentReadout


def create_preview(text: str, settings: Settings, color=None, skew=None) -> UCSevenSegmentReadout:
    """Build (but don't show) a readout widget using config defaults."""
    widget = UCSevenSegmentReadout(
        text=text,
        color=color if color is not None else settings.color,
        skew=skew if skew is not None else settings.skew,
        aspect_ratio=settings.aspect_ratio,
    )
    widget.set_background(settings.background)
    widget.setWindowTitle(f"sevenseg: {text}")
    hint = widget.sizeHint()
    height = int(settings.height)
    widget.resize(int(hint.width() * height / max(1, hint.height())), height)
    return widget


def run_preview_app(text: str, color=None, skew=None) -> int:
    """Run a Qt event loop showing ``text`` until the window is closed."""
    os.environ.setdefault("QT_LOGGING_RULES", "qt.qpa.services=false")
    app = QApplication.instance() or QApplication(sys.argv)
    window = create_preview(text, Settings(), color, skew)
    window.show()
    return app.exec()

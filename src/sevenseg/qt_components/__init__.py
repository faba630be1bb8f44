"""PyQt6 widgets for seven-segment displays."""

from .uc_seven_segment import PYQT6_AVAILABLE

__all__ = ['PYQT6_AVAILABLE']

if PYQT6_AVAILABLE:
    from .uc_seven_segment import UCSevenSegment, UCSevenSegmentReadout, paint_segments

    __all__ += [
        'UCSevenSegment',
        'UCSevenSegmentReadout',
        'paint_segments',
    ]

"""Tests for readout.py – spacing, aspect ratio, and text layout."""

import unittest

from sevenseg.display import Skew
from sevenseg.encoding import encode
from sevenseg.geometry import Rect, Size
from sevenseg.readout import (
    DEFAULT_CHARACTER_ASPECT_RATIO,
    layout_readout,
    readout_aspect_ratio,
    readout_spacing,
    render_readout,
    states_for,
)
from sevenseg.segments import DisplayState

# =========================================================================
# Spacing / aspect ratio
# =========================================================================


class TestSpacing(unittest.TestCase):

    def test_single_display_no_gap(self):
        self.assertEqual(readout_spacing(200, 1), 0.0)

    def test_empty_no_gap(self):
        self.assertEqual(readout_spacing(200, 0), 0.0)

    def test_five_over_200(self):
        self.assertAlmostEqual(readout_spacing(200, 5), 2.5)

    def test_two_over_100(self):
        self.assertAlmostEqual(readout_spacing(100, 2), 5.0)

    def test_total_gap_is_five_percent(self):
        for n in range(2, 12):
            self.assertAlmostEqual(readout_spacing(300, n) * (n - 1), 15.0)


class TestAspectRatio(unittest.TestCase):

    def test_scales_with_count(self):
        self.assertAlmostEqual(readout_aspect_ratio(0.5, 4), 2.0)

    def test_zero_count_unchanged(self):
        self.assertAlmostEqual(readout_aspect_ratio(0.5, 0), 0.5)

    def test_default(self):
        self.assertAlmostEqual(readout_aspect_ratio(), DEFAULT_CHARACTER_ASPECT_RATIO)


# =========================================================================
# Layout
# =========================================================================

class TestStatesFor(unittest.TestCase):

    def test_unrepresentable_becomes_blank(self):
        states = states_for("1K#")
        self.assertEqual(states, [encode('1'), DisplayState.empty(), DisplayState.empty()])

    def test_case_toggle_flag(self):
        self.assertEqual(states_for("N"), [encode('n')])
        self.assertEqual(states_for("N", allow_case_toggle=False), [DisplayState.empty()])


class TestLayoutReadout(unittest.TestCase):

    def test_01(self):
        readout = layout_readout("01")
        self.assertEqual(readout.states, (encode('0'), encode('1')))
        left, right = readout.cells
        gap = right.frame.min_x - left.frame.max_x
        self.assertGreater(gap, 0)
        self.assertAlmostEqual(gap, readout.spacing)

    def test_five_cells_in_200(self):
        readout = layout_readout("12345", Size(200, 80))
        self.assertAlmostEqual(readout.spacing, 2.5)
        widths = {round(c.frame.width, 9) for c in readout.cells}
        self.assertEqual(widths, {38.0})
        self.assertAlmostEqual(readout.cells[-1].frame.max_x, 200)
        for cell in readout.cells:
            self.assertEqual(cell.frame.height, 80)

    def test_left_to_right_order(self):
        readout = layout_readout("HELLO", Size(250, 80))
        xs = [c.frame.x for c in readout.cells]
        self.assertEqual(xs, sorted(xs))
        self.assertEqual(readout.states[0], encode('H'))

    def test_single_character_fills_frame(self):
        readout = layout_readout("8", Rect(10, 20, 45, 80))
        self.assertEqual(readout.spacing, 0.0)
        self.assertEqual(readout.cells[0].frame, Rect(10, 20, 45, 80))

    def test_empty_text(self):
        readout = layout_readout("", Size(100, 50))
        self.assertEqual(len(readout), 0)
        self.assertEqual(render_readout(readout), [])

    def test_default_frame_uses_aspect_ratio(self):
        readout = layout_readout("0000")
        self.assertAlmostEqual(readout.frame.width / readout.frame.height,
                               DEFAULT_CHARACTER_ASPECT_RATIO * 4)

    def test_accepts_character_sequence(self):
        readout = layout_readout(['4', '2'], Size(100, 80))
        self.assertEqual(readout.text, "42")

    def test_color_and_skew_normalized(self):
        readout = layout_readout("7", Size(50, 80), color='#00ff00', skew='traditional')
        self.assertEqual(readout.color, (0, 255, 0, 255))
        self.assertEqual(readout.skew, Skew.TRADITIONAL)


class TestRenderReadout(unittest.TestCase):

    def test_one_display_per_cell(self):
        readout = layout_readout("12.", Size(150, 80))
        rendered = render_readout(readout)
        self.assertEqual(len(rendered), 3)
        for segments in rendered:
            self.assertEqual(len(segments), 8)

    def test_segments_inside_their_cells(self):
        readout = layout_readout("88", Size(120, 80))
        for cell, segments in zip(readout.cells, render_readout(readout)):
            for r in segments:
                self.assertTrue(cell.frame.contains_rect(r.shape.rect))


if __name__ == '__main__':
    unittest.main()

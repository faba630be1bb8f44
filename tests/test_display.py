"""Tests for display.py – colors, skew, and display composition."""

import unittest

from sevenseg.display import (
    DIM_OPACITY,
    Skew,
    color_to_hex,
    parse_color,
    render_display,
    segment_fill,
    with_opacity,
)
from sevenseg.encoding import encode
from sevenseg.geometry import Point, Rect, Size, frame_for
from sevenseg.segments import DisplayState, Segment

RED = (255, 0, 0, 255)


# =========================================================================
# Colors
# =========================================================================

class TestParseColor(unittest.TestCase):

    def test_rgb_tuple(self):
        self.assertEqual(parse_color((1, 2, 3)), (1, 2, 3, 255))

    def test_rgba_tuple(self):
        self.assertEqual(parse_color((1, 2, 3, 4)), (1, 2, 3, 4))

    def test_hex_with_hash(self):
        self.assertEqual(parse_color('#ff8000'), (255, 128, 0, 255))

    def test_bare_hex(self):
        self.assertEqual(parse_color('00ff00'), (0, 255, 0, 255))

    def test_named(self):
        self.assertEqual(parse_color('red'), RED)

    def test_invalid(self):
        for bad in ('notacolor', (1, 2), (300, 0, 0), 42, None):
            with self.assertRaises(ValueError, msg=repr(bad)):
                parse_color(bad)

    def test_hex_round_trip(self):
        self.assertEqual(color_to_hex((255, 128, 0, 255)), '#ff8000')
        self.assertEqual(color_to_hex((255, 128, 0, 16)), '#ff800010')


class TestOpacity(unittest.TestCase):

    def test_dim(self):
        self.assertEqual(with_opacity(RED, 0.1), (255, 0, 0, 26))

    def test_clamped(self):
        self.assertEqual(with_opacity(RED, 2.0), RED)
        self.assertEqual(with_opacity(RED, -1), (255, 0, 0, 0))

    def test_segment_fill(self):
        state = DisplayState.of(Segment.TOP)
        self.assertEqual(segment_fill(state, Segment.TOP, RED), RED)
        self.assertEqual(segment_fill(state, Segment.BOTTOM, RED),
                         with_opacity(RED, DIM_OPACITY))


# =========================================================================
# Skew
# =========================================================================

class TestSkew(unittest.TestCase):

    def test_presets(self):
        self.assertEqual(Skew.NONE.factor, 0.0)
        self.assertEqual(Skew.TRADITIONAL.factor, -0.1)
        self.assertTrue(Skew.NONE.is_none)
        self.assertFalse(Skew.TRADITIONAL.is_none)

    def test_custom(self):
        self.assertEqual(Skew.custom(0.25).factor, 0.25)

    def test_parse(self):
        self.assertEqual(Skew.parse('none'), Skew.NONE)
        self.assertEqual(Skew.parse('Traditional'), Skew.TRADITIONAL)
        self.assertEqual(Skew.parse('-0.2'), Skew.custom(-0.2))
        self.assertEqual(Skew.parse(0.3), Skew.custom(0.3))
        self.assertIs(Skew.parse(Skew.TRADITIONAL), Skew.TRADITIONAL)

    def test_parse_invalid(self):
        with self.assertRaises(ValueError):
            Skew.parse('sideways')
        for bad in ('nan', 'inf', '-inf', float('nan')):
            with self.assertRaises(ValueError):
                Skew.parse(bad)
        with self.assertRaises(ValueError):
            Skew.custom(float('inf'))

    def test_str(self):
        self.assertEqual(str(Skew.NONE), 'none')
        self.assertEqual(str(Skew.TRADITIONAL), 'traditional')
        self.assertEqual(str(Skew.custom(0.25)), '0.25')

    def test_padding(self):
        self.assertAlmostEqual(Skew.TRADITIONAL.padding(200), 20.0)
        self.assertEqual(Skew.NONE.padding(200), 0.0)


# =========================================================================
# render_display
# =========================================================================

class TestRenderDisplay(unittest.TestCase):

    def test_eight_segments_in_bit_order(self):
        result = render_display(DisplayState.empty(), Size(90, 160), RED)
        self.assertEqual([r.segment for r in result], list(Segment))

    def test_lit_and_dim_colors(self):
        result = render_display(encode('1'), Size(90, 160), RED)
        for r in result:
            if r.segment in (Segment.TOP_RIGHT, Segment.BOTTOM_RIGHT):
                self.assertTrue(r.lit)
                self.assertEqual(r.fill, RED)
            else:
                self.assertFalse(r.lit)
                self.assertEqual(r.fill, (255, 0, 0, 26))

    def test_color_string_accepted(self):
        result = render_display(encode('8'), Size(90, 160), 'lime')
        self.assertEqual(result[0].fill, (0, 255, 0, 255))

    def test_unskewed_shapes_match_geometry(self):
        result = render_display(encode('8'), Size(90, 160), RED)
        for r in result:
            self.assertEqual(r.shape.rect, frame_for(r.segment, Size(90, 160)))
            self.assertTrue(r.shape.shear.is_identity)

    def test_frame_offset(self):
        frame = Rect(100, 50, 90, 160)
        result = render_display(encode('8'), frame, RED)
        top = result[0].shape
        self.assertEqual(top.rect.origin, Point(104.5, 50))

    def test_skew_pads_and_shears(self):
        frame = Rect(0, 0, 100, 160)
        result = render_display(encode('8'), frame, RED, Skew.TRADITIONAL)
        # 10 units of padding each side, laid out in an 80x160 inner frame
        top_left = result[5]
        self.assertIs(top_left.segment, Segment.TOP_LEFT)
        self.assertAlmostEqual(top_left.shape.rect.x, 10)
        self.assertAlmostEqual(top_left.shape.rect.y, 4)
        self.assertAlmostEqual(top_left.shape.rect.width, 8)
        self.assertEqual(top_left.shape.shear.factor, -0.1)
        self.assertEqual(top_left.shape.shear.pivot_y, 80)
        # Upper half leans right, lower half left
        pts = top_left.shape.outline()
        self.assertAlmostEqual(pts[3].x, 14 + 7.6)

    def test_skewed_outline_stays_in_frame(self):
        frame = Rect(0, 0, 100, 160)
        for skew in (Skew.TRADITIONAL, Skew.custom(0.1)):
            for r in render_display(encode('8').with_period(), frame, RED, skew):
                self.assertTrue(frame.contains_rect(r.shape.bounds()),
                                f"{skew} {r.segment.name}")

    def test_zero_frame(self):
        result = render_display(encode('8'), Size(0, 0), RED)
        self.assertEqual(len(result), 8)
        for r in result:
            self.assertEqual(r.shape.rect.width * r.shape.rect.height, 0)


if __name__ == '__main__':
    unittest.main()

#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from chip8vm.display import Display
from chip8vm.errors import PixelOutOfBounds
from fakes import RecordingFrontend


class TestDisplay(unittest.TestCase):
    def setUp(self):
        self.display = Display(4, 3)

    def test_display_init(self):
        self.assertEqual((4, 3), self.display.get_vid_size())
        self.assertEqual([False] * 12, self.display.pixels)
        self.assertTrue(self.display.redraw)
        self.assertEqual([False] * 16, self.display.keys)

    def test_display_default_size(self):
        self.assertEqual((128, 64), Display().get_vid_size())

    def test_display_xor_pixel(self):
        self.display.redraw = False
        self.assertFalse(self.display.xor_pixel(1, 2, True))
        self.assertTrue(self.display.pixels[2 * 4 + 1])

        # An unset sprite bit changes nothing
        self.assertFalse(self.display.xor_pixel(1, 2, False))
        self.assertTrue(self.display.pixels[9])

        # Set to unset is a collision
        self.assertTrue(self.display.xor_pixel(1, 2, True))
        self.assertFalse(self.display.pixels[9])

    def test_display_out_of_bounds(self):
        for x, y in (4, 0), (0, 3), (-1, 0), (10, 10):
            self.assertRaises(PixelOutOfBounds, self.display.xor_pixel, x, y, True)

        with self.assertRaises(PixelOutOfBounds) as context:
            self.display.xor_pixel(4, 1, False)

        self.assertEqual((4, 1), (context.exception.x, context.exception.y))

    def test_display_clear(self):
        self.display.xor_pixel(0, 0, True)
        self.display.redraw = False
        self.display.clear()
        self.assertEqual([False] * 12, self.display.pixels)
        self.assertTrue(self.display.redraw)

    def test_display_render_rows(self):
        self.display.xor_pixel(0, 0, True)
        self.display.xor_pixel(3, 2, True)
        self.assertEqual(["#...", "....", "...#"], self.display.render_rows())

    def test_display_keys(self):
        keys = [False] * 16
        keys[0xA] = True
        self.display.set_keys(keys)
        self.assertTrue(self.display.is_key_down(0xA))
        self.assertFalse(self.display.is_key_down(0xB))
        self.assertRaises(ValueError, self.display.set_keys, [True] * 15)

    def test_display_wait_key(self):
        frontend = RecordingFrontend(press_after=10, press_key=0xF)
        self.assertEqual(0xF, self.display.wait_key(frontend))
        self.assertEqual(10, frontend.get_keys_calls)

    def test_display_wait_key_ignores_held_keys(self):
        # Key 3 was already down when waiting started, so only key 5 counts
        keys = [False] * 16
        keys[3] = True
        self.display.set_keys(keys)
        frontend = RecordingFrontend(keys=keys, press_after=4, press_key=5)
        self.assertEqual(5, self.display.wait_key(frontend))

    def test_display_wait_key_close(self):
        frontend = RecordingFrontend(close_after=3)
        self.assertIsNone(self.display.wait_key(frontend))
        self.assertEqual(3, frontend.get_keys_calls)

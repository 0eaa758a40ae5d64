#!/usr/bin/env python3

"""
Display and Input State

Pixels are written here by the CPU, and only handed to the front end when the
redraw flag is set.  Programs cannot write directly into video memory, sprites
are XORed onto the bitmap instead.  A collision is reported whenever a pixel
that was set gets unset by the XOR.

Unlike wrapping displays, any sprite pixel landing outside the bitmap is an
error.

The keyboard snapshot is refreshed from the front end once per cycle, and is
what the key-skip and key-wait instructions look at.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import NUM_KEYS, SCREEN_HEIGHT, SCREEN_WIDTH
from .errors import PixelOutOfBounds


class Display:
    def __init__(self, vid_width=SCREEN_WIDTH, vid_height=SCREEN_HEIGHT):
        self.vid_width = vid_width
        self.vid_height = vid_height
        self.vid_size = vid_width * vid_height
        self.pixels = [False] * self.vid_size
        self.redraw = True  # Paint the blank screen on the first flush
        self.keys = [False] * NUM_KEYS

    def clear(self):
        self.pixels = [False] * self.vid_size
        self.redraw = True

    def check_bounds(self, x, y):
        if x < 0 or y < 0 or x >= self.vid_width or y >= self.vid_height:
            raise PixelOutOfBounds(x, y)

    def xor_pixel(self, x, y, value):
        # Returns True if a set pixel was unset
        self.check_bounds(x, y)
        vram_loc = y * self.vid_width + x
        pixel = self.pixels[vram_loc]
        self.pixels[vram_loc] = pixel != value
        return pixel and value

    def get_vid_size(self):
        return self.vid_width, self.vid_height

    def set_keys(self, keys):
        keys = list(keys)

        if len(keys) != NUM_KEYS:
            raise ValueError("Front end returned {} keys -- 16 required".format(len(keys)))

        self.keys = [bool(key) for key in keys]

    def is_key_down(self, key):
        return self.keys[key]

    def wait_key(self, frontend):
        # Poll the front end until a key that was up in the snapshot taken at the start of this cycle goes down.
        # There is no timeout.  Returns None if the front end asks to close while waiting.
        snapshot = self.keys

        while True:
            for key, down in enumerate(frontend.get_keys()):
                if down and not snapshot[key]:
                    return key

            if frontend.should_close():
                return None

    def render_rows(self, on="#", off="."):
        # Text rendering of the bitmap, one string per row.  Handy for tests and debugging
        width = self.vid_width
        return [
            "".join(on if pixel else off for pixel in self.pixels[row * width:(row + 1) * width])
            for row in range(self.vid_height)
        ]

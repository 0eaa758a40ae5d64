#!/usr/bin/env python3

"""
PyGame Front End Plugin

Draws the machine's bitmap onto an SDL window, scans the keyboard for proper
key 'press' and 'release' events, and plays a short square-wave beep when the
sound timer expires.

The bitmap is drawn into an off-screen RGB buffer at native resolution, then
stretched to fit the window using 'Nearest Neighbour' scaling, so each pixel is
only drawn once.

Pressing ESC or closing the window sets the close flag.  Keyboard events are
pumped whenever keys are requested, so waiting for a keypress still notices a
close request.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .f_null import Frontend as FrontendBase, FrontendError
from ..constants import APP_NAME, DEFAULT_KEYMAP, NUM_KEYS, SCREEN_HEIGHT, SCREEN_WIDTH

PLAYBACK_FREQUENCY = 44100
BEEP_FREQUENCY = 440.0
BEEP_LENGTH = 0.1  # Seconds
DEFAULT_VOLUME = 0.1
COLOUR_OFF = bytes((0x22, 0x22, 0x22))
COLOUR_ON = bytes((0xDD, 0xDD, 0xDD))


def square_wave(frequency, length, playback_frequency=PLAYBACK_FREQUENCY):
    # Unsigned 8-bit mono samples, high for the first half of each period
    period = playback_frequency / frequency
    return bytes(
        0xFF if (pos % period) < period / 2 else 0x00 for pos in range(int(playback_frequency * length))
    )


class Frontend(FrontendBase):
    def __init__(self, keymap=DEFAULT_KEYMAP, vid_width=SCREEN_WIDTH, vid_height=SCREEN_HEIGHT, scale=8,
                 mute=False):

        super().__init__(keymap)
        self.key_down = [False] * NUM_KEYS
        self.close_requested = False
        self.vid_width = vid_width
        self.vid_height = vid_height
        self.scaled_size = (vid_width * scale, vid_height * scale)
        self.rgb_buffer = memoryview(bytearray(vid_width * vid_height * 3))

        self.pygame_methods = {
            pygame.QUIT:    self._pygame_quit,
            pygame.KEYDOWN: self._pygame_keydown,
            pygame.KEYUP:   self._pygame_keyup
        }

        pygame.display.init()
        pygame.display.set_caption(APP_NAME)
        self.display_surface = pygame.display.set_mode(self.scaled_size)

        if mute:
            self.sound = None
        else:
            pygame.mixer.pre_init(PLAYBACK_FREQUENCY, size=8, channels=1, allowedchanges=0)
            pygame.mixer.init()
            self.sound = pygame.mixer.Sound(buffer=square_wave(BEEP_FREQUENCY, BEEP_LENGTH))
            self.sound.set_volume(DEFAULT_VOLUME)

    def draw(self, pixels):
        if len(pixels) != self.vid_width * self.vid_height:
            raise FrontendError("Pixel buffer does not match the window resolution")

        # Update RGB buffer in-place to minimise allocations and PyGame calls
        rgb_buffer = self.rgb_buffer

        for location, pixel in enumerate(pixels):
            rgb_location = location * 3
            rgb_buffer[rgb_location:rgb_location + 3] = COLOUR_ON if pixel else COLOUR_OFF

        render_surface = pygame.image.frombuffer(rgb_buffer, (self.vid_width, self.vid_height), "RGB")
        self.display_surface.blit(pygame.transform.scale(render_surface, self.scaled_size), (0, 0))
        pygame.display.flip()

    def get_keys(self):
        self.process_messages()
        return list(self.key_down)

    def play_sound(self):
        if self.sound is not None:
            self.sound.play()

    def should_close(self):
        self.process_messages()
        return self.close_requested

    def process_messages(self):
        # Call PyGame method based on fast dictionary lookup of event
        for event in pygame.event.get():
            pygame_method = self.pygame_methods.get(event.type)

            if pygame_method:
                pygame_method(event)

    def _pygame_quit(self, _):
        self.close_requested = True

    def _pygame_keydown(self, event):
        hex_key = self.keymap_dict.get(event.key)

        if hex_key is not None:
            self.key_down[hex_key] = True

    def _pygame_keyup(self, event):
        if event.key == pygame.K_ESCAPE:
            self.close_requested = True
            return

        hex_key = self.keymap_dict.get(event.key)

        if hex_key is not None:
            self.key_down[hex_key] = False

    def shutdown(self):
        if self.sound is not None:
            self.sound.stop()
            pygame.mixer.quit()

        # PyGame currently segfaults if display.quit is called via __del__
        pygame.display.quit()
        super().shutdown()

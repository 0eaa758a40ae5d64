#!/usr/bin/env python3

"""
Null Front End Plugin

Serves as a base class for other front end plugins, and defines the four calls
the machine makes into a front end:
    * draw(pixels)   - render a row-major list of booleans
    * get_keys()     - return the state of keys 0-F as 16 booleans
    * play_sound()   - fire-and-forget beep
    * should_close() - True once the user has asked to quit

Can be used on its own if no display, input or sound is required.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from ..constants import NUM_KEYS


class FrontendError(Exception):
    pass


class Frontend:
    def __init__(self, keymap=None):
        self.keymap_dict = {} if keymap is None else parse_keymap(keymap)

    def draw(self, pixels):  # pylint: disable=unused-argument
        pass

    def get_keys(self):
        return [False] * NUM_KEYS  # No keys are held

    def play_sound(self):
        pass

    def should_close(self):
        return False  # Don't exit the program

    def shutdown(self):
        pass


def parse_keymap(keymap):
    # Turns "120,49,50,.." into {keyscan: key number}
    keymap_dict = {}
    keymap_split = keymap.split(",")

    if len(keymap_split) != NUM_KEYS:
        raise FrontendError("Incorrect number of keys defined -- 16 required.  Use commas to split numbers")

    for key_num, key_defined in enumerate(keymap_split):
        try:
            key_defined_ord = int(key_defined)
        except ValueError:
            raise FrontendError("Defined keys are not all integer values") from None

        if key_defined_ord in keymap_dict:
            raise FrontendError("Duplicate keys defined")

        keymap_dict[key_defined_ord] = key_num

    return keymap_dict

#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

# App identification
APP_NAME = "Chip8VM"
APP_VERSION = "1.0.0"

# Memory layout.  The font table must end before the program area starts
MEMORY_SIZE = 0x1000
PROGRAM_START = 0x200
FONTSET_START = 0x50
CHAR_SPRITE_SIZE = 5  # Bytes per character sprite

# Registers
NUM_REGISTERS = 16
FLAG_REGISTER = 0xF
NUM_KEYS = 16

# Default display size (may be overridden per machine)
SCREEN_WIDTH = 128
SCREEN_HEIGHT = 64

# 60Hz emulated system timer refresh
TIMER_FREQ = 60.0
TIMER_INTERVAL = 1.0 / TIMER_FREQ

# Default mappings for keys 0-F (PyGame keyscans).  Laid out as the usual 4x4 block from '1' to 'V' on a QWERTY
# keyboard: X 1 2 3 Q W E A S D Z C 4 R F V
DEFAULT_KEYMAP = "120,49,50,51,113,119,101,97,115,100,122,99,52,114,102,118"

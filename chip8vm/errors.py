#!/usr/bin/env python3

"""
Emulation Errors

Every error is fatal to the current run.  Conditions such as returning with an
empty stack, wrapping arithmetic, or the program counter running off the end of
memory are normal control flow, and are not represented here.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class Chip8Error(Exception):
    pass


class ProgramTooLarge(Chip8Error):
    def __init__(self, program_size, memory_size):
        self.program_size = program_size
        self.memory_size = memory_size
        super().__init__(
            "Program too large: memory is {} bytes, but program was {} bytes".format(memory_size, program_size)
        )


class InvalidOpcode(Chip8Error):
    def __init__(self, opcode, address=None):
        self.opcode = opcode
        self.address = address
        super().__init__(opcode, address)

    def __str__(self):
        if self.address is None:
            return "Invalid opcode: {}".format(self.opcode)

        return "Invalid opcode: {} at address 0x{:03x}".format(self.opcode, self.address)


class InvalidAddress(Chip8Error):
    def __init__(self, address, instruction):
        self.address = address
        self.instruction = instruction
        super().__init__("Invalid address: 0x{:x} ({})".format(address, instruction))


class UnknownCharacter(Chip8Error):
    def __init__(self, character):
        self.character = character
        super().__init__("No sprite for character: {}".format(character))


class UnknownKey(Chip8Error):
    def __init__(self, key, instruction):
        self.key = key
        self.instruction = instruction
        super().__init__("Unknown key: {} ({})".format(key, instruction))


class PixelOutOfBounds(Chip8Error):
    def __init__(self, x, y):
        self.x = x
        self.y = y
        super().__init__("Invalid pixel coordinates: ({}, {})".format(x, y))

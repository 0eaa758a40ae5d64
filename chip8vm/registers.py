#!/usr/bin/env python3

"""
Register File

Sixteen 8-bit general purpose registers (V0 - VF), a 16-bit index register (I)
and a 16-bit program counter (PC).  VF doubles as the flag register for carry,
borrow, shift and collision results.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import NUM_REGISTERS, PROGRAM_START

INDEX_MASK = 0xFFFF


class Registers:
    def __init__(self, pc=PROGRAM_START):
        # Bytearrays are mutable and reject values over 0xFF, so wrapping must be done before storing
        self.v = memoryview(bytearray(NUM_REGISTERS))
        self.i = 0
        self.pc = pc

    def get(self, reg):
        return self.v[reg]

    def set(self, reg, value):
        self.v[reg] = value

    def set_index(self, value):
        self.i = value & INDEX_MASK

    def dump(self, count):
        # Copy of V0 up to (but excluding) register number 'count'
        return bytes(self.v[:count])

    def load(self, block):
        self.v[:len(block)] = block

#!/usr/bin/env python3

"""
RAM Emulator

Fixed size memory supporting block writes, and reads of single bytes, blocks or
big-endian opcode words.  Out of range accesses raise InvalidAddress, labelled
with whatever was trying to access memory at the time.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import MEMORY_SIZE
from .errors import InvalidAddress


class RAM:
    def __init__(self, mem_size=MEMORY_SIZE):
        self.mem = memoryview(bytearray(mem_size))
        self.mem_top = mem_size - 1
        self.mem_size = mem_size

    def read(self, location, accessor="read"):
        self.check_overflow(location, accessor)
        return self.mem[location]

    def read_block(self, location, size=1, accessor="read"):
        self.check_overflow(location + size - 1, accessor, location)
        return self.mem[location:location + size]

    def read_word(self, location):
        # Big-endian 16-bit read, as used for fetching opcodes
        return int.from_bytes(self.read_block(location, 2, "fetch"), "big", signed=False)

    def write_block(self, location, block, accessor="write"):
        block_top = location + len(block)
        self.check_overflow(block_top - 1, accessor, location)
        self.mem[location:block_top] = block

    def contains(self, location, size=1):
        return location >= 0 and location + size - 1 <= self.mem_top

    def check_overflow(self, location, accessor, reported=None):
        # 'reported' lets block operations report their start address rather than the last byte touched
        if location > self.mem_top or location < 0:
            raise InvalidAddress(location if reported is None else reported, accessor)

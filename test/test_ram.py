#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from chip8vm.errors import InvalidAddress
from chip8vm.ram import RAM


class TestRAM(unittest.TestCase):
    def setUp(self):
        self.ram = RAM(5)

    def test_ram_default_size(self):
        self.assertEqual(0x1000, RAM().mem_size)

    def test_ram_init(self):
        self.assertEqual("0000000000", self.ram.mem.hex())

    def test_ram_read(self):
        self.ram.write_block(1, b"\xFF")
        self.assertEqual("00ff000000", self.ram.mem.hex())
        self.assertEqual(255, self.ram.read(1))
        self.assertEqual(0, self.ram.read(4))

    def test_ram_write_block(self):
        self.ram.write_block(1, bytearray(b"\xFD\xFE"))
        self.ram.write_block(4, bytearray(b"\xFF"))
        self.assertEqual("00fdfe00ff", self.ram.mem.hex())
        self.assertEqual(b"\xFD\xFE", bytes(self.ram.read_block(1, 2)))

    def test_ram_read_word(self):
        self.ram.write_block(3, bytearray(b"\xAB\xCD"))
        self.assertEqual(0xABCD, self.ram.read_word(3))
        self.assertRaises(InvalidAddress, self.ram.read_word, 4)

    def test_ram_byte_overflow(self):
        with self.assertRaises(InvalidAddress) as context:
            self.ram.read(5, "Draw")

        self.assertEqual(5, context.exception.address)
        self.assertEqual("Draw", context.exception.instruction)
        self.assertRaises(InvalidAddress, self.ram.read, -1)

    def test_ram_block_overflow(self):
        with self.assertRaises(InvalidAddress) as context:
            self.ram.write_block(4, bytearray(b"\xFE\xFF"), "RegDump")

        # Block errors report where the block started, and who asked
        self.assertEqual(4, context.exception.address)
        self.assertEqual("RegDump", context.exception.instruction)
        self.assertEqual("0000000000", self.ram.mem.hex())

    def test_ram_contains(self):
        self.assertTrue(self.ram.contains(0))
        self.assertTrue(self.ram.contains(3, 2))
        self.assertFalse(self.ram.contains(4, 2))
        self.assertFalse(self.ram.contains(5))
        self.assertFalse(self.ram.contains(-1))

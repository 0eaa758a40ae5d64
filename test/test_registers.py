#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from chip8vm.registers import Registers


class TestRegisters(unittest.TestCase):
    def setUp(self):
        self.registers = Registers()

    def test_registers_init(self):
        self.assertEqual(bytes(16), bytes(self.registers.v))
        self.assertEqual(0, self.registers.i)
        self.assertEqual(0x200, self.registers.pc)

    def test_registers_set_get(self):
        self.registers.set(0xF, 0xFF)
        self.assertEqual(0xFF, self.registers.get(0xF))
        self.assertRaises(ValueError, self.registers.set, 0x0, 0x100)

    def test_registers_index_wraps_16_bit(self):
        self.registers.set_index(0x1FFFE)
        self.assertEqual(0xFFFE, self.registers.i)

    def test_registers_dump_load(self):
        for reg in range(16):
            self.registers.set(reg, reg * 3)

        block = self.registers.dump(4)
        self.assertEqual(bytes((0, 3, 6, 9)), block)

        self.registers.load(bytes((9, 8)))
        self.assertEqual(9, self.registers.get(0))
        self.assertEqual(8, self.registers.get(1))
        self.assertEqual(6, self.registers.get(2))

#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import contextlib
import io
import unittest
from chip8vm.debugger import Debugger
from chip8vm.errors import InvalidOpcode, UnknownCharacter
from chip8vm.machine import Machine
from fakes import RecordingFrontend, program


class TestDebugger(unittest.TestCase):
    def setUp(self):
        self.stream = io.StringIO()
        self.debugger = Debugger(self.stream)

    def test_debugger_not_live_by_default(self):
        self.assertFalse(self.debugger.is_live())
        machine = Machine(program(0x61FF), debugger=self.debugger)
        machine.cycle(RecordingFrontend())
        self.assertEqual("", self.stream.getvalue())

    def test_debugger_log_enables_live_output(self):
        machine = Machine(program(0x61FF, 0xF118), log=True, debugger=self.debugger)
        self.assertTrue(self.debugger.is_live())
        frontend = RecordingFrontend()
        machine.cycle(frontend)
        machine.cycle(frontend)
        lines = self.stream.getvalue().splitlines()
        self.assertEqual(2, len(lines))
        self.assertIn("PC: 0x200 OP: 0x61ff IN: LD V1, 0xff", lines[0])
        self.assertIn("PC: 0x202 OP: 0xf118 IN: LD ST, V1", lines[1])

        # Registers are listed from VF down to V0, so V1 is second from the end
        self.assertTrue(lines[1].startswith("V: 0x" + "00" * 14 + "ff00 "))

    def test_debugger_verbose(self):
        machine = Machine(b"")
        self.assertIn("Stack: (Empty)", self.debugger.debug(machine, "CLS", verbose=True))
        machine.stack.push(0x204)
        machine.stack.push(0x3AE)
        self.assertIn("Stack: 0x204 0x3ae", self.debugger.debug(machine, "CLS", verbose=True))
        self.assertNotIn("Stack", self.debugger.debug(machine, "CLS"))

    def test_debugger_crash_dump(self):
        machine = Machine(program(0x2204, 0x0000, 0xFFFF), log=True, debugger=self.debugger)
        frontend = RecordingFrontend()
        machine.cycle(frontend)
        self.assertRaises(InvalidOpcode, machine.cycle, frontend)
        output = self.stream.getvalue()
        self.assertIn("OP: 0xffff IN: ???", output)
        self.assertIn("Stack: 0x200", output)

    def test_debugger_crash_dump_on_execute(self):
        # LD V1, 0x10; LD F, V1 has no character sprite, so the trace line is repeated with the stack
        machine = Machine(program(0x6110, 0xF129), log=True, debugger=self.debugger)
        frontend = RecordingFrontend()
        machine.cycle(frontend)
        self.assertRaises(UnknownCharacter, machine.cycle, frontend)
        lines = self.stream.getvalue().splitlines()
        self.assertEqual(4, len(lines))
        self.assertEqual(lines[1], lines[2])
        self.assertIn("IN: LD F, V1", lines[2])
        self.assertEqual("Stack: (Empty)", lines[3])

    def test_debugger_default_stream(self):
        machine = Machine(program(0x61FF), log=True)
        stdout = io.StringIO()

        with contextlib.redirect_stdout(stdout):
            machine.cycle(RecordingFrontend())

        self.assertIn("OP: 0x61ff IN: LD V1, 0xff", stdout.getvalue())

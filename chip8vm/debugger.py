#!/usr/bin/env python3

"""
Machine Debugger

Turned on by Machine(log=True), or by handing the Machine a Debugger that has
already been set live.  One line is printed per cycle, after the opcode has
been fetched and decoded but before it executes, so the registers shown are
the state the instruction is about to act on:
    * V  - All 16 registers, Vf first down to V0, as one hex string
    * I  - Index register
    * DT - Delay timer
    * ST - Sound timer
    * PC - Address the opcode was fetched from
    * OP - Raw opcode
    * IN - Disassembly of the decoded instruction (e.g. "DRW V1, V2, 0x5")

When an instruction raises, the line is printed again as a crash dump with
the call stack appended.  An opcode that fails to decode only gets the crash
dump, showing "???" as its disassembly.

Output goes to stdout unless another stream is given.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import sys


class Debugger:
    def __init__(self, stream=None):
        self.live = False
        self.stream = stream

    def debug(self, machine, instruction, verbose=False):
        registers = machine.registers
        debug_str = (
            "V: 0x" + ("{:02x}" * 16) + " I: 0x{:04x} DT: 0x{:02x} ST: 0x{:02x} PC: 0x{:03x} OP: 0x{:04x} IN: {}"
        ).format(
            *[registers.v[reg_num] for reg_num in range(15, -1, -1)] +
            [registers.i, machine.delay_timer, machine.sound_timer, machine.debug_pc, machine.opcode, instruction]
        )

        if verbose:
            stack_items = machine.stack.get_items()
            stack_str = (" 0x{:03x}" * len(stack_items)).format(*stack_items)
            debug_str += "\nStack:{}".format(stack_str or " (Empty)")

        return debug_str

    def set_live(self, enabled):
        self.live = bool(enabled)

    def is_live(self):
        return self.live

    def output(self, machine, instruction, verbose=False):
        print(self.debug(machine, instruction, verbose), file=self.stream or sys.stdout)

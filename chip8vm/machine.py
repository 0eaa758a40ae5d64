#!/usr/bin/env python3

"""
Machine Emulator

Like a real computer, this is where most of the processing happens.  Each call
to cycle() fetches one opcode, decodes it, and applies it to the registers,
RAM, stack and display.  Nothing here keeps real time: the owner of the machine
decides how often to call cycle() and update_timers() (see run() in the
package root).

The program counter is advanced past the fetched opcode before the instruction
executes.  Jumps overwrite it, and skips advance it once more.  A return pops
the address of the original call and resumes at the instruction after it.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from random import randint
from . import instruction as ins
from .constants import (
    CHAR_SPRITE_SIZE, FLAG_REGISTER, FONTSET_START, MEMORY_SIZE, NUM_KEYS, PROGRAM_START, SCREEN_HEIGHT, SCREEN_WIDTH
)
from .debugger import Debugger
from .decoder import decode
from .display import Display
from .errors import Chip8Error, InvalidAddress, InvalidOpcode, ProgramTooLarge, UnknownCharacter, UnknownKey
from .fontset import FONTSET
from .ram import RAM
from .registers import Registers
from .stack import Stack

SPRITE_WIDTH = 8


def bcd(num):
    # Decimal digits of a byte, most significant first
    return bytes((num // 100 % 10, num // 10 % 10, num % 10))


class Machine:
    def __init__(self, program, log=False, screen_width=None, screen_height=None, clear_redraw_on_flush=False,
                 borrow_quirks=False, debugger=None):

        program_memory_size = MEMORY_SIZE - PROGRAM_START

        if len(program) >= program_memory_size:
            raise ProgramTooLarge(len(program), program_memory_size)

        self.ram = RAM(MEMORY_SIZE)
        self.ram.write_block(FONTSET_START, FONTSET)
        self.ram.write_block(PROGRAM_START, program)
        self.stack = Stack()
        self.registers = Registers(PROGRAM_START)
        self.display = Display(
            SCREEN_WIDTH if screen_width is None else screen_width,
            SCREEN_HEIGHT if screen_height is None else screen_height
        )

        self.debugger = Debugger() if debugger is None else debugger

        if log:
            self.debugger.set_live(True)

        self.live_debug = self.debugger.is_live()

        """
        Policies
        --------

        - Clear redraw on flush: Off by default, so once the display has changed it is handed to the front end on
                                 every cycle.  When on, the flag is dropped after each flush.
        - Borrow quirks        : Off by default, so VF = 1 when a subtraction borrows (unsigned underflow).  When
                                 on, the historical flag is used instead: VF = 1 when it does NOT borrow.
        """

        self.clear_redraw_on_flush = clear_redraw_on_flush
        self.borrow_quirks = borrow_quirks

        # Timers
        self.delay_timer = 0
        self.sound_timer = 0

        # Current cycle state
        self.debug_pc = PROGRAM_START
        self.opcode = 0
        self.frontend = None
        self.program_ended = False

        self.instructions = {
            ins.Return: self._return,
            ins.Goto: self._goto,
            ins.Call: self._call,
            ins.OffsetGoto: self._offset_goto,
            ins.SetConst: self._set_const,
            ins.AddConst: self._add_const,
            ins.Move: self._move,
            ins.BitOr: self._bit_or,
            ins.BitAnd: self._bit_and,
            ins.BitXor: self._bit_xor,
            ins.Shr: self._shr,
            ins.Shl: self._shl,
            ins.Add: self._add,
            ins.Sub: self._sub,
            ins.InverseSub: self._inverse_sub,
            ins.Rand: self._rand,
            ins.BCD: self._bcd,
            ins.SkipEqConst: self._skip_eq_const,
            ins.SkipNeqConst: self._skip_neq_const,
            ins.SkipEq: self._skip_eq,
            ins.SkipNeq: self._skip_neq,
            ins.RegDump: self._reg_dump,
            ins.RegLoad: self._reg_load,
            ins.SetIndex: self._set_index,
            ins.AddIndex: self._add_index,
            ins.SetIndexChar: self._set_index_char,
            ins.GetDelay: self._get_delay,
            ins.SetDelay: self._set_delay,
            ins.WaitKey: self._wait_key,
            ins.SkipKey: self._skip_key,
            ins.SkipNotKey: self._skip_not_key,
            ins.SetSound: self._set_sound,
            ins.Draw: self._draw,
            ins.ClearScreen: self._clear_screen
        }

    def cycle(self, frontend):
        pc = self.registers.pc

        if not self.ram.contains(pc, 2):
            # Running off the end of memory is how programs finish
            self.program_ended = True
            return

        # Keep track of the program counter before altering it in any way for debugging purposes
        self.debug_pc = pc
        self.opcode = self.ram.read_word(pc)

        try:
            instruction = decode(self.opcode)
        except InvalidOpcode as err:
            err.address = pc
            self._crash_dump("???")
            raise

        if self.live_debug:
            self.debugger.output(self, instruction)

        self.frontend = frontend
        self.display.set_keys(frontend.get_keys())
        self.inc_pc()  # Program counter updates after fetch and decode, but before execute

        try:
            self.execute(instruction)
        except Chip8Error:
            self._crash_dump(instruction)
            raise

        if self.display.redraw:
            frontend.draw(self.display.pixels)

            if self.clear_redraw_on_flush:
                self.display.redraw = False

    def execute(self, instruction):
        self.instructions[type(instruction)](instruction)

    def update_timers(self, frontend):
        if self.delay_timer > 0:
            self.delay_timer -= 1

        if self.sound_timer > 0:
            self.sound_timer -= 1

            if self.sound_timer == 0:
                frontend.play_sound()

    def inc_pc(self):
        # No wrapping.  A program counter past the end of memory ends the program on the next cycle
        self.registers.pc += 2

    def _crash_dump(self, instruction):
        if self.live_debug:
            self.debugger.output(self, instruction, verbose=True)

    def _check_address(self, address, instruction_name):
        if not self.ram.contains(address):
            raise InvalidAddress(address, instruction_name)

    def _check_key(self, key, instruction_name):
        if key >= NUM_KEYS:
            raise UnknownKey(key, instruction_name)

    # Flow

    def _return(self, _):
        # An empty stack leaves the program counter alone
        addr = self.stack.pop()

        if addr is not None:
            self.registers.pc = addr
            self.inc_pc()

    def _goto(self, instruction):
        self._check_address(instruction.addr, "Goto")
        self.registers.pc = instruction.addr

    def _call(self, instruction):
        self._check_address(instruction.addr, "Call")
        self.stack.push(self.debug_pc)
        self.registers.pc = instruction.addr

    def _offset_goto(self, instruction):
        addr = instruction.addr + self.registers.get(0)
        self._check_address(addr, "OffsetGoto")
        self.registers.pc = addr

    # Constants and assignment

    def _set_const(self, instruction):
        self.registers.set(instruction.x, instruction.byte)

    def _add_const(self, instruction):
        # Never touches VF
        self.registers.set(instruction.x, (self.registers.get(instruction.x) + instruction.byte) & 0xFF)

    def _move(self, instruction):
        self.registers.set(instruction.x, self.registers.get(instruction.y))

    # Bit operations

    def _bit_or(self, instruction):
        self.registers.v[instruction.x] |= self.registers.v[instruction.y]

    def _bit_and(self, instruction):
        self.registers.v[instruction.x] &= self.registers.v[instruction.y]

    def _bit_xor(self, instruction):
        self.registers.v[instruction.x] ^= self.registers.v[instruction.y]

    # Shifts store Vx first and the flag second, so VF as the operand ends up holding the flag

    def _shr(self, instruction):
        val = self.registers.get(instruction.x)
        self.registers.set(instruction.x, val >> 1)
        self.registers.set(FLAG_REGISTER, val & 1)

    def _shl(self, instruction):
        val = self.registers.get(instruction.x)
        self.registers.set(instruction.x, (val << 1) & 0xFF)
        self.registers.set(FLAG_REGISTER, val >> 7)

    # Arithmetic

    def _add(self, instruction):
        val = self.registers.get(instruction.x) + self.registers.get(instruction.y)
        self.registers.set(instruction.x, val & 0xFF)
        self.registers.set(FLAG_REGISTER, int(val > 0xFF))  # Vf is set when carrying

    def _post_sub(self, x, val):
        self.registers.set(x, val & 0xFF)
        borrowed = val < 0
        self.registers.set(FLAG_REGISTER, int(not borrowed if self.borrow_quirks else borrowed))

    def _sub(self, instruction):
        self._post_sub(instruction.x, self.registers.get(instruction.x) - self.registers.get(instruction.y))

    def _inverse_sub(self, instruction):
        self._post_sub(instruction.x, self.registers.get(instruction.y) - self.registers.get(instruction.x))

    def _rand(self, instruction):
        # The ANDing here is intentional.  This is not a random number between 0 and 'byte' inclusive.
        self.registers.set(instruction.x, randint(0, 0xFF) & instruction.byte)

    # Memory

    def _bcd(self, instruction):
        self.ram.write_block(self.registers.i, bcd(self.registers.get(instruction.x)), "BCD")

    def _reg_dump(self, instruction):
        self.ram.write_block(self.registers.i, self.registers.dump(instruction.x + 1), "RegDump")

    def _reg_load(self, instruction):
        self.registers.load(self.ram.read_block(self.registers.i, instruction.x + 1, "RegLoad"))

    def _set_index(self, instruction):
        self.registers.set_index(instruction.addr)

    def _add_index(self, instruction):
        self.registers.set_index(self.registers.i + self.registers.get(instruction.x))

    def _set_index_char(self, instruction):
        character = self.registers.get(instruction.x)

        if character > 0xF:
            raise UnknownCharacter(character)

        self.registers.set_index(FONTSET_START + CHAR_SPRITE_SIZE * character)

    # Conditional skips

    def _skip_eq_const(self, instruction):
        if self.registers.get(instruction.x) == instruction.byte:
            self.inc_pc()

    def _skip_neq_const(self, instruction):
        if self.registers.get(instruction.x) != instruction.byte:
            self.inc_pc()

    def _skip_eq(self, instruction):
        if self.registers.get(instruction.x) == self.registers.get(instruction.y):
            self.inc_pc()

    def _skip_neq(self, instruction):
        if self.registers.get(instruction.x) != self.registers.get(instruction.y):
            self.inc_pc()

    # Timers

    def _get_delay(self, instruction):
        self.registers.set(instruction.x, self.delay_timer)

    def _set_delay(self, instruction):
        self.delay_timer = self.registers.get(instruction.x)

    def _set_sound(self, instruction):
        self.sound_timer = self.registers.get(instruction.x)

    # Keyboard

    def _wait_key(self, instruction):
        # Blocks until the front end reports a new keypress.  If it asks to close instead, Vx is left alone.
        key = self.display.wait_key(self.frontend)

        if key is not None:
            self.registers.set(instruction.x, key)

    def _skip_key(self, instruction):
        key = self.registers.get(instruction.x)
        self._check_key(key, "SkipKey")

        if self.display.is_key_down(key):
            self.inc_pc()

    def _skip_not_key(self, instruction):
        key = self.registers.get(instruction.x)
        self._check_key(key, "SkipNotKey")

        if not self.display.is_key_down(key):
            self.inc_pc()

    # Display

    def _draw(self, instruction):
        # Every column of the 8-pixel-wide sprite must be on screen, including unset bits
        vx_pos = self.registers.get(instruction.x)
        vy_pos = self.registers.get(instruction.y)
        i = self.registers.i
        collided = False

        for y in range(instruction.height):
            spr_data = self.ram.read(i + y, "Draw")
            scr_y = vy_pos + y

            for x in range(SPRITE_WIDTH):
                if self.display.xor_pixel(vx_pos + x, scr_y, bool(spr_data & (0x80 >> x))):
                    # Don't stop drawing.  Just remember the collision.
                    collided = True

        self.registers.set(FLAG_REGISTER, int(collided))
        self.display.redraw = True

    def _clear_screen(self, _):
        self.display.clear()

#!/usr/bin/env python3

"""
Opcode Decoder

Turns a raw 16-bit opcode into an Instruction.  Decoding is stateless, so it
can also be used on its own to disassemble a program.

Lookups are done in the same way for every opcode: the first nibble selects
either an instruction directly, or a bitmask.  The opcode is then ANDed with
that bitmask and looked up again, which is how instructions sharing the same
first nibble are told apart:
    * 0x0 - bitmask 0xFFFF (exact match)
    * 0x5, 0x8, 0x9 - bitmask 0xF00F (last nibble)
    * 0xE, 0xF - bitmask 0xF0FF (last byte)

Anything not found is an InvalidOpcode.  This is not a programming error, as
it will happen whenever the program counter wanders into data or empty memory.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from . import instruction as ins
from .errors import InvalidOpcode


def nibbles(num, start, end):
    # Nibbles are numbered 0 (most significant) to 3 (least significant), and the range is inclusive
    shift = 4 * (3 - end)
    mask = (0x10 ** (end - start + 1) - 1) << shift
    return (num & mask) >> shift


def nibble(num, index):
    return nibbles(num, index, index)


def _addr(opcode):
    return nibbles(opcode, 1, 3)


def _x(opcode):
    return nibble(opcode, 1)


def _y(opcode):
    return nibble(opcode, 2)


def _byte(opcode):
    return nibbles(opcode, 2, 3)


def _x_byte(variant):
    return lambda opcode: variant(_x(opcode), _byte(opcode))


def _x_y(variant):
    return lambda opcode: variant(_x(opcode), _y(opcode))


def _x_only(variant):
    return lambda opcode: variant(_x(opcode))


def _addr_only(variant):
    return lambda opcode: variant(_addr(opcode))


MASK_EXACT = 0xFFFF
MASK_LOW_NIBBLE = 0xF00F
MASK_LOW_BYTE = 0xF0FF

# Initial lookup on the first nibble.  Integers are bitmasks to apply before a second lookup
FIRST_NIBBLE = {
    0x0: MASK_EXACT,
    0x1: _addr_only(ins.Goto),
    0x2: _addr_only(ins.Call),
    0x3: _x_byte(ins.SkipEqConst),
    0x4: _x_byte(ins.SkipNeqConst),
    0x5: MASK_LOW_NIBBLE,
    0x6: _x_byte(ins.SetConst),
    0x7: _x_byte(ins.AddConst),
    0x8: MASK_LOW_NIBBLE,
    0x9: MASK_LOW_NIBBLE,
    0xA: _addr_only(ins.SetIndex),
    0xB: _addr_only(ins.OffsetGoto),
    0xC: _x_byte(ins.Rand),
    0xD: lambda opcode: ins.Draw(_x(opcode), _y(opcode), nibble(opcode, 3)),
    0xE: MASK_LOW_BYTE,
    0xF: MASK_LOW_BYTE
}

# Second lookup on the masked opcode
MASKED = {
    # Bitmask 0xFFFF
    0x00E0: lambda opcode: ins.ClearScreen(),
    0x00EE: lambda opcode: ins.Return(),
    # Bitmask 0xF00F
    0x5000: _x_y(ins.SkipEq),
    0x8000: _x_y(ins.Move),
    0x8001: _x_y(ins.BitOr),
    0x8002: _x_y(ins.BitAnd),
    0x8003: _x_y(ins.BitXor),
    0x8004: _x_y(ins.Add),
    0x8005: _x_y(ins.Sub),
    0x8006: _x_only(ins.Shr),  # Vy is ignored
    0x8007: _x_y(ins.InverseSub),
    0x800E: _x_only(ins.Shl),  # Vy is ignored
    0x9000: _x_y(ins.SkipNeq),
    # Bitmask 0xF0FF
    0xE09E: _x_only(ins.SkipKey),
    0xE0A1: _x_only(ins.SkipNotKey),
    0xF007: _x_only(ins.GetDelay),
    0xF00A: _x_only(ins.WaitKey),
    0xF015: _x_only(ins.SetDelay),
    0xF018: _x_only(ins.SetSound),
    0xF01E: _x_only(ins.AddIndex),
    0xF029: _x_only(ins.SetIndexChar),
    0xF033: _x_only(ins.BCD),
    0xF055: _x_only(ins.RegDump),
    0xF065: _x_only(ins.RegLoad)
}


def decode(opcode):
    entry = FIRST_NIBBLE[nibble(opcode, 0)]

    if isinstance(entry, int):
        entry = MASKED.get(opcode & entry)

        if entry is None:
            raise InvalidOpcode("0x{:04X}".format(opcode))

    return entry(opcode)


def disassemble(program, start_address=0x200):
    # Yields (address, opcode, instruction) for every 2-byte word.  Undecodable words give None for the instruction
    for offset in range(0, len(program) - 1, 2):
        opcode = (program[offset] << 8) | program[offset + 1]

        try:
            instruction = decode(opcode)
        except InvalidOpcode:
            instruction = None

        yield start_address + offset, opcode, instruction

#!/usr/bin/env python3

"""
Decoded Instructions

Each instruction is an immutable named tuple.  Operands come in three kinds:
    * addr - 12-bit memory address (0x000 - 0xFFF)
    * byte - 8-bit immediate number
    * x/y  - 4-bit register selector (V0 - VF)

The Draw instruction also carries a 4-bit sprite height.

The 'mnemonic' format string of each class is used by the debugger, so the
trace output reads like a disassembly listing.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from collections import namedtuple


class Instruction:
    __slots__ = ()
    mnemonic = "???"

    def __str__(self):
        return self.mnemonic.format(*self)

    # Variants are tuples underneath, so the variant type must match too (Return() != ClearScreen())
    def __eq__(self, other):
        return type(self) is type(other) and tuple.__eq__(self, other)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self).__name__,) + tuple(self))


def _variant(name, fields, mnemonic):
    # Build a named tuple subclass which is also an Instruction
    return type(name, (Instruction, namedtuple(name, fields)), {"__slots__": (), "mnemonic": mnemonic})


# Flow
Return = _variant("Return", "", "RET")
Goto = _variant("Goto", "addr", "JP 0x{:03x}")
Call = _variant("Call", "addr", "CALL 0x{:03x}")
OffsetGoto = _variant("OffsetGoto", "addr", "JP V0, 0x{:03x}")

# Constants
SetConst = _variant("SetConst", "x byte", "LD V{:01x}, 0x{:02x}")
AddConst = _variant("AddConst", "x byte", "ADD V{:01x}, 0x{:02x}")

# Assignment
Move = _variant("Move", "x y", "LD V{:01x}, V{:01x}")

# Bit operations
BitOr = _variant("BitOr", "x y", "OR V{:01x}, V{:01x}")
BitAnd = _variant("BitAnd", "x y", "AND V{:01x}, V{:01x}")
BitXor = _variant("BitXor", "x y", "XOR V{:01x}, V{:01x}")
Shr = _variant("Shr", "x", "SHR V{:01x}")
Shl = _variant("Shl", "x", "SHL V{:01x}")

# Arithmetic
Add = _variant("Add", "x y", "ADD V{:01x}, V{:01x}")
Sub = _variant("Sub", "x y", "SUB V{:01x}, V{:01x}")
InverseSub = _variant("InverseSub", "x y", "SUBN V{:01x}, V{:01x}")

# Random
Rand = _variant("Rand", "x byte", "RND V{:01x}, 0x{:02x}")

# Binary-coded decimal
BCD = _variant("BCD", "x", "LD B, V{:01x}")

# Conditional skips
SkipEqConst = _variant("SkipEqConst", "x byte", "SE V{:01x}, 0x{:02x}")
SkipNeqConst = _variant("SkipNeqConst", "x byte", "SNE V{:01x}, 0x{:02x}")
SkipEq = _variant("SkipEq", "x y", "SE V{:01x}, V{:01x}")
SkipNeq = _variant("SkipNeq", "x y", "SNE V{:01x}, V{:01x}")

# Memory
RegDump = _variant("RegDump", "x", "LD [I], V{:01x}")
RegLoad = _variant("RegLoad", "x", "LD V{:01x}, [I]")
SetIndex = _variant("SetIndex", "addr", "LD I, 0x{:03x}")
AddIndex = _variant("AddIndex", "x", "ADD I, V{:01x}")
SetIndexChar = _variant("SetIndexChar", "x", "LD F, V{:01x}")

# Timers
GetDelay = _variant("GetDelay", "x", "LD V{:01x}, DT")
SetDelay = _variant("SetDelay", "x", "LD DT, V{:01x}")
SetSound = _variant("SetSound", "x", "LD ST, V{:01x}")

# Keyboard
WaitKey = _variant("WaitKey", "x", "LD V{:01x}, K")
SkipKey = _variant("SkipKey", "x", "SKP V{:01x}")
SkipNotKey = _variant("SkipNotKey", "x", "SKNP V{:01x}")

# Display
Draw = _variant("Draw", "x y height", "DRW V{:01x}, V{:01x}, 0x{:01x}")
ClearScreen = _variant("ClearScreen", "", "CLS")

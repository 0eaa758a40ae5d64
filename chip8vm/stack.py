#!/usr/bin/env python3

"""
Stack Emulator

There is no specified location for the call stack, and no stack pointer
register is exposed to the running program, so the stack lives outside system
RAM as a plain list of return addresses.

Returning with nothing on the stack is not an error.  The program counter is
simply left alone, so pop() gives None in that case.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class Stack:
    def __init__(self):
        self.items = []

    def push(self, item):
        self.items.append(item)

    def pop(self):
        if not self.items:
            return None

        return self.items.pop()

    def get_items(self):
        # For debugging
        return self.items

#!/usr/bin/env python3

"""
Main Startup Module

Call run(program, frontend) to execute a program until it finishes or the
front end asks to close.  The front end must provide draw, get_keys,
play_sound and should_close (see frontends/f_null.py).

Any extra keyword arguments are passed to the Machine.  Errors are not caught
here: reporting them is left to whatever called run().
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from time import perf_counter
from .constants import APP_VERSION, TIMER_INTERVAL
from .errors import (
    Chip8Error, InvalidAddress, InvalidOpcode, PixelOutOfBounds, ProgramTooLarge, UnknownCharacter, UnknownKey
)
from .machine import Machine

__version__ = APP_VERSION
__all__ = [
    "Chip8Error", "InvalidAddress", "InvalidOpcode", "Machine", "PixelOutOfBounds", "ProgramTooLarge",
    "UnknownCharacter", "UnknownKey", "run"
]


def run(program, frontend, log=False, **machine_options):
    machine = Machine(program, log=log, **machine_options)

    # The time when the next timer update should happen
    next_tick = perf_counter()

    while True:
        machine.cycle(frontend)

        if machine.program_ended or frontend.should_close():
            break

        # Timers only ever move between cycles.  If the host lags, the schedule catches up one tick per cycle
        if perf_counter() > next_tick:
            next_tick += TIMER_INTERVAL
            machine.update_timers(frontend)

    return machine

# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Oxford Quantum Circuits Ltd
from __future__ import annotations

from pulsetrace.config import TraceConfig
from pulsetrace.ir.program import Program
from pulsetrace.trace.context import TraceContext
from pulsetrace.trace.events import PulseEventLog
from pulsetrace.trace.transitions import transition
from pulsetrace.utils.logger import get_default_logger

log = get_default_logger()


class PulseTracer:
    """Runs a program instruction by instruction, recording when each pulse and capture
    happens.

    The tracer owns its :class:`TraceContext`; a tracer must not be stepped from more
    than one thread at a time.
    """

    def __init__(self, program: Program, config: TraceConfig | None = None):
        """
        :param program: The program to trace.
        :param config: Settings for this trace. Defaults to a :class:`TraceConfig` read
            from the environment.
        :raises MissingSampleRate: If any frame of the program lacks a sample rate.
        """
        self.program = program
        self.config = config or TraceConfig()
        self.config.validate_program(program)
        self.context = TraceContext.from_definitions(program.frames, self.config)
        self.pc = 0

    @property
    def finished(self) -> bool:
        return self.pc >= len(self.program.instructions)

    @property
    def events(self) -> PulseEventLog:
        return self.context.events

    def step(self):
        """Applies the instruction at the program counter, then moves to the next one."""
        if self.finished:
            raise IndexError("The program has no more instructions to trace.")
        transition(self.context, self.program.instructions[self.pc])
        self.pc += 1

    def run(self) -> PulseEventLog:
        """Steps through the remaining instructions and returns the event log."""
        while not self.finished:
            self.step()
        log.info(
            f"Traced {self.pc} instructions into {len(self.events)} pulse events over "
            f"{self.events.duration} seconds."
        )
        return self.events


def trace(program: Program, config: TraceConfig | None = None) -> PulseEventLog:
    """
    Computes the start time, end time and frame state of every pulse, capture and raw
    capture in the program.

    :param program: The program to trace.
    :param config: Settings for this trace.
    :returns: The events, in the order their instructions were processed.
    :raises MissingSampleRate: If any frame of the program lacks a sample rate.
    :raises UndefinedFrame: If an instruction reads or changes the state of a frame the
        program does not define.
    :raises SamePhaseFrame: If a phase swap names the same frame twice.
    :raises UnsupportedInstruction: If the program holds an instruction that does not
        act on the pulse timeline.
    """
    return PulseTracer(program, config).run()

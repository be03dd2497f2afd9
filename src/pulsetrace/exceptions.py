# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Oxford Quantum Circuits Ltd


class PulseTraceException(Exception):
    """Base class for exceptions raised while tracing a pulse program."""

    ...


class MissingSampleRate(PulseTraceException):
    """Raised when a frame definition does not declare a sample rate."""

    def __init__(self, frame):
        self.frame = frame
        super().__init__(f"Frame {frame} is defined without a sample rate.")


class UndefinedFrame(PulseTraceException, KeyError):
    """Raised when the state of a frame that was never defined is read or written."""

    def __init__(self, frame):
        self.frame = frame
        super().__init__(f"Frame {frame} is not defined.")

    def __str__(self):
        return self.args[0]


class SamePhaseFrame(PulseTraceException, ValueError):
    """Raised when a phase swap names the same frame on both sides."""

    def __init__(self, frame):
        self.frame = frame
        super().__init__(f"Cannot swap the phase of frame {frame} with itself.")


class UnsupportedInstruction(PulseTraceException, NotImplementedError):
    """Raised for any instruction that has no effect on the pulse timeline."""

    def __init__(self, instruction):
        self.instruction = instruction
        super().__init__(
            f"Instruction {instruction!r} of type `{type(instruction).__name__}` is not "
            "supported by the pulse tracer."
        )

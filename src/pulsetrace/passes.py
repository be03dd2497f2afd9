# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Oxford Quantum Circuits Ltd
from dataclasses import dataclass, field

from pulsetrace.config import TraceConfig
from pulsetrace.core.pass_base import AnalysisPass, PassManager, ValidationPass
from pulsetrace.core.result_base import ResultInfoMixin, ResultManager
from pulsetrace.exceptions import UndefinedFrame
from pulsetrace.ir.frames import Frame
from pulsetrace.ir.instructions import (
    DelayOnFrames,
    FrameTimedInstruction,
    SimpleFrameMutation,
    SwapPhase,
)
from pulsetrace.ir.program import Program
from pulsetrace.trace.events import PulseEventLog
from pulsetrace.trace.tracer import PulseTracer


class FrameDefinitionValidation(ValidationPass):
    """Checks that frames are defined once, and that every frame whose state an
    instruction relies on is defined.

    Delays on frames may name frames without a definition: they only move the frame's
    clock.
    """

    def run(self, ir: Program, res_mgr: ResultManager, *args, **kwargs):
        """
        :param ir: The program to validate.
        :param res_mgr: The result manager, unused.
        :raises ValueError: If a frame is defined more than once.
        :raises UndefinedFrame: If an instruction uses the state of an undefined frame.
        """
        defined = set()
        for definition in ir.frames:
            if definition.frame in defined:
                raise ValueError(f"Frame {definition.frame} is defined more than once.")
            defined.add(definition.frame)

        for instruction in ir.instructions:
            if isinstance(instruction, DelayOnFrames):
                continue
            for frame in self._frames_with_state(instruction):
                if frame not in defined:
                    raise UndefinedFrame(frame)
        return ir

    @staticmethod
    def _frames_with_state(instruction) -> list[Frame]:
        if isinstance(instruction, (SimpleFrameMutation, FrameTimedInstruction)):
            return [instruction.frame]
        if isinstance(instruction, SwapPhase):
            return [instruction.left, instruction.right]
        return []


@dataclass
class PulseTraceResult(ResultInfoMixin):
    """Stores the outcome of tracing a program.

    :param events: The emitted pulse events, in processing order.
    :param clocks: The local time of every frame with a clock at the end of the trace.
    """

    events: PulseEventLog = field(default_factory=PulseEventLog)
    clocks: dict[Frame, float] = field(default_factory=dict)


class PulseTraceAnalysis(AnalysisPass):
    """Traces the program and stores the pulse events and final clocks in the result
    manager."""

    def __init__(self, config: TraceConfig | None = None):
        self.config = config

    def run(self, ir: Program, res_mgr: ResultManager, *args, **kwargs):
        tracer = PulseTracer(ir, self.config)
        events = tracer.run()
        res_mgr.add(
            PulseTraceResult(events=events, clocks=tracer.context.clocks.snapshot())
        )
        return ir


def default_pipeline(config: TraceConfig | None = None) -> PassManager:
    """Validates the program's frames and then traces it."""
    return PassManager() | FrameDefinitionValidation() | PulseTraceAnalysis(config)

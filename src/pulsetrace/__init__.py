# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Oxford Quantum Circuits Ltd
from pulsetrace.config import TraceConfig as TraceConfig
from pulsetrace.exceptions import MissingSampleRate as MissingSampleRate
from pulsetrace.exceptions import PulseTraceException as PulseTraceException
from pulsetrace.exceptions import SamePhaseFrame as SamePhaseFrame
from pulsetrace.exceptions import UndefinedFrame as UndefinedFrame
from pulsetrace.exceptions import UnsupportedInstruction as UnsupportedInstruction
from pulsetrace.ir.frames import Frame as Frame
from pulsetrace.ir.frames import FrameDefinition as FrameDefinition
from pulsetrace.ir.frames import FrameState as FrameState
from pulsetrace.ir.program import Program as Program
from pulsetrace.trace.events import PulseEvent as PulseEvent
from pulsetrace.trace.events import PulseEventLog as PulseEventLog
from pulsetrace.trace.tracer import PulseTracer as PulseTracer
from pulsetrace.trace.tracer import trace as trace

# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Oxford Quantum Circuits Ltd
from pulsetrace.exceptions import SamePhaseFrame, UnsupportedInstruction
from pulsetrace.ir.instructions import (
    Capture,
    DelayOnFrames,
    DelayOnQubits,
    Fence,
    FrameTimedInstruction,
    Instruction,
    Pulse,
    RawCapture,
    SetFrequency,
    SetPhase,
    SetScale,
    ShiftPhase,
    SimpleFrameMutation,
    SwapPhase,
)
from pulsetrace.trace import sync
from pulsetrace.trace.context import TraceContext
from pulsetrace.trace.events import PulseEvent
from pulsetrace.utils.logger import LoggerLevel, get_default_logger

log = get_default_logger()


def transition(context: TraceContext, instruction: Instruction):
    """
    Applies the effect of a single instruction to the context.

    :param context: The frame states, clocks and event log of the running trace.
    :param instruction: The instruction to apply.
    :raises UnsupportedInstruction: If the instruction has no effect on the pulse
        timeline, e.g. classical control flow.
    """
    log.debug(f"Applying {instruction!r}.")

    match instruction:
        case DelayOnFrames():
            delay_on_frames(context, instruction)
        case DelayOnQubits():
            delay_on_qubits(context, instruction)
        case Fence():
            fence(context, instruction)
        case SetFrequency() | SetPhase() | ShiftPhase() | SetScale():
            mutate_frame(context, instruction)
        case SwapPhase():
            swap_phase(context, instruction)
        case Pulse() | Capture() | RawCapture():
            emit(context, instruction)
        case _:
            raise UnsupportedInstruction(instruction)


def delay_on_frames(context: TraceContext, instruction: DelayOnFrames):
    for frame in instruction.frames:
        context.clocks.set(frame, context.clocks.get(frame) + instruction.duration)


def delay_on_qubits(context: TraceContext, instruction: DelayOnQubits):
    frames = context.exact(instruction.qubits)
    latest = context.synchronize(frames)
    if context.config.DELAY_ON_QUBITS_ADDS_DURATION:
        for frame in frames:
            context.clocks.set(frame, latest + instruction.duration)


def fence(context: TraceContext, instruction: Fence):
    qubits = instruction.qubits or sync.all_qubits(context.frames)
    context.synchronize(context.intersecting(qubits))


def mutate_frame(context: TraceContext, instruction: SimpleFrameMutation):
    state = context.states.get(instruction.frame)
    match instruction:
        case SetFrequency():
            update = {"frequency": instruction.value}
        case SetPhase():
            update = {"phase": instruction.value}
        case ShiftPhase():
            update = {"phase": state.phase + instruction.value}
        case SetScale():
            update = {"scale": instruction.value}
    context.states.set(instruction.frame, state.model_copy(update=update))


def swap_phase(context: TraceContext, instruction: SwapPhase):
    if instruction.left == instruction.right:
        raise SamePhaseFrame(instruction.left)

    left = context.states.get(instruction.left)
    right = context.states.get(instruction.right)
    context.states.set(instruction.left, left.model_copy(update={"phase": right.phase}))
    context.states.set(instruction.right, right.model_copy(update={"phase": left.phase}))


def emit(context: TraceContext, instruction: FrameTimedInstruction):
    """
    Places a pulse or capture on the timeline of its frame, starting at the frame's
    local time. A blocking instruction also keeps every frame sharing a qubit with it
    busy until it finishes.
    """
    frame = instruction.frame
    state = context.states.get(frame)
    start = context.clocks.get(frame)
    end = start + instruction.duration_at(state.sample_rate)

    event = PulseEvent(
        instruction=instruction, start_time=start, end_time=end, frame_state=state
    )
    context.events.append(event)
    log.log(
        LoggerLevel.INFO if context.config.LOG_EVENTS else LoggerLevel.DEBUG,
        f"Emitted {event!r}.",
    )

    context.clocks.set(frame, end)
    if instruction.blocking:
        for other in context.intersecting(frame.qubits):
            context.clocks.set(other, max(context.clocks.get(other), end))

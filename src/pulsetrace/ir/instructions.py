# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Oxford Quantum Circuits Ltd
from __future__ import annotations

from functools import cached_property

from pydantic import Field, computed_field

from pulsetrace.ir.frames import Frame
from pulsetrace.ir.waveforms import SampledWaveform, Waveform
from pulsetrace.utils.pydantic import AllowExtraFieldsModel, QubitSet

BASE_INSTR = "pulsetrace.ir.instructions.Instruction"


class Instruction(AllowExtraFieldsModel):
    @computed_field
    @cached_property
    def instr_type(self) -> str:
        """
        Returns the type of the instruction, which is the class name.
        """
        return self.__class__.__module__ + "." + self.__class__.__name__

    def __repr__(self):
        return f"{self.__class__.__name__}()"


### Timing and synchronisation


class DelayOnFrames(Instruction):
    """Instructs each of the given frames to do nothing for a fixed time."""

    frames: list[Frame] = Field(min_length=1)
    duration: float = Field(ge=0, default=0.0)  # in seconds

    def __repr__(self):
        frames = ", ".join(repr(frame) for frame in self.frames)
        return f"DELAY {frames} {self.duration}"


class DelayOnQubits(Instruction):
    """Instructs every frame defined on exactly the given qubits to wait."""

    qubits: QubitSet = Field(min_length=1)
    duration: float = Field(ge=0, default=0.0)  # in seconds

    def __repr__(self):
        qubits = " ".join(str(qubit) for qubit in self.qubits)
        return f"DELAY {qubits} {self.duration}"


class Fence(Instruction):
    """
    Tells the QPU to wait for all frames touching any of the given qubits to be free
    before continuing execution on any of them. A fence without qubits applies to every
    qubit of the program.
    """

    qubits: QubitSet = ()

    def __repr__(self):
        qubits = " ".join(str(qubit) for qubit in self.qubits)
        return f"FENCE {qubits}".rstrip()


### Frame mutations


class SimpleFrameMutation(Instruction):
    """Changes one field of the analog state of a single frame."""

    frame: Frame
    value: float

    def __repr__(self):
        return f"{self.__class__.__name__}({self.frame!r}, {self.value})"


class SetFrequency(SimpleFrameMutation):
    """Set the frequency of a frame."""


class SetPhase(SimpleFrameMutation):
    """Sets the absolute phase of a frame, unlike :class:`ShiftPhase`, which changes
    the phase relative to the current phase."""


class ShiftPhase(SimpleFrameMutation):
    """Change the phase of waveforms sent down the frame."""


class SetScale(SimpleFrameMutation):
    """Set the scale applied to waveforms sent down the frame."""


class SwapPhase(Instruction):
    """Exchanges the phases of two frames."""

    left: Frame
    right: Frame

    def __repr__(self):
        return f"SWAP-PHASES {self.left!r} {self.right!r}"


### Pulses and captures


class FrameTimedInstruction(Instruction):
    """
    An instruction that occupies its frame for a duration. Unless marked as
    non-blocking, it also occupies every other frame sharing a qubit with it.
    """

    frame: Frame
    nonblocking: bool = False

    @property
    def blocking(self) -> bool:
        return not self.nonblocking

    def duration_at(self, sample_rate: float) -> float:
        """The time the instruction occupies a frame with the given sample rate."""
        return self.duration

    def _prefix(self, name: str):
        return f"NONBLOCKING {name}" if self.nonblocking else name


class Pulse(FrameTimedInstruction):
    """Plays a waveform on a frame."""

    waveform: Waveform | SampledWaveform

    @property
    def duration(self):
        return self.waveform.duration

    def duration_at(self, sample_rate: float) -> float:
        return self.waveform.duration_at(sample_rate)

    def __repr__(self):
        return f"{self._prefix('PULSE')} {self.frame!r} {self.waveform!r}"


class Capture(FrameTimedInstruction):
    """Integrates the signal on a frame against a kernel waveform and stores the result
    in memory."""

    waveform: Waveform | SampledWaveform
    memory_ref: str

    @property
    def duration(self):
        return self.waveform.duration

    def duration_at(self, sample_rate: float) -> float:
        return self.waveform.duration_at(sample_rate)

    def __repr__(self):
        return (
            f"{self._prefix('CAPTURE')} {self.frame!r} {self.waveform!r} {self.memory_ref}"
        )


class RawCapture(FrameTimedInstruction):
    """Records the raw signal on a frame for a fixed time."""

    duration: float = Field(ge=0, default=0.0)  # in seconds
    memory_ref: str

    def __repr__(self):
        return (
            f"{self._prefix('RAW-CAPTURE')} {self.frame!r} {self.duration} {self.memory_ref}"
        )

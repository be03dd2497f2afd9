# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Oxford Quantum Circuits Ltd
from __future__ import annotations

import numpy as np
from pydantic import Field, field_serializer, model_validator

from pulsetrace.ir.frames import Frame, FrameState
from pulsetrace.ir.instructions import FrameTimedInstruction
from pulsetrace.utils.pydantic import NoExtraFieldsFrozenModel


def duration_as_samples(duration: float, sample_rate: float) -> int:
    """Converts a duration into a number of samples, rounding partial samples up."""
    return int(np.ceil(np.round(duration * sample_rate, decimals=4)))


class PulseEvent(NoExtraFieldsFrozenModel):
    """A pulse, capture or raw capture placed on the timeline of its frame.

    :param instruction: The instruction that emitted the event.
    :param start_time: When the instruction starts, in seconds.
    :param end_time: When the instruction ends, in seconds.
    :param frame_state: The state of the frame at the time the event was emitted.
    """

    instruction: FrameTimedInstruction
    start_time: float
    end_time: float
    frame_state: FrameState = Field(repr=False)

    @model_validator(mode="after")
    def _check_times(self):
        if self.end_time < self.start_time:
            raise ValueError(
                f"Event ends at {self.end_time}, before its start at {self.start_time}."
            )
        return self

    @field_serializer("instruction")
    def _serialize_instruction(self, instruction: FrameTimedInstruction):
        return instruction.model_dump()

    @property
    def frame(self) -> Frame:
        return self.instruction.frame

    @property
    def duration(self) -> float:
        return self.end_time - self.start_time

    @property
    def start_sample(self) -> int:
        return duration_as_samples(self.start_time, self.frame_state.sample_rate)

    @property
    def samples(self) -> int:
        return duration_as_samples(self.duration, self.frame_state.sample_rate)

    @property
    def end_sample(self) -> int:
        return self.start_sample + self.samples

    def __repr__(self):
        return f"<{self.instruction!r} from {self.start_time} to {self.end_time}>"


class PulseEventLog:
    """The events emitted during a trace, in the order their instructions were
    processed. Events are only ever appended."""

    def __init__(self):
        self._events: list[PulseEvent] = []

    def append(self, event: PulseEvent):
        self._events.append(event)

    @property
    def events(self) -> tuple[PulseEvent, ...]:
        return tuple(self._events)

    @property
    def duration(self) -> float:
        """The time at which the last event finishes, or 0.0 if nothing was emitted."""
        return max((event.end_time for event in self._events), default=0.0)

    def for_frame(self, frame: Frame) -> list[PulseEvent]:
        return [event for event in self._events if event.frame == frame]

    def model_dump(self, **kwargs) -> list[dict]:
        return [event.model_dump(**kwargs) for event in self._events]

    def __iter__(self):
        return iter(self._events)

    def __len__(self):
        return len(self._events)

    def __getitem__(self, index):
        return self._events[index]

    def __repr__(self):
        return f"{self.__class__.__name__}({len(self._events)} events)"

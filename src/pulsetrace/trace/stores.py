# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Oxford Quantum Circuits Ltd
from __future__ import annotations

from collections.abc import Iterable

from pulsetrace.exceptions import MissingSampleRate, UndefinedFrame
from pulsetrace.ir.frames import Frame, FrameDefinition, FrameState
from pulsetrace.utils.logger import get_default_logger

log = get_default_logger()


class FrameStateStore:
    """Holds the analog state of every frame defined by a program.

    Frames are registered once by :meth:`initialize` and never removed. Reads hand out
    independent copies of the stored state and writes replace it wholesale, so a state
    obtained from the store can be kept around without it changing underneath.
    """

    def __init__(self):
        self._states: dict[Frame, FrameState] = {}

    def initialize(self, definitions: Iterable[FrameDefinition]):
        """
        :param definitions: The frame definitions to build the initial states from.
        :raises MissingSampleRate: If any definition lacks a sample rate.
        :raises ValueError: If a frame is defined more than once.
        """
        for definition in definitions:
            if definition.frame in self._states:
                raise ValueError(f"Frame {definition.frame} is defined more than once.")
            if definition.sample_rate is None:
                raise MissingSampleRate(definition.frame)
            self._states[definition.frame] = FrameState(
                frequency=definition.initial_frequency,
                sample_rate=definition.sample_rate,
            )
        log.debug(f"Initialised the state of {len(self._states)} frames.")

    @property
    def frames(self) -> list[Frame]:
        """The registered frames, in registration order."""
        return list(self._states)

    def get(self, frame: Frame) -> FrameState:
        if frame not in self._states:
            raise UndefinedFrame(frame)
        return self._states[frame].model_copy(deep=True)

    def set(self, frame: Frame, state: FrameState):
        if frame not in self._states:
            raise UndefinedFrame(frame)
        self._states[frame] = state.model_copy(deep=True)

    def __contains__(self, frame):
        return frame in self._states

    def __len__(self):
        return len(self._states)


class LocalClockStore:
    """The logical time of each frame.

    A frame that was never written to reads as being at time 0.0. Any frame can be
    written to, whether or not it has a state in the :class:`FrameStateStore`.
    """

    def __init__(self):
        self._clocks: dict[Frame, float] = {}

    def get(self, frame: Frame, default: float = 0.0) -> float:
        return self._clocks.get(frame, default)

    def set(self, frame: Frame, time: float):
        self._clocks[frame] = time

    def latest(self, frames: Iterable[Frame]) -> float:
        """The latest time over the given frames, or 0.0 if there are none."""
        return max((self.get(frame) for frame in frames), default=0.0)

    def snapshot(self) -> dict[Frame, float]:
        return dict(self._clocks)

    def __contains__(self, frame):
        return frame in self._clocks

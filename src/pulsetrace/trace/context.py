# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Oxford Quantum Circuits Ltd
from __future__ import annotations

from collections.abc import Iterable

from pulsetrace.config import TraceConfig
from pulsetrace.ir.frames import Frame, FrameDefinition
from pulsetrace.trace import sync
from pulsetrace.trace.events import PulseEventLog
from pulsetrace.trace.stores import FrameStateStore, LocalClockStore


class TraceContext:
    """Everything a trace mutates: frame states, local clocks and the event log.

    A context is owned by a single tracer for the lifetime of a run and is handed to
    every transition. It is not safe to mutate one context from several threads.
    """

    def __init__(self, config: TraceConfig | None = None):
        self.config = config or TraceConfig()
        self.states = FrameStateStore()
        self.clocks = LocalClockStore()
        self.events = PulseEventLog()

    @classmethod
    def from_definitions(
        cls, definitions: Iterable[FrameDefinition], config: TraceConfig | None = None
    ):
        context = cls(config)
        context.states.initialize(definitions)
        return context

    @property
    def frames(self) -> list[Frame]:
        return self.states.frames

    def intersecting(self, qubits) -> list[Frame]:
        return sync.intersecting(self.frames, qubits)

    def exact(self, qubits) -> list[Frame]:
        return sync.exact(self.frames, qubits)

    def synchronize(self, frames: list[Frame]) -> float:
        """Moves the clocks of the given frames to the latest time among them.

        :returns: The time the frames were synchronised to.
        """
        latest = self.clocks.latest(frames)
        for frame in frames:
            self.clocks.set(frame, latest)
        return latest

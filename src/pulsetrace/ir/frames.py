# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Oxford Quantum Circuits Ltd
from __future__ import annotations

from pydantic import Field

from pulsetrace.utils.pydantic import (
    NoExtraFieldsFrozenModel,
    NoExtraFieldsModel,
    QubitSet,
)


class Frame(NoExtraFieldsFrozenModel):
    """A named control channel tied to one or more qubits.

    Two frames are the same if they act on the same set of qubits and carry the same
    name. The qubits are stored sorted and without duplicates, so ``Frame(qubits=[1, 0],
    name="cz")`` and ``Frame(qubits=(0, 1), name="cz")`` are equal and hash alike.
    """

    qubits: QubitSet = Field(min_length=1)
    name: str

    def intersects(self, qubits) -> bool:
        return not set(self.qubits).isdisjoint(qubits)

    def __repr__(self):
        qubits = " ".join(str(qubit) for qubit in self.qubits)
        return f'{qubits} "{self.name}"'


class FrameDefinition(NoExtraFieldsModel):
    """
    Declares a frame available to a program, along with the hardware properties its
    initial state is built from.
    """

    frame: Frame
    sample_rate: float | None = Field(gt=0, default=None)  # in Hz
    initial_frequency: float | None = None  # in Hz

    def __repr__(self):
        return (
            f"{self.__class__.__name__}(frame={self.frame!r}, "
            f"sample_rate={self.sample_rate}, initial_frequency={self.initial_frequency})"
        )


class FrameState(NoExtraFieldsFrozenModel):
    """The analog state carried by a frame, as an immutable value.

    The sample rate is fixed when the state is created from its :class:`FrameDefinition`.
    Frame mutation instructions replace the state with an updated copy, so a state
    recorded with an event never changes afterwards.
    """

    phase: float = 0.0
    scale: float = 1.0
    frequency: float | None = None
    sample_rate: float = Field(gt=0)

    def __repr__(self):
        return (
            f"{self.__class__.__name__}(phase={self.phase}, scale={self.scale}, "
            f"frequency={self.frequency}, sample_rate={self.sample_rate})"
        )

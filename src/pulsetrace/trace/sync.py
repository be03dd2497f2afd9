# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Oxford Quantum Circuits Ltd
from collections.abc import Iterable

from pulsetrace.ir.frames import Frame


def intersecting(frames: Iterable[Frame], qubits: Iterable[int]) -> list[Frame]:
    """
    Finds the frames that act on at least one of the given qubits. Frame names are not
    considered.

    :param frames: The registered frames to search.
    :param qubits: The qubits of interest.
    :returns: The matching frames, in the order they were given.
    """
    qubits = set(qubits)
    return [frame for frame in frames if frame.intersects(qubits)]


def exact(frames: Iterable[Frame], qubits: Iterable[int]) -> list[Frame]:
    """
    Finds the frames that act on exactly the given qubits, irrespective of their order.

    :param frames: The registered frames to search.
    :param qubits: The qubits of interest.
    :returns: The matching frames, in the order they were given.
    """
    qubits = set(qubits)
    return [frame for frame in frames if set(frame.qubits) == qubits]


def all_qubits(frames: Iterable[Frame]) -> set[int]:
    """The union of the qubits the given frames act on."""
    return {qubit for frame in frames for qubit in frame.qubits}

# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Oxford Quantum Circuits Ltd
import pytest

from pulsetrace.exceptions import MissingSampleRate, UndefinedFrame
from pulsetrace.ir.frames import Frame, FrameDefinition, FrameState
from pulsetrace.trace.stores import FrameStateStore, LocalClockStore


class TestFrameStateStore:
    def test_initialize(self, definitions, frames):
        store = FrameStateStore()
        store.initialize(definitions)

        assert store.frames == frames
        assert len(store) == 4
        for frame in frames:
            assert store.get(frame) == FrameState(frequency=5e9, sample_rate=1e9)

    def test_initialize_without_frequency(self, drive):
        store = FrameStateStore()
        store.initialize([FrameDefinition(frame=drive, sample_rate=1e9)])
        assert store.get(drive).frequency is None

    def test_missing_sample_rate_raises(self, drive, readout):
        store = FrameStateStore()
        with pytest.raises(MissingSampleRate) as excinfo:
            store.initialize(
                [
                    FrameDefinition(frame=drive, sample_rate=1e9),
                    FrameDefinition(frame=readout),
                ]
            )
        assert excinfo.value.frame == readout

    def test_duplicate_definition_raises(self, drive):
        store = FrameStateStore()
        with pytest.raises(ValueError, match="more than once"):
            store.initialize(
                [
                    FrameDefinition(frame=drive, sample_rate=1e9),
                    FrameDefinition(frame=Frame(qubits=[0], name="rf"), sample_rate=2e9),
                ]
            )

    def test_get_returns_a_copy(self, definitions, drive):
        store = FrameStateStore()
        store.initialize(definitions)

        state = store.get(drive)
        assert state == store.get(drive)
        assert state is not store.get(drive)

    def test_set_replaces_state(self, definitions, drive):
        store = FrameStateStore()
        store.initialize(definitions)
        before = store.get(drive)

        state = FrameState(phase=0.5, scale=0.5, frequency=4e9, sample_rate=1e9)
        store.set(drive, state)
        assert store.get(drive) == state
        assert before == FrameState(frequency=5e9, sample_rate=1e9)

    def test_undefined_frame_raises(self, definitions):
        store = FrameStateStore()
        store.initialize(definitions)
        undefined = Frame(qubits=[7], name="rf")

        with pytest.raises(UndefinedFrame):
            store.get(undefined)
        with pytest.raises(UndefinedFrame):
            store.set(undefined, FrameState(sample_rate=1e9))
        assert undefined not in store


class TestLocalClockStore:
    def test_unwritten_clock_reads_as_zero(self, drive):
        clocks = LocalClockStore()
        assert clocks.get(drive) == 0.0
        assert clocks.get(drive, default=3.0) == 3.0
        assert drive not in clocks

    def test_set_any_frame(self):
        clocks = LocalClockStore()
        frame = Frame(qubits=[9], name="not_defined")
        clocks.set(frame, 1e-6)
        assert clocks.get(frame) == 1e-6
        assert clocks.snapshot() == {frame: 1e-6}

    def test_latest(self, drive, readout, coupler):
        clocks = LocalClockStore()
        clocks.set(drive, 10.0)
        clocks.set(readout, 3.0)
        assert clocks.latest([drive, readout, coupler]) == 10.0
        assert clocks.latest([coupler]) == 0.0
        assert clocks.latest([]) == 0.0
        assert coupler not in clocks

    def test_snapshot_is_a_copy(self, drive):
        clocks = LocalClockStore()
        clocks.set(drive, 1.0)
        snapshot = clocks.snapshot()
        clocks.set(drive, 2.0)
        assert snapshot[drive] == 1.0

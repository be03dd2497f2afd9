# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Oxford Quantum Circuits Ltd
import pytest

from pulsetrace.config import TraceConfig
from pulsetrace.ir.frames import Frame, FrameDefinition
from pulsetrace.ir.program import Program
from pulsetrace.ir.waveforms import Waveform
from pulsetrace.trace.context import TraceContext

SAMPLE_RATE = 1e9


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path):
    """Keeps environment variables and YAML files of the host out of the config."""
    for name in TraceConfig.model_fields:
        monkeypatch.delenv(f"PULSETRACE_{name}", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def flat():
    def _flat(width: float) -> Waveform:
        return Waveform(name="flat", width=width, parameters={"iq": 1.0})

    return _flat


@pytest.fixture
def drive():
    return Frame(qubits=[0], name="rf")


@pytest.fixture
def readout():
    return Frame(qubits=[0], name="ro_rx")


@pytest.fixture
def coupler():
    return Frame(qubits=[0, 1], name="cz")


@pytest.fixture
def other_drive():
    return Frame(qubits=[1], name="rf")


@pytest.fixture
def frames(drive, readout, coupler, other_drive):
    return [drive, readout, coupler, other_drive]


@pytest.fixture
def definitions(frames):
    return [
        FrameDefinition(frame=frame, sample_rate=SAMPLE_RATE, initial_frequency=5e9)
        for frame in frames
    ]


@pytest.fixture
def program(definitions):
    return Program(frames=definitions)


@pytest.fixture
def context(definitions):
    return TraceContext.from_definitions(definitions)

# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Oxford Quantum Circuits Ltd
import pytest

from pulsetrace.core.pass_base import PassManager
from pulsetrace.core.result_base import ResultManager
from pulsetrace.exceptions import UndefinedFrame
from pulsetrace.ir.frames import Frame, FrameDefinition
from pulsetrace.ir.instructions import (
    DelayOnFrames,
    Pulse,
    SetScale,
    SwapPhase,
)
from pulsetrace.passes import (
    FrameDefinitionValidation,
    PulseTraceAnalysis,
    PulseTraceResult,
    default_pipeline,
)


class TestFrameDefinitionValidation:
    def test_valid_program_is_returned(self, program, drive, flat):
        program.add(Pulse(frame=drive, waveform=flat(1.0)))
        assert FrameDefinitionValidation().run(program, ResultManager()) is program

    def test_duplicate_definition_raises(self, program, drive):
        program.frames.append(FrameDefinition(frame=drive, sample_rate=2e9))
        with pytest.raises(ValueError, match="more than once"):
            FrameDefinitionValidation().run(program, ResultManager())

    @pytest.mark.parametrize(
        "instruction",
        [
            SetScale(frame=Frame(qubits=[4], name="rf"), value=0.5),
            SwapPhase(
                left=Frame(qubits=[0], name="rf"), right=Frame(qubits=[4], name="rf")
            ),
            Pulse(
                frame=Frame(qubits=[4], name="rf"),
                waveform={"name": "flat", "width": 1.0},
            ),
        ],
    )
    def test_undefined_frame_raises(self, program, instruction):
        program.add(instruction)
        with pytest.raises(UndefinedFrame):
            FrameDefinitionValidation().run(program, ResultManager())

    def test_delays_may_use_undefined_frames(self, program):
        program.add(DelayOnFrames(frames=[Frame(qubits=[4], name="rf")], duration=1.0))
        FrameDefinitionValidation().run(program, ResultManager())


class TestPulseTraceAnalysis:
    def test_results_are_stored(self, program, drive, readout, flat):
        program.add(Pulse(frame=drive, waveform=flat(3.0)))
        res_mgr = ResultManager()

        assert PulseTraceAnalysis().run(program, res_mgr) is program

        result = res_mgr.lookup_by_type(PulseTraceResult)
        assert len(result.events) == 1
        assert result.clocks[drive] == 3.0
        assert result.clocks[readout] == 3.0

    def test_default_pipeline(self, program, drive, flat):
        program.add(Pulse(frame=drive, waveform=flat(3.0)))
        res_mgr = ResultManager()

        pipeline = default_pipeline()
        assert isinstance(pipeline, PassManager)
        assert len(pipeline.passes) == 2
        pipeline.run(program, res_mgr)

        assert res_mgr.lookup_by_type(PulseTraceResult).events[0].end_time == 3.0


class TestResultManager:
    def test_lookup_missing_raises(self):
        with pytest.raises(ValueError):
            ResultManager().lookup_by_type(PulseTraceResult)

    def test_lookup_multiple_raises(self):
        res_mgr = ResultManager()
        res_mgr.add(PulseTraceResult())
        res_mgr.add(PulseTraceResult())
        with pytest.raises(ValueError):
            res_mgr.lookup_by_type(PulseTraceResult)

    def test_update(self):
        res_mgr = ResultManager()
        other = ResultManager()
        other.add(PulseTraceResult())
        res_mgr.update(other)
        assert len(res_mgr.results) == 1
        with pytest.raises(ValueError):
            res_mgr.update({})

# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Oxford Quantum Circuits Ltd
from __future__ import annotations

from pydantic import Field

from pulsetrace.utils.pydantic import NoExtraFieldsModel


class AbstractWaveform(NoExtraFieldsModel):
    @property
    def duration(self) -> float:
        raise NotImplementedError()

    def duration_at(self, sample_rate: float) -> float:
        """The duration of the waveform when played on a frame with the given sample rate."""
        return self.duration


class Waveform(AbstractWaveform):
    """
    A waveform built from a named template, such as ``flat`` or ``gaussian``, with an
    explicit duration. The remaining template parameters are kept as given.
    """

    name: str
    width: float = Field(ge=0, default=0.0)  # in seconds
    parameters: dict[str, float | complex] = {}

    @property
    def duration(self):
        return self.width

    def __repr__(self):
        params = ", ".join(f"{key}: {value}" for key, value in self.parameters.items())
        return f"{self.name}(duration: {self.width}{', ' if params else ''}{params})"


class SampledWaveform(AbstractWaveform):
    """
    Provide a list of amplitudes to define a sampled waveform. Without a sample time, the
    samples are played at the sample rate of the frame the waveform is sent down.
    """

    samples: list[float | complex]
    sample_time: float | None = Field(gt=0, default=None)  # Time between samples, in seconds

    @property
    def duration(self):
        if self.sample_time is None:
            raise ValueError(
                "Cannot determine duration of SampledWaveform without sample_time being set."
            )
        return len(self.samples) * self.sample_time

    def duration_at(self, sample_rate: float) -> float:
        if self.sample_time is None:
            return len(self.samples) / sample_rate
        return self.duration

    def __repr__(self):
        return f"{self.__class__.__name__}(samples={len(self.samples)}, sample_time={self.sample_time})"

# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Oxford Quantum Circuits Ltd
from typing import Type

from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from pulsetrace.utils.logger import get_default_logger

log = get_default_logger()


class TraceConfig(BaseSettings):
    """
    Settings for a single trace. Values can be given directly, through environment
    variables prefixed with ``PULSETRACE_``, or through a ``pulsetrace.yaml`` file in the
    working directory, in that order of precedence.
    """

    model_config = SettingsConfigDict(
        env_prefix="PULSETRACE_",
        validate_assignment=True,
        yaml_file="pulsetrace.yaml",
    )

    DELAY_ON_QUBITS_ADDS_DURATION: bool = False
    """
    A delay on qubits only synchronises the frames on exactly those qubits to the latest
    of them. When enabled, the delay's duration is also added after synchronising.
    """

    MAX_INSTRUCTIONS: int | None = Field(gt=0, default=1_000_000)
    """Max number of instructions accepted in a single program. `None` disables the
    check."""

    LOG_EVENTS: bool = False
    """Log each emitted pulse event at ``INFO`` rather than ``DEBUG``."""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls),
        )

    @field_validator("DELAY_ON_QUBITS_ADDS_DURATION")
    def check_delay_on_qubits_adds_duration(cls, DELAY_ON_QUBITS_ADDS_DURATION):
        if DELAY_ON_QUBITS_ADDS_DURATION:
            log.warning(
                "Delays on qubits will add their duration after synchronising frames, "
                "which differs from the reference tracing behaviour."
            )
        return DELAY_ON_QUBITS_ADDS_DURATION

    def validate_program(self, program):
        """Checks a program against the limits of this configuration.

        :param program: The :class:`Program` about to be traced.
        :raises ValueError: If the program has more instructions than allowed.
        """
        if (
            self.MAX_INSTRUCTIONS is not None
            and len(program.instructions) > self.MAX_INSTRUCTIONS
        ):
            raise ValueError(
                f"Number of instructions {len(program.instructions)} exceeds the maximum "
                f"amount of {self.MAX_INSTRUCTIONS}."
            )

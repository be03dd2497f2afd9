# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Oxford Quantum Circuits Ltd
from __future__ import annotations

from pydoc import locate

from pydantic import field_serializer, field_validator

from pulsetrace.ir.frames import Frame, FrameDefinition
from pulsetrace.ir.instructions import BASE_INSTR, Instruction
from pulsetrace.utils.pydantic import NoExtraFieldsModel


class Program(NoExtraFieldsModel):
    """
    A typed pulse program: the frames it may act on and the instructions to run, in
    program order.
    """

    frames: list[FrameDefinition] = []
    instructions: list[Instruction] = []

    def add(self, *instructions: Instruction):
        self.instructions.extend(instructions)
        return self

    def define_frame(
        self,
        qubits,
        name: str,
        sample_rate: float | None = None,
        initial_frequency: float | None = None,
    ) -> Frame:
        frame = Frame(qubits=qubits, name=name)
        self.frames.append(
            FrameDefinition(
                frame=frame, sample_rate=sample_rate, initial_frequency=initial_frequency
            )
        )
        return frame

    @field_serializer("instructions")
    def _serialize_instructions(self, instructions: list[Instruction]):
        return [inst.model_dump() for inst in instructions]

    @field_validator("instructions", mode="before")
    @classmethod
    def _rehydrate_instructions(cls, instructions):
        if not isinstance(instructions, list):
            raise TypeError(
                f"Expected `instructions` to be a list of `Instruction` instances or dictionaries, got {type(instructions)}."
            )

        rehydrated = []
        # Cache for located types to avoid repeated lookups
        type_cache: dict[str, type[Instruction]] = {}

        for instr in instructions:
            if isinstance(instr, dict):
                instr_type_str = instr.get("instr_type", BASE_INSTR)

                if instr_type_str not in type_cache:
                    type_cache[instr_type_str] = locate(instr_type_str)
                instr_type = type_cache[instr_type_str]
                if instr_type is None or not issubclass(instr_type, Instruction):
                    raise TypeError(
                        f"Could not locate an instruction type for '{instr_type_str}'."
                    )
                rehydrated.append(instr_type(**instr))
            elif isinstance(instr, Instruction):
                rehydrated.append(instr)
            else:
                raise TypeError(
                    f"Instruction must be an Instruction instance or dict, got {type(instr)}."
                )

        return rehydrated

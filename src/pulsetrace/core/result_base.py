# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Oxford Quantum Circuits Ltd
import uuid
from abc import ABC
from typing import Set


class ResultInfoMixin(ABC):
    """Base mixin for the results produced by passes."""

    pass


class ResultModel:
    """Wrapper for any result object typically produced by an analysis pass.

    See :class:`ResultManager`.
    """

    def __init__(self, res_obj):
        self._result = res_obj
        self._uuid = uuid.uuid4()

    @property
    def value(self):
        return self._result

    def __hash__(self):
        return hash(self._uuid)


class ResultManager:
    """Represents a collection of analysis results.

    Passes that merely compute analyses on a program must not invalidate prior results.
    To keep things simple, the ResultManager is just a set of analysis results, each
    identified by a UUID.
    """

    def __init__(self):
        self._results: Set[ResultModel] = set()

    @property
    def results(self):
        return self._results

    def update(self, other_res_mgr):
        """Add the results from another results manager.

        :param ResultManager other_res_mgr:
        """
        if not isinstance(other_res_mgr, ResultManager):
            raise ValueError(
                f"Invalid type, expected {ResultManager}, but got {type(other_res_mgr)}"
            )
        self._results.update(other_res_mgr._results)

    def add(self, res_obj: ResultInfoMixin):
        """Add a results object to the manager.

        :param res_obj: Results from a pass, typically an analysis pass.
        """
        self._results.add(ResultModel(res_obj))

    def lookup_by_type(self, ty: type):
        """Find a result by its type.

        :param ty: The results type.
        """
        found = [res.value for res in self._results if isinstance(res.value, ty)]
        if not found:
            raise ValueError(f"Could not find any results instances of {ty}")

        if len(found) > 1:
            raise ValueError(f"Found multiple results instances of {ty}")

        return found[0]

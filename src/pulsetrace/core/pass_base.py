# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Oxford Quantum Circuits Ltd
from abc import ABC, abstractmethod

from pulsetrace.core.result_base import ResultManager


class PassConcept(ABC):
    """Base class describing the abstraction of a pass.

    See :class:`PassManager`.
    """

    @abstractmethod
    def run(self, ir, res_mgr: ResultManager, *args, **kwargs):
        pass


class PassModel(PassConcept):
    """A wrapper for any object providing a :meth:`run` method that accepts a program as
    well as a :class:`ResultManager`.

    See :class:`PassManager`.
    """

    def __init__(self, pass_obj):
        self._pass = pass_obj

    def run(self, ir, res_mgr: ResultManager, *args, **kwargs):
        return self._pass.run(ir, res_mgr, *args, **kwargs)


class AnalysisPass(ABC):
    """Base class of all passes that compute some form of analysis on the input program,
    with the program left intact."""

    @abstractmethod
    def run(self, ir, res_mgr: ResultManager, *args, **kwargs):
        pass


class ValidationPass(ABC):
    """Base class for all passes that check a program before it is traced.

    A validation pass either returns the program untouched or raises an error.
    """

    @abstractmethod
    def run(self, ir, res_mgr: ResultManager, *args, **kwargs):
        pass


class PassManager:
    """Contains a sequence of passes.

    Component passes run in the order they were added and register their own results
    within the :class:`ResultManager` passed in as argument.
    """

    def __init__(self):
        self.passes: list[PassModel] = []

    def run(self, ir, res_mgr: ResultManager, *args, **kwargs):
        """
        :param ir: The program to pass to each pass in turn.
        :param res_mgr: Collects the results of the passes.
        """
        for p in self.passes:
            ir = p.run(ir, res_mgr, *args, **kwargs)
        return ir

    def add(self, pass_obj):
        """
        Add a pass to the pass manager.

        This can be achieved by either using :code:`pass_mgr.add(pass)`, or
        :code:`pass_mgr | pass`.
        """
        self.passes.append(PassModel(pass_obj))
        return self

    def __or__(self, pass_obj):
        return self.add(pass_obj)

"""Base task with a fixed life cycle and a check on the order of its steps."""

from __future__ import annotations

import sys
import time
import warnings
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from itertools import cycle
from typing import Any


class StateOfTesting(Enum):
    """Whether a task is being checked for correctness or for speed."""

    FUNC = "func"
    PERF = "perf"


@dataclass
class TaskData:
    """Input and output buffers of a task, with their element counts."""

    inputs: list[Any] = field(default_factory=list)
    inputs_count: list[int] = field(default_factory=list)
    outputs: list[Any] = field(default_factory=list)
    outputs_count: list[int] = field(default_factory=list)
    state_of_testing: StateOfTesting = StateOfTesting.FUNC


class TaskOrderError(ValueError):
    """Raised when the steps of a task are called out of order."""

    def __init__(self, position: int, actual: str, expected: str) -> None:
        self.position = position
        self.actual = actual
        self.expected = expected
        super().__init__(
            "ORDER OF FUNCTIONS IS NOT RIGHT: \n"
            f"Serial number: {position}\n"
            f"Yours function: {actual}\n"
            f"Expected function: {expected}"
        )


class Task(ABC):
    """A unit of work run as validation, pre_processing, run, post_processing.

    Subclasses call ``self._order_test()`` at the start of each step; it
    checks that the steps follow the expected cycle and, in functional
    testing, warns when one pass takes longer than ``MAX_TEST_TIME``.
    """

    STEPS: tuple[str, ...] = ("validation", "pre_processing", "run", "post_processing")
    MAX_TEST_TIME = 1.0

    def __init__(self, task_data: TaskData) -> None:
        self._steps: list[str] = []
        self._started: float | None = None
        self.data: TaskData
        self.set_data(task_data)

    def set_data(self, task_data: TaskData) -> None:
        """Attach new data, switch to functional testing and reset the order."""
        task_data.state_of_testing = StateOfTesting.FUNC
        self._steps.clear()
        self.data = task_data

    @abstractmethod
    def validation(self) -> bool:
        """Check the data and task attributes before running."""

    @abstractmethod
    def pre_processing(self) -> bool:
        """Prepare the input data."""

    @abstractmethod
    def run(self) -> bool:
        """Do the work of the task."""

    @abstractmethod
    def post_processing(self) -> bool:
        """Finish the output data."""

    def _order_test(self, step: str | None = None) -> None:
        if step is None:
            step = sys._getframe(1).f_code.co_name

        if self._steps and step == self._steps[-1] == "run":
            return

        self._steps.append(step)
        for position, (actual, expected) in enumerate(zip(self._steps, cycle(self.STEPS)), start=1):
            if actual != expected:
                raise TaskOrderError(position, actual, expected)

        if self.data.state_of_testing is not StateOfTesting.FUNC:
            return
        if step == "pre_processing":
            self._started = time.perf_counter()
        elif step == "post_processing" and self._started is not None:
            elapsed = time.perf_counter() - self._started
            if elapsed > self.MAX_TEST_TIME:
                message = f"Current test work more than {self.MAX_TEST_TIME} secs: {elapsed}"
                print(message, file=sys.stderr)
                warnings.warn(message, RuntimeWarning, stacklevel=3)
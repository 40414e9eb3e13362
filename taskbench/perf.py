"""Performance measurement of tasks."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, ClassVar

from taskbench.task import StateOfTesting, Task

_COURSE_MARKER = "parallel_programming_course"
_PERF_MARKER = "perf_tests"


class TypeOfRunning(Enum):
    """Which part of a task was measured."""

    PIPELINE = "pipeline"
    TASK_RUN = "task_run"
    NONE = "none"


@dataclass
class PerfAttr:
    """How often to run the measured code and which clock to read."""

    num_running: int = 1
    current_timer: Callable[[], float] = field(default=lambda: 0.0)


@dataclass
class PerfResults:
    """Measured time in seconds and what was measured."""

    time_sec: float = 0.0
    type_of_running: TypeOfRunning = TypeOfRunning.NONE
    MAX_TIME: ClassVar[float] = 10.0
    MIN_TIME: ClassVar[float] = 0.05


class Perf:
    """Measures a task whose data is already prepared."""

    def __init__(self, task: Task) -> None:
        self.task: Task
        self.set_task(task)

    def set_task(self, task: Task) -> None:
        """Use ``task`` for measurement and put it into performance testing."""
        task.data.state_of_testing = StateOfTesting.PERF
        self.task = task

    def pipeline_run(self, perf_attr: PerfAttr, perf_results: PerfResults | None = None) -> PerfResults:
        """Time the whole life cycle of the task, repeated ``num_running`` times."""
        results = perf_results if perf_results is not None else PerfResults()
        results.type_of_running = TypeOfRunning.PIPELINE

        def pipeline() -> None:
            self.task.validation()
            self.task.pre_processing()
            self.task.run()
            self.task.post_processing()

        results.time_sec = _measure(perf_attr, pipeline)
        return results

    def task_run(self, perf_attr: PerfAttr, perf_results: PerfResults | None = None) -> PerfResults:
        """Time only ``run`` of the task, repeated ``num_running`` times."""
        results = perf_results if perf_results is not None else PerfResults()
        results.type_of_running = TypeOfRunning.TASK_RUN

        task = self.task
        task.validation()
        task.pre_processing()
        results.time_sec = _measure(perf_attr, task.run)
        task.post_processing()

        task.validation()
        task.pre_processing()
        task.run()
        task.post_processing()
        return results


def _measure(perf_attr: PerfAttr, action: Callable[[], object]) -> float:
    begin = perf_attr.current_timer()
    for _ in range(perf_attr.num_running):
        action()
    end = perf_attr.current_timer()
    return end - begin


def _relative_path(test_path: str) -> str:
    path = str(test_path).replace("\\", "/")
    start = path.find(_COURSE_MARKER)
    if start != -1:
        path = path[start + len(_COURSE_MARKER) + 1 :]
    stop = path.find(_PERF_MARKER)
    if stop != -1:
        path = path[: max(stop - 1, 0)]
    return path


def _within_limits(time_sec: float) -> bool:
    return PerfResults.MIN_TIME < time_sec < PerfResults.MAX_TIME


def format_perf_statistic(perf_results: PerfResults, test_path: str) -> str:
    """Return the ``path:kind:seconds`` line for automated checkers.

    A time outside the allowed bounds is reported as -1.
    """
    time_sec = perf_results.time_sec if _within_limits(perf_results.time_sec) else -1.0
    return f"{_relative_path(test_path)}:{perf_results.type_of_running.value}:{time_sec:.10f}"


def print_perf_statistic(perf_results: PerfResults, test_path: str) -> bool:
    """Print the statistic line; return whether the time is within bounds."""
    ok = _within_limits(perf_results.time_sec)
    if not ok:
        print(
            f"Task execute time need to be: {PerfResults.MIN_TIME} secs. < time < "
            f"{PerfResults.MAX_TIME} secs.",
            file=sys.stderr,
        )
        print(f"Original time in secs: {perf_results.time_sec}", file=sys.stderr)
    print(format_perf_statistic(perf_results, test_path))
    return ok
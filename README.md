# taskbench

A small framework for writing computational tasks with a fixed lifecycle
and measuring how long they take.

## Tasks

Subclass `taskbench.task.Task` and implement its four steps:
`validation`, `pre_processing`, `run` and `post_processing`. Inputs and
outputs travel in a `TaskData` object. It holds the lists `inputs`,
`inputs_count`, `outputs` and `outputs_count`, and a `state_of_testing`
(`StateOfTesting.FUNC` or `StateOfTesting.PERF`). The task keeps its data
in `self.data`. `set_data` attaches new data, switches it to
`StateOfTesting.FUNC` and resets the order check.

At the start of each step, call `self._order_test()`. It records the step
by the name of the calling method and checks that the steps follow the
cycle `validation`, `pre_processing`, `run`, `post_processing`. `run` may
be repeated several times in a row. Any other departure from the cycle
raises `TaskOrderError`, a `ValueError`. The error carries the
`position`, the `actual` step and the `expected` step.

In functional testing, a pass from `pre_processing` to `post_processing`
that takes longer than `Task.MAX_TEST_TIME` (1 second) is reported on
stderr and raises a `RuntimeWarning`.

```python
from taskbench.task import Task, TaskData


class SumTask(Task):
    def validation(self):
        self._order_test()
        return self.data.outputs_count[0] == 1

    def pre_processing(self):
        self._order_test()
        self.data.outputs[0][0] = 0
        return True

    def run(self):
        self._order_test()
        data = self.data
        data.outputs[0][0] += sum(data.inputs[0][: data.inputs_count[0]])
        return True

    def post_processing(self):
        self._order_test()
        return True


inputs, outputs = [1] * 20, [0]
task = SumTask(TaskData(inputs=[inputs], inputs_count=[20], outputs=[outputs], outputs_count=[1]))
task.validation()
task.pre_processing()
task.run()
task.post_processing()
assert outputs[0] == 20
```

## Measuring performance

`taskbench.perf.Perf` wraps a task and switches its data to
`StateOfTesting.PERF`. It has two ways to time the task:

- `pipeline_run(perf_attr, perf_results=None)` times the whole lifecycle.
- `task_run(perf_attr, perf_results=None)` times only `run`. It then goes
  through one more full lifecycle without timing it.

`PerfAttr` sets `num_running`, the number of repetitions, and
`current_timer`, the clock to read. The default clock always returns 0.0,
so pass a real one such as `time.perf_counter`. Both methods write
`time_sec` and `type_of_running` (a `TypeOfRunning`) into the given
`PerfResults`, or into a new one, and return it.

```python
import time
from taskbench.perf import Perf, PerfAttr

results = Perf(task).pipeline_run(PerfAttr(num_running=10, current_timer=time.perf_counter))
```

`format_perf_statistic(perf_results, test_path)` returns the line
`<path>:<kind>:<seconds>`, with the seconds to ten decimal places. The
path is `test_path` trimmed to the part after `parallel_programming_course/`
and before `/perf_tests`. A time not strictly between
`PerfResults.MIN_TIME` (0.05 s) and `PerfResults.MAX_TIME` (10 s) is
reported as `-1.0000000000`. `print_perf_statistic` prints that line. When
the time is out of bounds it first explains why on stderr. It returns
whether the time was within the bounds.

## Samples

`taskbench.samples` holds `fib(n)`, which computes Fibonacci numbers by
working on the two halves in separate threads. It also holds
`thread_messages(num_threads=None)`, which starts one thread per index and
returns the messages in the order the threads finished. The thread count
defaults to the number of CPUs. A negative count raises `ValueError`.

The command runs one sample:

```
taskbench-samples [threads|team|fib] [--threads N]
```

`threads` is the default. It prints the thread count and one line per
thread. `team` prints each thread's number and the team size. `fib`
computes `fib(10)` and exits with status 0 if the result is 55.

## Running the tests

```
pip install .[test]
pytest
```
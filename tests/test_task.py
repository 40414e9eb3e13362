from unittest import mock

import pytest

from taskbench.task import StateOfTesting, Task, TaskData, TaskOrderError


class SumTask(Task):
    def pre_processing(self):
        self._order_test()
        self._input = self.data.inputs[0]
        self._output = self.data.outputs[0]
        self._output[0] = 0
        return True

    def validation(self):
        self._order_test()
        return self.data.outputs_count[0] == 1

    def run(self):
        self._order_test()
        for value in self._input[: self.data.inputs_count[0]]:
            self._output[0] += value
        return True

    def post_processing(self):
        self._order_test()
        return True


def make_data(inp, out):
    return TaskData(inputs=[inp], inputs_count=[len(inp)], outputs=[out], outputs_count=[len(out)])


def run_all(task):
    valid = task.validation()
    task.pre_processing()
    task.run()
    task.post_processing()
    return valid


@pytest.mark.parametrize("value", [1, 1.0])
def test_sum_values(value):
    inp = [value] * 20
    out = [0]
    task = SumTask(make_data(inp, out))
    assert run_all(task) is True
    assert out[0] == pytest.approx(len(inp), abs=1e-6)


def test_uint8_like_values():
    inp = [1] * 20
    out = [0]
    assert run_all(SumTask(make_data(inp, out)))
    assert out[0] == 20


def test_validate_func():
    task = SumTask(make_data([1] * 20, [0, 0]))
    assert task.validation() is False


def test_wrong_order():
    inp = [1.0] * 20
    out = [0.0]
    task = SumTask(make_data(inp, out))
    assert task.validation() is True
    task.pre_processing()
    with pytest.raises(TaskOrderError) as info:
        task.post_processing()
    assert info.value.position == 3
    assert info.value.actual == "post_processing"
    assert info.value.expected == "run"


def test_error_is_value_error_with_message():
    task = SumTask(make_data([1], [0]))
    with pytest.raises(ValueError, match="Expected function: validation"):
        task.run()


def test_repeated_run_is_allowed():
    inp = [1] * 5
    out = [0]
    task = SumTask(make_data(inp, out))
    task.validation()
    task.pre_processing()
    task.run()
    task.run()
    task.post_processing()
    assert out[0] == 10


def test_second_cycle_is_allowed():
    inp = [2] * 3
    out = [0]
    task = SumTask(make_data(inp, out))
    run_all(task)
    run_all(task)
    assert out[0] == 6


def test_set_data_resets_order_and_state():
    task = SumTask(make_data([1], [0]))
    task.validation()
    data = make_data([3, 4], [0])
    data.state_of_testing = StateOfTesting.PERF
    task.set_data(data)
    assert task.data is data
    assert data.state_of_testing is StateOfTesting.FUNC
    assert run_all(task)
    assert data.outputs[0][0] == 7


def test_slow_pass_warns():
    task = SumTask(make_data([1], [0]))
    with mock.patch("taskbench.task.time.perf_counter", side_effect=[0.0, 2.0]):
        task.validation()
        task.pre_processing()
        task.run()
        with pytest.warns(RuntimeWarning, match="Current test work more than"):
            task.post_processing()


def test_perf_state_skips_timing():
    data = make_data([1], [0])
    task = SumTask(data)
    data.state_of_testing = StateOfTesting.PERF
    with mock.patch("taskbench.task.time.perf_counter", side_effect=AssertionError("timed")):
        assert run_all(task) is True
    assert data.outputs[0][0] == 1
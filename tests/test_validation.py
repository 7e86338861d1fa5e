import pytest

from schedsim.algorithms import run_algorithm
from schedsim.errors import (
    IncompleteScheduleError,
    InvalidAlgorithmError,
    InvalidProcessError,
    InvalidQuantumError,
    SchedulerError,
)
from schedsim.metrics import compute_process_metrics
from schedsim.models import Process


@pytest.mark.parametrize(
    "procs",
    [
        [Process("A", arrival_time=0, burst_time=0)],
        [Process("A", arrival_time=0, burst_time=-2)],
        [Process("A", arrival_time=-1, burst_time=2)],
        [Process("A", arrival_time=0, burst_time=1), Process("A", arrival_time=1, burst_time=1)],
        [Process("", arrival_time=0, burst_time=1)],
        [Process("A", arrival_time=0, burst_time=1, priority=1.5)],
        [Process("A", arrival_time=0, burst_time=True)],
        [Process("A", arrival_time=0, burst_time=float("nan"))],
        [Process("A", arrival_time=0, burst_time=0.2)],
        [Process("A", arrival_time=0.5, burst_time=2)],
        [Process("A", arrival_time=0, burst_time=3.0)],
        [Process("A", arrival_time="0", burst_time=1)],
    ],
)
def test_invalid_processes_rejected(procs):
    with pytest.raises(InvalidProcessError):
        run_algorithm("fcfs", procs)


def test_duplicate_pid_message():
    procs = [Process("A", arrival_time=0, burst_time=1), Process("A", arrival_time=1, burst_time=1)]
    with pytest.raises(InvalidProcessError, match="Duplicate process id"):
        run_algorithm("priority", procs)


@pytest.mark.parametrize("name", ["sjf", "", "FCFS2", None, 3])
def test_unknown_algorithm(name):
    with pytest.raises(InvalidAlgorithmError):
        run_algorithm(name, [Process("A", arrival_time=0, burst_time=1)])


@pytest.mark.parametrize("quantum", [None, 0, -1, 1.5, True])
def test_round_robin_needs_positive_quantum(quantum):
    with pytest.raises(InvalidQuantumError):
        run_algorithm("rr", [Process("A", arrival_time=0, burst_time=1)], quantum=quantum)


def test_errors_are_value_errors():
    assert issubclass(SchedulerError, ValueError)
    for cls in (InvalidProcessError, InvalidAlgorithmError, InvalidQuantumError, IncompleteScheduleError):
        assert issubclass(cls, SchedulerError)


def test_missing_completion_is_surfaced():
    procs = [Process("A", arrival_time=0, burst_time=1), Process("B", arrival_time=0, burst_time=1)]
    with pytest.raises(IncompleteScheduleError, match="B"):
        compute_process_metrics(procs, {"A": 1})

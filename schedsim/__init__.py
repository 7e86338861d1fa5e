"""
CPU scheduling simulator.

Simulates FCFS, non-preemptive Priority and Round Robin scheduling on a
single CPU and reports turnaround and waiting times.
"""

from .algorithms import run_algorithm
from .errors import (
    IncompleteScheduleError,
    InvalidAlgorithmError,
    InvalidProcessError,
    InvalidQuantumError,
    SchedulerError,
)
from .models import Algorithm, Process, ScheduleResult

__all__ = [
    "Algorithm",
    "IncompleteScheduleError",
    "InvalidAlgorithmError",
    "InvalidProcessError",
    "InvalidQuantumError",
    "Process",
    "ScheduleResult",
    "SchedulerError",
    "run_algorithm",
]

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union

from .errors import InvalidAlgorithmError


class Algorithm(Enum):
    FCFS = "FCFS"
    PRIORITY = "Priority"
    ROUND_ROBIN = "RoundRobin"

    @classmethod
    def parse(cls, name: Union["Algorithm", str]) -> "Algorithm":
        """
        Resolve an algorithm selector given as an enum member, its value, or
        one of the short command-line aliases.
        """
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise InvalidAlgorithmError(f"Unknown algorithm {name!r}")

        key = name.strip().lower()
        if key not in _ALIASES:
            raise InvalidAlgorithmError(f"Unknown algorithm {name!r} (use fcfs, priority or rr)")
        return _ALIASES[key]

    @property
    def label(self) -> str:
        return _LABELS[self]


_ALIASES = {
    "fcfs": Algorithm.FCFS,
    "priority": Algorithm.PRIORITY,
    "rr": Algorithm.ROUND_ROBIN,
    "roundrobin": Algorithm.ROUND_ROBIN,
    "round-robin": Algorithm.ROUND_ROBIN,
    "round_robin": Algorithm.ROUND_ROBIN,
}

_LABELS = {
    Algorithm.FCFS: "FCFS",
    Algorithm.PRIORITY: "Priority (non-preemptive)",
    Algorithm.ROUND_ROBIN: "Round Robin",
}


@dataclass(frozen=True)
class Process:
    pid: str
    arrival_time: int
    burst_time: int
    priority: int = 0


@dataclass(frozen=True)
class ScheduledSlice:
    """
    One contiguous slice of execution for a process in the Gantt chart.
    """

    pid: str
    start_time: int
    end_time: int

    @property
    def duration(self) -> int:
        return self.end_time - self.start_time


@dataclass(frozen=True)
class ProcessMetrics:
    pid: str
    arrival_time: int
    burst_time: int
    completion_time: int
    turnaround_time: int
    waiting_time: int


@dataclass(frozen=True)
class SystemMetrics:
    cpu_busy_time: int
    makespan: int
    idle_time: int
    throughput: float
    cpu_utilization: float


@dataclass
class ScheduleResult:
    algorithm: Algorithm
    quantum: Optional[int]
    timeline: List[ScheduledSlice] = field(default_factory=list)
    metrics: Dict[str, ProcessMetrics] = field(default_factory=dict)
    average_turnaround: float = 0.0
    average_waiting: float = 0.0
    system: Optional[SystemMetrics] = None

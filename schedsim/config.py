"""
Default settings for the scheduler CLI.

Command-line flags override these values; the engine itself takes no
configuration beyond its explicit arguments.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from .models import Process


@dataclass(frozen=True)
class SchedulerConfig:
    """
    Attributes:
        default_quantum: Time slice used for Round Robin when none is given.
        gantt_width: Maximum number of columns for the Gantt chart.
        log_level: Logging level name for the CLI.
        log_format: Format string passed to the log handler.
    """

    default_quantum: int = 2
    gantt_width: int = 60
    log_level: str = "WARNING"
    log_format: str = "%(message)s"

    def validate(self) -> bool:
        if self.default_quantum < 1:
            raise ValueError("default_quantum must be at least 1")
        if self.gantt_width < 10:
            raise ValueError("gantt_width must be at least 10")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        return True


DEFAULT_CONFIG = SchedulerConfig()

# Classic three-process workload used when no workload file is given.
EXAMPLE_WORKLOAD: List[Process] = [
    Process("P1", arrival_time=0, burst_time=5, priority=2),
    Process("P2", arrival_time=1, burst_time=3, priority=1),
    Process("P3", arrival_time=2, burst_time=8, priority=3),
]

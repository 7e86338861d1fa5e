from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional

from .errors import InvalidProcessError, InvalidQuantumError
from .models import Process

logger = logging.getLogger(__name__)


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a valid time value
    return isinstance(value, int) and not isinstance(value, bool)


def validate_processes(processes: Iterable[Process]) -> List[Process]:
    """
    Check a process set and return it as an independent list.

    Raises InvalidProcessError for an empty or duplicate pid, a negative
    or non-integer arrival, a non-positive or non-integer burst, or a
    non-integer priority. Times are whole time units so slice durations
    add up to each burst exactly.
    """
    checked: List[Process] = []
    seen: set[str] = set()

    for p in processes:
        if not isinstance(p, Process):
            raise InvalidProcessError("Expected a Process", field="process", value=p)
        if not isinstance(p.pid, str) or not p.pid.strip():
            raise InvalidProcessError("Process id must be a non-empty string", field="pid", value=p.pid)
        if p.pid in seen:
            raise InvalidProcessError("Duplicate process id", field="pid", value=p.pid)
        if not _is_int(p.arrival_time) or p.arrival_time < 0:
            raise InvalidProcessError(
                f"Process {p.pid} needs a non-negative integer arrival time", field="arrival_time", value=p.arrival_time
            )
        if not _is_int(p.burst_time) or p.burst_time <= 0:
            raise InvalidProcessError(
                f"Process {p.pid} needs a positive integer burst time", field="burst_time", value=p.burst_time
            )
        if not _is_int(p.priority):
            raise InvalidProcessError(
                f"Process {p.pid} needs an integer priority", field="priority", value=p.priority
            )

        seen.add(p.pid)
        checked.append(p)

    logger.debug("Validated %d processes", len(checked))
    return checked


def validate_quantum(quantum: Optional[int]) -> int:
    if quantum is None:
        raise InvalidQuantumError("Round Robin requires a quantum (use --quantum)")
    if isinstance(quantum, bool) or not isinstance(quantum, int) or quantum <= 0:
        raise InvalidQuantumError("Round Robin requires a positive integer quantum", field="quantum", value=quantum)
    return quantum

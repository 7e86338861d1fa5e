from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Deque, Dict, List, Optional, Sequence, Tuple, Union

from .metrics import average_metrics, compute_process_metrics, compute_system_metrics
from .models import Algorithm, Process, ScheduledSlice, ScheduleResult
from .validation import validate_processes, validate_quantum

logger = logging.getLogger(__name__)

# Ordered slices plus the completion time of every process.
Schedule = Tuple[List[ScheduledSlice], Dict[str, int]]


def _by_arrival(processes: Sequence[Process]) -> List[Process]:
    # sorted() is stable, so equal arrivals keep their input order
    return sorted(processes, key=lambda p: p.arrival_time)


def schedule_fcfs(processes: Sequence[Process], quantum: Optional[int] = None) -> Schedule:
    """
    First-Come First-Serve (non-preemptive) scheduling.
    """
    processes_sorted = _by_arrival(validate_processes(processes))

    timeline: List[ScheduledSlice] = []
    completions: Dict[str, int] = {}
    if not processes_sorted:
        return timeline, completions

    time = processes_sorted[0].arrival_time

    for p in processes_sorted:
        if time < p.arrival_time:
            logger.debug("FCFS idle from %s to %s", time, p.arrival_time)
            time = p.arrival_time

        end_time = time + p.burst_time
        timeline.append(ScheduledSlice(pid=p.pid, start_time=time, end_time=end_time))
        completions[p.pid] = end_time
        time = end_time

    return timeline, completions


def schedule_priority(processes: Sequence[Process], quantum: Optional[int] = None) -> Schedule:
    """
    Priority scheduling (non-preemptive).

    Whenever the CPU becomes free, the arrived process with the lowest
    numeric priority value is selected and runs its whole burst. Ties go to
    the earlier arrival, then to input order. A process that arrives during
    a burst is only considered at the next decision point.
    """
    processes = validate_processes(processes)
    order = {p.pid: index for index, p in enumerate(processes)}
    waiting: List[Process] = _by_arrival(processes)

    timeline: List[ScheduledSlice] = []
    completions: Dict[str, int] = {}
    if not waiting:
        return timeline, completions

    time = waiting[0].arrival_time

    while waiting:
        ready = [p for p in waiting if p.arrival_time <= time]

        if not ready:
            # Nothing has arrived yet: jump to the next arrival.
            next_arrival = min(p.arrival_time for p in waiting)
            logger.debug("Priority idle from %s to %s", time, next_arrival)
            time = next_arrival
            continue

        p = min(ready, key=lambda x: (x.priority, x.arrival_time, order[x.pid]))
        waiting.remove(p)

        end_time = time + p.burst_time
        timeline.append(ScheduledSlice(pid=p.pid, start_time=time, end_time=end_time))
        completions[p.pid] = end_time
        logger.debug("Priority selected %s (priority %s) at %s", p.pid, p.priority, time)
        time = end_time

    return timeline, completions


def schedule_rr(processes: Sequence[Process], quantum: Optional[int] = None) -> Schedule:
    """
    Round Robin scheduling with a fixed time quantum.

    Processes that arrive while a slice runs (including at its end) join the
    ready queue before the preempted process is put back at the tail.
    """
    quantum = validate_quantum(quantum)
    processes = validate_processes(processes)

    arrivals: Deque[Process] = deque(_by_arrival(processes))
    remaining: Dict[str, int] = {p.pid: p.burst_time for p in processes}
    ready: Deque[str] = deque()

    timeline: List[ScheduledSlice] = []
    completions: Dict[str, int] = {}
    if not arrivals:
        return timeline, completions

    time = arrivals[0].arrival_time

    def enqueue_new_arrivals(current_time: int) -> None:
        while arrivals and arrivals[0].arrival_time <= current_time:
            ready.append(arrivals.popleft().pid)

    while remaining:
        enqueue_new_arrivals(time)

        if not ready:
            logger.debug("Round Robin idle from %s to %s", time, arrivals[0].arrival_time)
            time = arrivals[0].arrival_time
            continue

        pid = ready.popleft()
        run_time = min(quantum, remaining[pid])
        timeline.append(ScheduledSlice(pid=pid, start_time=time, end_time=time + run_time))

        time += run_time
        remaining[pid] -= run_time

        enqueue_new_arrivals(time)

        if remaining[pid] > 0:
            ready.append(pid)
        else:
            completions[pid] = time
            del remaining[pid]

    return timeline, completions


ALGORITHMS: Dict[Algorithm, Callable[..., Schedule]] = {
    Algorithm.FCFS: schedule_fcfs,
    Algorithm.PRIORITY: schedule_priority,
    Algorithm.ROUND_ROBIN: schedule_rr,
}


def run_algorithm(
    name: Union[Algorithm, str], processes: Sequence[Process], quantum: Optional[int] = None
) -> ScheduleResult:
    """
    Validate the inputs, run the selected algorithm and derive the metrics.

    The quantum is only used (and required) by Round Robin.
    """
    algorithm = Algorithm.parse(name)
    snapshot = validate_processes(processes)
    if algorithm is Algorithm.ROUND_ROBIN:
        quantum = validate_quantum(quantum)
    else:
        quantum = None

    logger.debug("Running %s on %d processes (quantum=%s)", algorithm.value, len(snapshot), quantum)

    func = ALGORITHMS[algorithm]
    timeline, completions = func(snapshot, quantum=quantum)

    metrics = compute_process_metrics(snapshot, completions)
    avg_turnaround, avg_waiting = average_metrics(metrics)

    return ScheduleResult(
        algorithm=algorithm,
        quantum=quantum,
        timeline=timeline,
        metrics=metrics,
        average_turnaround=avg_turnaround,
        average_waiting=avg_waiting,
        system=compute_system_metrics(timeline, metrics),
    )

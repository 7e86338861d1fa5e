from __future__ import annotations

from typing import Dict, List, Mapping, Sequence, Tuple

from .errors import IncompleteScheduleError
from .models import Process, ProcessMetrics, ScheduledSlice, SystemMetrics


def compute_process_metrics(
    processes: Sequence[Process], completions: Mapping[str, int]
) -> Dict[str, ProcessMetrics]:
    """
    Derive turnaround and waiting time for every process from its completion
    time. Metrics are keyed by pid in input order.
    """
    metrics: Dict[str, ProcessMetrics] = {}
    for p in processes:
        if p.pid not in completions:
            raise IncompleteScheduleError(f"No completion recorded for process {p.pid}", field="pid", value=p.pid)

        completion_time = completions[p.pid]
        turnaround_time = completion_time - p.arrival_time
        metrics[p.pid] = ProcessMetrics(
            pid=p.pid,
            arrival_time=p.arrival_time,
            burst_time=p.burst_time,
            completion_time=completion_time,
            turnaround_time=turnaround_time,
            waiting_time=turnaround_time - p.burst_time,
        )
    return metrics


def average_metrics(metrics: Mapping[str, ProcessMetrics]) -> Tuple[float, float]:
    """
    Return (average turnaround, average waiting), rounded to two decimals.
    """
    if not metrics:
        return 0.0, 0.0

    n = len(metrics)
    avg_turnaround = sum(m.turnaround_time for m in metrics.values()) / n
    avg_waiting = sum(m.waiting_time for m in metrics.values()) / n
    return round(avg_turnaround, 2), round(avg_waiting, 2)


def compute_system_metrics(timeline: List[ScheduledSlice], metrics: Mapping[str, ProcessMetrics]) -> SystemMetrics:
    """
    Compute CPU busy/idle time, throughput and utilization over the span of
    the schedule.
    """
    if not timeline:
        return SystemMetrics(cpu_busy_time=0, makespan=0, idle_time=0, throughput=0.0, cpu_utilization=0.0)

    makespan = timeline[-1].end_time - timeline[0].start_time
    cpu_busy_time = sum(slice_.duration for slice_ in timeline)

    throughput = len(metrics) / makespan if makespan > 0 else 0.0
    cpu_utilization = cpu_busy_time / makespan if makespan > 0 else 0.0

    return SystemMetrics(
        cpu_busy_time=cpu_busy_time,
        makespan=makespan,
        idle_time=makespan - cpu_busy_time,
        throughput=throughput,
        cpu_utilization=cpu_utilization,
    )

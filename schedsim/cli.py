from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .algorithms import ALGORITHMS, run_algorithm
from .config import DEFAULT_CONFIG, EXAMPLE_WORKLOAD, SchedulerConfig
from .gantt import build_rich_gantt, format_time, render_gantt
from .models import Algorithm, Process, ScheduleResult
from .workload_io import load_workload

logger = logging.getLogger(__name__)

ALGORITHM_NAMES = {Algorithm.FCFS: "fcfs", Algorithm.PRIORITY: "priority", Algorithm.ROUND_ROBIN: "rr"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="schedsim",
        description="CPU scheduling simulator (FCFS, non-preemptive Priority, Round Robin).",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_CONFIG.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help=f"Logging level written to stderr (default: {DEFAULT_CONFIG.log_level}).",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Run a scheduling algorithm on a workload.")
    run_parser.add_argument(
        "--algorithm",
        "-a",
        required=True,
        help="Algorithm to use (fcfs, priority, rr).",
    )
    _add_workload_args(run_parser)
    run_parser.add_argument(
        "--plain",
        action="store_true",
        help="Print a plain-text Gantt chart instead of the colored one.",
    )

    compare_parser = subparsers.add_parser(
        "compare",
        help="Run several algorithms on the same workload and compare average metrics.",
    )
    _add_workload_args(compare_parser)
    compare_parser.add_argument(
        "--algorithms",
        nargs="+",
        default=list(ALGORITHM_NAMES[a] for a in ALGORITHMS),
        help="Algorithms to compare (default: fcfs priority rr).",
    )

    return parser


def _add_workload_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--workload",
        "-w",
        default=None,
        help="Path to JSON or CSV workload file (default: built-in P1/P2/P3 example).",
    )
    parser.add_argument(
        "--quantum",
        "-q",
        type=int,
        default=DEFAULT_CONFIG.default_quantum,
        help=f"Time quantum for round-robin, ignored otherwise (default: {DEFAULT_CONFIG.default_quantum}).",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=DEFAULT_CONFIG.gantt_width,
        help=f"Maximum Gantt chart width in columns (default: {DEFAULT_CONFIG.gantt_width}).",
    )


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format=DEFAULT_CONFIG.log_format,
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_processes(workload: Optional[str]) -> List[Process]:
    if workload is None:
        logger.info("No workload given, using the built-in example")
        return list(EXAMPLE_WORKLOAD)
    return load_workload(Path(workload))


def _print_result(result: ScheduleResult, console: Console, width: int, plain: bool = False) -> None:
    console.print(f"[bold]Algorithm:[/bold] {result.algorithm.label}")
    if result.quantum is not None:
        console.print(f"[bold]Quantum:[/bold] {result.quantum}")

    console.print()

    if plain:
        console.print(render_gantt(result.timeline, width=width), markup=False, highlight=False)
    else:
        panel, time_marks = build_rich_gantt(result.timeline, width=width)
        console.print(panel)
        if time_marks:
            console.print(time_marks)

    console.print()

    headers = ["PID", "Arrive", "Burst", "Complete", "Turnaround", "Wait"]

    proc_table = Table(title="Per-process metrics", box=box.SIMPLE_HEAVY)
    for h in headers:
        proc_table.add_column(h, justify="center" if h == "PID" else "right")

    for m in result.metrics.values():
        proc_table.add_row(
            m.pid,
            format_time(m.arrival_time),
            format_time(m.burst_time),
            format_time(m.completion_time),
            format_time(m.turnaround_time),
            format_time(m.waiting_time),
        )

    console.print(proc_table)
    console.print()

    sys_table = Table(title="Summary", box=box.SIMPLE_HEAVY)
    sys_table.add_column("Metric")
    sys_table.add_column("Value", justify="right")

    sys_table.add_row("Avg turnaround", f"{result.average_turnaround:.2f}")
    sys_table.add_row("Avg waiting", f"{result.average_waiting:.2f}")
    if result.system:
        sys = result.system
        sys_table.add_row("CPU idle time", format_time(sys.idle_time))
        sys_table.add_row("Throughput (proc/time)", f"{sys.throughput:.3f}")
        sys_table.add_row("CPU utilization", f"{sys.cpu_utilization*100:.1f}%")

    console.print(sys_table)


def _print_comparison(processes: List[Process], algorithms: List[str], quantum: int, console: Console) -> None:
    summary_table = Table(title="Algorithm comparison", box=box.SIMPLE_HEAVY)
    summary_table.add_column("Algorithm")
    summary_table.add_column("Quantum", justify="right")
    summary_table.add_column("Avg turnaround", justify="right")
    summary_table.add_column("Avg waiting", justify="right")

    for alg in algorithms:
        # each run gets its own copy of the process list
        result = run_algorithm(alg, list(processes), quantum=quantum)
        summary_table.add_row(
            result.algorithm.label,
            "" if result.quantum is None else str(result.quantum),
            f"{result.average_turnaround:.2f}",
            f"{result.average_waiting:.2f}",
        )

    console.print(summary_table)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    console = Console()

    try:
        config = SchedulerConfig(
            default_quantum=args.quantum,
            gantt_width=args.width,
            log_level=args.log_level,
        )
        config.validate()

        processes = _load_processes(args.workload)

        if args.command == "run":
            result = run_algorithm(args.algorithm, processes, quantum=config.default_quantum)
            _print_result(result, console, width=config.gantt_width, plain=args.plain)
            return 0

        if args.command == "compare":
            _print_comparison(processes, args.algorithms, config.default_quantum, console)
            return 0
    except (ValueError, OSError) as exc:
        logger.debug("Run aborted", exc_info=True)
        console.print(f"Error: {exc}", style="red", markup=False)
        return 2

    parser.error(f"Unknown command: {args.command}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import ScheduledSlice


def format_time(value: int) -> str:
    return str(value)


def _merge_runs(slices: List[ScheduledSlice]) -> List[ScheduledSlice]:
    """
    Join back-to-back slices of the same process into one bar.
    """
    merged: List[ScheduledSlice] = []
    for sl in sorted(slices, key=lambda s: (s.start_time, s.end_time)):
        if merged and merged[-1].pid == sl.pid and merged[-1].end_time == sl.start_time:
            merged[-1] = ScheduledSlice(sl.pid, merged[-1].start_time, sl.end_time)
        else:
            merged.append(sl)
    return merged


def _columns(slices: List[ScheduledSlice], width: Optional[int]) -> List[Tuple[int, int]]:
    """
    Map each slice to (idle_gap, bar_width) in character columns.

    Bars are proportional to the schedule length; when it exceeds `width`
    columns the whole chart is scaled down to exactly `width` columns and a
    slice too short to show may get a zero-width bar.
    """
    total = slices[-1].end_time
    scale = width / total if width is not None and 0 < width < total else 1

    columns: List[Tuple[int, int]] = []
    last_col = 0
    for sl in slices:
        start_col = round(sl.start_time * scale)
        end_col = round(sl.end_time * scale)
        columns.append((start_col - last_col, end_col - start_col))
        last_col = end_col
    return columns


def render_gantt(slices: List[ScheduledSlice], width: Optional[int] = None) -> str:
    """
    Plain-text Gantt chart renderer, used for --plain output.
    """
    if not slices:
        return "(no execution)"

    slices = _merge_runs(slices)

    line = "|"
    labels = " "
    time_marks = "0"
    last_time = 0

    for sl, (gap, bar) in zip(slices, _columns(slices, width)):
        if gap > 0 or sl.start_time > last_time:
            line += "." * gap
            labels += " " * gap
            time_marks += f" {format_time(sl.start_time)}"

        line += "=" * bar
        labels += sl.pid[:bar].ljust(bar)
        last_time = sl.end_time
        time_marks += f" {format_time(last_time)}"

    line += "|"

    return "\n".join(
        [
            "Gantt Chart:",
            line,
            labels.rstrip(),
            time_marks,
        ]
    )


def build_rich_gantt(slices: List[ScheduledSlice], width: Optional[int] = None) -> tuple[Panel, str]:
    """
    Build a Rich Panel containing a colored Gantt chart and a string with time marks.
    """
    if not slices:
        panel = Panel("No execution", title="Gantt Chart")
        return panel, ""

    slices = _merge_runs(slices)

    colors = ["red", "green", "yellow", "blue", "magenta", "cyan"]
    pid_to_color: Dict[str, str] = {}

    def pid_color(pid: str) -> str:
        if pid not in pid_to_color:
            idx = len(pid_to_color) % len(colors)
            pid_to_color[pid] = colors[idx]
        return pid_to_color[pid]

    timeline = Text()
    labels = Text()
    marks: List[str] = ["0"]
    last_time = 0

    for sl, (gap, bar) in zip(slices, _columns(slices, width)):
        if gap > 0 or sl.start_time > last_time:
            timeline.append(" " * gap)
            labels.append(" " * gap)
            marks.append(format_time(sl.start_time))

        color = pid_color(sl.pid)
        timeline.append(" " * bar, style=f"on {color}")
        labels.append(sl.pid[:bar].ljust(bar), style="bold")

        last_time = sl.end_time
        marks.append(format_time(last_time))

    table = Table.grid(padding=(0, 0))
    table.add_row(timeline)
    table.add_row(labels)

    panel = Panel.fit(table, title="Gantt Chart")
    return panel, " ".join(marks)

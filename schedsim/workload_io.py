from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Any, List, Mapping, Optional

from .errors import InvalidProcessError
from .models import Process

logger = logging.getLogger(__name__)


def load_workload(path: str | Path) -> List[Process]:
    """
    Load a workload from a JSON or CSV file into a list of Process objects.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        processes = _load_json(path)
    elif suffix == ".csv":
        processes = _load_csv(path)
    else:
        raise ValueError(f"Unsupported workload format: {suffix} (use .json or .csv)")

    logger.debug("Loaded %d processes from %s", len(processes), path)
    return processes


def _load_json(path: Path) -> List[Process]:
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)

    if not isinstance(raw, list):
        raise ValueError("JSON workload must be a list of process objects")

    return [_process_from_mapping(entry, index) for index, entry in enumerate(raw)]


def _load_csv(path: Path) -> List[Process]:
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        return [_process_from_mapping(row, index) for index, row in enumerate(reader)]


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _integer(mapping: Mapping[str, Any], key: str, default: Optional[int] = None) -> int:
    value = mapping.get(key)
    if _blank(value):
        if default is None:
            raise InvalidProcessError(f"Missing {key} in process entry: {dict(mapping)!r}", field=key)
        return default
    if isinstance(value, bool):
        raise InvalidProcessError("Expected an integer", field=key, value=value)
    if isinstance(value, int):
        return value

    try:
        number = float(str(value).strip())
    except ValueError as exc:
        raise InvalidProcessError("Expected an integer", field=key, value=value) from exc
    # "3" and "3.0" are fine, "2.5" is not
    if not number.is_integer():
        raise InvalidProcessError("Expected an integer", field=key, value=value)
    return int(number)


def _process_from_mapping(mapping: Any, index: int) -> Process:
    """
    Build a Process from one JSON object or CSV row.

    A blank pid becomes P<n> (1-based position); missing arrival_time and
    priority default to 0. burst_time is required. All times and the
    priority must be whole numbers.
    """
    if not isinstance(mapping, Mapping):
        raise InvalidProcessError(f"Invalid process entry: {mapping!r}")

    pid = mapping.get("pid")
    pid = f"P{index + 1}" if _blank(pid) else str(pid).strip()

    return Process(
        pid=pid,
        arrival_time=_integer(mapping, "arrival_time", default=0),
        burst_time=_integer(mapping, "burst_time"),
        priority=_integer(mapping, "priority", default=0),
    )

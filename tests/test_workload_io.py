from pathlib import Path

import pytest

from schedsim.errors import InvalidProcessError
from schedsim.workload_io import load_workload
from schedsim.models import Process


def test_load_json(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"pid":"A","arrival_time":0,"burst_time":3,"priority":1},'
                 '{"pid":"B","arrival_time":1,"burst_time":2}]')
    procs = load_workload(p)
    assert isinstance(procs[0], Process)
    assert procs[0].priority == 1
    assert procs[1].priority == 0
    assert procs[1].arrival_time == 1


def test_load_csv(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("pid,arrival_time,burst_time,priority\nA,0,3,1\nB,1,2.0,\n")
    procs = load_workload(p)
    assert procs[0].pid == "A"
    assert procs[1].burst_time == 2
    assert procs[1].priority == 0


def test_blank_pid_gets_position_name(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("pid,arrival_time,burst_time,priority\n,0,3,1\nX,,2,\n,4,1,2\n")
    procs = load_workload(p)
    assert [proc.pid for proc in procs] == ["P1", "X", "P3"]
    assert procs[1].arrival_time == 0


def test_missing_burst_rejected(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"pid":"A","arrival_time":0}]')
    with pytest.raises(InvalidProcessError, match="burst_time"):
        load_workload(p)


def test_non_numeric_field_rejected(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("pid,arrival_time,burst_time,priority\nA,soon,3,1\n")
    with pytest.raises(InvalidProcessError, match="arrival_time"):
        load_workload(p)


def test_fractional_priority_rejected(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("pid,arrival_time,burst_time,priority\nA,0,3,1.5\n")
    with pytest.raises(InvalidProcessError, match="priority"):
        load_workload(p)


def test_json_must_be_a_list(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('{"pid":"A","burst_time":1}')
    with pytest.raises(ValueError):
        load_workload(p)


def test_unsupported_suffix(tmp_path: Path):
    p = tmp_path / "w.txt"
    p.write_text("A 0 3")
    with pytest.raises(ValueError, match="Unsupported workload format"):
        load_workload(p)


def test_fractional_burst_rejected(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"pid":"A","arrival_time":0,"burst_time":0.2}]')
    with pytest.raises(InvalidProcessError, match="burst_time"):
        load_workload(p)

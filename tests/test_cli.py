import io

import pytest

from cpusched.cli import main, read_manual_processes
from cpusched.process import Process
from cpusched.report import format_report
from cpusched.scheduler import run


def feeder(answers):
    it = iter(answers)
    return lambda prompt="": next(it)


def feed_stdin(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def test_read_manual_processes_builds_processes():
    ps = read_manual_processes(feeder(["2", "0 3 1", "4 5 2"]))
    assert ps == [
        Process(pid=1, arrival_time=0, burst_time=3, priority=1),
        Process(pid=2, arrival_time=4, burst_time=5, priority=2),
    ]


def test_read_manual_processes_sets_remaining_time():
    ps = read_manual_processes(feeder(["1", "2 7 0"]))
    assert ps[0].remaining_time == ps[0].burst_time


@pytest.mark.parametrize(
    "answers",
    [["x"], ["-1"], ["1", "0 3"], ["1", "0 a 1"]],
)
def test_read_manual_processes_rejects_bad_input(answers):
    with pytest.raises(ValueError):
        read_manual_processes(feeder(answers))


def test_main_invalid_choice(monkeypatch, capsys, tmp_path):
    feed_stdin(monkeypatch, "9\n")
    assert main(["-o", str(tmp_path / "out.txt")]) == 1
    assert "Invalid choice." in capsys.readouterr().err


def test_main_invalid_input_method(monkeypatch, capsys, tmp_path):
    feed_stdin(monkeypatch, "1\n3\n")
    assert main(["-o", str(tmp_path / "out.txt")]) == 1
    assert "Invalid input method." in capsys.readouterr().err


def test_main_missing_file(monkeypatch, capsys, tmp_path):
    feed_stdin(monkeypatch, f"1\n2\n{tmp_path / 'missing.txt'}\n")
    assert main(["-o", str(tmp_path / "out.txt")]) == 1
    assert "Failed to read input from file." in capsys.readouterr().err


def test_main_manual_fcfs_writes_report(monkeypatch, capsys, tmp_path):
    out = tmp_path / "out.txt"
    feed_stdin(monkeypatch, "1\n1\n2\n0 3 1\n1 2 2\n")
    assert main(["-o", str(out)]) == 0
    expected = run(
        "FCFS",
        [
            Process(pid=1, arrival_time=0, burst_time=3, priority=1),
            Process(pid=2, arrival_time=1, burst_time=2, priority=2),
        ],
    )
    assert out.read_text(encoding="utf-8") == format_report(
        expected.name, expected.processes, expected.chart
    )
    assert f"Output also saved to: {out}" in capsys.readouterr().out


def test_main_truncates_previous_output(monkeypatch, tmp_path):
    out = tmp_path / "out.txt"
    out.write_text("old contents\n", encoding="utf-8")
    feed_stdin(monkeypatch, "3\n1\n1\n0 4 1\n")
    assert main(["-o", str(out)]) == 0
    text = out.read_text(encoding="utf-8")
    assert "old contents" not in text
    assert "Priority Scheduling" in text


def test_main_run_all_from_file(monkeypatch, tmp_path):
    data = tmp_path / "input.txt"
    data.write_text("0 5 2\n1 3 1\n2 8 3\n", encoding="utf-8")
    out = tmp_path / "out.txt"
    feed_stdin(monkeypatch, f"6\n2\n{data}\n2\n")
    assert main(["-o", str(out)]) == 0
    text = out.read_text(encoding="utf-8")
    names = [
        "First Come First Serve (FCFS)",
        "Shortest Remaining Time First (SRTF)",
        "Priority Scheduling",
        "Round Robin (RR)",
    ]
    positions = [text.index(name) for name in names]
    assert positions == sorted(positions)


def test_main_invalid_quantum_reports_error(monkeypatch, capsys, tmp_path):
    feed_stdin(monkeypatch, "4\n1\n1\n0 4 1\n0\n")
    assert main(["-o", str(tmp_path / "out.txt")]) == 1
    assert "time quantum" in capsys.readouterr().err


def test_main_end_of_input(monkeypatch, capsys, tmp_path):
    feed_stdin(monkeypatch, "1\n")
    assert main(["-o", str(tmp_path / "out.txt")]) == 1
    assert "Unexpected end of input." in capsys.readouterr().err
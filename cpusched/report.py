"""Reading process lists and formatting scheduling results."""

from __future__ import annotations

import re
import struct

from .process import GanttEntry, Process

_COLUMNS = (
    ("PID", 6),
    ("Arrival", 10),
    ("Burst", 8),
    ("Priority", 10),
    ("Waiting", 10),
    ("Turnaround", 12),
    ("Response", 10),
    ("Completion", 10),
)

_INTEGER = re.compile(r"[+-]?\d+")


def _row(values) -> str:
    return "".join(f"{value:<{width}}" for value, (_, width) in zip(values, _COLUMNS))


def _average(total: int, count: int) -> str:
    if count == 0:
        return "nan"
    single = struct.unpack("f", struct.pack("f", total / count))[0]
    return f"{single:.2f}"


def parse_processes(lines) -> list[Process]:
    """Build processes from lines of "arrival burst priority".

    Lines that do not start with three integers are skipped; PIDs are
    numbered from 1 in the order of the accepted lines.
    """
    processes: list[Process] = []
    for line in lines:
        tokens = line.split()[:3]
        if len(tokens) < 3 or not all(_INTEGER.fullmatch(t) for t in tokens):
            continue
        arrival, burst, prio = (int(t) for t in tokens)
        processes.append(
            Process(
                pid=len(processes) + 1,
                arrival_time=arrival,
                burst_time=burst,
                priority=prio,
            )
        )
    return processes


def load_processes(path) -> list[Process]:
    """Read processes from a text file; see :func:`parse_processes`."""
    with open(path, encoding="utf-8") as handle:
        return parse_processes(handle)


def format_process_table(processes) -> str:
    """Return the process table followed by the average waiting and turnaround times."""
    lines = [_row(name for name, _ in _COLUMNS)]
    for p in processes:
        lines.append(
            _row(
                (
                    p.pid,
                    p.arrival_time,
                    p.burst_time,
                    p.priority,
                    p.waiting_time,
                    p.turnaround_time,
                    p.response_time,
                    p.completion_time,
                )
            )
        )
    count = len(processes)
    total_waiting = sum(p.waiting_time for p in processes)
    total_turnaround = sum(p.turnaround_time for p in processes)
    lines.append("")
    lines.append(f"Average Waiting Time: {_average(total_waiting, count)}")
    lines.append(f"Average Turnaround Time: {_average(total_turnaround, count)}")
    return "\n".join(lines) + "\n"


def format_gantt_chart(chart) -> str:
    """Return a text Gantt chart: a bar of process slots and their end times."""
    border = "------" * len(chart)
    slots = "".join(f"  P{entry.pid}  |" for entry in chart)
    ends = "".join(f"{entry.end_time:<6}" for entry in chart)
    return f" {border}\n|{slots}\n {border}\n0{ends}\n"


def format_report(algorithm_name: str, processes, chart) -> str:
    """Return the full report written to the output file for one algorithm."""
    return (
        f"\n========== {algorithm_name} ==========\n\n"
        + format_process_table(processes)
        + "\nGantt Chart:\n"
        + format_gantt_chart(chart)
    )


def export_report(algorithm_name: str, processes, chart, path) -> None:
    """Append the report for one algorithm to the file at ``path``."""
    with open(path, "a", encoding="utf-8") as out:
        out.write(format_report(algorithm_name, processes, chart))
"""Selecting and running a scheduling algorithm over a list of processes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum

from .algorithms import fcfs, priority, round_robin, srtf
from .process import GanttEntry, Process, sort_processes


class Algorithm(Enum):
    """The scheduling algorithms the simulator offers."""

    FCFS = "FCFS"
    SRTF = "SRTF"
    PRIORITY = "Priority"
    RR = "RR"
    AUTO = "auto"

    @property
    def full_name(self) -> str:
        """The descriptive name used in reports."""
        return _FULL_NAMES[self]


_FULL_NAMES = {
    Algorithm.FCFS: "First Come First Serve (FCFS)",
    Algorithm.SRTF: "Shortest Remaining Time First (SRTF)",
    Algorithm.PRIORITY: "Priority Scheduling",
    Algorithm.RR: "Round Robin (RR)",
    Algorithm.AUTO: "Adaptive Scheduling (Auto)",
}


@dataclass
class ScheduleResult:
    """The processes with their metrics filled in and the resulting Gantt chart."""

    algorithm: Algorithm
    processes: list[Process] = field(default_factory=list)
    chart: list[GanttEntry] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.algorithm.full_name


def choose_auto(processes) -> Algorithm:
    """Pick an algorithm from the spread of burst times.

    Low variation (standard deviation under half the mean) picks FCFS;
    otherwise more than seven processes pick Round Robin, and fewer pick SRTF.
    """
    bursts = [p.burst_time for p in processes]
    count = len(bursts)
    if count == 0:
        return Algorithm.SRTF
    mean = sum(bursts) / count
    stddev = math.sqrt(sum((b - mean) ** 2 for b in bursts) / count)
    if stddev < mean / 2.0:
        return Algorithm.FCFS
    if count > 7:
        return Algorithm.RR
    return Algorithm.SRTF


def _dispatch(algorithm: Algorithm, processes, time_quantum: int) -> list[GanttEntry]:
    if algorithm is Algorithm.FCFS:
        return fcfs(processes)
    if algorithm is Algorithm.SRTF:
        return srtf(processes)
    if algorithm is Algorithm.PRIORITY:
        return priority(processes)
    if algorithm is Algorithm.RR:
        return round_robin(processes, time_quantum)
    return auto_schedule(processes, time_quantum)


def auto_schedule(processes, time_quantum) -> list[GanttEntry]:
    """Run the algorithm chosen by :func:`choose_auto` on the processes in place."""
    return _dispatch(choose_auto(processes), processes, time_quantum)


def run(algorithm, processes, time_quantum=1) -> ScheduleResult:
    """Schedule copies of the processes, sorted by arrival, priority and PID.

    ``algorithm`` is an :class:`Algorithm` or its value ("FCFS", "SRTF",
    "Priority", "RR" or "auto"). The given processes are left untouched.
    """
    try:
        chosen = Algorithm(algorithm)
    except ValueError:
        raise ValueError(f"invalid scheduling algorithm: {algorithm!r}") from None
    ordered = [replace(p) for p in sort_processes(processes)]
    chart = _dispatch(chosen, ordered, time_quantum)
    return ScheduleResult(chosen, ordered, chart)
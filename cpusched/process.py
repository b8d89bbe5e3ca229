"""Process records and Gantt chart entries used by the schedulers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Process:
    """A process to be scheduled, together with the metrics a scheduler fills in.

    A lower ``priority`` value means a higher priority.
    """

    pid: int
    arrival_time: int
    burst_time: int
    priority: int = 0
    remaining_time: int | None = None
    waiting_time: int = 0
    turnaround_time: int = 0
    completion_time: int = 0
    response_time: int = 0
    start_time: int = 0

    def __post_init__(self) -> None:
        if self.remaining_time is None:
            self.remaining_time = self.burst_time


@dataclass(frozen=True)
class GanttEntry:
    """One contiguous slice of CPU time given to a process."""

    pid: int
    start_time: int
    end_time: int

    @property
    def duration(self) -> int:
        return self.end_time - self.start_time


def sort_processes(processes):
    """Return the processes ordered by arrival time, then priority, then PID."""
    return sorted(processes, key=lambda p: (p.arrival_time, p.priority, p.pid))
"""CPU scheduling algorithms.

Each function fills in the timing metrics of the given processes in place
and returns the Gantt chart of the schedule it produced.
"""

from __future__ import annotations

from collections import deque

from .process import GanttEntry, Process


def _require_positive_bursts(processes) -> None:
    for p in processes:
        if p.burst_time <= 0:
            raise ValueError(
                f"process {p.pid} has a non-positive burst time ({p.burst_time})"
            )


def fcfs(processes: list[Process]) -> list[GanttEntry]:
    """First Come First Serve, in the order the processes are given."""
    chart: list[GanttEntry] = []
    current: int | None = None
    for p in processes:
        if current is None or current < p.arrival_time:
            current = p.arrival_time
        end = current + p.burst_time
        chart.append(GanttEntry(p.pid, current, end))
        p.start_time = current
        p.waiting_time = current - p.arrival_time
        p.turnaround_time = p.waiting_time + p.burst_time
        p.completion_time = end
        p.response_time = p.waiting_time
        current = end
    return chart


def srtf(processes: list[Process]) -> list[GanttEntry]:
    """Preemptive Shortest Remaining Time First.

    A chart entry is recorded when a process completes, spanning its burst
    time back from the completion time.
    """
    _require_positive_bursts(processes)
    for p in processes:
        p.remaining_time = p.burst_time
        p.response_time = -1

    chart: list[GanttEntry] = []
    current = 0
    unfinished = list(processes)
    while unfinished:
        ready = [p for p in unfinished if p.arrival_time <= current]
        if not ready:
            current = min(p.arrival_time for p in unfinished)
            continue

        chosen = min(ready, key=lambda p: p.remaining_time)
        if chosen.response_time == -1:
            chosen.response_time = current - chosen.arrival_time
            chosen.start_time = current

        # Run until the process finishes or the next arrival may preempt it.
        upcoming = [p.arrival_time for p in unfinished if p.arrival_time > current]
        run = chosen.remaining_time
        if upcoming:
            run = min(run, min(upcoming) - current)
        chosen.remaining_time -= run
        current += run

        if chosen.remaining_time == 0:
            unfinished = [p for p in unfinished if p is not chosen]
            chosen.completion_time = current
            chosen.waiting_time = max(
                0, current - chosen.arrival_time - chosen.burst_time
            )
            chosen.turnaround_time = chosen.burst_time + chosen.waiting_time
            chart.append(GanttEntry(chosen.pid, current - chosen.burst_time, current))
    return chart


def priority(processes: list[Process]) -> list[GanttEntry]:
    """Non-preemptive priority scheduling; a lower value runs first."""
    for p in processes:
        p.waiting_time = 0
        p.turnaround_time = 0
        p.response_time = -1
        p.completion_time = 0
        p.remaining_time = p.burst_time

    chart: list[GanttEntry] = []
    current = 0
    pending = list(processes)
    while pending:
        ready = [p for p in pending if p.arrival_time <= current]
        if not ready:
            current = min(p.arrival_time for p in pending)
            continue

        chosen = min(ready, key=lambda p: p.priority)
        pending = [p for p in pending if p is not chosen]
        chosen.response_time = current - chosen.arrival_time
        chosen.start_time = current
        start = current
        current += chosen.burst_time
        chosen.completion_time = current
        chosen.turnaround_time = current - chosen.arrival_time
        chosen.waiting_time = chosen.turnaround_time - chosen.burst_time
        chosen.remaining_time = 0
        chart.append(GanttEntry(chosen.pid, start, current))
    return chart


def round_robin(processes: list[Process], time_quantum: int) -> list[GanttEntry]:
    """Round Robin with the given time quantum.

    Processes that arrive during a slice join the queue before the process
    whose slice just ended.
    """
    if time_quantum <= 0:
        raise ValueError(f"time quantum must be positive, got {time_quantum}")
    _require_positive_bursts(processes)
    for p in processes:
        p.remaining_time = p.burst_time

    chart: list[GanttEntry] = []
    queue: deque[Process] = deque()
    not_arrived = list(processes)
    current = 0
    completed = 0

    def admit() -> None:
        nonlocal not_arrived
        queue.extend(p for p in not_arrived if p.arrival_time <= current)
        not_arrived = [p for p in not_arrived if p.arrival_time > current]

    while completed < len(processes):
        admit()
        if not queue:
            current = min(p.arrival_time for p in not_arrived)
            continue

        p = queue.popleft()
        if p.remaining_time == p.burst_time:
            p.response_time = current - p.arrival_time
            p.start_time = current

        if p.remaining_time > time_quantum:
            chart.append(GanttEntry(p.pid, current, current + time_quantum))
            current += time_quantum
            p.remaining_time -= time_quantum
            admit()
            queue.append(p)
        else:
            chart.append(GanttEntry(p.pid, current, current + p.remaining_time))
            current += p.remaining_time
            p.completion_time = current
            p.turnaround_time = current - p.arrival_time
            p.waiting_time = p.turnaround_time - p.burst_time
            p.remaining_time = 0
            completed += 1
    return chart
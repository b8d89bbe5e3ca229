from cpusched.process import GanttEntry, Process, sort_processes


def test_remaining_time_defaults_to_burst():
    p = Process(pid=1, arrival_time=2, burst_time=7, priority=3)
    assert p.remaining_time == p.burst_time


def test_explicit_remaining_time_is_kept():
    p = Process(pid=1, arrival_time=0, burst_time=7, remaining_time=4)
    assert p.remaining_time == 4


def test_gantt_entry_duration():
    entry = GanttEntry(pid=2, start_time=3, end_time=11)
    assert entry.duration == entry.end_time - entry.start_time
    assert entry.duration == 8


def test_sort_by_arrival_then_priority_then_pid():
    processes = [
        Process(pid=1, arrival_time=2, burst_time=1, priority=1),
        Process(pid=2, arrival_time=0, burst_time=1, priority=5),
        Process(pid=3, arrival_time=0, burst_time=1, priority=2),
        Process(pid=4, arrival_time=2, burst_time=1, priority=1),
        Process(pid=5, arrival_time=0, burst_time=1, priority=2),
    ]
    ordered = sort_processes(processes)
    assert [p.pid for p in ordered] == [3, 5, 2, 1, 4]


def test_sort_returns_new_list_and_keeps_input():
    processes = [
        Process(pid=1, arrival_time=5, burst_time=1),
        Process(pid=2, arrival_time=1, burst_time=1),
    ]
    ordered = sort_processes(processes)
    assert [p.pid for p in processes] == [1, 2]
    assert sorted(p.pid for p in ordered) == [1, 2]
    assert ordered[0] is processes[1]


def test_sorted_keys_are_non_decreasing():
    processes = [
        Process(pid=pid, arrival_time=(pid * 7) % 5, burst_time=1, priority=(pid * 3) % 4)
        for pid in range(1, 20)
    ]
    ordered = sort_processes(processes)
    keys = [(p.arrival_time, p.priority, p.pid) for p in ordered]
    assert keys == sorted(keys)
    assert len(ordered) == len(processes)
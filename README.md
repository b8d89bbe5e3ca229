# cpusched

`cpusched` is a CPU scheduling simulator. You can use it from the command line
or call it from Python. It runs a set of processes through one of several
classic scheduling algorithms. It then prints the following:

- a process table with waiting, turnaround, response and completion times
- the average waiting time and the average turnaround time
- a text Gantt chart

Supported algorithms:

- First Come First Serve (FCFS)
- Shortest Remaining Time First (SRTF), preemptive
- Priority Scheduling, non-preemptive. A lower value means a higher priority.
- Round Robin (RR), with a configurable time quantum
- Auto (best fit). It picks FCFS, RR or SRTF from the spread of burst times:
  - If the standard deviation is under half the mean, it picks FCFS.
  - Otherwise, with more than seven processes, it picks RR.
  - Otherwise it picks SRTF.

## Installation

```
pip install .
```

## Command line

```
cpusched [-o OUTPUT]
```

The program is interactive and runs in this order:

1. It asks you to choose an algorithm (1–5), or option 6 to run FCFS, SRTF,
   Priority and RR one after another so you can compare them.
2. It asks how to enter processes:
   - By hand: first the number of processes, then arrival time, burst time
     and priority for each one.
   - From a file: see the file format below.
3. For Round Robin, Auto and "run all" it also asks for a time quantum. In the
   other cases the quantum is 1.

The results are printed to the terminal and appended to the output file. The
output file is `output.txt` unless you give another with `-o/--output`. The
program empties the file at the start of each run.

The command exits with status 1 in these cases:

- the menu choice is invalid
- the process data is invalid
- the input file is missing or holds no usable lines
- the scheduler rejects the input, for example because the time quantum or a
  burst time is not positive

### Input file format

Put one process per line, as three integers separated by whitespace:

```
arrival_time burst_time priority
```

For example:

```
0 5 2
1 3 1
2 8 3
```

Processes get IDs 1, 2, 3, … in the order they are accepted. The program skips
any line that does not start with three integers.

## Python API

```python
from cpusched.report import load_processes, format_report
from cpusched.scheduler import run, Algorithm

processes = load_processes("input.txt")
result = run(Algorithm.RR, processes, 2)
print(format_report(result.name, result.processes, result.chart))
```

- `cpusched.process`
  - `Process` is a dataclass. A scheduler fills in its metrics.
  - `GanttEntry` is a frozen dataclass with `pid`, `start_time`, `end_time` and
    `duration`.
  - `sort_processes` orders processes by arrival time, then priority, then PID.
- `cpusched.algorithms`
  - Provides `fcfs`, `srtf`, `priority` and `round_robin(processes,
    time_quantum)`.
  - Each one fills in the metrics of the given processes in place and returns
    a list of `GanttEntry`.
  - `srtf` and `round_robin` raise `ValueError` when a burst time is not
    positive. `round_robin` also raises it when the quantum is not positive.
  - `srtf` records one chart entry per process, when the process completes.
- `cpusched.scheduler`
  - `Algorithm` is an enum with the members `FCFS`, `SRTF`, `PRIORITY`, `RR`
    and `AUTO`. Their values are `"FCFS"`, `"SRTF"`, `"Priority"`, `"RR"` and
    `"auto"`, and each member has a `full_name` used in reports.
  - `run(algorithm, processes, time_quantum=1)` sorts copies of the processes
    and schedules them. It leaves the given processes unchanged and returns a
    `ScheduleResult` with `algorithm`, `processes`, `chart` and `name`. It
    raises `ValueError` for an unknown algorithm.
  - `choose_auto` returns the algorithm that Auto picks.
  - `auto_schedule` runs that algorithm in place.
- `cpusched.report`
  - `parse_processes` and `load_processes` read processes.
  - `format_process_table`, `format_gantt_chart` and `format_report` build the
    text output.
  - `export_report` appends a report to a file.
- `cpusched.cli`
  - `main(argv=None)` is the entry point of the command.
  - `read_manual_processes(input_func)` prompts for processes.

## Running the tests

```
pip install .[test]
pytest
```
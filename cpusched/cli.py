"""Interactive command-line front end of the CPU scheduling simulator."""

from __future__ import annotations

import argparse
import sys

from .process import Process
from .report import export_report, format_gantt_chart, format_process_table, load_processes
from .scheduler import Algorithm, ScheduleResult, run

_MENU = {
    1: Algorithm.FCFS,
    2: Algorithm.SRTF,
    3: Algorithm.PRIORITY,
    4: Algorithm.RR,
    5: Algorithm.AUTO,
}
_RUN_ALL = 6
_COMPARED = (Algorithm.FCFS, Algorithm.SRTF, Algorithm.PRIORITY, Algorithm.RR)


def _ask_int(prompt: str, input_func=input) -> int:
    return int(input_func(prompt).strip())


def read_manual_processes(input_func=input) -> list[Process]:
    """Prompt for a process count and then each process's arrival, burst and priority.

    Raises ValueError on anything that is not the expected integers.
    """
    count = _ask_int("Enter the number of processes: ", input_func)
    if count < 0:
        raise ValueError(f"number of processes must not be negative, got {count}")
    processes = []
    for pid in range(1, count + 1):
        fields = input_func(
            f"Enter arrival time, burst time, and priority for process {pid}: "
        ).split()
        if len(fields) != 3:
            raise ValueError(f"expected three integers for process {pid}")
        arrival, burst, prio = (int(f) for f in fields)
        processes.append(
            Process(pid=pid, arrival_time=arrival, burst_time=burst, priority=prio)
        )
    return processes


def _error(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def _show(result: ScheduleResult, output: str) -> None:
    print("\n--- Process Table ---")
    print(format_process_table(result.processes), end="")
    print("\n--- Gantt Chart ---")
    print(format_gantt_chart(result.chart), end="")
    try:
        export_report(result.name, result.processes, result.chart, output)
    except OSError:
        print(f"Failed to open {output} for writing.", file=sys.stderr)
        return
    print(f"\nOutput also saved to: {output}")


def _interactive(output: str) -> int:
    print("=====================")
    print(" CPU Scheduling Simulator")
    print("=====================\n")
    print("--- Select Scheduling Algorithm ---\n")
    print("1. FCFS")
    print("2. SRTF")
    print("3. Priority")
    print("4. Round Robin")
    print("5. Auto (Best Fit)")
    print("6. Run All Algorithms & Compare")

    try:
        choice = _ask_int("\nEnter your choice: ")
    except ValueError:
        choice = None
    run_all = choice == _RUN_ALL
    algorithm = _MENU.get(choice)
    if not run_all and algorithm is None:
        return _error("Invalid choice.")

    print("\n--- Select Input Method ---\n")
    print("1. Manual Entry")
    print("2. Load from File")
    try:
        method = _ask_int("\nEnter your choice: ")
    except ValueError:
        method = None
    print()

    if method == 1:
        try:
            processes = read_manual_processes(input)
        except ValueError as exc:
            return _error(f"Invalid process data: {exc}")
    elif method == 2:
        filename = input("Enter input filename (e.g., input.txt): ").strip()
        try:
            processes = load_processes(filename)
        except OSError:
            print(f"Error opening file: {filename}", file=sys.stderr)
            processes = []
        if not processes:
            return _error("Failed to read input from file.")
    else:
        return _error("Invalid input method.")

    time_quantum = 1
    if run_all or algorithm in (Algorithm.RR, Algorithm.AUTO):
        try:
            time_quantum = _ask_int("\nEnter time quantum: ")
        except ValueError:
            return _error("Invalid time quantum.")

    with open(output, "w", encoding="utf-8"):
        pass

    try:
        if run_all:
            for algo in _COMPARED:
                print(f"\n========== {algo.value} ==========")
                _show(run(algo, processes, time_quantum), output)
        else:
            print(f"\n--- Running {algorithm.value} Scheduling ---")
            _show(run(algorithm, processes, time_quantum), output)
    except ValueError as exc:
        return _error(str(exc))
    return 0


def main(argv=None) -> int:
    """Run the interactive simulator; returns the process exit status."""
    parser = argparse.ArgumentParser(
        prog="cpusched", description="Interactive CPU scheduling simulator."
    )
    parser.add_argument(
        "-o",
        "--output",
        default="output.txt",
        help="file the results are written to (default: output.txt)",
    )
    args = parser.parse_args(argv)
    try:
        return _interactive(args.output)
    except EOFError:
        return _error("\nUnexpected end of input.")


if __name__ == "__main__":
    sys.exit(main())
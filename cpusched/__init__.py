"""CPU scheduling simulator with FCFS, SRTF, priority, round robin and adaptive modes."""

__version__ = "0.1.0"
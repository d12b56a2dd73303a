"""Round-robin CPU scheduling."""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Process:
    """A job arriving at ``arrival`` and needing ``burst`` units of CPU."""

    arrival: int
    burst: int


@dataclass(frozen=True)
class Completion:
    """When and how a process finished; ``index`` is its input position."""

    index: int
    finish: int
    turnaround: int
    waiting: int


@dataclass(frozen=True)
class Schedule:
    """Completions in the order the processes finished."""

    completions: tuple[Completion, ...]

    def average_waiting_time(self) -> float:
        return sum(c.waiting for c in self.completions) / len(self.completions)

    def average_turnaround_time(self) -> float:
        return sum(c.turnaround for c in self.completions) / len(self.completions)


def round_robin(
    processes: Iterable[Process | tuple[int, int]], quantum: int
) -> Schedule:
    """Run the processes round robin with time slices of ``quantum``.

    After each slice the next process in input order gets the CPU if it has
    arrived; otherwise scheduling restarts from the first process.
    """
    jobs = [p if isinstance(p, Process) else Process(*p) for p in processes]
    if not jobs:
        raise ValueError("no processes to schedule")
    if quantum <= 0:
        raise ValueError("quantum must be positive")
    if any(job.burst <= 0 for job in jobs):
        raise ValueError("burst times must be positive")

    remaining = [job.burst for job in jobs]
    completions: list[Completion] = []
    time = 0
    i = 0
    idle_steps = 0
    last = len(jobs) - 1
    while len(completions) < len(jobs):
        worked = remaining[i] > 0
        if 0 < remaining[i] <= quantum:
            time += remaining[i]
            remaining[i] = 0
            job = jobs[i]
            turnaround = time - job.arrival
            completions.append(
                Completion(i, time, turnaround, turnaround - job.burst)
            )
        elif remaining[i] > 0:
            remaining[i] -= quantum
            time += quantum
        idle_steps = 0 if worked else idle_steps + 1
        if idle_steps > len(jobs):
            raise ValueError(f"no unfinished process has arrived by time {time}")
        if i == last or jobs[i + 1].arrival > time:
            i = 0
        else:
            i += 1
    return Schedule(tuple(completions))
import pytest

from classicalgos.scheduling import Process, Schedule, round_robin

PROCESSES = [Process(0, 5), Process(1, 3), Process(2, 1)]


def test_worked_schedule():
    schedule = round_robin(PROCESSES, 2)
    assert [c.index for c in schedule.completions] == [2, 1, 0]
    assert [c.finish for c in schedule.completions] == [5, 8, 9]


def test_every_process_completes_once():
    schedule = round_robin(PROCESSES, 2)
    assert sorted(c.index for c in schedule.completions) == [0, 1, 2]


def test_waiting_is_turnaround_minus_burst():
    schedule = round_robin(PROCESSES, 3)
    for completion in schedule.completions:
        job = PROCESSES[completion.index]
        assert completion.turnaround == completion.finish - job.arrival
        assert completion.waiting == completion.turnaround - job.burst
        assert completion.waiting >= 0


def test_last_finish_is_total_burst_when_never_idle():
    schedule = round_robin(PROCESSES, 4)
    assert max(c.finish for c in schedule.completions) == sum(p.burst for p in PROCESSES)


def test_averages():
    schedule = round_robin(PROCESSES, 2)
    completions = schedule.completions
    assert schedule.average_waiting_time() == pytest.approx(
        sum(c.waiting for c in completions) / len(completions)
    )
    assert schedule.average_turnaround_time() - schedule.average_waiting_time() == (
        pytest.approx(sum(p.burst for p in PROCESSES) / len(PROCESSES))
    )


def test_tuples_are_accepted():
    assert round_robin([(0, 5), (1, 3), (2, 1)], 2) == round_robin(PROCESSES, 2)


def test_single_process():
    schedule = round_robin([Process(0, 7)], 3)
    assert schedule == Schedule(schedule.completions)
    assert schedule.completions[0].finish == 7
    assert schedule.completions[0].waiting == 0


@pytest.mark.parametrize("quantum", [0, -1])
def test_bad_quantum(quantum):
    with pytest.raises(ValueError):
        round_robin(PROCESSES, quantum)


def test_empty_input():
    with pytest.raises(ValueError):
        round_robin([], 2)


def test_zero_burst():
    with pytest.raises(ValueError):
        round_robin([Process(0, 0)], 2)


def test_stall_waiting_for_late_arrival():
    with pytest.raises(ValueError):
        round_robin([Process(0, 1), Process(10, 2)], 2)
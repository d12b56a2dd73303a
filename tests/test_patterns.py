from math import comb

import pytest

from classicalgos.patterns import (
    fizzbuzz,
    floyd_triangle,
    hanoi_moves,
    pascal_triangle,
    rule30,
    rule30_step,
    star_pattern,
)


def test_fizzbuzz_default_length():
    assert len(fizzbuzz()) == 100


def test_fizzbuzz_words():
    lines = fizzbuzz(15)
    assert lines[0] == "1"
    assert lines[2] == "Fizz"
    assert lines[4] == "Buzz"
    assert lines[14] == "FizzBuzz"


def test_fizzbuzz_fizzbuzz_only_on_multiples_of_fifteen():
    lines = fizzbuzz(100)
    positions = [i + 1 for i, line in enumerate(lines) if line == "FizzBuzz"]
    assert all(p % 15 == 0 for p in positions)
    assert len(positions) == 100 // 15


@pytest.mark.parametrize("lines", [0, 1, 4, 7])
def test_floyd_triangle_counts_up(lines):
    rows = floyd_triangle(lines)
    assert [len(row) for row in rows] == list(range(1, lines + 1))
    flat = [n for row in rows for n in row]
    assert flat == list(range(1, len(flat) + 1))


@pytest.mark.parametrize("rows", [1, 5, 12])
def test_pascal_rows_are_binomials(rows):
    triangle = pascal_triangle(rows)
    assert len(triangle) == rows
    for i, row in enumerate(triangle):
        assert row == [comb(i, k) for k in range(i + 1)]
        assert sum(row) == 2**i


def test_pascal_empty():
    assert pascal_triangle(0) == []


def test_star_pattern_shrinks():
    lines = star_pattern(5)
    assert [line.count("*") for line in lines] == [5, 4, 3, 2, 1]
    assert lines[-1] == "*"


def test_rule30_step_from_single_cell():
    assert rule30_step("X") == "XXX"


def test_rule30_step_grows_by_two():
    level = "X"
    for _ in range(10):
        following = rule30_step(level)
        assert len(following) == len(level) + 2
        level = following


def test_rule30_step_rejects_other_cells():
    with pytest.raises(ValueError):
        rule30_step("ab")


def test_rule30_pyramid():
    lines = rule30(20)
    assert len(lines) == 20
    assert lines[0] == " " * 20 + "X"
    assert lines[1].rstrip() == " " * 19 + rule30_step("X")
    assert all(set(line) <= {"X", " "} for line in lines)


def test_hanoi_single_disk():
    assert hanoi_moves(1) == [("Source", "Destination")]


@pytest.mark.parametrize("disks", [1, 2, 3, 6])
def test_hanoi_moves_are_legal_and_complete(disks):
    pegs = {"A": list(range(disks, 0, -1)), "B": [], "C": []}
    moves = hanoi_moves(disks, "A", "B", "C")
    assert len(moves) == 2**disks - 1
    for source, destination in moves:
        disk = pegs[source].pop()
        assert not pegs[destination] or pegs[destination][-1] > disk
        pegs[destination].append(disk)
    assert pegs["C"] == list(range(disks, 0, -1))


def test_hanoi_rejects_zero_disks():
    with pytest.raises(ValueError):
        hanoi_moves(0)
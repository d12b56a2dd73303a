# classicalgos

Classic algorithms and small programming exercises, written as plain Python
functions and classes. It needs only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `classicalgos.sorting` | `insertion_sort`, `quick_sort`, `selection_sort`, `bubble_sort`, `shell_sort` (each returns a new sorted list), `sort_string` |
| `classicalgos.searching` | `binary_search`, `linear_search` (both return an index, or `None` when the value is absent) |
| `classicalgos.numbers` | `gcd`, `lcm`, `factorial`, `power`, `mod_power` (modulo 1 000 000 007), `is_prime`, `count_primes` (limit up to 2 000 000), `is_happy`, `reverse_number`, `is_even`, `is_leap_year`, `century`, `clock_add`, `fibonacci`, `fibonacci_upto`, `calculate_sum`, `calculate_average` (two or three integers) |
| `classicalgos.conversions` | `binary_to_decimal`, `binary_to_octal`, `to_binary`, `to_octal` |
| `classicalgos.trees` | `Node`, `build_tree` (from inorder and preorder traversals), `postorder`, `are_mirror` |
| `classicalgos.graphs` | `Graph` with `add_edge`, `neighbours` and `bfs`; `tree_diameter` for a tree on vertices `1..n` |
| `classicalgos.containers` | `BoundedQueue` (default capacity 10), `Stack`, and the errors `QueueFull`, `QueueEmpty`, `StackUnderflow` |
| `classicalgos.dynamic` | `longest_common_subsequence`, `knapsack` (0/1), `subset_sum` |
| `classicalgos.text` | `zigzag`, `is_vowel`, `count_characters` (returns `CharacterCounts`), `is_palindrome`, `reverse_string`, `word_frequencies` |
| `classicalgos.patterns` | `fizzbuzz`, `floyd_triangle`, `pascal_triangle`, `star_pattern`, `rule30_step`, `rule30`, `hanoi_moves` |
| `classicalgos.geometry` | `quadrant`, `can_form_triangle` |
| `classicalgos.calculators` | `calculate` (`+ - * /`), `menu_calculate` (options 1 to 4), `matrix_multiply`, `min_max`, `reverse_list` |
| `classicalgos.scheduling` | `Process`, `Completion`, `Schedule`, `round_robin` |
| `classicalgos.tictactoe` | `Board` with `place`, `winner` and a text rendering; `FieldTakenError`; `toggle_player` |

Invalid input raises an exception, usually `ValueError`. For example,
`calculate(1, "%", 2)` raises `ValueError`, `Stack().pop()` raises
`StackUnderflow`, and placing a mark on a taken field raises
`FieldTakenError`.

## Examples

```python
from classicalgos.sorting import quick_sort
from classicalgos.searching import binary_search
from classicalgos.dynamic import knapsack
from classicalgos.text import zigzag

quick_sort([64, 25, 12, 22, 11])            # [11, 12, 22, 25, 64]
binary_search([2, 3, 4, 10, 40], 10)        # 3
knapsack(50, [10, 20, 30], [60, 100, 120])  # 220
zigzag("ILOVECODING", 3)                    # "IEILVCDNOOG"
```

Round-robin scheduling:

```python
from classicalgos.scheduling import Process, round_robin

schedule = round_robin([Process(0, 5), Process(1, 3)], quantum=2)
schedule.average_waiting_time()     # 3.0
schedule.average_turnaround_time()  # 7.0
```

Tic-tac-toe board:

```python
from classicalgos.tictactoe import Board

board = Board()
for field in (1, 2, 3):
    board.place(field, "X")
board.winner()  # "X"
print(board)
```

## Command line

The package installs one command, `classicalgos`.

```
classicalgos
classicalgos hello
```

Both print `Hello World`.

```
classicalgos echo
```

Prompts for a line of text, reads one line from standard input and prints it
back after `Your text was: `.

## What it does not do

The package offers no interactive programs: there is no playable
tic-tac-toe game loop, no menu-driven queue or stack session and no prompt
for the calculators. These are library functions and classes for your own
code to call. The only command is the greeting and echo described above.
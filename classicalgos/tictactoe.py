"""A tic-tac-toe board with fields numbered 1 to 9."""

PLAYERS = ("X", "O")

_LINES = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (6, 4, 2),
)


class FieldTakenError(ValueError):
    """Raised when placing a mark on a field that already holds one."""


class Board:
    """A 3x3 board; free fields show their number, taken ones the mark."""

    def __init__(self) -> None:
        self._cells = [str(field) for field in range(1, 10)]

    def place(self, field: int, player: str) -> None:
        """Put ``player``'s mark on ``field`` (1 to 9)."""
        if player not in PLAYERS:
            raise ValueError(f"player must be 'X' or 'O', got {player!r}")
        if not 1 <= field <= 9:
            raise ValueError(f"field must be between 1 and 9, got {field}")
        if self._cells[field - 1] in PLAYERS:
            raise FieldTakenError(f"field {field} is already taken")
        self._cells[field - 1] = player

    def winner(self) -> str | None:
        """The player holding a full row, column or diagonal, X checked first."""
        for player in PLAYERS:
            if any(all(self._cells[k] == player for k in line) for line in _LINES):
                return player
        return None

    def __str__(self) -> str:
        return "\n".join(
            " ".join(self._cells[start : start + 3]) for start in range(0, 9, 3)
        )


def toggle_player(player: str) -> str:
    """The player whose turn comes after ``player``; anything but X gives X."""
    if player == PLAYERS[0]:
        return PLAYERS[1]
    return PLAYERS[0]
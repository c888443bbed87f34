from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from functools import cache
from typing import Final, TypeAlias

from minimax_tic_tac_toe.exception import InvalidMoveError

BOARD_SIZE: Final = 3
WIN_LENGTH: Final = 3

Position: TypeAlias = tuple[int, int]

# (row step, col step): horizontal, vertical, diagonal, anti-diagonal
_DIRECTIONS: Final = ((0, 1), (1, 0), (1, 1), (1, -1))


class Mark(Enum):
    CROSS = "X"
    CIRCLE = "O"

    @property
    def side(self) -> "Side":
        return Side.MAX if self is Mark.CROSS else Side.MIN


class Side(Enum):
    MAX = "max"
    MIN = "min"

    @property
    def mark(self) -> Mark:
        return Mark.CROSS if self is Side.MAX else Mark.CIRCLE

    def exchange(self) -> "Side":
        return Side.MIN if self is Side.MAX else Side.MAX


class GameStage(Enum):
    ONGOING = "ongoing"
    MAX_WON = "max-won"
    MIN_WON = "min-won"
    DRAWN = "drawn"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStage.ONGOING


@cache
def _runs(width: int, win_length: int) -> tuple[tuple[Position, ...], ...]:
    """Every run of `win_length` cells that fits on a `width` x `width` grid."""
    runs: list[tuple[Position, ...]] = []
    for row in range(width):
        for col in range(width):
            for d_row, d_col in _DIRECTIONS:
                end_row = row + d_row * (win_length - 1)
                end_col = col + d_col * (win_length - 1)
                if not (0 <= end_row < width) or not (0 <= end_col < width):
                    continue
                runs.append(tuple((row + i * d_row, col + i * d_col) for i in range(win_length)))
    return tuple(runs)


@dataclass(frozen=True, slots=True)
class Board:
    """Immutable square grid of optional marks.

    Applying a move returns a new board and leaves the receiver untouched, so the
    minimax search can branch from the same position freely.
    """

    cells: tuple[tuple[Mark | None, ...], ...]
    win_length: int = WIN_LENGTH

    def __post_init__(self) -> None:
        width = len(self.cells)
        if width < 1 or any(len(row) != width for row in self.cells):
            raise ValueError("Board must be a non-empty square grid.")
        if not (1 <= self.win_length <= width):
            msg = f"Win length must be between 1 and {width}, got {self.win_length}."
            raise ValueError(msg)

    @classmethod
    def from_rows(cls, rows: Iterable[str], win_length: int | None = None) -> "Board":
        """Build a board from strings like ``"XO "``; a space or ``.`` is an empty cell."""
        symbols = {"X": Mark.CROSS, "O": Mark.CIRCLE, " ": None, ".": None}
        try:
            cells = tuple(tuple(symbols[char] for char in row) for row in rows)
        except KeyError as e:
            msg = f"Unknown cell symbol: {e.args[0]!r}"
            raise ValueError(msg) from None
        return cls(cells, len(cells) if win_length is None else win_length)

    @property
    def width(self) -> int:
        return len(self.cells)

    def is_filled(self, position: Position) -> bool:
        row, col = position
        if not (0 <= row < self.width) or not (0 <= col < self.width):
            raise IndexError("Move out of bounds.")
        return self.cells[row][col] is not None

    def apply(self, mark: Mark, position: Position) -> "Board":
        if self.is_filled(position):
            raise InvalidMoveError("Cell occupied.")

        row, col = position
        new_row = (*self.cells[row][:col], mark, *self.cells[row][col + 1 :])
        return Board((*self.cells[:row], new_row, *self.cells[row + 1 :]), self.win_length)

    def legal_moves(self) -> list[Position]:
        return [(r, c) for r in range(self.width) for c in range(self.width) if self.cells[r][c] is None]

    def count(self, mark: Mark) -> int:
        return sum(row.count(mark) for row in self.cells)

    def is_full(self) -> bool:
        return all(all(cell is not None for cell in row) for row in self.cells)

    def stage(self) -> GameStage:
        cells = self.cells
        for run in _runs(self.width, self.win_length):
            first_row, first_col = run[0]
            first = cells[first_row][first_col]
            if first is not None and all(cells[r][c] is first for r, c in run[1:]):
                return GameStage.MAX_WON if first.side is Side.MAX else GameStage.MIN_WON

        if self.is_full():
            return GameStage.DRAWN
        return GameStage.ONGOING


def empty_board(width: int = BOARD_SIZE, win_length: int = WIN_LENGTH) -> Board:
    return Board(tuple((None,) * width for _ in range(width)), win_length)

from abc import ABC, abstractmethod

from minimax_tic_tac_toe.board import Board, Mark, Position, Side


class Player(ABC):
    is_human = False

    def __init__(self, side: Side) -> None:
        self._side = side

    @property
    def side(self) -> Side:
        return self._side

    @property
    def mark(self) -> Mark:
        return self._side.mark

    @abstractmethod
    def choose_move(self, board: Board) -> Position:
        """Return the position this player wants to fill next."""

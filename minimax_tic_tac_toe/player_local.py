from collections.abc import Callable

from minimax_tic_tac_toe.board import Board, Position, Side
from minimax_tic_tac_toe.exception import LogicError
from minimax_tic_tac_toe.player import Player


class LocalPlayer(Player):
    is_human = True

    def __init__(self, side: Side) -> None:
        super().__init__(side)
        self._read_position_cb: Callable[[Board], Position] | None = None

    def set_read_position_cb(self, callback: Callable[[Board], Position]) -> None:
        self._read_position_cb = callback

    def choose_move(self, board: Board) -> Position:
        if self._read_position_cb is None:
            msg = f"No input source for player {self.mark.value}."
            raise LogicError(msg)
        return self._read_position_cb(board)

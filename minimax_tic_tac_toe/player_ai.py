import random

from minimax_tic_tac_toe import minimax
from minimax_tic_tac_toe.board import Board, Position, Side
from minimax_tic_tac_toe.player import Player


class AiPlayer(Player):
    def __init__(self, side: Side, rng: random.Random | None = None) -> None:
        super().__init__(side)
        self._rng = rng if rng is not None else random.Random()

    def choose_move(self, board: Board) -> Position:
        return minimax.choose_move(board, self._side, self._rng)

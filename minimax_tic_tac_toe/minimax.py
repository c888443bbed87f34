"""Exhaustive minimax over immutable boards.

Game values are always expressed from the maximizing side's point of view:
``1`` if CROSS can force a win, ``-1`` if CIRCLE can, ``0`` for a forced draw.
There is no pruning and no caching; every call walks the whole subtree.
"""

import logging
import random
from typing import Final

from minimax_tic_tac_toe.board import Board, GameStage, Mark, Position, Side
from minimax_tic_tac_toe.exception import LogicError

logger = logging.getLogger(__name__)

_OUTCOMES: Final = {GameStage.MAX_WON: 1, GameStage.MIN_WON: -1, GameStage.DRAWN: 0}


def value_for_max(board: Board) -> int:
    """Best value CROSS can force when it is CROSS's turn."""
    stage = board.stage()
    if stage.is_terminal:
        return _OUTCOMES[stage]
    return max(value_for_min(board.apply(Mark.CROSS, move)) for move in board.legal_moves())


def value_for_min(board: Board) -> int:
    """Best value CIRCLE can force when it is CIRCLE's turn."""
    stage = board.stage()
    if stage.is_terminal:
        return _OUTCOMES[stage]
    return min(value_for_max(board.apply(Mark.CIRCLE, move)) for move in board.legal_moves())


def value_for(side: Side, board: Board) -> int:
    return value_for_max(board) if side is Side.MAX else value_for_min(board)


def move_values(board: Board, side: Side) -> dict[Position, int]:
    """Value of each legal move for `side`, assuming optimal play afterwards."""
    opponent = side.exchange()
    return {move: value_for(opponent, board.apply(side.mark, move)) for move in board.legal_moves()}


def choose_move(board: Board, side: Side = Side.MAX, rng: random.Random | None = None) -> Position:
    """Pick an optimal move for `side`, breaking ties uniformly at random."""
    if board.stage().is_terminal:
        msg = f"No move to choose for {side.mark.value}: the game is over."
        raise LogicError(msg)

    rng = rng if rng is not None else random.Random()

    buckets: dict[int, list[Position]] = {1: [], 0: [], -1: []}
    for move, value in move_values(board, side).items():
        logger.debug("%s at %s has value %d", side.mark.value, move, value)
        buckets[value].append(move)

    reachable = [value for value, moves in buckets.items() if moves]
    best = max(reachable) if side is Side.MAX else min(reachable)
    candidates = buckets[best]
    return candidates[rng.randrange(len(candidates))]

import logging
import random
from collections.abc import Callable

from minimax_tic_tac_toe.board import BOARD_SIZE, WIN_LENGTH, Board, GameStage, Position, Side, empty_board
from minimax_tic_tac_toe.exception import InvalidMoveError, LogicError
from minimax_tic_tac_toe.player import Player

logger = logging.getLogger(__name__)


class GameEngine:
    def __init__(self, width: int = BOARD_SIZE, win_length: int = WIN_LENGTH, rng: random.Random | None = None) -> None:
        self._board = empty_board(width, win_length)
        self._rng = rng if rng is not None else random.Random()
        self._players: dict[Side, Player] = {}
        self._current_side = Side.MAX
        self._last_move: Position | None = None
        self._board_updated_cbs: list[Callable[[], None]] = []
        self._on_error_cbs: list[Callable[[Exception], None]] = []

    @property
    def board(self) -> Board:
        return self._board

    @property
    def current_side(self) -> Side:
        return self._current_side

    @property
    def current_player(self) -> Player:
        return self.player(self._current_side)

    @property
    def last_move(self) -> Position | None:
        return self._last_move

    @property
    def stage(self) -> GameStage:
        return self._board.stage()

    @property
    def is_game_over(self) -> bool:
        return self.stage.is_terminal

    def player(self, side: Side) -> Player:
        try:
            return self._players[side]
        except KeyError as e:
            msg = f"No player set for side {side.value}."
            raise LogicError(msg) from e

    def set_players(self, player_max: Player, player_min: Player) -> None:
        if player_max.side is not Side.MAX or player_min.side is not Side.MIN:
            raise LogicError("Players must be given as (max, min).")
        self._players = {Side.MAX: player_max, Side.MIN: player_min}

    def add_board_updated_cb(self, callback: Callable[[], None]) -> None:
        self._board_updated_cbs.append(callback)

    def add_on_error_cb(self, callback: Callable[[Exception], None]) -> None:
        self._on_error_cbs.append(callback)

    def start(self, first: Side | None = None) -> None:
        """Pick who moves first (a coin flip unless `first` is given) and show the empty board."""
        if first is None:
            first = (Side.MAX, Side.MIN)[self._rng.randrange(2)]
        self._current_side = first
        logger.info("Player %s moves first", first.mark.value)
        self._notify_board_updated()

    def tick(self) -> None:
        """Ask the current player for one move and apply it.

        A rejected move is reported to the error callbacks and the turn does not pass,
        so the same player is asked again on the next tick.
        """
        if self.is_game_over:
            return

        player = self.current_player
        position = player.choose_move(self._board)
        try:
            self._board = self._board.apply(player.mark, position)
        except (InvalidMoveError, IndexError) as e:
            logger.warning("Rejected move %s by %s: %s", position, player.mark.value, e)
            self._notify_on_error(e)
            return

        self._last_move = position
        logger.info("Player %s plays %s", player.mark.value, position)
        self._notify_board_updated()

        if not self.is_game_over:
            self._current_side = self._current_side.exchange()

    def run(self, first: Side | None = None) -> GameStage:
        """Play a whole game and return the final stage."""
        self.start(first)
        while not self.is_game_over:
            self.tick()
        return self.stage

    def _notify_board_updated(self) -> None:
        for callback in list(self._board_updated_cbs):
            callback()

    def _notify_on_error(self, exception: Exception) -> None:
        for callback in list(self._on_error_cbs):
            callback(exception)

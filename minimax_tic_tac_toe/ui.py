from abc import ABC, abstractmethod

from minimax_tic_tac_toe.board import Board, GameStage, Position, Side
from minimax_tic_tac_toe.game_engine import GameEngine


class Ui(ABC):
    def __init__(self, game_engine: GameEngine) -> None:
        self._game_engine = game_engine

    def on_board_updated(self) -> None:
        self._render_board()
        stage = self._game_engine.stage
        if stage.is_terminal:
            self._show_end_message(self._end_message(stage))

    def on_error(self, exception: Exception) -> None:
        self._on_input_error(exception)

    def close(self) -> None:  # noqa: B027
        """Release the UI once the game is over."""

    def _end_message(self, stage: GameStage) -> str:
        humans = [side for side in Side if self._game_engine.player(side).is_human]

        if stage is GameStage.DRAWN:
            return "Draw." if len(humans) == 1 else "It's a draw"

        winner = Side.MAX if stage is GameStage.MAX_WON else Side.MIN
        if len(humans) == 1:
            return "You win." if humans[0] is winner else "You lose."
        return f"Winner: {winner.mark.value}"

    @abstractmethod
    def read_position(self, board: Board) -> Position:
        """Block until the human enters a legal position on `board`."""

    @abstractmethod
    def _render_board(self) -> None:
        pass

    @abstractmethod
    def _show_end_message(self, message: str) -> None:
        pass

    @abstractmethod
    def _on_input_error(self, exception: Exception) -> None:
        pass

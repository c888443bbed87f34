# ruff: noqa: T201

from minimax_tic_tac_toe.board import Board, Position
from minimax_tic_tac_toe.exception import GameAbortedError, InvalidMoveError
from minimax_tic_tac_toe.game_engine import GameEngine
from minimax_tic_tac_toe.terminal_control import NullTerminalControl, TerminalControl
from minimax_tic_tac_toe.ui import Ui


def format_board(board: Board) -> str:
    """Render `board` as a grid with 1-based row and column headers."""
    width = board.width
    header = "   " + " ".join(f"{col + 1:^3}" for col in range(width))
    separator = "   " + "┼".join("───" for _ in range(width))

    lines = [header]
    for row in range(width):
        cells = (" " if cell is None else cell.value for cell in board.cells[row])
        lines.append(f"{row + 1:^3}" + "│".join(f" {cell} " for cell in cells))
        if row != width - 1:
            lines.append(separator)
    return "\n".join(lines)


def parse_position(text: str, board: Board) -> Position:
    """Turn a ``"row col"`` line (1-based) into a free 0-based position on `board`."""
    parts = text.split()
    if len(parts) != 2:  # noqa: PLR2004
        raise ValueError("Enter a row and a column separated by a space")

    try:
        row, col = (int(part) for part in parts)
    except ValueError:
        raise ValueError("Not an integer") from None

    width = board.width
    if not (1 <= row <= width) or not (1 <= col <= width):
        msg = f"Not between 1 and {width}"
        raise ValueError(msg)

    position = (row - 1, col - 1)
    if board.is_filled(position):
        raise InvalidMoveError("Cell occupied.")
    return position


class TerminalUi(Ui):
    def __init__(self, game_engine: GameEngine, terminal: TerminalControl | None = None) -> None:
        super().__init__(game_engine)
        self._terminal = terminal if terminal is not None else NullTerminalControl()

    def read_position(self, board: Board) -> Position:
        while True:
            self._ask_for_move(board)
            try:
                input_str = input()
            except (KeyboardInterrupt, EOFError) as e:
                print()
                raise GameAbortedError("Input closed.") from e

            try:
                return parse_position(input_str, board)
            except (ValueError, InvalidMoveError) as e:
                self._on_input_error(e)

    def close(self) -> None:
        self._terminal.pause()

    def _ask_for_move(self, board: Board) -> None:
        mark = self._game_engine.current_player.mark.value
        print(f"Your move as {mark} (row col, 1-{board.width}): ", end="", flush=True)

    def _render_board(self) -> None:
        self._terminal.clear_screen()
        print(f"\n{format_board(self._game_engine.board)}\n", flush=True)

        # Board updates arrive before the turn passes, so the current player is the one who just moved.
        mover = self._game_engine.current_player
        last_move = self._game_engine.last_move
        if last_move is None:
            if mover.is_human:
                print("You go first", flush=True)
            return

        if not mover.is_human:
            row, col = last_move
            print(f"Computer plays {mover.mark.value} at ({row + 1}, {col + 1})", flush=True)

    def _show_end_message(self, message: str) -> None:
        print(message, flush=True)

    def _on_input_error(self, exception: Exception) -> None:
        print(str(exception), flush=True)

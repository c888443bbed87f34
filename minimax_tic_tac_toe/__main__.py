# ruff: noqa: T201

import argparse
import logging
import random
import sys

from minimax_tic_tac_toe.board import BOARD_SIZE, WIN_LENGTH, Side
from minimax_tic_tac_toe.exception import GameAbortedError
from minimax_tic_tac_toe.factories import config_game_engine, create_players, create_ui
from minimax_tic_tac_toe.game_engine import GameEngine
from minimax_tic_tac_toe.terminal_control import AnsiTerminalControl, NullTerminalControl, TerminalControl

logger = logging.getLogger(__name__)


def main() -> None:
    parser, args = _parse_args()

    if args.win_length is None:
        args.win_length = min(WIN_LENGTH, args.width)
    if args.width < 1:
        parser.error("--width must be at least 1")
    if not (1 <= args.win_length <= args.width):
        parser.error(f"--win-length must be between 1 and {args.width}")

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s: %(message)s")
    if args.width > BOARD_SIZE:
        logger.warning("Exhaustive search on a %dx%d board may take a very long time.", args.width, args.width)

    # Build game components

    rng = random.Random(args.seed)
    game_engine = GameEngine(args.width, args.win_length, rng)
    terminal: TerminalControl = NullTerminalControl() if args.no_clear else AnsiTerminalControl()
    ui = create_ui(args.ui, game_engine, terminal)

    human_side = Side.MAX if args.human_mark == "X" else Side.MIN
    if human_side is Side.MAX:
        players = create_players("human", "ai", ui, rng)
    else:
        players = create_players("ai", "human", ui, rng)
    config_game_engine(game_engine, players, ui)

    match args.first:
        case "human":
            first: Side | None = human_side
        case "computer":
            first = human_side.exchange()
        case _:
            first = None

    try:
        game_engine.run(first)
    except GameAbortedError:
        print("Game aborted.")
        sys.exit(1)
    ui.close()


def _parse_args() -> tuple[argparse.ArgumentParser, argparse.Namespace]:
    parser = argparse.ArgumentParser(description="Play tic-tac-toe against an optimal minimax opponent.")

    parser.add_argument("--ui", choices=("terminal", "pygame"), default="terminal")
    parser.add_argument("--human-mark", choices=("X", "O"), default="O", help="the computer plays the other mark")
    parser.add_argument("--first", choices=("human", "computer", "random"), default="random")

    # board
    parser.add_argument("--width", type=int, default=BOARD_SIZE)
    parser.add_argument("--win-length", type=int, default=None, help="defaults to 3, or the width if smaller")

    parser.add_argument("--seed", type=int, default=None, help="seed for coin flip and tie-breaking")
    parser.add_argument("--no-clear", action="store_true", help="do not clear the screen between moves")
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
    )

    args = parser.parse_args()
    return parser, args


if __name__ == "__main__":
    main()

"""Factory functions for wiring game components.

Provides factories for creating:
- Players (local human, minimax AI)
- UIs (terminal, pygame)
- Game engine callbacks
"""

import random
from typing import Literal, TypeAlias

from minimax_tic_tac_toe.board import Side
from minimax_tic_tac_toe.game_engine import GameEngine
from minimax_tic_tac_toe.player import Player
from minimax_tic_tac_toe.player_ai import AiPlayer
from minimax_tic_tac_toe.player_local import LocalPlayer
from minimax_tic_tac_toe.terminal_control import TerminalControl
from minimax_tic_tac_toe.ui import Ui
from minimax_tic_tac_toe.ui_terminal import TerminalUi

PlayerType: TypeAlias = Literal["human", "ai"]
UiType: TypeAlias = Literal["terminal", "pygame"]

# ============================================================================
# Player Factories
# ============================================================================


def _create_player(player_type: PlayerType, side: Side, ui: Ui, rng: random.Random) -> Player:
    match player_type:
        case "human":
            human_player = LocalPlayer(side)
            human_player.set_read_position_cb(ui.read_position)
            return human_player
        case "ai":
            return AiPlayer(side, rng)
        case _:
            msg = f"Unknown player type: {player_type}. Choose from 'human', 'ai'."
            raise ValueError(msg)


def create_players(
    player_max_type: PlayerType,
    player_min_type: PlayerType,
    ui: Ui,
    rng: random.Random,
) -> tuple[Player, Player]:
    player1 = _create_player(player_max_type, Side.MAX, ui, rng)
    player2 = _create_player(player_min_type, Side.MIN, ui, rng)
    return player1, player2


# ============================================================================
# UI Factories
# ============================================================================


def create_ui(ui_type: UiType, game_engine: GameEngine, terminal: TerminalControl) -> Ui:
    match ui_type:
        case "terminal":
            return TerminalUi(game_engine, terminal)
        case "pygame":
            # pygame is only loaded when its window is requested.
            from minimax_tic_tac_toe.ui_pygame import PygameUi  # noqa: PLC0415

            return PygameUi(game_engine)
        case _:
            msg = f"Unknown UI type: {ui_type}. Choose from 'terminal', 'pygame'."
            raise ValueError(msg)


# ============================================================================
# GameEngine Factories
# ============================================================================


def config_game_engine(game_engine: GameEngine, players: tuple[Player, Player], ui: Ui) -> GameEngine:
    game_engine.set_players(*players)
    game_engine.add_board_updated_cb(ui.on_board_updated)
    game_engine.add_on_error_cb(ui.on_error)

    return game_engine

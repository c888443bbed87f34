from typing import Final

import pygame

from minimax_tic_tac_toe.board import Board, Mark, Position
from minimax_tic_tac_toe.exception import GameAbortedError, InvalidMoveError
from minimax_tic_tac_toe.game_engine import GameEngine
from minimax_tic_tac_toe.ui import Ui


class PygameUi(Ui):
    TITLE: Final = "Tic-Tac-Toe (Pygame)"
    WINDOW_SIZE: Final = 480
    LINE_WIDTH: Final = 4
    FPS: Final = 30

    BG_COLOR: Final = (0, 0, 0)
    LINE_COLOR: Final = (127, 127, 127)
    X_COLOR: Final = (191, 63, 63)
    O_COLOR: Final = (63, 63, 191)
    TEXT_COLOR: Final = (255, 255, 255)

    def __init__(self, game_engine: GameEngine) -> None:
        super().__init__(game_engine)
        self._width = game_engine.board.width
        self._cell_size = self.WINDOW_SIZE // self._width
        self._screen: pygame.Surface | None = None
        self._title = self.TITLE
        self._end_text = ""

    def read_position(self, board: Board) -> Position:
        self._open()
        self._title = f"{self.TITLE} - Your move ({self._game_engine.current_player.mark.value})"
        clock = pygame.time.Clock()
        while True:
            clock.tick(self.FPS)
            for event in pygame.event.get():
                match event.type:
                    case pygame.QUIT:
                        pygame.quit()
                        self._screen = None
                        raise GameAbortedError("Window closed.")
                    case pygame.MOUSEBUTTONDOWN:
                        position = self.position_at(event.pos)
                        if position is None:
                            continue
                        if board.is_filled(position):
                            self._on_input_error(InvalidMoveError("Cell occupied."))
                            continue
                        self._title = self.TITLE
                        return position
            self._render()

    def close(self) -> None:
        if self._screen is None:
            return
        clock = pygame.time.Clock()
        waiting = True
        while waiting:
            clock.tick(self.FPS)
            for event in pygame.event.get():
                if event.type in (pygame.QUIT, pygame.MOUSEBUTTONDOWN):
                    waiting = False
            self._render()
        pygame.quit()
        self._screen = None

    def position_at(self, pos: tuple[int, int]) -> Position | None:
        """Map a pixel position in the window to a board cell."""
        x, y = pos
        if x < 0 or y < 0:
            return None
        row, col = y // self._cell_size, x // self._cell_size
        if not (0 <= row < self._width) or not (0 <= col < self._width):
            return None
        return row, col

    def _open(self) -> None:
        if self._screen is not None:
            return
        pygame.init()
        self._screen = pygame.display.set_mode((self.WINDOW_SIZE, self.WINDOW_SIZE))
        pygame.display.set_caption(self.TITLE)

        self._font = pygame.font.SysFont(None, 96 * 3 // self._width)
        self._small_font = pygame.font.SysFont(None, 48)
        self._click_font = pygame.font.SysFont(None, 24)

    def _render_board(self) -> None:
        self._open()
        # Window events are drained between moves only, not during the search.
        pygame.event.pump()
        self._render()

    def _show_end_message(self, message: str) -> None:
        self._end_text = message
        self._render()

    def _on_input_error(self, exception: Exception) -> None:
        self._title = f"{self.TITLE} - {exception}"

    def _render(self) -> None:
        if self._screen is None:
            return
        pygame.display.set_caption(self._title)
        self._screen.fill(self.BG_COLOR)
        self._draw_grid()
        self._draw_marks()
        self._draw_end_text()
        pygame.display.flip()

    def _draw_grid(self) -> None:
        for offset in range(self._cell_size, self._width * self._cell_size, self._cell_size):
            for start, end in (((0, offset), (self.WINDOW_SIZE, offset)), ((offset, 0), (offset, self.WINDOW_SIZE))):
                pygame.draw.line(self._screen, self.LINE_COLOR, start, end, self.LINE_WIDTH)

    def _cell_center(self, row: int, col: int) -> tuple[int, int]:
        half = self._cell_size // 2
        return col * self._cell_size + half, row * self._cell_size + half

    def _draw_marks(self) -> None:
        for row, cells in enumerate(self._game_engine.board.cells):
            for col, mark in enumerate(cells):
                if mark is None:
                    continue
                color = self.X_COLOR if mark is Mark.CROSS else self.O_COLOR
                text = self._font.render(mark.value, True, color)  # noqa: FBT003
                self._screen.blit(text, text.get_rect(center=self._cell_center(row, col)))

    def _draw_end_text(self) -> None:
        if not self._end_text:
            return
        middle = self.WINDOW_SIZE // 2
        lines = ((self._small_font, self._end_text, -20), (self._click_font, "Click anywhere to exit", 20))
        for font, line, shift in lines:
            text = font.render(line, True, self.TEXT_COLOR)  # noqa: FBT003
            self._screen.blit(text, text.get_rect(center=(middle, middle + shift)))

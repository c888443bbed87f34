import logging
import sys
from abc import ABC, abstractmethod
from typing import Final, TextIO

logger = logging.getLogger(__name__)


class TerminalControl(ABC):
    """Screen handling around the game. Every operation is best-effort."""

    @abstractmethod
    def clear_screen(self) -> None:
        pass

    @abstractmethod
    def pause(self) -> None:
        pass


class AnsiTerminalControl(TerminalControl):
    CLEAR_SEQUENCE: Final = "\033[2J\033[H"
    PAUSE_PROMPT: Final = "Press Enter to exit"

    def __init__(self, stream: TextIO | None = None, *, force: bool = False) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._force = force

    def clear_screen(self) -> None:
        try:
            if not self._force and not self._stream.isatty():
                return
            self._stream.write(self.CLEAR_SEQUENCE)
            self._stream.flush()
        except OSError as e:
            logger.warning("Could not clear the screen: %s", e)

    def pause(self) -> None:
        try:
            print(self.PAUSE_PROMPT, end="", file=self._stream, flush=True)
            input()
        except (OSError, EOFError, KeyboardInterrupt) as e:
            logger.debug("Pause interrupted: %r", e)


class NullTerminalControl(TerminalControl):
    def clear_screen(self) -> None:
        pass

    def pause(self) -> None:
        pass

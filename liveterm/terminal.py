from __future__ import annotations

import io
import logging
import os
import sys
from enum import Enum, auto
from typing import Optional, TextIO

from liveterm.config import TerminalConfig
from liveterm.escapes import TERMINAL_CONTROL

log = logging.getLogger(__name__)


class CursorState(Enum):
    VISIBLE = auto()
    HIDDEN = auto()


class TerminalManager:
    """
    Terminal state for live updates, bound to one output stream.

    Every control sequence is gated on the stream being a TTY; ``write`` is
    not. Call ``cleanup`` on every exit path, or use the manager as a
    context manager, so the cursor is never left hidden.
    """

    def __init__(self, stream: Optional[TextIO] = None, config: Optional[TerminalConfig] = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.config = config or TerminalConfig()
        self._cursor = CursorState.VISIBLE
        self._reported_non_tty = False

    def __enter__(self) -> TerminalManager:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.cleanup()

    @property
    def cursor_state(self) -> CursorState:
        return self._cursor

    @property
    def cursor_hidden(self) -> bool:
        return self._cursor is CursorState.HIDDEN

    @property
    def is_tty(self) -> bool:
        isatty = getattr(self.stream, "isatty", None)
        if isatty is None:
            return False
        try:
            return bool(isatty())
        except (ValueError, OSError):
            # Closed or detached stream.
            return False

    @property
    def width(self) -> int:
        columns, _ = self._size()
        return columns or self.config.fallback_columns

    @property
    def height(self) -> int:
        _, rows = self._size()
        return rows or self.config.fallback_rows

    def _size(self) -> tuple[int, int]:
        try:
            size = os.get_terminal_size(self.stream.fileno())
        except (AttributeError, io.UnsupportedOperation, ValueError, OSError):
            log.debug("terminal size unavailable, using %dx%d",
                      self.config.fallback_columns, self.config.fallback_rows)
            return 0, 0
        return size.columns, size.lines

    def _control(self, sequence: str) -> bool:
        if not self.is_tty:
            if not self._reported_non_tty:
                log.debug("stream is not a TTY, control sequences disabled")
                self._reported_non_tty = True
            return False
        self._emit(sequence)
        return True

    def _emit(self, text: str) -> None:
        self.stream.write(text)
        flush = getattr(self.stream, "flush", None)
        if flush is not None:
            flush()

    def hide_cursor(self) -> None:
        if self._cursor is CursorState.VISIBLE and self._control(TERMINAL_CONTROL["HIDE_CURSOR"]):
            self._cursor = CursorState.HIDDEN
            log.debug("cursor hidden")

    def show_cursor(self) -> None:
        if self._cursor is CursorState.HIDDEN and self._control(TERMINAL_CONTROL["SHOW_CURSOR"]):
            self._cursor = CursorState.VISIBLE
            log.debug("cursor shown")

    def clear_screen(self) -> None:
        """Clear the whole screen and home the cursor."""
        if self._control(TERMINAL_CONTROL["CLEAR_SCREEN"]):
            self._emit(TERMINAL_CONTROL["MOVE_TO_TOP"])

    def clear_line(self) -> None:
        self._control(TERMINAL_CONTROL["CLEAR_LINE"])

    def move_up(self, lines: int) -> None:
        if lines > 0:
            self._control(TERMINAL_CONTROL["MOVE_UP"](lines))

    def move_down(self, lines: int) -> None:
        if lines > 0:
            self._control(TERMINAL_CONTROL["MOVE_DOWN"](lines))

    def move_to_line_start(self) -> None:
        self._control(TERMINAL_CONTROL["MOVE_TO_COLUMN"](1))

    def write(self, text: str) -> None:
        self._emit(text)

    def cleanup(self) -> None:
        """Restore the cursor. Safe to call any number of times."""
        self.show_cursor()
        self._cursor = CursorState.VISIBLE

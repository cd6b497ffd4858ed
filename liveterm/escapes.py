from __future__ import annotations

import re
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Union

ESC = "\x1b"
CSI = ESC + "["

COLOR_RESET = CSI + "0m"

_ANSI_RE = re.compile(
    r"\x1B(?:\][^\x07\x1B]*(?:\x07|\x1B\\)|\[[0-?]*[ -/]*[@-~]|[@-Z\\-_])"
)


def cursor_to(x: int, y: Optional[int] = None) -> str:
    """Absolute cursor position, 0-based. Only the column moves when y is None."""
    if y is None:
        return f"{CSI}{x + 1}G"
    return f"{CSI}{y + 1};{x + 1}H"


def cursor_up(count: int = 1) -> str:
    return f"{CSI}{count}A"


def cursor_down(count: int = 1) -> str:
    return f"{CSI}{count}B"


def strip_ansi(text: str) -> str:
    """Remove CSI, OSC and two-character escape sequences from text."""
    return _ANSI_RE.sub("", str(text))


ControlSequence = Union[str, Callable[[int], str]]

TERMINAL_CONTROL: Mapping[str, ControlSequence] = MappingProxyType(
    {
        # Cursor
        "HIDE_CURSOR": CSI + "?25l",
        "SHOW_CURSOR": CSI + "?25h",
        # Screen
        "CLEAR_SCREEN": ESC + "c",
        "CLEAR_LINE": CSI + "2K",
        "MOVE_TO_TOP": cursor_to(0, 0),
        # Movement
        "MOVE_UP": cursor_up,
        "MOVE_DOWN": cursor_down,
        # Columns are 1-based here, cursor_to is 0-based.
        "MOVE_TO_COLUMN": lambda n: cursor_to(n - 1),
    }
)


class Color:
    """SGR foreground codes for progress bar tiers."""

    BLK = CSI + "30m"
    RED = CSI + "31m"
    GRN = CSI + "32m"
    YLW = CSI + "33m"
    BLU = CSI + "34m"
    MGT = CSI + "35m"
    CYN = CSI + "36m"
    WHT = CSI + "37m"

    GRY = CSI + "90m"
    RED_B = CSI + "91m"
    GRN_B = CSI + "92m"
    YLW_B = CSI + "93m"
    BLU_B = CSI + "94m"
    MGT_B = CSI + "95m"
    CYN_B = CSI + "96m"
    WHT_B = CSI + "97m"

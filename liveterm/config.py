from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

CRITICAL_THRESHOLD = 90.0
HIGH_THRESHOLD = 80.0
MEDIUM_THRESHOLD = 50.0


@dataclass(slots=True)
class TerminalConfig:
    fallback_columns: int = 80
    fallback_rows: int = 24


@dataclass(slots=True)
class BarColors:
    low: Optional[str] = None
    medium: Optional[str] = None
    high: Optional[str] = None
    critical: Optional[str] = None


@dataclass(slots=True)
class ProgressBarOptions:
    show_percentage: bool = True
    show_values: bool = False
    fill_char: str = "█"
    empty_char: str = "░"
    left_bracket: str = "["
    right_bracket: str = "]"
    colors: Optional[BarColors] = None

from __future__ import annotations

import math
from dataclasses import replace
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Mapping, Optional, Union

from rich.cells import cell_len

from liveterm.config import (
    CRITICAL_THRESHOLD,
    HIGH_THRESHOLD,
    MEDIUM_THRESHOLD,
    BarColors,
    ProgressBarOptions,
)
from liveterm.escapes import COLOR_RESET, Color, strip_ansi

_UNSET: Any = object()


def _round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def _fmt_percentage(percentage: float) -> str:
    # Ties round up, the way JavaScript toFixed does.
    return str(Decimal(percentage).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _percentage(value: Union[int, float], maximum: Union[int, float]) -> float:
    if not maximum > 0:
        return 0.0
    try:
        percentage = value / maximum * 100
    except OverflowError:
        # Ints too large for a float. Only the side of the capacity matters.
        percentage = 100.0 if value >= maximum else 0.0
    if math.isnan(percentage):
        return 0.0
    return min(100.0, max(0.0, percentage))


def _fmt_number(n: Union[int, float]) -> str:
    if isinstance(n, float) and n.is_integer():
        return str(int(n))
    return str(n)


def _as_colors(colors: Union[BarColors, Mapping[str, Optional[str]], None]) -> Optional[BarColors]:
    if colors is None or isinstance(colors, BarColors):
        return colors
    return BarColors(**dict(colors))


def _pick_color(percentage: float, colors: Optional[BarColors]) -> str:
    if colors is None:
        return ""
    if colors.critical is not None and percentage >= CRITICAL_THRESHOLD:
        return colors.critical
    if colors.high is not None and percentage >= HIGH_THRESHOLD:
        return colors.high
    if colors.medium is not None and percentage >= MEDIUM_THRESHOLD:
        return colors.medium
    if colors.low is not None:
        return colors.low
    return ""


def usage_colors() -> BarColors:
    """Green to red tiers for usage meters."""
    return BarColors(low=Color.GRN, medium=Color.YLW, high=Color.YLW_B, critical=Color.RED)


def progress_bar(
    value: Union[int, float],
    maximum: Union[int, float],
    width: int,
    options: Optional[ProgressBarOptions] = None,
    *,
    show_percentage: bool = _UNSET,
    show_values: bool = _UNSET,
    fill_char: str = _UNSET,
    empty_char: str = _UNSET,
    left_bracket: str = _UNSET,
    right_bracket: str = _UNSET,
    colors: Union[BarColors, Mapping[str, Optional[str]], None] = _UNSET,
) -> str:
    """
    Render a progress bar string.

    Args:
        value: Current amount, may exceed ``maximum``
        maximum: Capacity; zero or negative renders 0%
        width: Number of fill + empty cells
        options: Base options, overridden by any keyword given explicitly
        show_percentage: Append the percentage with one decimal
        show_values: Append ``(value/maximum)``
        fill_char: Character for the filled portion
        empty_char: Character for the empty portion
        left_bracket: Opening bracket
        right_bracket: Closing bracket
        colors: Tier colours, picked by percentage (critical >= 90,
            high >= 80, medium >= 50, otherwise low)

    Returns:
        Progress bar string
    """
    overrides = {
        name: val
        for name, val in (
            ("show_percentage", show_percentage),
            ("show_values", show_values),
            ("fill_char", fill_char),
            ("empty_char", empty_char),
            ("left_bracket", left_bracket),
            ("right_bracket", right_bracket),
            ("colors", colors),
        )
        if val is not _UNSET
    }
    opts = replace(options or ProgressBarOptions(), **overrides)

    percentage = _percentage(value, maximum)
    cells = max(0, width)
    fill_width = _round_half_up(percentage / 100 * cells)
    empty_width = cells - fill_width

    color = _pick_color(percentage, _as_colors(opts.colors))

    bar = opts.left_bracket
    if color:
        bar += color
    bar += opts.fill_char * fill_width
    bar += opts.empty_char * empty_width
    if color:
        bar += COLOR_RESET
    bar += opts.right_bracket

    if opts.show_percentage:
        bar += f" {_fmt_percentage(percentage)}%"
    if opts.show_values:
        bar += f" ({_fmt_number(value)}/{_fmt_number(maximum)})"
    return bar


def display_width(text: str) -> int:
    """Terminal columns occupied by text, ignoring styling sequences."""
    return cell_len(strip_ansi(text))


def center_text(text: str, width: int) -> str:
    text_width = display_width(text)
    if text_width >= width:
        return text

    left = (width - text_width) // 2
    right = width - text_width - left
    return " " * left + text + " " * right

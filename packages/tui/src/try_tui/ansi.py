"""
ANSI control sequences emitted by the renderer.

Only 8-bit SGR styling plus the cursor/screen controls the Screen needs.
"""
from __future__ import annotations

CLEAR_EOL = "\x1b[K"
HOME = "\x1b[H"
HIDE = "\x1b[?25l"
SHOW = "\x1b[?25h"
ALT_SCREEN_ON = "\x1b[?1049h"
ALT_SCREEN_OFF = "\x1b[?1049l"

RESET = "\x1b[0m"
RESET_FG = "\x1b[39m"
RESET_BG = "\x1b[49m"
BOLD = "\x1b[1m"
RESET_INTENSITY = "\x1b[22m"
REVERSE = "\x1b[7m"
REVERSE_OFF = "\x1b[27m"


def fg(code: int) -> str:
    """256-color foreground."""
    return f"\x1b[38;5;{code}m"


def bg(code: int) -> str:
    """256-color background."""
    return f"\x1b[48;5;{code}m"


def sgr(*codes: int | str) -> str:
    return f"\x1b[{';'.join(str(c) for c in codes)}m"


def move_to(row: int, col: int) -> str:
    """Absolute cursor position, 1-based."""
    return f"\x1b[{row};{col}H"


def move_col(col: int) -> str:
    return f"\x1b[{col}G"

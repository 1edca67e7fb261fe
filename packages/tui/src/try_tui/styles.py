"""
Style table — named text styles mapped to their SGR sequences.

Every style is a member of the closed Style enum; its opening and closing
sequences live in _STYLE_CODES. Closing sequences undo only what the opening
set, so styles nest inside a line background.
"""
from __future__ import annotations

import enum

from . import ansi


class Style(enum.Enum):
    BOLD = "bold"
    DIM = "dim"
    HIGHLIGHT = "highlight"
    ACCENT = "accent"
    MATCH = "match"
    HEADER = "header"
    H1 = "h1"
    H2 = "h2"
    SECTION = "section"
    INPUT_HINT = "input_hint"
    CURSOR = "cursor"
    SELECTED_BG = "selected_bg"
    DANGER_BG = "danger_bg"

    @property
    def prefix(self) -> str:
        return _STYLE_CODES[self][0]

    @property
    def suffix(self) -> str:
        return _STYLE_CODES[self][1]

    def wrap(self, text: str, colors: bool = True) -> str:
        """Surround text with this style's sequences; plain text when colors are off."""
        if not text:
            return ""
        if not colors:
            return text
        prefix, suffix = _STYLE_CODES[self]
        return f"{prefix}{text}{suffix}"


_END_BOLD_FG = ansi.RESET_FG + ansi.RESET_INTENSITY

_STYLE_CODES: dict[Style, tuple[str, str]] = {
    Style.BOLD: (ansi.BOLD, ansi.RESET_INTENSITY),
    Style.DIM: (ansi.fg(245), ansi.RESET_FG),
    Style.HIGHLIGHT: ("\x1b[1;33m", _END_BOLD_FG),
    Style.ACCENT: (ansi.sgr(1, "38;5;214"), _END_BOLD_FG),
    Style.MATCH: (ansi.sgr(1, "38;5;226"), _END_BOLD_FG),
    Style.HEADER: (ansi.sgr(1, "38;5;114"), _END_BOLD_FG),
    Style.H1: (ansi.sgr(1, "38;5;208"), _END_BOLD_FG),
    Style.H2: (ansi.sgr(1, 34), _END_BOLD_FG),
    Style.SECTION: (ansi.BOLD, ansi.RESET),
    Style.INPUT_HINT: (ansi.fg(244), ansi.RESET_FG),
    Style.CURSOR: (ansi.REVERSE, ansi.REVERSE_OFF),
    Style.SELECTED_BG: (ansi.bg(238), ansi.RESET_BG),
    Style.DANGER_BG: (ansi.bg(52), ansi.RESET_BG),
}


def bold(text: str, colors: bool = True) -> str:
    return Style.BOLD.wrap(text, colors)


def dim(text: str, colors: bool = True) -> str:
    return Style.DIM.wrap(text, colors)


def highlight(text: str, colors: bool = True) -> str:
    return Style.HIGHLIGHT.wrap(text, colors)


def accent(text: str, colors: bool = True) -> str:
    return Style.ACCENT.wrap(text, colors)

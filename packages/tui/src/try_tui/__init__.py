"""
try_tui — terminal rendering and fuzzy ranking core for an interactive picker.

Frame-diffed full-screen rendering with left/center/right line lanes, plus a
subsequence fuzzy matcher that reports highlight positions.
"""
from . import ansi
from .config import RenderSettings, load_render_settings
from .fuzzy import Entry, Fuzzy, Match, MatchResult
from .input_field import InputField
from .line import Line
from .screen import Screen, Section
from .segments import FillSegment, PlainSegment, SegmentWriter, WideToken, fill, wide
from .styles import Style, accent, bold, dim, highlight
from .terminal import Terminal, get_terminal_size
from .utils import (
    WidthPolicy,
    char_width,
    extract_ansi_code,
    strip_ansi,
    truncate,
    truncate_from_start,
    visible_width,
)

__all__ = [
    # ansi
    "ansi",
    # config
    "RenderSettings",
    "load_render_settings",
    # fuzzy
    "Entry",
    "Fuzzy",
    "Match",
    "MatchResult",
    # input field
    "InputField",
    # line
    "Line",
    # screen
    "Screen",
    "Section",
    # segments
    "FillSegment",
    "PlainSegment",
    "SegmentWriter",
    "WideToken",
    "fill",
    "wide",
    # styles
    "Style",
    "accent",
    "bold",
    "dim",
    "highlight",
    # terminal
    "Terminal",
    "get_terminal_size",
    # utils
    "WidthPolicy",
    "char_width",
    "extract_ansi_code",
    "strip_ansi",
    "truncate",
    "truncate_from_start",
    "visible_width",
]

"""
Terminal boundary — size queries and screen-mode control for an output stream.

Provides:
- get_terminal_size(): rows/columns with env overrides and a 24x80 fallback
- Terminal: thin wrapper over a text stream (write, cursor, alternate screen)
"""
from __future__ import annotations

import contextlib
import logging
import os
import sys
from typing import IO, Iterator

from . import ansi
from .config import DEFAULT_COLUMNS, DEFAULT_ROWS, RenderSettings, load_render_settings

logger = logging.getLogger(__name__)


def _candidate_streams(stream: IO[str] | None) -> list[IO[str]]:
    candidates: list[IO[str]] = []
    for candidate in (stream, sys.stdout, sys.stdin):
        if candidate is not None and all(candidate is not c for c in candidates):
            candidates.append(candidate)
    return candidates


def _query_stream_size(stream: IO[str]) -> os.terminal_size | None:
    try:
        size = os.get_terminal_size(stream.fileno())
    except (AttributeError, OSError, ValueError) as exc:
        logger.debug("terminal size unavailable for %r: %s", stream, exc)
        return None
    if size.lines <= 0 or size.columns <= 0:
        return None
    return size


def get_terminal_size(
    stream: IO[str] | None = None,
    settings: RenderSettings | None = None,
) -> tuple[int, int]:
    """
    Return (rows, columns) for the terminal behind stream.

    TRY_HEIGHT / TRY_WIDTH win when set. Otherwise the given stream, stdout
    and stdin are asked in turn; if none is a terminal the result is 24x80.
    Never raises.
    """
    settings = settings or load_render_settings()
    rows = settings.height_override
    cols = settings.width_override
    if rows is not None and cols is not None:
        return rows, cols

    for candidate in _candidate_streams(stream):
        size = _query_stream_size(candidate)
        if size is not None:
            return rows or size.lines, cols or size.columns

    logger.debug("no terminal found; falling back to %dx%d", DEFAULT_ROWS, DEFAULT_COLUMNS)
    return rows or DEFAULT_ROWS, cols or DEFAULT_COLUMNS


class Terminal:
    """
    Output side of the user's terminal.

    Input handling (raw mode, key decoding) belongs to the caller; this only
    writes control sequences and reports the size.
    """

    def __init__(self, stream: IO[str] | None = None, settings: RenderSettings | None = None) -> None:
        self.stream = stream if stream is not None else sys.stderr
        self.settings = settings or load_render_settings()

    def write(self, data: str) -> None:
        self.stream.write(data)

    def flush(self) -> None:
        self.stream.flush()

    def hide_cursor(self) -> None:
        self.write(ansi.HIDE)

    def show_cursor(self) -> None:
        self.write(ansi.SHOW)

    def enter_alt_screen(self) -> None:
        self.write(ansi.ALT_SCREEN_ON)

    def exit_alt_screen(self) -> None:
        self.write(ansi.ALT_SCREEN_OFF)

    def size(self) -> tuple[int, int]:
        """(rows, columns)"""
        return get_terminal_size(self.stream, self.settings)

    @contextlib.contextmanager
    def session(self) -> Iterator["Terminal"]:
        """Alternate screen with a hidden cursor; the main screen comes back on exit."""
        self.enter_alt_screen()
        self.hide_cursor()
        self.flush()
        try:
            yield self
        finally:
            self.write(ansi.RESET)
            self.show_cursor()
            self.exit_alt_screen()
            self.flush()

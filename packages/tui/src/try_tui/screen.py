"""
Screen — header/body/footer sections painted with frame diffing.

Provides:
- Section: ordered Lines for one region of the screen
- Screen: composes the sections into rows, writes only the rows that
  changed since the previous flush, and places the cursor on the input line

A Screen is filled, flushed, and then starts empty again; the previous frame
is kept only as rendered strings for the next comparison.
"""
from __future__ import annotations

import logging
import sys
from typing import IO

from . import ansi
from .config import RenderSettings, load_render_settings
from .input_field import InputField
from .line import Line
from .styles import Style
from .terminal import Terminal
from .utils import WidthPolicy, visible_width

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Section
# ─────────────────────────────────────────────────────────────────────────────


class Section:
    def __init__(self, screen: "Screen") -> None:
        self.screen = screen
        self._lines: list[Line] = []

    @property
    def lines(self) -> list[Line]:
        return self._lines

    def add_line(self, background: Style | None = None, truncate: bool = True) -> Line:
        line = Line(background=background, truncate=truncate, policy=self.screen.width_policy)
        self._lines.append(line)
        return line

    def divider(self, char: str = "─") -> Line:
        line = self.add_line()
        line.write(char * max(self.screen.width - 1, 1))
        return line

    def clear(self) -> None:
        self._lines = []

    def __len__(self) -> int:
        return len(self._lines)


# ─────────────────────────────────────────────────────────────────────────────
# Screen
# ─────────────────────────────────────────────────────────────────────────────


class Screen:
    """
    Double-buffered full-screen renderer.

    width / height pin the size; otherwise it is re-queried from the
    terminal on every flush. colors and width_policy default to what the
    environment asks for (see config.load_render_settings).
    """

    def __init__(
        self,
        stream: IO[str] | None = None,
        width: int | None = None,
        height: int | None = None,
        colors: bool | None = None,
        width_policy: WidthPolicy | None = None,
        settings: RenderSettings | None = None,
    ) -> None:
        self.settings = settings or load_render_settings()
        self.terminal = Terminal(stream if stream is not None else sys.stderr, self.settings)
        self._fixed_width = width
        self._fixed_height = height
        self._colors = self.settings.colors if colors is None else colors
        self.width_policy = width_policy or self.settings.width_policy

        self.width = 0
        self.height = 0
        self.refresh_size()

        self.header = Section(self)
        self.body = Section(self)
        self.footer = Section(self)
        self._input_field: InputField | None = None

        self._previous_lines: list[str] = []
        self._previous_size: tuple[int, int] | None = None

    # ─────────────────────────────────────────────────────────────────────────
    # Render context
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def colors_enabled(self) -> bool:
        return self._colors

    def enable_colors(self) -> None:
        self._colors = True

    def disable_colors(self) -> None:
        self._colors = False

    @property
    def frame(self) -> tuple[str, ...]:
        """Rows written by the last successful flush."""
        return tuple(self._previous_lines)

    @property
    def input_field(self) -> InputField | None:
        return self._input_field

    def refresh_size(self) -> "Screen":
        rows, cols = (0, 0)
        if self._fixed_width is None or self._fixed_height is None:
            rows, cols = self.terminal.size()
        self.height = self._fixed_height if self._fixed_height is not None else rows
        self.width = self._fixed_width if self._fixed_width is not None else cols
        return self

    def invalidate(self) -> None:
        """Forget the previous frame so the next flush repaints every row."""
        if self._previous_lines:
            logger.debug("Screen invalidated; next flush repaints %d rows", len(self._previous_lines))
        self._previous_lines = []

    # ─────────────────────────────────────────────────────────────────────────
    # Frame content
    # ─────────────────────────────────────────────────────────────────────────

    def input(self, placeholder: str = "", value: str = "", cursor: int | None = None) -> InputField:
        """Create the frame's input field; attach it to a Line with Line.attach_input."""
        if self._input_field is not None:
            raise ValueError("Screen already has an input field for this frame")
        self._input_field = InputField(placeholder=placeholder, text=value, cursor=cursor)
        return self._input_field

    def clear(self) -> "Screen":
        self.header.clear()
        self.body.clear()
        self.footer.clear()
        self._input_field = None
        return self

    # ─────────────────────────────────────────────────────────────────────────
    # Flush
    # ─────────────────────────────────────────────────────────────────────────

    def flush(self) -> None:
        """
        Write the composed frame to the terminal and reset for the next one.

        Only rows whose rendered text differs from the previous frame are
        written. The sections and input field are emptied even when the
        write fails.
        """
        try:
            self.refresh_size()
            size = (self.width, self.height)
            if self._previous_size is not None and size != self._previous_size:
                logger.debug("Terminal resized to %dx%d; repainting", self.width, self.height)
                self._previous_lines = []

            self._write_home()

            rows, cursor = self._compose()
            buf = self._diff(rows)
            if cursor is not None:
                buf.append(ansi.move_to(*cursor) + ansi.SHOW)
            else:
                buf.append(ansi.HIDE)
            buf.append(ansi.RESET)

            try:
                self.terminal.write("".join(buf))
            except Exception:
                self._previous_lines = []
                raise
            self._previous_lines = rows
            self._previous_size = size
            self.terminal.flush()
        finally:
            self.clear()

    def _write_home(self) -> None:
        try:
            self.terminal.write(ansi.HOME)
        except (OSError, ValueError) as exc:
            logger.debug("Cursor home write failed: %s", exc)

    def _compose(self) -> tuple[list[str], tuple[int, int] | None]:
        header = self.header.lines
        footer = self.footer.lines
        body_space = max(self.height - len(header) - len(footer), 0)
        body = self.body.lines[:body_space]
        padding = body_space - len(body)

        ordered: list[Line | None] = [*header, *body, *([None] * padding), *footer]
        blank = " " * max(self.width - 1, 0)

        rows: list[str] = []
        input_rows: list[tuple[int, Line]] = []
        last_index = len(ordered) - 1
        for index, line in enumerate(ordered):
            last = index == last_index
            if line is None:
                rows.append(blank if last else blank + "\n")
                continue
            if line.has_input:
                input_rows.append((index, line))
            rendered = line.render(self.width, self._colors, last=last)
            if not line.truncate:
                line_width = visible_width(rendered.rstrip("\n"), self.width_policy)
                if line_width > self.width:
                    logger.warning(
                        "Rendered row %d exceeds terminal width (%d > %d)",
                        index + 1,
                        line_width,
                        self.width,
                    )
            rows.append(rendered)

        cursor = None
        if self._input_field is not None and len(input_rows) == 1:
            index, line = input_rows[0]
            cursor = (index + 1, line.cursor_column(self._input_field))
        return rows, cursor

    def _diff(self, rows: list[str]) -> list[str]:
        previous = self._previous_lines
        buf: list[str] = []
        for index, rendered in enumerate(rows):
            if index < len(previous) and previous[index] == rendered:
                continue
            buf.append(ansi.move_to(index + 1, 1) + ansi.CLEAR_EOL + rendered)
        # Rows left over from a taller previous frame
        for index in range(len(rows), len(previous)):
            buf.append(ansi.move_to(index + 1, 1) + ansi.CLEAR_EOL)
        return buf

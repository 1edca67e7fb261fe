"""
Segments — the pieces a line lane is built from.

Provides:
- PlainSegment: text, optionally styled at render time
- FillSegment: a pattern repeated to consume the rest of the lane
- WideToken: text whose column width is computed once up front
- SegmentWriter: ordered, chainable list of segments for one lane
- fill() / wide(): segment constructors for callers
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from .styles import Style
from .utils import WidthPolicy, char_width, extract_ansi_code, strip_ansi, visible_width

if TYPE_CHECKING:
    from .input_field import InputField


# ─────────────────────────────────────────────────────────────────────────────
# Segment variants
# ─────────────────────────────────────────────────────────────────────────────


class PlainSegment:
    __slots__ = ("text", "style")

    def __init__(self, text: str, style: Style | None = None) -> None:
        self.text = text
        self.style = style

    def render(self, used: int, width: int | None, colors: bool, policy: WidthPolicy) -> str:
        if self.style is None:
            return self.text
        return self.style.wrap(self.text, colors)

    def measure(self, rendered: str, policy: WidthPolicy) -> int:
        return visible_width(rendered, policy)


class FillSegment:
    """Repeats its pattern until the lane's remaining width is used up."""

    __slots__ = ("pattern", "style")

    def __init__(self, pattern: str = " ", style: Style | None = None) -> None:
        self.pattern = pattern or " "
        self.style = style

    def with_style(self, style: Style) -> "FillSegment":
        return FillSegment(self.pattern, style)

    def render(self, used: int, width: int | None, colors: bool, policy: WidthPolicy) -> str:
        if width is None:
            raise ValueError("fill requires width context")
        # Stop one column short of the edge so the terminal does not wrap
        remaining = (width - 1) - used
        if remaining <= 0:
            return ""
        tokens = self._tokens(policy)
        if not any(cw for _, cw, _ in tokens):
            return ""

        # Whole repetitions, then as much of the last one as fits. Escapes
        # in the pattern take no columns and are kept even past the cut so
        # a styled pattern still closes its style.
        pieces: list[str] = []
        filled = 0
        cut = False
        while not cut and filled < remaining:
            for token, cw, is_escape in tokens:
                if is_escape:
                    pieces.append(token)
                elif cut or filled + cw > remaining:
                    cut = True
                else:
                    pieces.append(token)
                    filled += cw
        filler = "".join(pieces)
        if self.style is None:
            return filler
        return self.style.wrap(filler, colors)

    def measure(self, rendered: str, policy: WidthPolicy) -> int:
        return visible_width(rendered, policy)

    def _tokens(self, policy: WidthPolicy) -> list[tuple[str, int, bool]]:
        """Split the pattern into (text, columns, is_escape) units."""
        tokens: list[tuple[str, int, bool]] = []
        pattern = self.pattern
        i = 0
        while i < len(pattern):
            if pattern[i] == "\x1b":
                ansi = extract_ansi_code(pattern, i)
                if ansi is None:
                    break
                tokens.append((ansi.code, 0, True))
                i += ansi.length
                continue
            tokens.append((pattern[i], char_width(ord(pattern[i]), policy), False))
            i += 1
        return tokens


class WideToken:
    """
    Text (usually an emoji) with a precomputed column width.

    A SegmentWriter re-measures a token built under a different width policy
    when it is written, so the width always matches the lane it sits in.
    """

    __slots__ = ("text", "width", "policy")

    def __init__(self, text: str, policy: WidthPolicy = WidthPolicy.EMOJI) -> None:
        self.text = text
        self.policy = policy
        self.width = sum(char_width(ord(ch), policy) for ch in text)

    def for_policy(self, policy: WidthPolicy) -> "WideToken":
        if policy is self.policy:
            return self
        return WideToken(self.text, policy)

    @property
    def char_count(self) -> int:
        return len(self.text)

    @property
    def width_delta(self) -> int:
        """Columns beyond what len() reports."""
        return self.width - len(self.text)

    def render(self, used: int, width: int | None, colors: bool, policy: WidthPolicy) -> str:
        return self.text

    def measure(self, rendered: str, policy: WidthPolicy) -> int:
        return self.width


Segment = PlainSegment | FillSegment | WideToken


def fill(pattern: str = " ", style: Style | None = None) -> FillSegment:
    return FillSegment(pattern, style)


def wide(text: str, policy: WidthPolicy = WidthPolicy.EMOJI) -> WideToken:
    return WideToken(text, policy)


# ─────────────────────────────────────────────────────────────────────────────
# SegmentWriter
# ─────────────────────────────────────────────────────────────────────────────


class SegmentWriter:
    """
    One lane (left, center or right) of a Line.

    Tracks whether any wide token was written and how many extra columns
    those tokens add, so the rendered width can be computed from the string
    length when every plain segment is single-column text.
    """

    def __init__(self, policy: WidthPolicy = WidthPolicy.EMOJI) -> None:
        self.policy = policy
        self._segments: list[Segment] = []
        self._has_wide = False
        self._width_delta = 0
        self._narrow = True
        self._has_fill = False

    @property
    def has_wide(self) -> bool:
        return self._has_wide

    @property
    def width_delta(self) -> int:
        return self._width_delta

    @property
    def is_narrow(self) -> bool:
        """True when every plain and fill segment is one column per character."""
        return self._narrow

    @property
    def segments(self) -> tuple[Segment, ...]:
        return tuple(self._segments)

    def is_empty(self) -> bool:
        return not self._segments

    def write(self, text: str | Segment | None = "") -> "SegmentWriter":
        if text is None:
            return self
        if isinstance(text, str):
            if not text:
                return self
            text = PlainSegment(text)
        elif isinstance(text, PlainSegment) and not text.text:
            return self

        if isinstance(text, WideToken):
            text = text.for_policy(self.policy)
            self._has_wide = True
            self._width_delta += text.width_delta
        elif isinstance(text, FillSegment):
            self._has_fill = True
            self._narrow = self._narrow and self._is_single_column(text.pattern)
        else:
            self._narrow = self._narrow and self._is_single_column(text.text)

        self._segments.append(text)
        return self

    __lshift__ = write

    def write_styled(self, text: str | FillSegment | None, style: Style) -> "SegmentWriter":
        if isinstance(text, FillSegment):
            return self.write(text.with_style(style))
        if not text:
            return self
        return self.write(PlainSegment(text, style))

    def write_dim(self, text: str | FillSegment | None) -> "SegmentWriter":
        return self.write_styled(text, Style.DIM)

    def write_bold(self, text: str | FillSegment | None) -> "SegmentWriter":
        return self.write_styled(text, Style.BOLD)

    def write_highlight(self, text: str | FillSegment | None) -> "SegmentWriter":
        return self.write_styled(text, Style.HIGHLIGHT)

    def write_accent(self, text: str | FillSegment | None) -> "SegmentWriter":
        return self.write_styled(text, Style.ACCENT)

    def write_matches(
        self,
        text: str,
        positions: Iterable[int],
        style: Style = Style.MATCH,
    ) -> "SegmentWriter":
        """Write text with the characters at the given indices highlighted."""
        marked = set(positions)
        if not marked:
            return self.write(text)
        run_start = 0
        for i in range(1, len(text) + 1):
            if i < len(text) and (i in marked) == (run_start in marked):
                continue
            run = text[run_start:i]
            if run_start in marked:
                self.write_styled(run, style)
            else:
                self.write(run)
            run_start = i
        return self

    def write_input(self, field: "InputField") -> "SegmentWriter":
        for segment in field.segments():
            self.write(segment)
        return self

    def render(self, width: int | None = None, colors: bool = True) -> str:
        """
        Render all segments in order.

        width is only needed when a fill segment is present; rendering a
        fill without it raises ValueError.
        """
        parts: list[str] = []
        used = 0
        for segment in self._segments:
            piece = segment.render(used, width, colors, self.policy)
            if self._has_fill:
                used += segment.measure(piece, self.policy)
            parts.append(piece)
        return "".join(parts)

    def visible_width(self, rendered: str) -> int:
        """Column width of a string rendered by this writer."""
        if not self._narrow:
            return visible_width(rendered, self.policy)
        stripped = strip_ansi(rendered) if "\x1b" in rendered else rendered
        return len(stripped) + self._width_delta

    def _is_single_column(self, text: str) -> bool:
        if text.isascii():
            return True
        stripped = strip_ansi(text)
        return visible_width(stripped, self.policy) == len(stripped)

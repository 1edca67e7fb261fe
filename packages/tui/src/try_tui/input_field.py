"""InputField — single-line text value with a cursor block."""
from __future__ import annotations

from .segments import PlainSegment
from .styles import Style
from .utils import WidthPolicy, visible_width


class InputField:
    """
    Text buffer, cursor and placeholder for the one editable field on a Screen.

    The cursor is clamped to [0, len(text)] and defaults to the end of the
    text. The caller owns editing; this only renders the current state.
    """

    __slots__ = ("placeholder", "text", "cursor")

    def __init__(self, placeholder: str = "", text: str = "", cursor: int | None = None) -> None:
        self.placeholder = placeholder
        self.text = text or ""
        if cursor is None:
            self.cursor = len(self.text)
        else:
            self.cursor = max(0, min(cursor, len(self.text)))

    def segments(self) -> list[PlainSegment]:
        if not self.text:
            return [PlainSegment(self.placeholder, Style.DIM)]

        before = self.text[:self.cursor]
        at_cursor = self.text[self.cursor] if self.cursor < len(self.text) else " "
        after = self.text[self.cursor + 1:]
        return [
            PlainSegment(before),
            PlainSegment(at_cursor, Style.CURSOR),
            PlainSegment(after),
        ]

    def render(self, colors: bool = True) -> str:
        return "".join(
            segment.render(0, None, colors, WidthPolicy.EMOJI) for segment in self.segments()
        )

    def cursor_offset(self, policy: WidthPolicy = WidthPolicy.EMOJI) -> int:
        """Columns between the start of the field and the cursor."""
        return visible_width(self.text[:self.cursor], policy)

    def __repr__(self) -> str:
        return f"InputField(text={self.text!r}, cursor={self.cursor})"

"""
Line — one terminal row with independent left, center and right lanes.

Left text starts at column 0, center text is centered without overlapping
left, and right text is right-aligned with at least one column of gap.
Overflowing right text loses its leading characters rather than its tail.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from . import ansi
from .segments import FillSegment, Segment, SegmentWriter
from .styles import Style
from .utils import WidthPolicy, truncate, truncate_from_start, visible_width

if TYPE_CHECKING:
    from .input_field import InputField

# Columns kept free between left and center text
_CENTER_MARGIN = 4


class Line:
    def __init__(
        self,
        background: Style | None = None,
        truncate: bool = True,
        policy: WidthPolicy = WidthPolicy.EMOJI,
    ) -> None:
        self.background = background
        self.truncate = truncate
        self.policy = policy
        self._left = SegmentWriter(policy)
        self._center: SegmentWriter | None = None
        self._right: SegmentWriter | None = None
        self._input_prefix_width: int | None = None

    # ─────────────────────────────────────────────────────────────────────────
    # Lanes
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def left(self) -> SegmentWriter:
        return self._left

    @property
    def center(self) -> SegmentWriter:
        if self._center is None:
            self._center = SegmentWriter(self.policy)
        return self._center

    @property
    def right(self) -> SegmentWriter:
        if self._right is None:
            self._right = SegmentWriter(self.policy)
        return self._right

    def write(self, text: str | Segment | None = "") -> SegmentWriter:
        """Append to the left lane; returns the lane for chaining."""
        return self._left.write(text)

    def write_dim(self, text: str | FillSegment | None) -> SegmentWriter:
        return self._left.write_dim(text)

    def write_bold(self, text: str | FillSegment | None) -> SegmentWriter:
        return self._left.write_bold(text)

    def write_highlight(self, text: str | FillSegment | None) -> SegmentWriter:
        return self._left.write_highlight(text)

    # ─────────────────────────────────────────────────────────────────────────
    # Input field
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def has_input(self) -> bool:
        return self._input_prefix_width is not None

    @property
    def input_prefix_width(self) -> int:
        return self._input_prefix_width or 0

    def mark_has_input(self, prefix_width: int) -> None:
        self._input_prefix_width = prefix_width

    def attach_input(self, field: "InputField") -> SegmentWriter:
        """Write the field after the current left text and remember where it starts."""
        prefix = self._left.visible_width(self._left.render())
        self._left.write_input(field)
        self.mark_has_input(prefix)
        return self._left

    def cursor_column(self, field: "InputField") -> int:
        """1-based terminal column of the field's cursor."""
        return self.input_prefix_width + field.cursor_offset(self.policy) + 1

    # ─────────────────────────────────────────────────────────────────────────
    # Rendering
    # ─────────────────────────────────────────────────────────────────────────

    def render(self, width: int, colors: bool = True, last: bool = False) -> str:
        """
        Lay out the three lanes into one row of the given width.

        The row never reaches the final column (when truncating) and ends with
        a full style reset followed by a newline, unless it is the last row.
        """
        max_content = width - 1
        context = max(width, 1)
        policy = self.policy

        left_text = self._left.render(context, colors)
        center_text = self._center.render(context, colors) if self._center else ""
        right_text = self._right.render(context, colors) if self._right else ""

        left_width = self._left.visible_width(left_text) if left_text else 0
        if self.truncate and left_width > max_content:
            left_text = truncate(left_text, max_content, policy=policy)
            left_width = visible_width(left_text, policy)

        center_width = 0
        if center_text:
            max_center = max_content - left_width - _CENTER_MARGIN
            if max_center <= 0:
                center_text = ""
            else:
                center_width = self.center.visible_width(center_text)
                if center_width > max_center:
                    center_text = truncate(center_text, max_center, policy=policy)
                    center_width = visible_width(center_text, policy)

        used = left_width + center_width + (2 if center_width > 0 else 0)
        available_for_right = max_content - used - 1

        right_width = 0
        if right_text:
            if available_for_right <= 0:
                right_text = ""
            else:
                right_width = self.right.visible_width(right_text)
                if right_width > available_for_right:
                    right_text = truncate_from_start(right_text, available_for_right, policy)
                    right_width = visible_width(right_text, policy)

        center_col = max((max_content - center_width) // 2, left_width + 1) if center_text else 0
        right_col = max_content - right_width if right_text else max_content

        parts: list[str] = []
        if self.background is not None and colors:
            parts.append(self.background.prefix)

        parts.append(left_text)
        pos = left_width

        if center_text:
            if center_col > pos:
                parts.append(" " * (center_col - pos))
            parts.append(center_text)
            pos = center_col + center_width

        if right_col > pos:
            parts.append(" " * (right_col - pos))

        if right_text:
            parts.append(right_text)
            parts.append(ansi.RESET_FG)

        parts.append(ansi.RESET)
        if not last:
            parts.append("\n")
        return "".join(parts)

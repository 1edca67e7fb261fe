"""
Terminal text metrics.

Provides:
- visible_width(): terminal column width of a string, ANSI-aware
- char_width(): per-codepoint column width under a WidthPolicy
- truncate(): cut text to a width with an overflow marker, escapes kept whole
- truncate_from_start(): keep the trailing portion of right-aligned text
- strip_ansi() / extract_ansi_code(): escape sequence helpers
"""
from __future__ import annotations

import enum
import re
from typing import NamedTuple

from wcwidth import wcwidth as _wcwidth

# ─────────────────────────────────────────────────────────────────────────────
# Width classification
# ─────────────────────────────────────────────────────────────────────────────


class WidthPolicy(enum.Enum):
    """Which codepoints occupy two terminal columns."""

    EMOJI = "emoji"            # only the common emoji blocks
    EAST_ASIAN = "east_asian"  # emoji plus East-Asian wide/fullwidth (via wcwidth)


# Variation selectors, zero-width space/joiners, combining diacritics,
# variation selectors supplement.
_ZERO_WIDTH_RANGES: tuple[tuple[int, int], ...] = (
    (0xFE00, 0xFE0F),
    (0x200B, 0x200D),
    (0x0300, 0x036F),
    (0xE0100, 0xE01EF),
)
_EMOJI_FIRST = 0x1F300
_EMOJI_LAST = 0x1FAFF

# CSI (ECMA-48): ESC [ parameter bytes, intermediate bytes, final byte
_ANSI_CSI_RE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")


def char_width(code: int, policy: WidthPolicy = WidthPolicy.EMOJI) -> int:
    """Column width of a single codepoint: 0, 1 or 2."""
    if code < 0x300:
        return 1
    for first, last in _ZERO_WIDTH_RANGES:
        if first <= code <= last:
            return 0
    if _EMOJI_FIRST <= code <= _EMOJI_LAST:
        return 2
    if policy is WidthPolicy.EAST_ASIAN and _wcwidth(chr(code)) == 2:
        return 2
    return 1


def is_zero_width(ch: str) -> bool:
    code = ord(ch)
    return any(first <= code <= last for first, last in _ZERO_WIDTH_RANGES)


def is_wide(ch: str, policy: WidthPolicy = WidthPolicy.EMOJI) -> bool:
    return char_width(ord(ch), policy) == 2


def strip_ansi(text: str) -> str:
    """Remove CSI escape sequences from *text*."""
    return _ANSI_CSI_RE.sub("", text)


def visible_width(text: str, policy: WidthPolicy = WidthPolicy.EMOJI) -> int:
    """
    Calculate the visible terminal column width of a string.

    Escape sequences take no columns, zero-width codepoints take none, emoji
    (and East-Asian wide characters under WidthPolicy.EAST_ASIAN) take two.
    Pure 7-bit ASCII without an escape byte is measured by length alone.
    """
    if not text:
        return 0

    # Fast path: plain ASCII
    if text.isascii() and "\x1b" not in text:
        return len(text)

    stripped = _ANSI_CSI_RE.sub("", text) if "\x1b" in text else text
    if stripped.isascii():
        return len(stripped)

    return sum(char_width(ord(ch), policy) for ch in stripped)


# ─────────────────────────────────────────────────────────────────────────────
# Escape sequence extraction
# ─────────────────────────────────────────────────────────────────────────────


class _AnsiExtract(NamedTuple):
    code: str
    length: int


def extract_ansi_code(s: str, pos: int) -> _AnsiExtract | None:
    """
    Extract the escape sequence starting at pos.

    Uses the same CSI grammar as strip_ansi and visible_width, so whatever
    is kept whole here is also zero width there. Returns None when pos is
    not the start of a complete CSI sequence.
    """
    if pos >= len(s) or s[pos] != "\x1b":
        return None
    m = _ANSI_CSI_RE.match(s, pos)
    if m is None:
        return None
    return _AnsiExtract(m.group(), m.end() - pos)


# ─────────────────────────────────────────────────────────────────────────────
# Truncation
# ─────────────────────────────────────────────────────────────────────────────


def truncate(
    text: str,
    max_width: int,
    overflow: str = "…",
    policy: WidthPolicy = WidthPolicy.EMOJI,
) -> str:
    """
    Truncate text to max_width columns and append the overflow marker.

    Text that already fits is returned unchanged. Escape sequences are copied
    whole and never count toward width; an unterminated one is dropped. The
    marker is dropped when it cannot fit on its own.
    """
    if visible_width(text, policy) <= max_width:
        return text
    if max_width <= 0:
        return ""

    overflow_width = visible_width(overflow, policy)
    if overflow_width > max_width:
        overflow = ""
        overflow_width = 0
    target = max(max_width - overflow_width, 0)

    kept: list[str] = []
    trailing: list[str] = []
    width = 0
    cut = False
    i = 0
    while i < len(text):
        if text[i] == "\x1b":
            ansi = extract_ansi_code(text, i)
            if ansi is None:
                break
            (trailing if cut else kept).append(ansi.code)
            i += ansi.length
            continue

        if not cut:
            cw = char_width(ord(text[i]), policy)
            if width + cw > target:
                cut = True
            else:
                kept.append(text[i])
                width += cw
        i += 1

    return "".join(kept).rstrip() + "".join(trailing) + overflow


def truncate_from_start(
    text: str,
    max_width: int,
    policy: WidthPolicy = WidthPolicy.EMOJI,
) -> str:
    """
    Truncate from the left, keeping the trailing max_width columns.

    Escape sequences that precede the first visible character are kept in
    front of the result so the tail keeps its styling. No marker is added.
    """
    total = visible_width(text, policy)
    if total <= max_width:
        return text
    if max_width <= 0:
        return ""

    leading: list[str] = []
    i = 0
    while i < len(text) and text[i] == "\x1b":
        ansi = extract_ansi_code(text, i)
        if ansi is None:
            return "".join(leading)
        leading.append(ansi.code)
        i += ansi.length

    to_skip = total - max_width
    skipped = 0
    kept: list[str] = []
    started = False
    while i < len(text):
        if text[i] == "\x1b":
            ansi = extract_ansi_code(text, i)
            if ansi is None:
                break
            kept.append(ansi.code)
            i += ansi.length
            continue

        cw = char_width(ord(text[i]), policy)
        if skipped < to_skip:
            skipped += cw
        elif cw == 0 and not started:
            # Zero-width mark belonging to a skipped character
            pass
        else:
            kept.append(text[i])
            started = True
        i += 1

    return "".join(leading) + "".join(kept)

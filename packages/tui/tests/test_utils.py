"""Tests for try_tui.utils — width math and ANSI-aware truncation"""
import pytest

from try_tui.utils import (
    WidthPolicy,
    char_width,
    extract_ansi_code,
    is_wide,
    is_zero_width,
    strip_ansi,
    truncate,
    truncate_from_start,
    visible_width,
)

BOLD = "\x1b[1m"
RESET_INTENSITY = "\x1b[22m"


class TestVisibleWidth:
    def test_ascii(self):
        assert visible_width("hello") == 5

    def test_empty(self):
        assert visible_width("") == 0

    def test_ansi_stripped(self):
        assert visible_width("\x1b[31mhello\x1b[0m") == 5

    def test_emoji_double_width(self):
        assert visible_width("🔥") == 2
        assert visible_width("a🔥b") == 4

    def test_combining_mark_zero_width(self):
        assert visible_width("e\u0301") == 1

    def test_variation_selector_zero_width(self):
        assert visible_width("x\ufe0f") == 1

    def test_cjk_single_under_emoji_policy(self):
        assert visible_width("中文") == 2

    def test_cjk_double_under_east_asian_policy(self):
        assert visible_width("中文", WidthPolicy.EAST_ASIAN) == 4

    def test_styled_emoji(self):
        assert visible_width("\x1b[1m🔥\x1b[22m ok") == 5

    def test_private_mode_sequence_zero_width(self):
        assert visible_width("\x1b[?25hx") == 1

    def test_colon_sgr_zero_width(self):
        assert visible_width("\x1b[38:5:208mabc") == 3


class TestCharWidth:
    def test_ascii(self):
        assert char_width(ord("a")) == 1

    def test_zero_width_ranges(self):
        for code in (0xFE0F, 0x200B, 0x200D, 0x0301, 0xE0100):
            assert char_width(code) == 0

    def test_emoji_range(self):
        assert char_width(0x1F525) == 2
        assert char_width(0x1F300) == 2
        assert char_width(0x1FAFF) == 2

    def test_helpers(self):
        assert is_zero_width("\u200d")
        assert not is_zero_width("a")
        assert is_wide("🔥")
        assert not is_wide("a")
        assert is_wide("中", WidthPolicy.EAST_ASIAN)


class TestStripAnsi:
    def test_removes_sequences(self):
        assert strip_ansi("\x1b[1;33mhi\x1b[0m there") == "hi there"

    def test_plain_unchanged(self):
        assert strip_ansi("plain") == "plain"


class TestExtractAnsiCode:
    def test_sgr(self):
        result = extract_ansi_code("\x1b[31mx", 0)
        assert result is not None
        assert result.code == "\x1b[31m"
        assert result.length == 5

    def test_not_at_escape(self):
        assert extract_ansi_code("abc", 1) is None

    def test_unterminated(self):
        assert extract_ansi_code("\x1b[31", 0) is None

    @pytest.mark.parametrize("code", ["\x1b[?25h", "\x1b[38:5:208m", "\x1b[2K", "\x1b[0m"])
    def test_agrees_with_strip_ansi(self, code):
        result = extract_ansi_code(code + "x", 0)
        assert result is not None
        assert result.code == code
        assert strip_ansi(code + "x") == "x"


class TestTruncate:
    def test_short_string_unchanged(self):
        assert truncate("hello", 10) == "hello"

    def test_exactly_fits(self):
        assert truncate("hello", 5) == "hello"

    def test_adds_overflow_marker(self):
        assert truncate("hello world", 8) == "hello w…"

    def test_trims_trailing_space_before_marker(self):
        assert truncate("hello world", 7) == "hello…"

    def test_zero_width(self):
        assert truncate("hello", 0) == ""

    def test_negative_width(self):
        assert truncate("hello", -3) == ""

    def test_empty_string(self):
        assert truncate("", 5) == ""
        assert truncate("", 0) == ""

    def test_marker_dropped_when_it_cannot_fit(self):
        assert truncate("hello", 1, overflow="...") == "h"

    def test_custom_overflow(self):
        assert truncate("hello world", 8, overflow="...") == "hello..."

    def test_keeps_bold_escape(self):
        text = f"{BOLD}a very long bold title{RESET_INTENSITY}"
        result = truncate(text, 6)
        assert BOLD in result
        assert result.endswith("…")
        assert visible_width(result) == 6

    def test_keeps_closing_escape_after_cut(self):
        result = truncate(f"{BOLD}abcdefgh{RESET_INTENSITY}", 4)
        assert RESET_INTENSITY in result

    def test_unterminated_escape_never_emitted(self):
        result = truncate("abcdef\x1b[3", 4)
        assert "\x1b" not in result
        assert result == "abc…"

    def test_colon_sgr_kept_whole(self):
        assert truncate("\x1b[38:5:208mabcdefgh", 4) == "\x1b[38:5:208mabc…"

    def test_private_mode_sequence_after_cut(self):
        assert truncate("abcdefgh\x1b[?25h", 4) == "abc\x1b[?25h…"

    def test_wide_characters(self):
        assert truncate("🔥🔥🔥", 3) == "🔥…"
        assert truncate("🔥🔥🔥", 2) == "…"

    @pytest.mark.parametrize(
        "text",
        [
            "hello world",
            "🔥 fire 🔥 fire",
            "\x1b[1mbold\x1b[22m text",
            "a\u0301b\u0301c\u0301d",
            "\x1b[38:5:208mabcdefgh",
            "abcdefgh\x1b[?25h",
        ],
    )
    @pytest.mark.parametrize("width", [0, 1, 2, 3, 5, 8])
    def test_result_never_exceeds_width(self, text, width):
        assert visible_width(truncate(text, width)) <= width


class TestTruncateFromStart:
    def test_fits_unchanged(self):
        assert truncate_from_start("abc", 5) == "abc"

    def test_keeps_tail(self):
        assert truncate_from_start("hello world", 5) == "world"

    def test_zero_width(self):
        assert truncate_from_start("abc", 0) == ""

    def test_leading_escapes_preserved(self):
        text = "\x1b[2mhello world\x1b[0m"
        assert truncate_from_start(text, 5) == "\x1b[2mworld\x1b[0m"

    def test_private_mode_sequence_counts_zero(self):
        result = truncate_from_start("\x1b[?25hhello world", 5)
        assert result == "\x1b[?25hworld"
        assert visible_width(result) == 5

    def test_skips_wide_character_whole(self):
        assert truncate_from_start("🔥abc", 3) == "abc"

    def test_width_bound_with_wide_characters(self):
        result = truncate_from_start("a🔥bc", 3)
        assert visible_width(result) <= 3
        assert result.endswith("bc")

    def test_no_marker(self):
        assert "…" not in truncate_from_start("~/src/tries/2024-project", 10)

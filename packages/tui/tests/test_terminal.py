"""Tests for try_tui.terminal — size queries and screen-mode control"""
import io
import os

import pytest

from try_tui import ansi
from try_tui.config import RenderSettings
from try_tui.terminal import Terminal, get_terminal_size


class FakeTTY(io.StringIO):
    def fileno(self):
        return 99


@pytest.fixture
def no_terminal(monkeypatch):
    def _raise(fd=None):
        raise OSError("not a terminal")

    monkeypatch.setattr(os, "get_terminal_size", _raise)


@pytest.fixture
def terminal_120x50(monkeypatch):
    monkeypatch.setattr(os, "get_terminal_size", lambda fd=None: os.terminal_size((120, 50)))


class TestGetTerminalSize:
    def test_overrides_win(self, terminal_120x50):
        settings = RenderSettings(width_override=100, height_override=40)
        assert get_terminal_size(FakeTTY(), settings) == (40, 100)

    def test_queries_stream(self, terminal_120x50):
        assert get_terminal_size(FakeTTY(), RenderSettings()) == (50, 120)

    def test_partial_override(self, terminal_120x50):
        settings = RenderSettings(width_override=100)
        assert get_terminal_size(FakeTTY(), settings) == (50, 100)

    def test_fallback_when_not_a_terminal(self, no_terminal):
        assert get_terminal_size(io.StringIO(), RenderSettings()) == (24, 80)

    def test_fallback_keeps_partial_override(self, no_terminal):
        settings = RenderSettings(height_override=10)
        assert get_terminal_size(io.StringIO(), settings) == (10, 80)

    def test_zero_size_ignored(self, monkeypatch):
        monkeypatch.setattr(os, "get_terminal_size", lambda fd=None: os.terminal_size((0, 0)))
        assert get_terminal_size(FakeTTY(), RenderSettings()) == (24, 80)

    def test_env_overrides(self, monkeypatch, no_terminal):
        monkeypatch.setenv("TRY_WIDTH", "132")
        monkeypatch.setenv("TRY_HEIGHT", "43")
        assert get_terminal_size(io.StringIO()) == (43, 132)


class TestTerminal:
    def test_write_and_cursor(self):
        stream = io.StringIO()
        terminal = Terminal(stream, RenderSettings())
        terminal.write("x")
        terminal.hide_cursor()
        terminal.show_cursor()
        assert stream.getvalue() == "x" + ansi.HIDE + ansi.SHOW

    def test_size(self, terminal_120x50):
        assert Terminal(FakeTTY(), RenderSettings()).size() == (50, 120)

    def test_session_restores_screen(self):
        stream = io.StringIO()
        terminal = Terminal(stream, RenderSettings())
        with terminal.session() as active:
            active.write("frame")
        output = stream.getvalue()
        assert output.startswith(ansi.ALT_SCREEN_ON + ansi.HIDE)
        assert "frame" in output
        assert output.endswith(ansi.RESET + ansi.SHOW + ansi.ALT_SCREEN_OFF)

    def test_session_restores_on_error(self):
        stream = io.StringIO()
        terminal = Terminal(stream, RenderSettings())
        with pytest.raises(RuntimeError):
            with terminal.session():
                raise RuntimeError("boom")
        assert stream.getvalue().endswith(ansi.ALT_SCREEN_OFF)

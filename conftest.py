"""
Root conftest.py — keeps render settings hermetic across test runs.

The renderer reads TRY_WIDTH / TRY_HEIGHT / TRY_WIDE_CHARS / NO_COLORS /
NO_COLOR from the environment; a developer shell that sets any of them would
otherwise change what every test sees.
"""
from __future__ import annotations

import pytest

_RENDER_ENV_VARS = ("TRY_WIDTH", "TRY_HEIGHT", "TRY_WIDE_CHARS", "NO_COLORS", "NO_COLOR")


@pytest.fixture(autouse=True)
def _clean_render_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _RENDER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)

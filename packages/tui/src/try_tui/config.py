"""
Render configuration read from the environment.

Provides:
- APP_NAME / ENV_* constants naming the recognised variables
- RenderSettings: resolved colors flag, size overrides and wide-char policy
- load_render_settings(): build RenderSettings from os.environ (or a mapping)
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from .utils import WidthPolicy

APP_NAME: str = "try"

ENV_WIDTH: str = f"{APP_NAME.upper()}_WIDTH"
ENV_HEIGHT: str = f"{APP_NAME.upper()}_HEIGHT"
ENV_WIDE_CHARS: str = f"{APP_NAME.upper()}_WIDE_CHARS"
ENV_NO_COLORS: str = "NO_COLORS"
ENV_NO_COLOR: str = "NO_COLOR"  # https://no-color.org/

DEFAULT_ROWS: int = 24
DEFAULT_COLUMNS: int = 80


@dataclass
class RenderSettings:
    colors: bool = True
    width_override: int | None = None
    height_override: int | None = None
    width_policy: WidthPolicy = WidthPolicy.EMOJI


def _positive_int(raw: str | None) -> int | None:
    if not raw:
        return None
    try:
        value = int(raw.strip())
    except ValueError:
        return None
    return value if value > 0 else None


def _parse_width_policy(raw: str | None) -> WidthPolicy:
    if raw and raw.strip().lower().replace("-", "_") == WidthPolicy.EAST_ASIAN.value:
        return WidthPolicy.EAST_ASIAN
    return WidthPolicy.EMOJI


def load_render_settings(environ: Mapping[str, str] | None = None) -> RenderSettings:
    """
    Resolve render settings from the environment.

    NO_COLORS (or the NO_COLOR standard) disables styling, TRY_WIDTH and
    TRY_HEIGHT pin the terminal size when set to positive integers, and
    TRY_WIDE_CHARS=east_asian counts East-Asian wide characters as two
    columns instead of only emoji.
    """
    env = os.environ if environ is None else environ
    no_colors = bool(env.get(ENV_NO_COLORS, "")) or bool(env.get(ENV_NO_COLOR, ""))
    return RenderSettings(
        colors=not no_colors,
        width_override=_positive_int(env.get(ENV_WIDTH)),
        height_override=_positive_int(env.get(ENV_HEIGHT)),
        width_policy=_parse_width_policy(env.get(ENV_WIDE_CHARS)),
    )

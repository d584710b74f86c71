"""Theme color resolution."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_BACKGROUND = "#f0f0f0"
DEFAULT_PRIMARY = "#1a1a1a"
DEFAULT_ACCENT = "#4f6ef7"

_CSS_COLOR_RE = re.compile(
    r"^(?:"
    r"#[0-9a-fA-F]{3,8}"
    r"|[a-zA-Z]{3,30}"
    r"|(?:rgb|rgba|hsl|hsla)\(\s*[0-9.,%\s]+\)"
    r")$"
)


@dataclass(frozen=True)
class Theme:
    """Three color tokens applied uniformly across block renderers."""

    background: str = DEFAULT_BACKGROUND
    primary: str = DEFAULT_PRIMARY
    accent: str = DEFAULT_ACCENT


def is_safe_color(value: Any) -> bool:
    """True when ``value`` can be embedded in a style attribute as-is."""
    return isinstance(value, str) and bool(_CSS_COLOR_RE.match(value.strip()))


def _token(theme: Mapping[str, Any], name: str, default: str) -> str:
    if name not in theme:
        return default
    value = theme[name]
    if not is_safe_color(value):
        logger.warning(
            "Ignoring unsafe theme color",
            extra={"token": name, "value": str(value)[:64]},
        )
        return default
    return value.strip()


def resolve_theme(theme: Mapping[str, Any] | None) -> Theme:
    """Apply per-token overrides on top of the default palette.

    Unknown tokens are ignored and each known token overrides only itself.
    """
    if not isinstance(theme, Mapping):
        return Theme()
    return Theme(
        background=_token(theme, "background", DEFAULT_BACKGROUND),
        primary=_token(theme, "primary", DEFAULT_PRIMARY),
        accent=_token(theme, "accent", DEFAULT_ACCENT),
    )

"""Render styles, kept apart from the state machine."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.errors import StyleSyntaxError
from rich.style import Style

if TYPE_CHECKING:
    from tickbox.config import Config

logger = logging.getLogger("tickbox.theme")


@dataclass(frozen=True)
class Theme:
    """Styles applied to rendered spans."""

    selected: Style
    muted: Style
    help: Style

    @classmethod
    def from_config(cls, config: Config) -> Theme:
        """Build a theme from config, falling back per slot on bad styles."""
        return cls(
            selected=_parse_style(config.selected_style, DEFAULT_THEME.selected, "selected_style"),
            muted=_parse_style(config.muted_style, DEFAULT_THEME.muted, "muted_style"),
            help=_parse_style(config.help_style, DEFAULT_THEME.help, "help_style"),
        )


def _parse_style(value: str, fallback: Style, name: str) -> Style:
    try:
        return Style.parse(str(value))
    except StyleSyntaxError:
        logger.warning("Invalid %s %r, using default", name, value)
        return fallback


DEFAULT_THEME = Theme(
    selected=Style.parse("bold #32CD32"),
    muted=Style.parse("#696969"),
    help=Style.parse("#626262"),
)

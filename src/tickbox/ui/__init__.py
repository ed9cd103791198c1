"""UI module."""

from .app import DEFAULT_CHOICES, run_selector
from .keys import key_name
from .render import render
from .theme import DEFAULT_THEME, Theme

__all__ = [
    "DEFAULT_CHOICES",
    "DEFAULT_THEME",
    "Theme",
    "key_name",
    "render",
    "run_selector",
]

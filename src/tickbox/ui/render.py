"""Render a selector state as a Rich text frame.

Styles are attached as spans only, so ``Text.plain`` always holds the exact
characters of the frame.
"""

from rich.text import Text

from tickbox.models import KeyMap
from tickbox.selector import SelectorState

from .theme import DEFAULT_THEME, Theme

HEADER = "What should we buy at the market?"
SHORT_HELP_SEPARATOR = " • "
FULL_HELP_SEPARATOR = "    "
MIN_HELP_HEIGHT = 2


def short_help_view(keys: KeyMap) -> str:
    return SHORT_HELP_SEPARATOR.join(b.label for b in keys.short_help())


def full_help_view(keys: KeyMap) -> str:
    """Lay out help columns side by side, one binding per row."""
    columns = [[b.label for b in group] for group in keys.full_help()]
    widths = [max((len(label) for label in col), default=0) for col in columns]
    rows = max((len(col) for col in columns), default=0)

    lines: list[str] = []
    for r in range(rows):
        cells = [
            (col[r] if r < len(col) else "").ljust(width) for col, width in zip(columns, widths)
        ]
        lines.append(FULL_HELP_SEPARATOR.join(cells).rstrip())
    return "\n".join(lines)


def help_view(state: SelectorState) -> str:
    if state.help_visible:
        return full_help_view(state.keys)
    return short_help_view(state.keys)


def help_padding(help_text: str) -> int:
    """Blank lines needed to give the help region its minimum height."""
    line_count = len(help_text.splitlines()) if help_text else 0
    return max(0, MIN_HELP_HEIGHT - line_count)


def render(state: SelectorState, theme: Theme = DEFAULT_THEME) -> Text:
    """Build the full frame for a state."""
    text = Text()
    text.append(f"{HEADER}\n\n")

    for i, choice in enumerate(state.choices):
        cursor = ">" if i == state.cursor else " "
        if i in state.selected:
            text.append(f"{cursor} [x] ")
            text.append(choice, style=theme.selected)
        else:
            text.append(f"{cursor} [ ] ")
            text.append(choice, style=theme.muted)
        text.append("\n")

    help_text = help_view(state)
    text.append("\n" * help_padding(help_text))
    text.append(help_text, style=theme.help)
    return text

"""Interactive checklist loop."""

import logging
from collections.abc import Callable, Sequence

import readchar
from rich.console import Console
from rich.live import Live

from tickbox.selector import Selector, SelectorState, resolve_action

from .keys import key_name
from .render import render
from .theme import DEFAULT_THEME, Theme

# UI Constants
LIVE_REFRESH_RATE = 20

DEFAULT_CHOICES: tuple[str, ...] = ("Buy carrots", "Buy celery", "Buy kohlrabi", "Buy milk")

logger = logging.getLogger("tickbox.app")


def run_selector(
    choices: Sequence[str] = DEFAULT_CHOICES,
    console: Console | None = None,
    theme: Theme | None = None,
    read_key: Callable[[], str] = readchar.readkey,
    help_visible: bool = False,
) -> SelectorState:
    """Run the checklist until the user quits. Returns the final state.

    Terminal errors (OSError, EOFError) from the key reader propagate to the
    caller; the loop never resumes after one.
    """
    console = console or Console()
    theme = theme or DEFAULT_THEME
    selector = Selector.create(choices, help_visible=help_visible)
    logger.debug("Starting selector with %d choices", len(selector.state.choices))

    with Live(
        render(selector.state, theme),
        console=console,
        refresh_per_second=LIVE_REFRESH_RATE,
        transient=False,
    ) as live:
        while not selector.terminated:
            try:
                key = key_name(read_key())
            except KeyboardInterrupt:
                key = "ctrl+c"
            except (OSError, EOFError):
                logger.exception("Failed to read key")
                raise

            logger.debug("key=%r action=%s", key, resolve_action(selector.state.keys, key))
            selector.feed(key)
            live.update(render(selector.state, theme))

    logger.debug(
        "Selector finished: cursor=%d checked=%s",
        selector.state.cursor,
        selector.state.selected_choices(),
    )
    return selector.state

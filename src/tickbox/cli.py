"""CLI entry point."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from tickbox.config import Config

app = typer.Typer(
    name="tickbox",
    help="Pick items from a checklist in the terminal.",
    add_completion=False,
)
console = Console()

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _get_config() -> Config:
    """Lazy import and load config."""
    from tickbox.config import Config

    return Config.load()


def configure_logging(config: Config) -> logging.Handler | None:
    """Send tickbox logs to the configured file. Returns the handler, if any."""
    if not config.log_file:
        return None

    handler = logging.FileHandler(config.log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger("tickbox")
    level = logging.getLevelName(str(config.log_level).upper())
    logger.setLevel(level if isinstance(level, int) else logging.WARNING)
    logger.addHandler(handler)
    return handler


def _version_callback(value: bool) -> None:
    if value:
        from tickbox import __version__

        console.print(f"tickbox {__version__}")
        raise typer.Exit()


@app.command()
def main(
    help_visible: Annotated[
        bool, typer.Option("--help-visible", help="Start with the full key help shown")
    ] = False,
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version"),
    ] = False,
) -> None:
    """Run the interactive checklist."""
    from tickbox.ui.app import run_selector
    from tickbox.ui.theme import Theme

    cfg = _get_config()
    handler = None
    try:
        handler = configure_logging(cfg)
        run_selector(theme=Theme.from_config(cfg), help_visible=help_visible)
    except (OSError, EOFError) as e:
        console.print(f"[red]Alas, there's been an error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    finally:
        if handler is not None:
            logging.getLogger("tickbox").removeHandler(handler)
            handler.close()

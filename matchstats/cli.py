"""Cli entrypoint to update the match statistics.

Provides a command line interface that demonstrates the statistics registry and its listeners.
See `matchstats --help` for further options.
"""
import logging
from pathlib import Path
from typing import Annotated, Optional
from importlib.metadata import version as pkg_version

from typer import Typer, Argument, Option, Exit
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.theme import Theme

from matchstats.config import MatchStatsConfig
from matchstats.listeners import ConsoleListener
from matchstats.registry import ListenerFailure, StatisticsRegistry
from matchstats.util import ConfigError, InvalidArgument


__all__ = ("app",)

help_message = """The matchstats command line program.

Keeps track of the goals and cards of a football match and notifies every registered listener when they change.
"""
app = Typer(help=help_message)
theme = Theme(
    {
        "success": "green",
        "warning": "orange3",
        "error": "red",
        "heading": "blue",
    }
)
console = Console(theme=theme)
logger = logging.getLogger("matchstats")

ConfigOption = Annotated[
    Optional[Path],
    Option("--config", exists=True, help="Path to a config file or a directory containing a 'matchstats.toml'."),
]


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"matchstats {pkg_version('matchstats')}")
        raise Exit


def _setup_logging(verbose: bool) -> None:
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@app.callback()
def main(
    verbose: Annotated[bool, Option("--verbose", "-v", help="Log debug messages to stderr.")] = False,
    version: Annotated[
        bool, Option("--version", callback=_version_callback, is_eager=True, help="Show the version and exit.")
    ] = False,
) -> None:
    """Sets up the shared options of all commands."""
    _setup_logging(verbose)


def _registry(config_path: Path | None) -> StatisticsRegistry:
    """Fetches the shared registry and applies the config found at the given path."""
    registry = StatisticsRegistry.get_instance()
    if config_path is None:
        registry.configure(MatchStatsConfig())
        return registry
    try:
        registry.configure(MatchStatsConfig.from_file(config_path))
    except ConfigError as e:
        console.print(f"[error]{e.message}[/]", escape(str(e.detail)), highlight=False)
        raise Exit(code=1)
    return registry


def _report(failures: list[ListenerFailure]) -> None:
    for failure in failures:
        console.print(f"[warning]Listener '{failure.listener}' failed:[/] {failure.error.type}: {escape(failure.error.message)}")


@app.command()
def demo(config: ConfigOption = None) -> None:
    """Registers two listeners, updates the statistics, unregisters one of them and updates again."""
    registry = _registry(config)
    central = ConsoleListener("Central", console)
    estadio = ConsoleListener("Estadio", console)
    registry.register(central)
    registry.register(estadio)
    try:
        _report(registry.update(2, 3))
        registry.unregister(central)
        _report(registry.update(3, 4))
    finally:
        registry.unregister(central)
        registry.unregister(estadio)


@app.command()
def update(
    goals: Annotated[int, Argument(help="The new number of goals.")],
    cards: Annotated[int, Argument(help="The new number of cards.")],
    listener: Annotated[
        Optional[list[str]], Option("--listener", "-l", help="Name of a listener that prints the update.")
    ] = None,
    config: ConfigOption = None,
) -> None:
    """Sets the statistics to the given values and notifies the listeners."""
    registry = _registry(config)
    listeners = [ConsoleListener(name, console) for name in listener or []]
    for obj in listeners:
        registry.register(obj)
    try:
        _report(registry.update(goals, cards))
    except InvalidArgument as e:
        console.print(f"[error]{e.message}[/]", escape(str(e.detail)), highlight=False)
        raise Exit(code=1)
    finally:
        for obj in listeners:
            registry.unregister(obj)
    console.print(f"[success]Statistics set to {registry.goals} goals and {registry.cards} cards.")

"""Concrete listeners that can be registered with the statistics registry."""
from __future__ import annotations
import logging
from typing import Callable

from rich.console import Console

from matchstats.events import Listener

logger = logging.getLogger("matchstats.listeners")


class ConsoleListener(Listener):
    """Prints every message it receives to the console."""

    def __init__(self, name: str, console: Console | None = None) -> None:
        super().__init__(name)
        self.console = console if console is not None else Console()

    def receive(self, message: str) -> None:
        self.console.print(f"{self.name} received: {message}", markup=False, highlight=False)


class RecordingListener(Listener):
    """Keeps every message it receives."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.messages: list[str] = []

    def receive(self, message: str) -> None:
        self.messages.append(message)


class LoggingListener(Listener):
    """Forwards every message to the `matchstats.listeners` logger."""

    def __init__(self, name: str, level: int = logging.INFO) -> None:
        super().__init__(name)
        self.level = level

    def receive(self, message: str) -> None:
        logger.log(self.level, f"{self.name}: {message}")


class CallbackListener(Listener):
    """Turns a plain function into a listener."""

    def __init__(self, name: str, callback: Callable[[str], None]) -> None:
        super().__init__(name)
        self.callback = callback

    def receive(self, message: str) -> None:
        self.callback(message)

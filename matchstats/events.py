"""Basic event handling module."""
from __future__ import annotations
from abc import ABC, abstractmethod


class Listener(ABC):
    """Class that can receive notifications from a :class:`Publisher`."""

    name: str
    """Label identifying this listener in messages and logs."""

    def __init__(self, name: str) -> None:
        super().__init__()
        self.name = name

    @abstractmethod
    def receive(self, message: str) -> None:
        """Receives a notification message."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"


class Publisher:
    """Class that keeps an ordered list of listeners and can send messages to them.

    Listeners are compared by identity, the same listener may be registered more than once and will then
    receive every message once per registration.
    """

    def __init__(self) -> None:
        super().__init__()
        self._subscribers: list[Listener] = []

    @property
    def subscribers(self) -> tuple[Listener, ...]:
        """The currently registered listeners, in registration order."""
        return tuple(self._subscribers)

    def __len__(self) -> int:
        return len(self._subscribers)

    def register(self, listener: Listener) -> None:
        """Registers the listener, making it receive any future messages."""
        self._subscribers.append(listener)

    def unregister(self, listener: Listener) -> None:
        """Unregisters every occurrence of the listener. Does nothing if it isn't registered."""
        self._subscribers = [sub for sub in self._subscribers if sub is not listener]

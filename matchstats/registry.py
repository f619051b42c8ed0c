"""The statistics registry, the single shared holder of the current match statistics."""
from __future__ import annotations
import logging
from threading import Lock, RLock
from typing import Annotated, ClassVar

from pydantic import ConfigDict, Field, ValidationError

from matchstats.config import MatchStatsConfig
from matchstats.events import Listener, Publisher
from matchstats.util import BaseModel, ExceptionInfo, InvalidArgument

logger = logging.getLogger("matchstats.registry")


Count = Annotated[int, Field(strict=True, ge=0)]


class Statistics(BaseModel):
    """Snapshot of the statistics of a match."""

    model_config = ConfigDict(frozen=True)

    goals: Count = 0
    cards: Count = 0


class ListenerFailure(BaseModel):
    """Records an exception a listener raised while being notified."""

    listener: str
    error: ExceptionInfo


class StatisticsRegistry(Publisher):
    """Holds the current statistics and notifies its listeners whenever they are updated.

    Use :meth:`get_instance` to access the process wide registry. Creating an instance directly yields an
    independent registry that shares nothing with the global one, which is what tests and callers that want to
    inject their own registry should do.
    """

    _instance: ClassVar[StatisticsRegistry | None] = None
    _instance_lock: ClassVar[Lock] = Lock()

    def __init__(self, config: MatchStatsConfig | None = None) -> None:
        super().__init__()
        self.config = config if config is not None else MatchStatsConfig()
        self._statistics = Statistics()
        self._lock = RLock()

    @classmethod
    def get_instance(cls) -> StatisticsRegistry:
        """Returns the shared registry, creating it on the first call."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    logger.debug("Creating the shared statistics registry.")
                    cls._instance = cls()
        return cls._instance

    @property
    def statistics(self) -> Statistics:
        """The current statistics."""
        return self._statistics

    @property
    def goals(self) -> int:
        return self._statistics.goals

    @property
    def cards(self) -> int:
        return self._statistics.cards

    def configure(self, config: MatchStatsConfig) -> None:
        """Replaces the settings used for future notifications."""
        with self._lock:
            self.config = config

    def register(self, listener: Listener) -> None:
        """Registers the listener, duplicate registrations lead to duplicate notifications."""
        with self._lock:
            super().register(listener)
        logger.debug(f"Registered listener '{listener.name}'.")

    def unregister(self, listener: Listener) -> None:
        """Unregisters all occurrences of the listener, does nothing if it isn't registered."""
        with self._lock:
            super().unregister(listener)
        logger.debug(f"Unregistered listener '{listener.name}'.")

    def format_message(self, statistics: Statistics) -> str:
        """Builds the notification message for the given statistics."""
        return self.config.message_template.format(goals=statistics.goals, cards=statistics.cards)

    def update(self, goals: int, cards: int) -> list[ListenerFailure]:
        """Sets the statistics and notifies every registered listener of the change.

        Args:
            goals: The new number of goals.
            cards: The new number of cards.

        Raises:
            InvalidArgument: If either value isn't a non-negative integer. The statistics stay unchanged in that case.

        Returns:
            The exceptions raised by listeners while they were being notified.
        """
        try:
            statistics = Statistics(goals=goals, cards=cards)
        except ValidationError as e:
            raise InvalidArgument(
                "Goals and cards must be non-negative integers.", detail=f"got goals={goals!r}, cards={cards!r}"
            ) from e

        with self._lock:
            message = self.format_message(statistics)
            self._statistics = statistics
            logger.debug(f"Statistics updated to {goals} goals and {cards} cards.")
            return self.notify_all(message)

    def notify_all(self, message: str) -> list[ListenerFailure]:
        """Sends the message to every registered listener, in registration order.

        A listener raising an exception does not prevent the remaining listeners from being notified, unless the
        config's `fail_fast` option is set. In that case the exception is propagated immediately.

        Returns:
            The exceptions raised by listeners.
        """
        failures: list[ListenerFailure] = []
        with self._lock:
            for listener in self.subscribers:
                try:
                    listener.receive(message)
                except Exception as e:
                    logger.exception(f"Listener '{listener.name}' failed to receive '{message}'.")
                    if self.config.fail_fast:
                        raise
                    failures.append(ListenerFailure(listener=listener.name, error=ExceptionInfo.from_exception(e)))
        return failures

    def reset(self) -> None:
        """Sets the statistics back to zero without notifying any listeners."""
        with self._lock:
            self._statistics = Statistics()

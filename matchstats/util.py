"""Module containing the shared model base class and the package's exceptions."""
from traceback import format_exception
from typing import LiteralString, Self

from pydantic import ConfigDict, BaseModel as _PydanticModel


class BaseModel(_PydanticModel):
    """Base class of the package's models, unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid")


class MatchStatsBaseException(Exception):
    """Base exception class for errors used by the matchstats package."""

    def __init__(self, message: LiteralString, *, detail: str | None = None) -> None:
        """Base exception class for errors used by the matchstats package.

        Args:
            message: Simple error message that can always be displayed.
            detail: More detailed error message, e.g. the offending values.
        """
        self.message = message
        self.detail = detail
        super().__init__()

    def __str__(self) -> str:
        if self.detail is None:
            return self.message
        return f"{self.message} {self.detail}"


class InvalidArgument(MatchStatsBaseException):
    """Indicates that the statistics passed to an update are invalid."""


class ConfigError(MatchStatsBaseException):
    """Indicates that a config file could not be loaded."""


class ExceptionInfo(BaseModel):
    """Summary of an exception a listener raised."""

    type: str
    message: str
    detail: str | None = None
    """The package's own error detail, or the formatted traceback of any other exception."""

    @classmethod
    def from_exception(cls, error: Exception) -> Self:
        if isinstance(error, MatchStatsBaseException):
            return cls(type=type(error).__name__, message=error.message, detail=error.detail)
        return cls(type=type(error).__name__, message=str(error), detail="".join(format_exception(error)))

"""Creates the config objects."""
from pathlib import Path
from string import Formatter
import tomllib
from typing import Annotated, Any, ClassVar, Self

from pydantic import AfterValidator, ValidationError

from matchstats.util import BaseModel, ConfigError


def _check_template(template: str) -> str:
    try:
        fields = {name for _, name, _, _ in Formatter().parse(template) if name is not None}
    except ValueError as e:
        raise ValueError(f"'{template}' is not a valid format string: {e}")
    if fields != {"goals", "cards"}:
        raise ValueError("The message template must use exactly the fields '{goals}' and '{cards}'.")
    try:
        template.format(goals=0, cards=0)
    except (ValueError, TypeError, KeyError) as e:
        raise ValueError(f"'{template}' cannot format integer statistics: {e}")
    return template


MessageTemplate = Annotated[str, AfterValidator(_check_template)]


class MatchStatsConfig(BaseModel):
    """Settings controlling how the statistics registry notifies its listeners."""

    message_template: MessageTemplate = "Goals: {goals}, Cards: {cards}"
    """Format string used to build the notification message."""

    fail_fast: bool = False
    """Whether an exception raised by a listener aborts the notification of the remaining ones."""

    default_file: ClassVar[str] = "matchstats.toml"

    @classmethod
    def from_file(cls, file: Path) -> Self:
        """Parses a config object from a toml file.

        The settings are read from the file's ``[matchstats]`` table, a file without one yields the defaults.

        Args:
            file: Path to the file, or a directory containing one called 'matchstats.toml'.

        Raises:
            ConfigError: If the file doesn't exist or doesn't contain a valid config.
        """
        if not file.is_file():
            if file.joinpath(cls.default_file).is_file():
                file /= cls.default_file
            else:
                raise ConfigError("The config file does not exist.", detail=str(file))
        try:
            config_dict: dict[str, Any] = tomllib.loads(file.read_text())
        except tomllib.TOMLDecodeError as e:
            raise ConfigError("The config file is not a properly formatted TOML file.", detail=f"{file}: {e}")
        try:
            return cls.model_validate(config_dict.get("matchstats", {}))
        except ValidationError as e:
            raise ConfigError("The config file contains invalid settings.", detail=str(e))

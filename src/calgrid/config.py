"""Configuration management for calgrid."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .adapters.gregorian import SYMBOL_STYLES, GregorianCalendar
from .core.days import Granularity
from .core.errors import GridConfigError
from .core.grid import DEFAULT_RADIUS, GridOptions

logger = logging.getLogger(__name__)

CALGRID_HOME = Path(os.environ.get("CALGRID_HOME", Path.home() / ".calgrid"))
CONFIG_FILE = CALGRID_HOME / "calgrid.conf"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass
class Config:
    """calgrid configuration."""

    week_start: str = "monday"
    granularity: str = "month"
    radius: int = DEFAULT_RADIUS
    symbol_style: str = "very_short"
    selecting_days: bool = True
    timezone: str = ""

    @property
    def week_starts_sunday(self) -> bool:
        return self.week_start == "sunday"

    def grid_options(self) -> GridOptions:
        """Immutable grid options; raises GridConfigError on a bad radius."""
        return GridOptions(week_starts_sunday=self.week_starts_sunday, radius=self.radius)

    def page_granularity(self) -> Granularity:
        try:
            return Granularity(self.granularity)
        except ValueError as e:
            raise GridConfigError(f"Unknown granularity: {self.granularity!r}") from e

    def calendar_system(self) -> GregorianCalendar:
        return GregorianCalendar(timezone=self.timezone or None)


def _unquote(value: str) -> str:
    # Handle quoted values with inline comments: "value" # comment
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from calgrid.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "week_start":
                if value.lower() in ("monday", "sunday"):
                    config.week_start = value.lower()
                else:
                    logger.warning(f"Ignoring invalid WEEK_START: {value}")
            case "granularity":
                if value.lower() in [g.value for g in Granularity]:
                    config.granularity = value.lower()
                else:
                    logger.warning(f"Ignoring invalid GRANULARITY: {value}")
            case "radius":
                try:
                    config.radius = int(value)
                except ValueError:
                    logger.warning(f"Ignoring invalid RADIUS: {value}")
            case "symbol_style":
                if value in SYMBOL_STYLES:
                    config.symbol_style = value
                else:
                    logger.warning(f"Ignoring invalid SYMBOL_STYLE: {value}")
            case "selecting_days":
                if value.lower() in _TRUE:
                    config.selecting_days = True
                elif value.lower() in _FALSE:
                    config.selecting_days = False
                else:
                    logger.warning(f"Ignoring invalid SELECTING_DAYS: {value}")
            case "timezone":
                try:
                    if value:
                        ZoneInfo(value)
                    config.timezone = value
                except (ZoneInfoNotFoundError, ValueError):
                    logger.warning(f"Ignoring invalid TIMEZONE: {value}")
            case _:
                logger.debug(f"Unknown config key: {key}")

    return config

import logging
import os
from typing import Optional

import attr

# Below DEBUG; every insert and removal on a container is recorded at this level.
TRACE = 5

logging.addLevelName(TRACE, "TRACE")

LOGGER_NAME = "assoclist"
LEVELS = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR")
LEVEL_ENV_VAR = "ASSOCLIST_LOGGING_LEVEL"
ENABLE_ENV_VAR = "ASSOCLIST_USE_DEV_LOGGER"

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] - %(message)s"


@attr.frozen
class LoggingSettings:
    """How much container activity the ``assoclist`` logger reports, and whether
    it is written anywhere at all.

    Records go to a ``NullHandler`` unless ``enabled`` is true, in which case they
    are written to stderr."""

    level: str = attr.field(
        default="WARNING", converter=str.upper, validator=attr.validators.in_(LEVELS)
    )
    enabled: bool = False
    fmt: str = DEFAULT_FORMAT

    @classmethod
    def from_env(cls) -> "LoggingSettings":
        return cls(
            level=os.getenv(LEVEL_ENV_VAR, "WARNING"),
            enabled=os.getenv(ENABLE_ENV_VAR, "").lower() in {"true", "1", "yes"},
        )


def configure_logger(settings: Optional[LoggingSettings] = None) -> logging.Logger:
    """Attach a single handler built from `settings` (read from the environment if
    not given) to the ``assoclist`` logger.

    A handler installed by an earlier call is replaced rather than stacked."""
    settings = settings or LoggingSettings.from_env()
    logger = logging.getLogger(LOGGER_NAME)
    for h in [h for h in logger.handlers if h.get_name() == LOGGER_NAME]:
        logger.removeHandler(h)

    handler = logging.StreamHandler() if settings.enabled else logging.NullHandler()
    handler.set_name(LOGGER_NAME)
    handler.setFormatter(logging.Formatter(settings.fmt))
    handler.setLevel(settings.level)

    logger.setLevel(settings.level)
    logger.addHandler(handler)
    return logger

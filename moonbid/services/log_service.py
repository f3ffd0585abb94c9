"""Logging service."""

import logging
import sys

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure logging for moonbid loggers.

    Args:
        level: Level name applied to the ``moonbid`` logger tree

    """
    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )
    logging.getLogger("moonbid").setLevel(level.upper())


class LogService:
    """Service for structured logging.

    Provides consistent key=value logging for game services.
    """

    def __init__(self, name: str | None = None) -> None:
        """Bind the service to a logger (this module's by default)."""
        self._logger = logging.getLogger(name) if name else logger

    @staticmethod
    def _format(data: dict[str, object]) -> str:
        return " | ".join(f"{k}={v}" for k, v in data.items())

    def info(self, data: dict[str, object]) -> None:
        """Log info message.

        Args:
            data: Log data as key-value pairs

        """
        self._logger.info(self._format(data))

    def error(self, data: dict[str, object]) -> None:
        """Log error message."""
        self._logger.error(self._format(data))

    def warning(self, data: dict[str, object]) -> None:
        """Log warning message."""
        self._logger.warning(self._format(data))

    def debug(self, data: dict[str, object]) -> None:
        """Log debug message."""
        self._logger.debug(self._format(data))

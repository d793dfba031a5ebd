import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class Log:
    """Process-wide logger for catboard, writing to stderr."""

    _logger: logging.Logger = logging.getLogger("catboard")

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and attach a single stream handler.

        Calling again only changes the level; the first handler is kept so
        repeated CLI invocations in one process do not duplicate lines.
        """
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            cls._logger.addHandler(handler)
        cls._logger.propagate = False

    @staticmethod
    def level_for(verbose: bool, quiet: bool, default: str) -> str:
        """Map CLI verbosity flags onto a level name; quiet wins."""
        if quiet:
            return "ERROR"
        if verbose:
            return "DEBUG"
        return default

    @classmethod
    def reset(cls) -> None:
        """Drop installed handlers (used between tests)."""
        for handler in list(cls._logger.handlers):
            cls._logger.removeHandler(handler)
        cls._logger.setLevel(logging.NOTSET)
        cls._logger.propagate = True

    @classmethod
    def info(cls, message: str) -> None:
        cls._logger.info(message)

    @classmethod
    def error(cls, message: str) -> None:
        cls._logger.error(message)

    @classmethod
    def warning(cls, message: str) -> None:
        cls._logger.warning(message)

    @classmethod
    def debug(cls, message: str) -> None:
        cls._logger.debug(message)

"""Engine and client loggers writing to standard output."""

from __future__ import annotations

import logging
import sys

TRACE = 5
CORE_LOGGER_NAME = "HyperReal"
CLIENT_LOGGER_NAME = "APP"

logging.addLevelName(TRACE, "TRACE")

_COLOURS = {
    TRACE: "\033[37m",
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[1;41m",
}
_RESET = "\033[0m"


class _StdoutHandler(logging.Handler):
    """Writes to whatever ``sys.stdout`` currently is, coloured on a terminal."""

    terminator = "\n"

    def emit(self, record: logging.LogRecord) -> None:
        try:
            stream = sys.stdout
            text = self.format(record)
            isatty = getattr(stream, "isatty", None)
            if isatty is not None and isatty():
                colour = _COLOURS.get(record.levelno)
                if colour:
                    text = f"{colour}{text}{_RESET}"
            stream.write(text + self.terminator)
            stream.flush()
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)


def _configure(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(TRACE)
    logger.propagate = False
    if not any(isinstance(h, _StdoutHandler) for h in logger.handlers):
        handler = _StdoutHandler()
        handler.setFormatter(
            logging.Formatter("[%(asctime)s] %(name)s: %(message)s", datefmt="%H:%M:%S")
        )
        logger.addHandler(handler)
    return logger


def init() -> None:
    """Set up both loggers at trace level; calling again changes nothing."""
    _configure(CORE_LOGGER_NAME)
    _configure(CLIENT_LOGGER_NAME)


def core_logger() -> logging.Logger:
    return logging.getLogger(CORE_LOGGER_NAME)


def client_logger() -> logging.Logger:
    return logging.getLogger(CLIENT_LOGGER_NAME)
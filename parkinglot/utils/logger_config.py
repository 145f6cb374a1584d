import logging
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "parkinglot"
FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s - %(message)s"

_installed_handlers: List[logging.Handler] = []


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package's logger hierarchy."""
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: str = "WARNING", log_file: Optional[str] = None,
                      console: Optional[Console] = None) -> logging.Logger:
    """
    Route package logs to a rich console handler on stderr, and to a file
    when `log_file` is given.

    Calling it again replaces the handlers installed by the previous call.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    for handler in _installed_handlers:
        logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    rich_handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
    )
    _installed_handlers.append(rich_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        _installed_handlers.append(file_handler)

    for handler in _installed_handlers:
        logger.addHandler(handler)

    logger.setLevel(level.upper())
    logger.propagate = False
    return logger

"""
Logging setup for jout.

The report owns stdout, so every log record goes to stderr through a rich
handler. How much is logged follows the ``verbosity`` setting of the run.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "jout"

VERBOSITY_LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Route jout's log records to stderr, and optionally to a file.

    Args:
        verbosity: "quiet" (errors only), "normal" (warnings) or "verbose"
                   (debug records, source paths and tracebacks with locals)
        log_file: Append plain-text records to this file as well

    Returns:
        The configured "jout" logger
    """
    level = VERBOSITY_LEVELS.get(verbosity, logging.WARNING)
    verbose = level == logging.DEBUG

    # Paths and javap output may contain [brackets]; never treat them as markup.
    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            level=level,
            markup=False,
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            show_path=verbose,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s")
        )
        handlers.append(file_handler)

    # Each CLI invocation reconfigures from scratch.
    logging.basicConfig(level=level, format="%(message)s", handlers=handlers, force=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the "jout" logger or one of its children.

    Module names outside the package (e.g. "__main__") are nested under it.
    """
    if name is None:
        return logging.getLogger(LOGGER_NAME)
    if name != LOGGER_NAME and not name.startswith(f"{LOGGER_NAME}."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)

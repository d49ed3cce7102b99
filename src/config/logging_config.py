# src/config/logging_config.py

"""Per-run timestamped logging configuration for storefront.

Each launch writes a dedicated log file inside ``logs/`` named with the
launch timestamp (e.g. ``logs/run_20260214_153045.log``). Every
``storefront.*`` logger routes through it.

While the Textual UI owns the terminal, writing records to stderr would
corrupt the screen, so in ``tui`` mode the console handler is replaced
by Textual's own handler, which forwards records to ``textual console``.
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path

from textual.logging import TextualHandler

from src.config.settings import Settings

_DETAILED_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(module)s:%(funcName)s:%(lineno)d | "
    "%(message)s"
)

_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _console_level() -> int:
    """Resolve the console level from ``STOREFRONT_LOG_LEVEL`` (default WARNING)."""
    name = os.getenv("STOREFRONT_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(tui: bool = False) -> Path:
    """Initialise the root ``storefront`` logger for the current run.

    Args:
        tui: Route console output through Textual instead of stderr.

    Returns:
        The :class:`~pathlib.Path` to the log file created for this run.
    """
    logs_dir: Path = Settings.LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = logs_dir / f"run_{timestamp}.log"

    root_logger = logging.getLogger("storefront")
    root_logger.setLevel(logging.DEBUG)

    # Prevent duplicate handlers on repeated calls (e.g. tests)
    if root_logger.handlers:
        return log_file

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(_DETAILED_FORMAT, datefmt=_DATE_FORMAT)
    )

    console_handler: logging.Handler
    if tui:
        console_handler = TextualHandler()
    else:
        console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(_console_level())
    console_handler.setFormatter(
        logging.Formatter(_CONSOLE_FORMAT, datefmt=_DATE_FORMAT)
    )

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    root_logger.info(
        "Logging initialised (tui=%s), log file: %s", tui, log_file
    )

    return log_file

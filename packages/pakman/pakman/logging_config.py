"""Logging configuration for front ends built on pakman."""

import logging
import os
import sys
from datetime import UTC, datetime
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def _is_testing() -> bool:
    return (
        "PYTEST_CURRENT_TEST" in os.environ
        or os.environ.get("TESTING") == "1"
        or "pytest" in sys.modules
    )


def configure_logging(level: int | str = logging.INFO, log_dir: Path | None = None) -> None:
    """Configure root logging.

    With *log_dir*, records go to a timestamped file there (the screen
    belongs to the game); if the directory cannot be created, logging falls
    back to stderr. Under pytest only warnings and above are emitted.
    """
    if _is_testing():
        logging.basicConfig(format=LOG_FORMAT, level=logging.WARNING)
        return

    if log_dir is None:
        logging.basicConfig(format=LOG_FORMAT, level=level)
        return

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"pakman_{datetime.now(UTC).strftime('%Y%m%d_%H%M%S')}.log"
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logging.basicConfig(level=level, handlers=[file_handler])
    except OSError as exc:
        logging.basicConfig(format=LOG_FORMAT, level=level)
        logging.getLogger(__name__).warning(
            "Failed to initialize file logging in %s: %s. Falling back to stderr logging.",
            log_dir,
            exc,
        )

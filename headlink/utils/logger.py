import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False

_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


def configure_logging(headlink_home: Path | None = None) -> None:
    """Configure unified headlink logging.

    Args:
        headlink_home: Path to headlink home directory. If None, derived from environment.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if headlink_home is None:
        from .get_headlink_home import get_headlink_home

        headlink_home = get_headlink_home()

    level = os.environ.get("HEADLINK_LOG_LEVEL", "INFO").upper()
    if level == "WARN":
        level = "WARNING"
    if level not in _LEVELS:
        level = "INFO"

    root_logger = logging.getLogger("headlink")
    root_logger.setLevel(getattr(logging, level))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    try:
        headlink_home.mkdir(parents=True, exist_ok=True)
        file_handler: logging.Handler = RotatingFileHandler(
            headlink_home / "headlink.log",
            maxBytes=5 * 1024 * 1024,
            backupCount=3,  # 5MB * 3
        )
    except OSError:
        # Read-only home: keep records in-process only
        file_handler = logging.NullHandler()
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Handlers are attached by configure_logging() at app entry; module-level
    loggers created before that simply propagate to them once installed.
    """
    return logging.getLogger(f"headlink.{name}")

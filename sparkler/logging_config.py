"""Process-wide logging for the Sparkler CLI and HTTP service.

Records go to stderr and to ``sparkler.log`` under ``SPARKLER_LOG_DIR``.
Pillow and gradio are chatty at DEBUG, so their loggers are held at INFO
even when Sparkler itself logs at DEBUG.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from .config import load_settings

LOG_FILENAME = "sparkler.log"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"
QUIET_LOGGERS = ("PIL", "gradio", "httpx", "multipart")


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def configure_logging(level: Optional[str] = None) -> str:
    """Install stream and rotating-file handlers once; later calls only change the level."""

    settings = load_settings()
    desired_level = _level(level or settings.log_level)
    root = logging.getLogger()
    if getattr(configure_logging, "_log_file", None):
        root.setLevel(desired_level)
        return configure_logging._log_file  # type: ignore[attr-defined]

    log_file = os.path.join(settings.log_dir, LOG_FILENAME)
    os.makedirs(settings.log_dir, exist_ok=True)

    for handler in list(root.handlers):
        root.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT)
    handlers = [
        logging.StreamHandler(),
        RotatingFileHandler(log_file, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"),
    ]
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(desired_level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(desired_level, logging.INFO))

    configure_logging._log_file = log_file  # type: ignore[attr-defined]
    logging.getLogger(__name__).debug("Logging to %s", log_file)
    return log_file


__all__ = ["LOG_FILENAME", "configure_logging"]

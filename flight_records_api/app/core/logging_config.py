"""
Logging configuration for the application.

``setup_logging`` configures the root logger from :class:`Settings`:
a console handler always, a file handler when ``log_file`` is set.
Per-request access logs from uvicorn and the HTTP client libraries are
held at WARNING unless the application runs in debug mode.
"""

import logging
from typing import Optional

from .config import Settings, resolve_path


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers that emit a line per request or connection.
NOISY_LOGGERS = ("uvicorn.access", "httpx", "urllib3")


def setup_logging(app_settings: Settings) -> Optional[logging.Handler]:
    """Configure the root logger from ``app_settings``.

    Does nothing if the root logger already has handlers (pytest or a
    repeated ``create_app`` call).  A relative ``log_file`` is resolved
    against the project root, like the database path.  Unknown level
    names fall back to ``INFO``.

    Returns the file handler when one was attached, otherwise ``None``.
    """
    root = logging.getLogger()
    if root.handlers:
        return None

    root.setLevel(getattr(logging, app_settings.log_level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    noisy_level = logging.DEBUG if app_settings.debug else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(noisy_level)

    if not app_settings.log_file:
        return None
    file_handler = logging.FileHandler(resolve_path(app_settings.log_file), encoding="utf-8")
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)
    return file_handler

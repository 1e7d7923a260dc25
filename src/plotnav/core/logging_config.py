# PlotNav
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Rotating file + console logging for PlotNav tools and demos."""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

PACKAGE_LOGGER = "plotnav"

DETAILED_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(name)s | %(message)s"

# per-event chatter from these loggers stays out of the console
_NOISY_LOGGERS = ("plotnav.interactions.dispatch", "plotnav.backends.mouse_state")


def setup_logging(
    app_name: str = "PlotNav",
    console_level: int = logging.INFO,
    log_dir: Path | None = None,
) -> Path:
    """
    Install PlotNav's log handlers and return the log directory.

    Files written:
    - plotnav.log: everything the ``plotnav`` loggers emit at DEBUG and above
      (5 MB per file, 3 backups)
    - errors.log: ERROR and above from any logger (2 MB per file, 3 backups)

    Console output goes to stdout at ``console_level``. Calling this again
    replaces the handlers instead of stacking new ones.

    Args:
        app_name: Used to pick the per-platform log directory
        console_level: Minimum level printed to the console
        log_dir: Explicit directory, bypassing the per-platform default
    """
    log_dir = Path(log_dir) if log_dir is not None else _get_log_directory(app_name)
    log_dir.mkdir(parents=True, exist_ok=True)
    detailed = logging.Formatter(DETAILED_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)
    _drop_handlers(root_logger)
    root_logger.addHandler(
        _rotating_handler(log_dir / "errors.log", logging.ERROR, 2 * 1024 * 1024, detailed)
    )

    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    pkg_logger.setLevel(logging.DEBUG)
    _drop_handlers(pkg_logger)
    pkg_logger.addHandler(
        _rotating_handler(log_dir / "plotnav.log", logging.DEBUG, 5 * 1024 * 1024, detailed)
    )
    console = logging.StreamHandler(sys.stdout)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    pkg_logger.addHandler(console)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.INFO)

    log = logging.getLogger(__name__)
    log.info("%s logging initialized in %s", app_name, log_dir)
    log.info("Platform: %s, Python: %s", sys.platform, sys.version.split()[0])
    return log_dir


def _rotating_handler(
    path: Path, level: int, max_bytes: int, formatter: logging.Formatter
) -> RotatingFileHandler:
    handler = RotatingFileHandler(path, maxBytes=max_bytes, backupCount=3, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def _drop_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def _get_log_directory(app_name: str) -> Path:
    """
    Per-platform log directory.

    - Windows: %LOCALAPPDATA%\\AppName\\logs
    - macOS: ~/Library/Logs/AppName
    - elsewhere: $XDG_DATA_HOME/AppName/logs (default ~/.local/share)
    """
    home = Path.home()
    if sys.platform == "win32":
        return Path(os.environ.get("LOCALAPPDATA", home / "AppData" / "Local")) / app_name / "logs"
    if sys.platform == "darwin":
        return home / "Library" / "Logs" / app_name
    return Path(os.environ.get("XDG_DATA_HOME", home / ".local" / "share")) / app_name / "logs"


def get_log_directory(app_name: str = "PlotNav") -> Path:
    """Log directory ``setup_logging`` would use, without touching any handlers."""
    return _get_log_directory(app_name)

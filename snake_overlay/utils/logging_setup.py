"""
Logging setup - rich console output plus an optional log file.
"""
import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config_loader import LoggingConfig

PACKAGE_LOGGER = "snake_overlay"
FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(config: Optional[LoggingConfig] = None, console: Optional[Console] = None) -> logging.Logger:
    """
    Configure the package logger.

    Replaces any handlers installed by an earlier call, so it is safe to call
    again after reloading the configuration.

    Args:
        config: Logging settings (defaults to LoggingConfig())
        console: Rich console to write to (defaults to stderr)

    Returns:
        The configured package logger
    """
    config = config or LoggingConfig()
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(str(config.level).upper())

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = console or Console(stderr=True, legacy_windows=False)
    logger.addHandler(RichHandler(console=console, show_path=False, markup=False))

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger

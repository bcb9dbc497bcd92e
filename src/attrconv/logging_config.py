"""
Logging configuration for applications embedding the conversion library.

Library modules only create module loggers; nothing is configured on import.
Applications (or a debugging session) call ``configure_logging`` to attach a
single console handler to the ``attrconv`` logger:
- level from the argument, then ``ATTRCONV_LOG_LEVEL``, then WARNING
- repeated calls replace the handler instead of stacking new ones
"""

import logging
import sys
import threading
from typing import Optional, Union

from .config import env_choice
from .exceptions import ConfigurationError

# Thread-safe lock for logging configuration
_config_lock = threading.Lock()
_PACKAGE_LOGGER_NAME = "attrconv"
_HANDLER_NAME = "attrconv-console"
LOG_LEVEL_ENV_VAR = "ATTRCONV_LOG_LEVEL"
_LEVEL_NAMES = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
_DEFAULT_LEVEL = "WARNING"
_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: Optional[Union[int, str]]) -> int:
    if isinstance(level, int):
        return level
    if level is None:
        name = env_choice(LOG_LEVEL_ENV_VAR, _LEVEL_NAMES, or_value=_DEFAULT_LEVEL)
    else:
        name = level.strip().upper()
        if name not in _LEVEL_NAMES:
            raise ConfigurationError.invalid_value("level", level, f"Expected one of {sorted(_LEVEL_NAMES)}")
    return logging.getLevelName(name)


def _build_console_handler() -> logging.Handler:
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.set_name(_HANDLER_NAME)
    console_handler.setFormatter(logging.Formatter(_FORMAT))
    return console_handler


def _remove_existing_handler(package_logger: logging.Logger) -> None:
    for handler in list(package_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            package_logger.removeHandler(handler)
            handler.close()


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Configure the package logger and return it."""

    resolved = _resolve_level(level)
    with _config_lock:
        package_logger = logging.getLogger(_PACKAGE_LOGGER_NAME)
        _remove_existing_handler(package_logger)
        console_handler = _build_console_handler()
        console_handler.setLevel(resolved)
        package_logger.addHandler(console_handler)
        package_logger.setLevel(resolved)
    return package_logger


__all__ = ["LOG_LEVEL_ENV_VAR", "configure_logging"]

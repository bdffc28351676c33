"""
Logging utilities for the outcomes package.

Library modules only create module loggers with ``logging.getLogger(__name__)``;
handlers are installed by front ends (the CLI) through ``setup_logger``.
"""

import logging
import sys
from typing import Optional

from outcomes.utils.config_manager import LoggingConfig, get_config, get_debug_mode

# Marker attribute so repeat calls do not stack handlers
_HANDLER_MARKER = "_outcomes_handler"


def setup_logger(
    logger_name: str = "outcomes",
    level: Optional[str] = None,
    debug_mode: Optional[bool] = None,
    logging_config: Optional[LoggingConfig] = None,
) -> logging.Logger:
    """
    Set up a logger with a console handler and the project formatter.

    Args:
        logger_name: Name of the logger
        level: Log level name (overrides config if provided)
        debug_mode: Whether to force DEBUG level (overrides config if provided)
        logging_config: Logging settings to use instead of the global config

    Returns:
        logging.Logger: Configured logger instance
    """
    if debug_mode is None:
        debug_mode = get_debug_mode(logger_name)

    settings = logging_config or get_config().logging

    if level is None:
        level = "DEBUG" if debug_mode else settings.log_level

    logger = logging.getLogger(logger_name)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    has_handler = any(getattr(h, _HANDLER_MARKER, False) for h in logger.handlers)
    if settings.console_logging and not has_handler:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(settings.format))
        setattr(handler, _HANDLER_MARKER, True)
        logger.addHandler(handler)

    logger.debug(f"{logger_name} initialized with debug_mode={debug_mode}")
    return logger

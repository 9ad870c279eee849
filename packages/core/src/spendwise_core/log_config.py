"""structlog setup.

Modules log through ``structlog.get_logger()``; this configures how those
events are filtered and rendered for the application embedding the core.
"""

import logging
from typing import Optional

import structlog

from .config import SpendwiseConfig


def configure_logging(config: Optional[SpendwiseConfig] = None) -> None:
    """
    Configure structlog from settings.

    Args:
        config: Settings to use (default: loaded from the environment)
    """
    config = config or SpendwiseConfig()
    level = logging.getLevelName(config.log_level)

    if config.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )

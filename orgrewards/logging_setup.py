"""
Logging setup.

Configures the loguru logger for applications embedding orgrewards.
Library modules only emit records; sinks are added here.
"""

import sys

from loguru import logger

from orgrewards.config.settings import Settings, settings as default_settings


def setup_logging(config: Settings | None = None) -> None:
    """Configure stderr output and, if configured, a rotating log file."""
    config = config or default_settings

    logger.remove()
    logger.add(sys.stderr, level=config.log_level)

    if config.log_file:
        logger.add(
            config.log_file,
            rotation=config.log_rotation,
            retention=config.log_retention,
            level=config.log_level,
            encoding="utf-8",
        )

    logger.info(f"Logging configured at {config.log_level}")

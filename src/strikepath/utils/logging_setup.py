"""
Loguru sink configuration.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from strikepath.config.settings import LoggingConfig

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}"


def setup_logging(config: Optional[LoggingConfig] = None) -> None:
    """
    Replace loguru's default handler with a console sink and an optional
    rotating file sink.

    Args:
        config: Logging settings (default: LoggingConfig())
    """
    config = config or LoggingConfig()

    logger.remove()
    logger.add(sys.stderr, level=config.level, format=CONSOLE_FORMAT)

    if config.log_file:
        Path(config.log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            config.log_file,
            level="DEBUG",
            rotation=config.rotation,
            retention=config.retention,
            format=FILE_FORMAT,
        )

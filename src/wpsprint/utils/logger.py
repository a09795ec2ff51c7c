import sys
from loguru import logger
from typing import Optional


def setup_logger(config: Optional[dict] = None) -> Optional[int]:
    """
    Configure the application logger using loguru.

    Args:
        config: Logging configuration dictionary

    Returns:
        The console handler id, or None if no console handler was added.
    """
    # Remove default handler
    logger.remove()

    if config is None:
        return logger.add(sys.stderr, level="INFO")

    level = config.get("level", "INFO")
    console_id = None

    if config.get("console", True):
        console_id = logger.add(
            sys.stderr,
            level=level,
            format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"
        )

    file_config = config.get("file", {})
    if file_config.get("enabled", False):
        # loguru creates the log directory and expands {time} in the path
        logger.add(
            file_config.get("path", "logs/wpsprint_{time}.log"),
            rotation=file_config.get("rotation", "10 MB"),
            retention=file_config.get("retention", "10 days"),
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
        )

    return console_id

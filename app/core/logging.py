"""
Structured logging configuration using loguru.
"""
import sys
from loguru import logger
from app.core.config import Settings, settings


def configure_logging(config: Settings) -> None:
    """(Re)install the log handlers described by ``config``."""
    # Remove default handler
    logger.remove()

    level = config.LOG_LEVEL or ("DEBUG" if config.ENVIRONMENT == "development" else "INFO")

    # Add custom handler with structured format
    logger.add(
        sys.stdout,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level,
        colorize=True,
    )

    # Add file handler for production
    if config.ENVIRONMENT == "production":
        logger.add(
            config.LOG_FILE,
            rotation="100 MB",
            retention="14 days",
            compression="zip",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level=level,
        )


configure_logging(settings)

# Export configured logger
__all__ = ["logger", "configure_logging"]

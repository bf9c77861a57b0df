"""
Logging configuration for the PostoAqui API.

This module provides structured logging configuration with proper formatting,
log levels, and handlers for both development and production environments.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from app.config import settings


def setup_logging():
    """
    Configure application logging.

    Sets up console and (optionally) file handlers with appropriate
    formatting based on environment (DEBUG vs production).
    """
    logger = logging.getLogger()
    logger.setLevel(settings.LOG_LEVEL)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    if settings.DEBUG:
        # Detailed format for development
        log_format = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
    else:
        # Structured format for production (easier to parse)
        log_format = logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

    # Console handler (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)
    console_handler.setFormatter(log_format)
    logger.addHandler(console_handler)

    if settings.LOG_TO_FILE:
        log_dir = Path(settings.LOG_DIR)
        log_dir.mkdir(exist_ok=True)

        # File handler for all logs
        file_handler = RotatingFileHandler(
            log_dir / "postoaqui_api.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8"
        )
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(log_format)
        logger.addHandler(file_handler)

        # File handler for errors only
        error_handler = RotatingFileHandler(
            log_dir / "postoaqui_api_errors.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8"
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(log_format)
        logger.addHandler(error_handler)

    # Reduce noise from some verbose libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    logger.info("=" * 60)
    logger.info("PostoAqui API - Logging initialized")
    logger.info(f"Log Level: {settings.LOG_LEVEL}")
    logger.info(f"Debug Mode: {settings.DEBUG}")
    logger.info("=" * 60)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)

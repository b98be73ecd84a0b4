"""Logging configuration for the application."""
import logging
import os
from pathlib import Path
from datetime import datetime

# Create logs directory
LOGS_DIR = Path(os.getenv("BRANDSITE_LOG_DIR", "logs"))
LOGS_DIR.mkdir(parents=True, exist_ok=True)

# One log file per process start
LOG_FILE = LOGS_DIR / f"brandsite_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"


def _level_from_env(default: int = logging.INFO) -> int:
    name = os.getenv("BRANDSITE_LOG_LEVEL", "").upper()
    return logging.getLevelName(name) if name in ("DEBUG", "INFO", "WARNING", "ERROR") else default


def setup_logger(name: str = "brandsite", level: int = None) -> logging.Logger:
    """Set up a logger with file and console handlers."""
    if level is None:
        level = _level_from_env()

    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)

    # Remove existing handlers to avoid duplicates
    logger.handlers = []

    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_formatter = logging.Formatter(
        '%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    # File handler - everything, with call sites
    file_handler = logging.FileHandler(LOG_FILE, encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(detailed_formatter)
    logger.addHandler(file_handler)

    # Console handler - configured level only
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    return logger


# Shared logger instance
logger = setup_logger()

"""
Logging Configuration
"""
import logging
import sys
from pathlib import Path

from app.core.config import settings


# Shared application logger
logger = logging.getLogger("app")


def setup_logging():
    """Setup application logging"""

    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    # Format
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    # Handlers
    handlers = [logging.StreamHandler(sys.stdout)]
    if settings.LOG_DIR:
        log_dir = Path(settings.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_dir / "app.log"))

    # Basic config
    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        handlers=handlers,
    )

    # Disable noisy loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    return logger

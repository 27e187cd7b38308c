"""Logging configuration for the admin backend.

Console output always, plus a date-named file when ``LOG_DIR`` is set.
"""

import logging
from datetime import date
from pathlib import Path

from consult_admin.core.config import Settings

LOGGER_NAME = "consult_admin"


def setup_logging(config: Settings) -> logging.Logger:
    """Set up the application logger.

    Args:
        config: Application settings containing ``LOG_LEVEL`` and ``LOG_DIR``.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.LOG_LEVEL)

    # 재호출 시 핸들러 중복 방지
    logger.handlers.clear()

    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(config.LOG_LEVEL)
    console_handler.setFormatter(detailed_formatter)
    logger.addHandler(console_handler)

    if config.LOG_DIR:
        log_dir = Path(config.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(
            log_dir / f"consult-admin-{date.today().isoformat()}.log"
        )
        file_handler.setLevel(config.LOG_LEVEL)
        file_handler.setFormatter(detailed_formatter)
        logger.addHandler(file_handler)

    return logger

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from tireshop.config import LOG_DIR


def setup_logger(name: str = None, log_level: int = logging.INFO,
                 log_dir: str = LOG_DIR) -> logging.Logger:
    """
    Sets up the given logger (root by default) with console and rotating file output.
    """
    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # Prevent adding handlers multiple times if logger is already set up
    if logger.handlers:
        return logger

    console_format = logging.Formatter("%(levelname)s %(name)s: %(message)s")
    file_format = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        log_path / "tireshop.log", maxBytes=5 * 1024 * 1024, backupCount=3,
        encoding="utf-8"  # 5 MB
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(file_format)
    logger.addHandler(file_handler)

    return logger

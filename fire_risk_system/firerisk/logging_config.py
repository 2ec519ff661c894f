"""Centralized logging configuration for the Fire Risk Monitor."""

import logging
from pathlib import Path
from typing import Optional

from . import config


def configure_logging(
    level: Optional[str] = None,
    log_dir: Optional[Path] = None,
    log_to_file: bool = True
) -> None:
    """
    Configure a consistent logging format for the entire application.
    
    Installs a console handler and, unless disabled, a file handler writing
    to <log_dir>/fire_risk_monitor.log. Safe to call repeatedly (Streamlit
    re-runs the script on every interaction): existing root handlers are
    replaced rather than duplicated.
    
    Args:
        level: Log level name; defaults to FIRERISK_LOG_LEVEL
        log_dir: Directory for the log file; defaults to FIRERISK_LOG_DIR
        log_to_file: Whether to write the log file
    """
    log_level = getattr(logging, (level or config.LOG_LEVEL).upper(), logging.INFO)
    
    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    
    # Remove any existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    
    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)
    
    if log_to_file:
        directory = Path(log_dir) if log_dir is not None else config.LOG_DIR
        directory.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(directory / config.LOG_FILE_NAME, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
    
    # HTTP libraries are noisy at INFO; keep them to warnings
    for logger_name in ("urllib3", "requests"):
        logging.getLogger(logger_name).setLevel(logging.WARNING)

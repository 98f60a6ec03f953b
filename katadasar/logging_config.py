"""Logging configuration with console and rotating file handlers"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union


def setup_logging(
    log_file: Optional[Union[str, Path]] = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    stream=None,
):
    """
    Configure logging for scripts with up to two destinations:
    - Console: Brief logs (INFO by default)
    - File: Detailed logs (DEBUG by default) with rotation, only when
      log_file is given

    Rotation policy:
    - Auto-rotate when file reaches 10MB
    - Keep 5 rotated files

    The library itself never calls this; it only emits records on
    module-level loggers.

    Args:
        log_file: Path to log file, or None for console only
        console_level: Console logging level (INFO = brief)
        file_level: File logging level (DEBUG = verbose)
        stream: Console stream (default: stdout)

    Returns:
        Path of the log file in use, or None
    """
    # Root logger configuration
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture everything, filter in handlers

    # Remove existing handlers to avoid duplicates
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    # Console handler - brief output
    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    root_logger.addHandler(console_handler)

    log_path = None
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            mode='a',
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        root_logger.addHandler(file_handler)

    destination = f", file={log_path} ({logging.getLevelName(file_level)})" if log_path else ""
    logging.getLogger(__name__).debug(
        f"Logging configured: console={logging.getLevelName(console_level)}{destination}"
    )

    return log_path

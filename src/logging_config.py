"""Logging configuration with console and optional rotating file handlers"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config import get_log_level


def setup_logging(log_file: Optional[str] = None, console_level: Optional[int] = None, file_level: int = logging.DEBUG):
    """
    Configure logging with up to two destinations:
    - Console: Brief logs on stderr (stdout carries stemmed text)
    - File: Detailed logs (DEBUG by default), rotated at 10MB
    
    Args:
        log_file: Path to log file, or None for console only
        console_level: Console logging level (default: LOG_LEVEL env, else WARNING)
        file_level: File logging level (DEBUG = verbose)
    """
    if console_level is None:
        console_level = get_log_level()
    
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture everything, filter in handlers
    
    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()
    
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    root_logger.addHandler(console_handler)
    
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
    
    # NLTK data loader is chatty at DEBUG
    logging.getLogger("nltk").setLevel(logging.WARNING)
    
    logging.debug(f"Logging configured: console={logging.getLevelName(console_level)}, file={log_file or '-'}")

"""Structured logging setup for tf-plan-format."""

import logging
import sys
from typing import Optional


def setup_logging(level: int = logging.WARNING, format_string: Optional[str] = None) -> logging.Logger:
    """
    Set up structured logging for tf-plan-format.
    
    Log records go to stderr so rendered reports on stdout stay clean.
    
    Args:
        level: Logging level (default: WARNING)
        format_string: Custom format string (optional)
    
    Returns:
        Configured logger instance
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    
    logging.basicConfig(
        format=format_string,
        stream=sys.stderr,
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    
    logger = logging.getLogger("tfplanformat")
    logger.setLevel(level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a specific module."""
    return logging.getLogger(f"tfplanformat.{name}")

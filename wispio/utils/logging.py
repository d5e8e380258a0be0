"""
Logging utilities for the Wispio core.

Provides standardized logger configuration following security and privacy rules.

CRITICAL SECURITY RULES:
- NEVER log Supabase Auth access or refresh tokens
- NEVER log passwords, even when a password update fails
- NEVER log document payloads (they are user content)

Acceptable logging:
- High-level events (e.g., "Document read", "Remote procedure invoked")
- Non-sensitive metadata (collection names, document ids, procedure names)
- Normalized error kinds and messages
"""

import logging
from typing import Optional, Union


def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Get a configured logger for the specified module.

    Args:
        name: Module name (typically __name__)
        level: Optional logging level, as an int or a name like "DEBUG"
               (defaults to INFO)

    Returns:
        Configured logger instance

    Usage:
        >>> from wispio.utils.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("High-level event occurred")
    """
    logger = logging.getLogger(name)

    if level is None:
        level = logging.INFO
    elif isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger.setLevel(level)

    # Add handler if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger

"""
Logging utilities for the Contractor Risk backend.

Provides standardized logger configuration.

SECURITY RULES:
- NEVER log the Gemini API key or Supabase keys
- NEVER echo upstream error bodies or stack traces to HTTP clients
  (log them here instead)

Acceptable logging:
- High-level events (e.g., "Prompt created", "Gemini API response received")
- Non-sensitive metadata (e.g., contractor name, number of recommendations)
- Upstream status codes and bodies at ERROR level (server-side only)
"""

import logging
from typing import Optional, Union

from contractor_risk.config import settings


def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Get a configured logger for the specified module.

    Args:
        name: Module name (typically __name__)
        level: Optional logging level (defaults to settings.LOG_LEVEL)

    Returns:
        Configured logger instance

    Usage:
        >>> from contractor_risk.utils.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("High-level event occurred")
    """
    logger = logging.getLogger(name)

    if level is None:
        level = settings.LOG_LEVEL.upper()

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

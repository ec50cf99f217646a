"""Shared package initialization."""

from .constants import (
    AuthenticationType,
    Config,
    may_trim_surrounding_quotes,
)

from .logger import ContextLogger, get_logger

__all__ = [
    # Constants
    "AuthenticationType",
    "Config",
    "may_trim_surrounding_quotes",
    # Logging
    "ContextLogger",
    "get_logger",
]

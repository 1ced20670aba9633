"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides shared utilities, constants, and enums that are used
across multiple layers of the application.

Its primary responsibilities include:
- Defining cross-layer constants (environment names, log levels, response keys)
- Centralizing pagination defaults and the default role name
- Exposing the structured logging helpers

Shared code must not depend on Infrastructure or Frameworks.
"""

from .consts import (
    ALLOWED_PAGE_LIMITS,
    DEFAULT_PAGE,
    DEFAULT_PAGE_LIMIT,
    DEFAULT_ROLE,
    DEFAULT_TEST_QUESTIONS,
    EnumEnvironment,
    EnumLogLevel,
    EnumResponseKey,
)
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "ALLOWED_PAGE_LIMITS",
    "DEFAULT_PAGE",
    "DEFAULT_PAGE_LIMIT",
    "DEFAULT_ROLE",
    "DEFAULT_TEST_QUESTIONS",
    "EnumEnvironment",
    "EnumLogLevel",
    "EnumResponseKey",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]

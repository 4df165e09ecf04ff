"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides shared utilities, constants, and enums that are used
across multiple layers of the application.

Its primary responsibilities include:
- Defining cross-layer constants (environment names, log levels, styles)
- Configuring structured logging
- Resolving secret files and reporting installed package versions

Following Clean Architecture principles:
- Shared module contains only *cross-cutting concerns*
- It must not depend on Infrastructure or Frameworks
"""

from .consts import EnumEnvironment, EnumLogLevel, EnumStylePreference
from .logging import configure_logging, get_logger, update_logging_from_settings
from .versions import package_version

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "EnumStylePreference",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
    "package_version",
]

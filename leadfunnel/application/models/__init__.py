"""Application-level settings models."""

from .system_info import SystemInfo

__all__ = ["SystemInfo"]

"""
Presentation Layer Package

This package contains the presentation layer components,
which are responsible for handling HTTP requests and responses,
including API routes, the response envelope and token security.
"""

from leadfunnel.presentation import controllers

__all__ = ["controllers"]

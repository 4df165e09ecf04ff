"""Installed distribution lookups used by the info endpoint."""

from importlib.metadata import PackageNotFoundError, version


def package_version(name: str) -> str:
    """Return the installed version of a distribution, or ``"unknown"``."""
    try:
        return version(name)
    except PackageNotFoundError:
        return "unknown"

"""Version information for the simulator."""

from __future__ import annotations

from datetime import date
from pathlib import Path

PROJECT_VERSION = "0.0.1"
PROJECT_VERSION_MAJOR = 0
PROJECT_VERSION_MINOR = 0
PROJECT_VERSION_PATCH = 1


def get_version() -> str:
    """Return the full version string."""
    return PROJECT_VERSION


def get_major() -> int:
    """Return the major version number."""
    return PROJECT_VERSION_MAJOR


def get_minor() -> int:
    """Return the minor version number."""
    return PROJECT_VERSION_MINOR


def get_patch() -> int:
    """Return the patch version number."""
    return PROJECT_VERSION_PATCH


def _build_date() -> str:
    try:
        built = date.fromtimestamp(Path(__file__).stat().st_mtime)
    except OSError:
        built = date.today()
    return f"{built:%b} {built.day:2d} {built.year}"


def get_full_info() -> str:
    """Return the version together with the date the module was built."""
    return f"Version {get_version()} (Built on {_build_date()})"
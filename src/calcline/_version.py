"""Installed calcline version."""

from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    """Version of the installed distribution, or 0.0.0 when running uninstalled."""
    try:
        return version("calcline")
    except PackageNotFoundError:
        return "0.0.0"

"""Installed treecalc version."""

from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    """Version of the installed treecalc distribution, or "0.0.0" when not installed."""
    try:
        return version("treecalc")
    except PackageNotFoundError:
        return "0.0.0"

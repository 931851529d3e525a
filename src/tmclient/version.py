"""Package version lookup.

SINGLE SOURCE OF TRUTH: pyproject.toml [project] version

Python 3.13+.
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

__all__ = ["get_version"]


def get_version() -> str:
    """Installed package version, or a dev marker when not installed."""
    try:
        return _get_version("tmclient")
    except PackageNotFoundError:
        # Development mode: package not installed yet
        return "0.0.0+dev"

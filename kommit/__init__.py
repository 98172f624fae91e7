"""Conventional Commits helper with shell completion from git history."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("kommit")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"

"""
commitstat: commit history and code statistics for git repositories.
"""

from importlib.metadata import PackageNotFoundError, version

__all__ = ["__version__"]

try:
    __version__ = version("commitstat")
except PackageNotFoundError:
    __version__ = "0.1.0"

"""
Startup check for the git executable.
"""

import logging
from typing import Optional, Tuple

from git import Git
from git.exc import GitCommandError, GitCommandNotFound

from commitstat.core.errors import GitEnvironmentError

logger = logging.getLogger(__name__)

MINIMUM_GIT_VERSION = (2, 0)


def git_version(binary: Optional[Git] = None) -> Tuple[int, ...]:
    """Installed git version; GitEnvironmentError if git cannot be run."""
    git = binary or Git()
    try:
        return tuple(git.version_info)
    except (GitCommandNotFound, GitCommandError, OSError) as e:
        raise GitEnvironmentError(
            "Git not found. Make sure git is installed and on your PATH."
        ) from e


def check_git_environment(binary: Optional[Git] = None) -> Tuple[Tuple[int, ...], Optional[str]]:
    """
    Return the git version and a warning if it is older than supported.

    Raises:
        GitEnvironmentError: git is missing.
    """
    version = git_version(binary)
    if version[:2] < MINIMUM_GIT_VERSION:
        found = ".".join(str(part) for part in version)
        warning = f"Old git version detected ({found}); 2.x or newer is recommended"
        logger.warning(warning)
        return version, warning
    return version, None

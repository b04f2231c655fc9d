"""
Thin wrappers around `repo.git` command dispatch.
"""

import logging
import os
from typing import List, Optional

from git import Repo
from git.exc import GitCommandError, GitCommandNotFound

from commitstat.core.errors import ExecutionError

logger = logging.getLogger(__name__)


def run_git(repo: Repo, command: str, args: List[str], timeout: Optional[float] = None) -> str:
    """Run `git <command> <args>` in `repo` and return stdout."""
    if os.name == "nt":
        # GitPython cannot kill timed-out commands on Windows.
        timeout = None
    try:
        return getattr(repo.git, command)(*args, kill_after_timeout=timeout)
    except GitCommandNotFound as e:
        raise ExecutionError(f"Git executable not found: {e}")
    except GitCommandError as e:
        stderr = (e.stderr or "").strip() or str(e)
        logger.debug("git %s failed with status %s: %s", command, e.status, stderr)
        raise ExecutionError(f"git {command} failed: {stderr}")


def has_commits(repo: Repo) -> bool:
    """False for a freshly initialized repository whose HEAD is unborn."""
    return repo.head.is_valid()

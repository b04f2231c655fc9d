"""
Per-repository GitPython handles, cached by normalized path.
"""

import logging
import os
import threading
from typing import Dict

from git import InvalidGitRepositoryError, NoSuchPathError, Repo

from commitstat.core.errors import RepositoryError

logger = logging.getLogger(__name__)


def normalize_path(path: str) -> str:
    """Absolute path with forward slashes, so one directory maps to one key."""
    return os.path.abspath(os.fspath(path)).replace("\\", "/")


class RepositoryHandleCache:
    """
    Lazily opened `git.Repo` handles, one per repository path.

    Handles are only used to dispatch `git` subprocesses through `repo.git`,
    so sharing one between concurrent queries is safe.
    """

    def __init__(self):
        self._handles: Dict[str, Repo] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._handles)

    def __contains__(self, path: str) -> bool:
        return normalize_path(path) in self._handles

    def get_handle(self, path: str) -> Repo:
        """Return the cached handle for `path`, opening it on first use."""
        key = normalize_path(path)
        with self._lock:
            handle = self._handles.get(key)
            if handle is None:
                handle = self._open(key)
                self._handles[key] = handle
            return handle

    def reset_all(self) -> None:
        """Close and drop every cached handle."""
        with self._lock:
            handles = list(self._handles.values())
            self._handles.clear()
        for handle in handles:
            handle.close()
        logger.debug("Dropped %d repository handle(s)", len(handles))

    @staticmethod
    def _open(path: str) -> Repo:
        try:
            repo = Repo(path, search_parent_directories=True)
        except NoSuchPathError:
            raise RepositoryError(f"Path does not exist: {path}")
        except InvalidGitRepositoryError:
            raise RepositoryError(f"Not a valid Git repository: {path}")
        if repo.bare:
            repo.close()
            raise RepositoryError(f"Cannot analyze bare repository: {path}")
        logger.debug("Opened repository handle for %s", path)
        return repo

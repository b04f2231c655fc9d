"""
Branch and author enumeration.
"""

from typing import Iterable, List, Optional

from git import Repo

from commitstat.core.repository import has_commits, run_git

REMOTE_PREFIX = "remotes/origin/"
HEAD_SUFFIX = "/HEAD"


def _display_name(refname: str) -> str:
    """`refs/heads/main` -> `main`, `refs/remotes/origin/x` -> `remotes/origin/x`."""
    if refname.startswith("refs/heads/"):
        return refname[len("refs/heads/"):]
    if refname.startswith("refs/"):
        return refname[len("refs/"):]
    return refname


def unique_branches(names: Iterable[str]) -> List[str]:
    """Collapse remote-tracking names onto local ones, dropping HEAD pointers."""
    seen = []
    for name in names:
        name = name.strip()
        if not name or name.endswith(HEAD_SUFFIX):
            continue
        if name.startswith(REMOTE_PREFIX):
            name = name[len(REMOTE_PREFIX):]
        if name not in seen:
            seen.append(name)
    return seen


def unique_authors(names: Iterable[str]) -> List[str]:
    seen = []
    for name in names:
        name = name.strip()
        if name and name not in seen:
            seen.append(name)
    return seen


def list_branches(repo: Repo, timeout: Optional[float] = None) -> List[str]:
    """Local and remote branch names, de-duplicated."""
    output = run_git(repo, "for_each_ref", ["--format=%(refname)", "refs/heads", "refs/remotes"], timeout)
    return unique_branches(_display_name(line) for line in output.splitlines())


def list_authors(repo: Repo, branch: Optional[str] = None,
                 timeout: Optional[float] = None) -> List[str]:
    """Distinct author names on `branch` (or HEAD), newest first."""
    if not branch and not has_commits(repo):
        return []
    args = ["--format=%an"]
    if branch:
        args.append(branch)
    output = run_git(repo, "log", args, timeout)
    return unique_authors(output.splitlines())

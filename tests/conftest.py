from datetime import datetime, timezone
from pathlib import Path
from types import SimpleNamespace

import pytest
from click.testing import CliRunner
from git import Actor, Repo

from commitstat.core.engine import QueryEngine

ALICE = Actor("Alice", "alice@example.com")
BOB = Actor("Bob", "bob@example.com")


def commit_file(repo: Repo, name: str, content: str, message: str, author: Actor, when: datetime):
    """Write `name`, stage it and commit with fixed author and dates."""
    path = Path(repo.working_tree_dir) / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    repo.index.add([name])
    stamp = f"{int(when.timestamp())} +0000"
    return repo.index.commit(
        message,
        author=author,
        committer=author,
        author_date=stamp,
        commit_date=stamp,
    )


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def engine():
    engine = QueryEngine()
    yield engine
    engine.reset_all()


@pytest.fixture
def empty_repo(tmp_path: Path) -> Repo:
    repo = Repo.init(tmp_path / "empty", initial_branch="main")
    yield repo
    repo.close()


@pytest.fixture
def history_repo(tmp_path: Path):
    """
    Three commits on main, newest first:

    - "Trim readme"  (Alice, 2024-03-20): README.md 0 added / 1 deleted
    - "Add app"      (Bob,   2024-02-15): src/app.py 5 added
    - "Add readme"   (Alice, 2024-01-10): README.md 3 added
    """
    repo = Repo.init(tmp_path / "work" / "repo", initial_branch="main")
    first = commit_file(repo, "README.md", "one\ntwo\nthree\n", "Add readme", ALICE,
                        datetime(2024, 1, 10, 12, 0, tzinfo=timezone.utc))
    second = commit_file(repo, "src/app.py", "a = 1\nb = 2\nc = 3\nd = 4\ne = 5\n", "Add app", BOB,
                         datetime(2024, 2, 15, 12, 0, tzinfo=timezone.utc))
    third = commit_file(repo, "README.md", "one\nthree\n", "Trim readme", ALICE,
                        datetime(2024, 3, 20, 12, 0, tzinfo=timezone.utc))
    yield SimpleNamespace(repo=repo, path=repo.working_tree_dir, commits=[first, second, third])
    repo.close()


@pytest.fixture
def merge_repo(tmp_path: Path):
    """
    main: root -> "Main work" -> merge of side -> "Tip"; side branches off root.

    Exposes `root`, `side`, `merge` and `tip` commits.
    """
    repo = Repo.init(tmp_path / "merge", initial_branch="main")
    root = commit_file(repo, "README.md", "root\n", "Root", ALICE,
                       datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc))
    repo.git.checkout("-b", "side")
    side = commit_file(repo, "side.txt", "side\n", "Side work", BOB,
                       datetime(2024, 1, 5, 12, 0, tzinfo=timezone.utc))
    repo.git.checkout("main")
    mainline = commit_file(repo, "main.txt", "main\n", "Main work", ALICE,
                           datetime(2024, 1, 6, 12, 0, tzinfo=timezone.utc))
    stamp = f"{int(datetime(2024, 1, 7, 12, 0, tzinfo=timezone.utc).timestamp())} +0000"
    merge = repo.index.commit(
        "Merge side",
        parent_commits=(mainline, side),
        author=ALICE,
        committer=ALICE,
        author_date=stamp,
        commit_date=stamp,
    )
    tip = commit_file(repo, "tip.txt", "tip\n", "Tip", BOB,
                      datetime(2024, 1, 8, 12, 0, tzinfo=timezone.utc))
    yield SimpleNamespace(repo=repo, path=repo.working_tree_dir, root=root, side=side, merge=merge, tip=tip)
    repo.close()

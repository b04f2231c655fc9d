"""
Parser for the single-line-per-commit `git log` listing format.
"""

from datetime import datetime
from typing import List, Optional, Tuple

from commitstat.core.filters import FIELD_SEP
from commitstat.core.models import (
    NO_MESSAGE,
    NOT_AVAILABLE,
    UNKNOWN_AUTHOR,
    CommitRecord,
)

FIELD_COUNT = 6


def parse_refs(decoration: str) -> Tuple[str, ...]:
    """Turn ` (HEAD -> main, origin/main)` into `('HEAD → main', 'origin/main')`."""
    text = decoration.replace("(", "").replace(")", "").replace(" -> ", " → ").strip()
    if not text:
        return ()
    return tuple(ref.strip() for ref in text.split(",") if ref.strip())


def parse_commit_date(value: str) -> Optional[datetime]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError:
        return None


def parse_line(line: str, repository_path: str) -> CommitRecord:
    """Parse one listing line; missing fields get placeholder values."""
    fields = line.split(FIELD_SEP, FIELD_COUNT - 1)
    fields += [""] * (FIELD_COUNT - len(fields))
    commit_hash, author, date, subject, refs, email = fields

    return CommitRecord(
        hash=commit_hash.strip() or NOT_AVAILABLE,
        author_name=author or UNKNOWN_AUTHOR,
        author_email=email.strip() or NOT_AVAILABLE,
        date=parse_commit_date(date),
        subject=subject or NO_MESSAGE,
        refs=parse_refs(refs),
        repository_path=repository_path,
    )


def parse_log(output: str, repository_path: str) -> List[CommitRecord]:
    """Parse listing output into records, keeping git's (newest first) order."""
    return [
        parse_line(line, repository_path)
        for line in output.split("\n")
        if line.strip()
    ]

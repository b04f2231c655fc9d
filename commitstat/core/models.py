"""
Value types shared by the parser, the aggregator and the query engine.
"""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict, Generic, Optional, Tuple, TypeVar, Union

from commitstat.core.errors import CommitStatError

NOT_AVAILABLE = "N/A"
UNKNOWN_AUTHOR = "Unknown"
NO_MESSAGE = "No message"

DateLike = Union[str, datetime, None]

T = TypeVar("T")


@dataclass(frozen=True)
class CommitRecord:
    """A single commit as listed by `git log`."""
    hash: str
    author_name: str
    author_email: str
    date: Optional[datetime]
    subject: str
    refs: Tuple[str, ...]
    repository_path: str

    @property
    def short_hash(self) -> str:
        return self.hash[:8]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'hash': self.hash,
            'author': self.author_name,
            'email': self.author_email,
            'date': self.date.isoformat() if self.date else NOT_AVAILABLE,
            'message': self.subject,
            'branch': ', '.join(self.refs) or NOT_AVAILABLE,
            'repository': self.repository_path,
        }


@dataclass
class CodeStatistics:
    """Rollup of numstat output. The all-zero instance means "no data"."""
    total_commits: int = 0
    lines_added: int = 0
    lines_deleted: int = 0
    files_added: int = 0
    files_modified: int = 0
    files_deleted: int = 0

    @property
    def lines_changed(self) -> int:
        return self.lines_added + self.lines_deleted

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class QueryFilter:
    """
    Filters applied to a history or statistics query.

    Dates may be given as strings (ISO-8601 or relative such as "2 weeks ago")
    or as datetimes. Validation returns a copy with both dates resolved.
    """
    branch: Optional[str] = None
    author: Optional[str] = None
    start_date: DateLike = None
    end_date: DateLike = None
    start_hash: Optional[str] = None
    end_hash: Optional[str] = None


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """Outcome of a query: the value, plus the error that degraded it, if any."""
    value: T
    error: Optional[CommitStatError] = field(default=None)

    @property
    def ok(self) -> bool:
        return self.error is None

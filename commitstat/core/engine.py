"""
Query engine: validates filters, runs `git log` and degrades failures
to empty results.
"""

import dataclasses
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Dict, Iterable, List, Optional, TypeVar

from commitstat.config import Settings
from commitstat.core.aggregator import aggregate_numstat
from commitstat.core.errors import CommitStatError, ValidationError
from commitstat.core.filters import LogMode, build_log_args, is_commit_hash, parse_date
from commitstat.core.handles import RepositoryHandleCache, normalize_path
from commitstat.core.models import CodeStatistics, CommitRecord, QueryFilter, QueryResult
from commitstat.core.parser import parse_log
from commitstat.core import refs
from commitstat.core.repository import has_commits, run_git

logger = logging.getLogger(__name__)

T = TypeVar("T")


def validate_filter(query: QueryFilter) -> QueryFilter:
    """
    Check a filter before any git command runs.

    Returns a copy with both dates resolved to UTC datetimes.

    Raises:
        ValidationError: unparsable date, start date after end date,
            or a hash that is not 7-40 hex characters.
    """
    start = parse_date(query.start_date)
    end = parse_date(query.end_date)
    if start and end and start > end:
        raise ValidationError(
            f"Start date {start.date().isoformat()} is after end date {end.date().isoformat()}"
        )
    for label, value in (("start", query.start_hash), ("end", query.end_hash)):
        if value and not is_commit_hash(value):
            raise ValidationError(f"Invalid {label} hash: {value!r} (expected 7-40 hex characters)")
    return dataclasses.replace(query, start_date=start, end_date=end)


class QueryEngine:
    """
    Entry point for history, statistics and branch/author queries.

    `query_*` methods return a QueryResult so callers can tell an empty
    repository from a failed query. The plain methods (`fetch_history`,
    `compute_statistics`, `list_branches`, `list_authors`) return only the
    value, which is empty or zero when the query failed.
    """

    def __init__(self, settings: Optional[Settings] = None,
                 cache: Optional[RepositoryHandleCache] = None):
        self.settings = settings or Settings()
        self.cache = cache or RepositoryHandleCache()

    def _run(self, operation: str, path: str, fallback: Callable[[], T],
             query: Callable[[], T]) -> QueryResult:
        try:
            return QueryResult(query())
        except ValidationError:
            raise
        except CommitStatError as e:
            logger.error("%s failed for %s: %s", operation, path, e)
            return QueryResult(fallback(), e)

    def query_history(self, path: str, query: Optional[QueryFilter] = None) -> QueryResult:
        query = validate_filter(query or QueryFilter())
        path = normalize_path(path)

        def run() -> List[CommitRecord]:
            repo = self.cache.get_handle(path)
            if not query.branch and not has_commits(repo):
                return []
            args = build_log_args(query, LogMode.LISTING)
            output = run_git(repo, "log", args, self.settings.git_timeout)
            return parse_log(output, path)

        return self._run("History query", path, list, run)

    def query_statistics(self, path: str, query: Optional[QueryFilter] = None) -> QueryResult:
        query = validate_filter(query or QueryFilter())
        path = normalize_path(path)

        def run() -> CodeStatistics:
            repo = self.cache.get_handle(path)
            if not query.branch and not has_commits(repo):
                return CodeStatistics()
            args = build_log_args(query, LogMode.AGGREGATION)
            output = run_git(repo, "log", args, self.settings.git_timeout)
            return aggregate_numstat(output)

        return self._run("Statistics query", path, CodeStatistics, run)

    def query_branches(self, path: str) -> QueryResult:
        path = normalize_path(path)
        return self._run(
            "Branch listing", path, list,
            lambda: refs.list_branches(self.cache.get_handle(path), self.settings.git_timeout),
        )

    def query_authors(self, path: str, branch: Optional[str] = None) -> QueryResult:
        path = normalize_path(path)
        return self._run(
            "Author listing", path, list,
            lambda: refs.list_authors(self.cache.get_handle(path), branch, self.settings.git_timeout),
        )

    def fetch_history(self, path: str, query: Optional[QueryFilter] = None) -> List[CommitRecord]:
        return self.query_history(path, query).value

    def compute_statistics(self, path: str, query: Optional[QueryFilter] = None) -> CodeStatistics:
        return self.query_statistics(path, query).value

    def list_branches(self, path: str) -> List[str]:
        return self.query_branches(path).value

    def list_authors(self, path: str, branch: Optional[str] = None) -> List[str]:
        return self.query_authors(path, branch).value

    def reset_all(self) -> None:
        self.cache.reset_all()

    def refresh_all(self, paths: Iterable[str],
                    workers: Optional[int] = None,
                    on_result: Optional[Callable[[str, QueryResult], None]] = None
                    ) -> Dict[str, QueryResult]:
        """
        Drop cached handles, then list branches for every path concurrently.

        Every path gets its own result; a failing repository does not cancel
        the others.
        """
        self.reset_all()
        targets = list(dict.fromkeys(normalize_path(p) for p in paths))
        results: Dict[str, QueryResult] = {}
        if not targets:
            return results

        with ThreadPoolExecutor(max_workers=workers or self.settings.max_workers) as executor:
            future_to_path = {executor.submit(self.query_branches, p): p for p in targets}
            for future in as_completed(future_to_path):
                path = future_to_path[future]
                try:
                    result = future.result()
                except Exception as e:
                    logger.exception("Refresh failed for %s", path)
                    result = QueryResult([], CommitStatError(str(e)))
                results[path] = result
                if on_result:
                    on_result(path, result)

        return {path: results[path] for path in targets}

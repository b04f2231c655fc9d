"""
Commit-log query and aggregation engine.
"""

from commitstat.core.engine import QueryEngine, validate_filter
from commitstat.core.errors import (
    CommitStatError,
    ExecutionError,
    GitEnvironmentError,
    RepositoryError,
    ValidationError,
)
from commitstat.core.models import CodeStatistics, CommitRecord, QueryFilter, QueryResult

__all__ = [
    "QueryEngine",
    "validate_filter",
    "CommitStatError",
    "ExecutionError",
    "GitEnvironmentError",
    "RepositoryError",
    "ValidationError",
    "CodeStatistics",
    "CommitRecord",
    "QueryFilter",
    "QueryResult",
]

"""
Error taxonomy for commit queries.
"""


class CommitStatError(Exception):
    """Base class for every error raised by the query engine."""
    pass


class ValidationError(CommitStatError):
    """Filter input is malformed or logically inconsistent."""
    pass


class RepositoryError(CommitStatError):
    """Path is missing or is not a git repository."""
    pass


class ExecutionError(CommitStatError):
    """The git command failed, timed out or produced unusable output."""
    pass


class GitEnvironmentError(CommitStatError):
    """Git is not installed or is older than the supported version."""
    pass

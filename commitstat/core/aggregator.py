"""
Aggregation of `git log --numstat` output into CodeStatistics.
"""

import re
from typing import Optional, Tuple

from commitstat.core.filters import BLOCK_SENTINEL
from commitstat.core.models import CodeStatistics

ABSENT_FILE = "dev/null"

_ALL_ZEROS = re.compile(r"^0+$")


def _safe_int(value: str, default: int = 0) -> int:
    try:
        return int(value)
    except ValueError:
        return default


def parse_numstat_row(line: str) -> Optional[Tuple[str, str, str]]:
    """Split an `added<TAB>deleted<TAB>path` row; None for any other line."""
    parts = line.strip().split("\t")
    if len(parts) != 3 or not parts[2]:
        return None
    return parts[0], parts[1], parts[2]


def classify_file(added: str, path: str) -> str:
    """
    Classify a numstat row as 'deleted', 'modified' or 'added'.

    This is a heuristic on the added-line count only: a rename, or a file with
    deletions but no additions, is reported as modified.
    """
    if path.startswith(ABSENT_FILE):
        return 'deleted'
    if _ALL_ZEROS.match(added):
        return 'modified'
    return 'added'


def aggregate_numstat(output: str) -> CodeStatistics:
    """Roll up sentinel-separated numstat blocks, one block per commit."""
    stats = CodeStatistics()
    if not output:
        return stats

    blocks = output.split(BLOCK_SENTINEL)
    # The text before the first sentinel is not a commit.
    stats.total_commits = len(blocks) - 1

    for block in blocks:
        for line in block.split("\n"):
            row = parse_numstat_row(line)
            if row is None:
                continue
            added, deleted, path = row
            stats.lines_added += _safe_int(added)
            stats.lines_deleted += _safe_int(deleted)

            kind = classify_file(added, path)
            if kind == 'deleted':
                stats.files_deleted += 1
            elif kind == 'modified':
                stats.files_modified += 1
            else:
                stats.files_added += 1

    return stats

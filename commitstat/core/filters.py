"""
Builds `git log` argument lists from a QueryFilter.
"""

import logging
import re
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import List, Optional

from commitstat.core.errors import ValidationError
from commitstat.core.models import DateLike, QueryFilter

logger = logging.getLogger(__name__)

FIELD_SEP = "\x1f"
BLOCK_SENTINEL = "|||"

# %x1f renders as FIELD_SEP; field order is fixed and read back by the parser.
LISTING_FORMAT = "%H%x1f%an%x1f%ad%x1f%s%x1f%d%x1f%ae"
AGGREGATION_FORMAT = BLOCK_SENTINEL + "%n"

GIT_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

_RELATIVE_DATE = re.compile(r"^(\d+)\s+(day|week|month|year)s?\s+ago$", re.IGNORECASE)
_HASH = re.compile(r"^[0-9a-fA-F]{7,40}$")


class LogMode(Enum):
    LISTING = "listing"
    AGGREGATION = "aggregation"


def parse_date(value: DateLike) -> Optional[datetime]:
    """Parse an ISO-8601 or relative date into an aware UTC datetime."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return _as_utc(value)

    text = value.strip()
    if not text:
        return None

    match = _RELATIVE_DATE.match(text)
    if match:
        amount = int(match.group(1))
        unit = match.group(2).lower()
        days = {'day': 1, 'week': 7, 'month': 30, 'year': 365}[unit]
        return datetime.now(timezone.utc) - timedelta(days=amount * days)

    try:
        return _as_utc(datetime.fromisoformat(text))
    except ValueError:
        raise ValidationError(f"Invalid date: {value!r}")


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_timestamp(value: DateLike) -> str:
    """Render a date in the single absolute form passed to --since/--until."""
    return parse_date(value).strftime(GIT_DATE_FORMAT)


def is_commit_hash(value: str) -> bool:
    return bool(_HASH.match(value))


def hash_range(start_hash: Optional[str], end_hash: Optional[str]) -> List[str]:
    """
    Revision arguments for a hash range; the start commit itself is included.

    `^<start>^@` excludes every parent of the start commit, which is an empty
    set for a root commit and covers both sides of a merge.
    """
    if start_hash and end_hash:
        return [end_hash, f"^{start_hash}^@"]
    if start_hash:
        return [start_hash]
    return []


def build_log_args(query: QueryFilter, mode: LogMode) -> List[str]:
    """
    Build the argument list for `git log`.

    Flags always come first, then the branch ref, then the hash range, which
    is the order git expects for options and revisions.
    """
    if mode is LogMode.LISTING:
        args = ["--no-merges", "--date=iso-strict", f"--format={LISTING_FORMAT}"]
    else:
        args = ["--numstat", f"--format={AGGREGATION_FORMAT}"]

    if query.author:
        args.append(f"--author={query.author}")
    if query.start_date:
        args.append(f"--since={format_timestamp(query.start_date)}")
    if query.end_date:
        args.append(f"--until={format_timestamp(query.end_date)}")

    if query.end_hash and not query.start_hash:
        # No single-endpoint revision form exists; git reads this as a date cutoff.
        logger.warning("End hash %s without start hash is applied as --until", query.end_hash)
        args.append(f"--until={query.end_hash}")

    if query.branch:
        args.append(query.branch)

    args.extend(hash_range(query.start_hash, query.end_hash))

    logger.debug("git log arguments (%s): %s", mode.value, args)
    return args

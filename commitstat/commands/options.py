"""
Options shared by the query commands.
"""

from pathlib import Path

import rich_click as click

from commitstat.core.models import QueryFilter

repo_argument = click.argument(
    'repo_path', default='.', type=click.Path(exists=True, file_okay=False, path_type=Path)
)

output_option = click.option(
    '--output', '-o', type=click.Choice(['table', 'json']), default='table', help='Output format'
)


def filter_options(func):
    """Attach the branch/author/date/hash filter options to a command."""
    options = [
        click.option('--branch', '-b', help='Branch or ref to query (default: HEAD)'),
        click.option('--author', '-a', help='Only commits whose author matches this text'),
        click.option('--since', '-s', help='Since date (YYYY-MM-DD, ISO-8601 or relative like "2 weeks ago")'),
        click.option('--until', '-u', help='Until date (YYYY-MM-DD, ISO-8601 or relative)'),
        click.option('--start-hash', help='First commit of the range (included)'),
        click.option('--end-hash', help='Last commit of the range'),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def build_filter(branch, author, since, until, start_hash, end_hash) -> QueryFilter:
    return QueryFilter(
        branch=branch or None,
        author=author or None,
        start_date=since or None,
        end_date=until or None,
        start_hash=start_hash or None,
        end_hash=end_hash or None,
    )

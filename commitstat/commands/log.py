"""
Commit history and code statistics commands.
"""

import json
from pathlib import Path
from typing import List

import rich_click as click

from commitstat.commands.options import build_filter, filter_options, output_option, repo_argument
from commitstat.core.engine import QueryEngine
from commitstat.core.errors import ValidationError
from commitstat.core.models import CodeStatistics, CommitRecord


@click.command()
@repo_argument
@filter_options
@output_option
@click.option('--limit', '-l', type=int, default=0, help='Show at most N commits (0 = all)')
@click.pass_obj
def history(engine: QueryEngine, repo_path: Path, branch: str, author: str, since: str,
            until: str, start_hash: str, end_hash: str, output: str, limit: int):
    """List commits matching the filters, newest first."""

    query = build_filter(branch, author, since, until, start_hash, end_hash)
    try:
        result = engine.query_history(str(repo_path), query)
    except ValidationError as e:
        raise click.UsageError(str(e))

    if not result.ok:
        click.echo(f"❌ Failed to get commit history: {result.error}", err=True)

    commits = result.value[:limit] if limit > 0 else result.value

    if output == 'json':
        click.echo(json.dumps([c.to_dict() for c in commits], indent=2, ensure_ascii=False))
        return

    if result.ok and not commits:
        click.echo("❌ No commits found matching criteria")
        return
    _display_history(commits, len(result.value))


@click.command()
@repo_argument
@filter_options
@output_option
@click.pass_obj
def stats(engine: QueryEngine, repo_path: Path, branch: str, author: str, since: str,
          until: str, start_hash: str, end_hash: str, output: str):
    """Summarize lines and files added, modified and deleted."""

    query = build_filter(branch, author, since, until, start_hash, end_hash)
    try:
        result = engine.query_statistics(str(repo_path), query)
    except ValidationError as e:
        raise click.UsageError(str(e))

    if not result.ok:
        click.echo(f"❌ Code statistics failed: {result.error}", err=True)

    if output == 'json':
        click.echo(json.dumps(result.value.to_dict(), indent=2))
        return

    _display_statistics(result.value)


def _display_history(commits: List[CommitRecord], total: int):
    """Display commits in table format."""
    click.echo("\n🔥 " + "=" * 60)
    click.echo(f"🔥 COMMIT HISTORY ({total:,} commits)")
    click.echo("🔥 " + "=" * 60)

    for commit in commits:
        date_str = commit.date.strftime('%Y-%m-%d %H:%M') if commit.date else 'N/A'
        click.echo(f"{commit.short_hash} | {date_str} | {commit.author_name} <{commit.author_email}>")
        click.echo(f"   📝 {commit.subject[:60]}{'...' if len(commit.subject) > 60 else ''}")
        if commit.refs:
            click.echo(f"   🌿 {', '.join(commit.refs)}")

    if len(commits) < total:
        click.echo(f"\n… {total - len(commits):,} more")


def _display_statistics(stats: CodeStatistics):
    """Display code statistics in table format."""
    click.echo("\n📊 " + "=" * 60)
    click.echo("📊 CODE STATISTICS")
    click.echo("📊 " + "=" * 60)

    click.echo(f"📈 Total commits: {stats.total_commits:,}")
    click.echo(f"➕ Lines added: {stats.lines_added:,}")
    click.echo(f"➖ Lines deleted: {stats.lines_deleted:,}")
    click.echo(f"📝 Total line changes: {stats.lines_changed:,}")
    click.echo(f"🆕 Files added: {stats.files_added:,}")
    click.echo(f"✏️ Files modified: {stats.files_modified:,}")
    click.echo(f"🗑️ Files deleted: {stats.files_deleted:,}")

"""
Branch and author listing commands.
"""

import json
from pathlib import Path
from typing import List

import rich_click as click

from commitstat.commands.options import output_option, repo_argument
from commitstat.core.engine import QueryEngine


@click.command()
@repo_argument
@output_option
@click.pass_obj
def branches(engine: QueryEngine, repo_path: Path, output: str):
    """List local and remote branches, merged by name."""

    result = engine.query_branches(str(repo_path))
    if not result.ok:
        click.echo(f"❌ Failed to get branches: {result.error}", err=True)

    _echo_names(result.value, output, "🌿", "BRANCHES")


@click.command()
@repo_argument
@click.option('--branch', '-b', help='Only authors on this branch (default: HEAD)')
@output_option
@click.pass_obj
def authors(engine: QueryEngine, repo_path: Path, branch: str, output: str):
    """List distinct commit authors."""

    result = engine.query_authors(str(repo_path), branch or None)
    if not result.ok:
        click.echo(f"❌ Failed to get authors: {result.error}", err=True)

    _echo_names(result.value, output, "👥", "AUTHORS")


def _echo_names(names: List[str], output: str, icon: str, title: str):
    if output == 'json':
        click.echo(json.dumps(names, indent=2, ensure_ascii=False))
        return

    click.echo(f"\n{icon} " + "=" * 40)
    click.echo(f"{icon} {title} ({len(names)})")
    click.echo(f"{icon} " + "=" * 40)
    for name in names:
        click.echo(f"  {name}")

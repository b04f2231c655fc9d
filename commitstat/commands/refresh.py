"""
Bulk refresh across several repositories.
"""

import json
from pathlib import Path
from typing import Tuple

import rich_click as click
from tqdm import tqdm

from commitstat.core.engine import QueryEngine
from commitstat.core.handles import normalize_path


@click.command()
@click.argument('repo_paths', nargs=-1, required=True, type=click.Path(path_type=Path))
@click.option('--workers', '-w', type=int, default=None, help='Number of concurrent queries')
@click.option('--output', '-o', type=click.Choice(['table', 'json']), default='table', help='Output format')
@click.pass_obj
def refresh(engine: QueryEngine, repo_paths: Tuple[Path, ...], workers: int, output: str):
    """Reload branches for every repository, reporting each failure separately.

    Examples:
      commitstat refresh ~/src/api ~/src/web
      commitstat refresh */ --workers 8 --output json
    """

    targets = list(dict.fromkeys(normalize_path(p) for p in repo_paths))
    show_progress = output == 'table'
    with tqdm(total=len(targets), desc="Refreshing", unit="repo", disable=not show_progress) as pbar:

        def on_result(path, result):
            name = Path(path).name
            pbar.set_postfix_str(f"✅ {name}" if result.ok else f"❌ {name}")
            pbar.update(1)

        results = engine.refresh_all(targets, workers, on_result)

    failed = {path: r for path, r in results.items() if not r.ok}

    if output == 'json':
        click.echo(json.dumps({
            path: {'branches': r.value, 'error': str(r.error) if r.error else None}
            for path, r in results.items()
        }, indent=2, ensure_ascii=False))
    else:
        click.echo(f"\n📊 Refresh Summary:")
        click.echo(f"   ✅ Successful: {len(results) - len(failed)}")
        click.echo(f"   ❌ Failed: {len(failed)}")
        for path, r in results.items():
            if r.ok:
                click.echo(f"   🌿 {path}: {', '.join(r.value) or '(no branches)'}")

    for path, r in failed.items():
        click.echo(f"❌ {Path(path).name} refresh failed: {r.error}", err=True)

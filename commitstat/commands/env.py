"""
Environment check command: git availability, version and active settings.
"""

import json
import platform
import sys
from typing import Any, Dict

import rich_click as click

from commitstat import __version__ as COMMITSTAT_VERSION
from commitstat.core.engine import QueryEngine
from commitstat.core.environment import MINIMUM_GIT_VERSION, check_git_environment
from commitstat.core.errors import GitEnvironmentError


@click.command(name="env")
@click.option(
    '--output',
    '-o',
    type=click.Choice(['table', 'json']),
    default='table',
    help='Output format (table/json)',
)
@click.pass_obj
def env_cmd(engine: QueryEngine, output: str) -> None:
    """Check that git is installed and recent enough.

    A missing or outdated git is reported but does not change the exit code.

    Examples:
      commitstat env
      commitstat env --output json
    """

    info = _collect_env_info(engine)

    if output == 'json':
        click.echo(json.dumps(info, indent=2, default=str))
        return

    _print_table(info)


def _collect_env_info(engine: QueryEngine) -> Dict[str, Any]:
    """Collect git, Python and commitstat information."""
    git: Dict[str, Any] = {
        'version': None,
        'minimum': ".".join(str(part) for part in MINIMUM_GIT_VERSION),
        'warning': None,
        'error': None,
    }
    try:
        version, warning = check_git_environment()
        git['version'] = ".".join(str(part) for part in version)
        git['warning'] = warning
    except GitEnvironmentError as e:
        git['error'] = str(e)

    return {
        'git': git,
        'python': {
            'version': platform.python_version(),
            'implementation': platform.python_implementation(),
            'executable': sys.executable,
        },
        'commitstat': {
            'version': COMMITSTAT_VERSION,
            'settings': engine.settings.to_dict(),
        },
    }


def _print_table(info: Dict[str, Any]) -> None:
    """Pretty-print environment info for humans."""
    click.echo("🧩 commitstat Environment")
    click.echo("=" * 60)

    git = info['git']
    click.echo("\n🔧 Git")
    if git['error']:
        click.echo(f"❌ {git['error']}", err=True)
    else:
        click.echo(f"  Version:   {git['version']} (minimum {git['minimum']})")
        if git['warning']:
            click.echo(f"⚠️ {git['warning']}", err=True)

    python = info['python']
    click.echo("\n🐍 Python")
    click.echo(f"  Version:   {python['version']} ({python['implementation']})")
    click.echo(f"  Executable:{python['executable']}")

    app = info['commitstat']
    click.echo("\n💎 commitstat")
    click.echo(f"  Version:   {app['version']}")
    for key, value in app['settings'].items():
        click.echo(f"  {key}: {value}")

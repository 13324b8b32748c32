"""Command-line interface for ccactive."""

import json
import logging
from pathlib import Path

import click

from ccactive.context import CcactiveContext, create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

UNSUPPORTED_MESSAGE = "Session detection is not supported on this platform."

pass_context = click.make_pass_decorator(CcactiveContext)


@click.group(name="ccactive", context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="ccactive")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Show which directories have an active Claude Code session."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()


@cli.command(name="list")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@pass_context
def list_cmd(ctx: CcactiveContext, as_json: bool) -> None:
    """List directories with a running claude process."""
    result = ctx.session_detector().detect()

    if as_json:
        click.echo(json.dumps(result.to_json_dict()))
        return

    if not result.supported:
        click.echo(UNSUPPORTED_MESSAGE)
        return

    if not result.active_paths:
        click.echo("No active sessions.")
        return

    for path in sorted(result.active_paths):
        click.echo(path)


@cli.command(name="check")
@click.argument("path", type=click.Path(path_type=Path))
@pass_context
def check_cmd(ctx: CcactiveContext, path: Path) -> None:
    """Check whether PATH has an active session.

    Exits 0 when active, 1 when inactive, 2 when detection is unsupported.
    """
    result = ctx.session_detector().detect()
    if not result.supported:
        click.echo(UNSUPPORTED_MESSAGE, err=True)
        raise SystemExit(2)

    # Relative paths are taken from the invocation directory; symlinks are
    # resolved because the OS reports working directories in resolved form.
    resolved = (ctx.cwd / path).resolve()
    if result.is_active(str(resolved)):
        click.echo("active")
        return

    click.echo("inactive")
    raise SystemExit(1)


def main() -> None:
    """CLI entry point used by the `ccactive` console script."""
    cli()

from __future__ import annotations

from pathlib import Path

import click

from scopeid import __version__
from scopeid.errors import ScopeIdError
from scopeid.ids import generate_id, parse_id
from scopeid.registry import ScopeRegistry

DEFAULT_SCOPES = "scopes.yaml"


@click.group()
@click.version_option(version=__version__, prog_name="scopeid")
@click.option(
    "--scopes",
    "scopes_path",
    default=DEFAULT_SCOPES,
    envvar="SCOPEID_SCOPES",
    type=click.Path(),
    help="Path to the YAML scope file.",
)
@click.pass_context
def cli(ctx, scopes_path):
    """Generate and inspect scope-tagged identifiers."""
    ctx.ensure_object(dict)
    ctx.obj["scopes_path"] = Path(scopes_path)


def _load_registry(ctx) -> ScopeRegistry:
    scopes_path = ctx.obj["scopes_path"]
    if not scopes_path.is_file():
        click.echo(f"Scope file not found: {scopes_path}", err=True)
        raise SystemExit(1)
    try:
        return ScopeRegistry.from_file(scopes_path)
    except OSError as e:
        click.echo(f"Cannot read scope file: {e}", err=True)
        raise SystemExit(1)
    except ValueError as e:
        click.echo(f"Invalid scope file: {e}", err=True)
        raise SystemExit(1)


@cli.command()
@click.argument("scope")
@click.option("-n", "--count", type=click.IntRange(min=1), default=1,
              help="Number of identifiers to generate.")
@click.pass_context
def generate(ctx, scope, count):
    """Generate new identifiers in SCOPE."""
    registry = _load_registry(ctx)
    try:
        for _ in range(count):
            click.echo(generate_id(scope, registry).hex)
    except ScopeIdError as e:
        click.echo(f"ERROR: {e}", err=True)
        raise SystemExit(1)


@cli.command()
@click.argument("identifiers", nargs=-1, required=True)
@click.pass_context
def parse(ctx, identifiers):
    """Show the scope of each identifier."""
    registry = _load_registry(ctx)
    failed = 0
    for text in identifiers:
        try:
            identifier = parse_id(text, registry)
        except ScopeIdError as e:
            click.echo(f"  ERROR: {e}", err=True)
            failed += 1
            continue
        click.echo(f"{identifier.hex}  {identifier.scope}")

    if failed:
        click.echo(f"{failed} identifier(s) could not be parsed.", err=True)
        raise SystemExit(1)


@cli.command(name="scopes")
@click.pass_context
def list_scopes(ctx):
    """List registered scopes and their tags."""
    registry = _load_registry(ctx)
    items = registry.items()
    if not items:
        click.echo("No scopes registered.")
        return
    for name, tag in items:
        click.echo(f"0x{tag:02x}  {name}")

"""Command-line interface for managed-alias."""

import logging
import sys
from typing import NoReturn

import click

from . import launcher
from .config import resolve_style_name
from .exceptions import ManagedAliasError
from .listing import ListFormat, format_aliases
from .store import AliasStore
from .table.style import STYLES

logger = logging.getLogger(__name__)

COMMAND_ALIASES = {
    "g": "go",
    "s": "set",
    "l": "list",
    "r": "run",
    "d": "delete",
}
"""Single-letter shortcuts for subcommands."""

OPEN_COMMAND = "open key"
"""Hidden command used when the first argument is a key, not a subcommand.

The name contains whitespace so that it can never collide with a stored key.
"""


class AliasGroup(click.Group):
    """Group that resolves subcommand shortcuts and treats unknown words as keys."""

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        return super().get_command(ctx, COMMAND_ALIASES.get(cmd_name, cmd_name))

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        if args and not args[0].startswith("-") and self.get_command(ctx, args[0]) is None:
            return OPEN_COMMAND, self.get_command(ctx, OPEN_COMMAND), args
        return super().resolve_command(ctx, args)


def _fail(message: str) -> NoReturn:
    click.echo(f"✗ {message}", err=True)
    sys.exit(1)


@click.group(cls=AliasGroup)
@click.version_option(package_name="managed-alias")
@click.option(
    "--store",
    "store_path",
    type=click.Path(dir_okay=False),
    help=(
        "Alias store file "
        "(default: $MANAGED_ALIAS_STORE, else .managed-alias-store beside the executable)"
    ),
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, store_path: str | None, verbose: bool) -> None:
    """Store short aliases for paths and command lines.

    Run `managed-alias KEY [ARGS]...` to navigate to a stored path or run a
    stored command.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(message)s",
    )
    ctx.obj = AliasStore(store_path)
    logger.debug("Using alias store %s", ctx.obj.path)


@cli.command("set", context_settings={"ignore_unknown_options": True})
@click.argument("key")
@click.argument("value", nargs=-1, required=True, type=click.UNPROCESSED)
@click.pass_obj
def set_alias(store: AliasStore, key: str, value: tuple[str, ...]) -> None:
    """Sets the specified key to the specified value."""
    combined = " ".join(value)
    try:
        store.set(key, combined)
    except ManagedAliasError as e:
        _fail(str(e))
    click.echo(f"✓ {key} = {combined}")


@cli.command("list")
@click.option(
    "--format",
    "list_format",
    type=click.Choice([f.value for f in ListFormat]),
    default=ListFormat.TABLE.value,
    show_default=True,
    help="Output format",
)
@click.option(
    "--style",
    type=click.Choice(sorted(STYLES)),
    help="Table border style (default: $MANAGED_ALIAS_STYLE, else extended)",
)
@click.pass_obj
def list_aliases(store: AliasStore, list_format: str, style: str | None) -> None:
    """Lists all variables."""
    try:
        style_name = resolve_style_name(style)
        aliases = store.load()
    except (ManagedAliasError, ValueError) as e:
        _fail(str(e))

    output = format_aliases(aliases, formatter=ListFormat(list_format), style=style_name)
    if output:
        click.echo(output)


@cli.command("delete")
@click.argument("key")
@click.pass_obj
def delete_alias(store: AliasStore, key: str) -> None:
    """Delete a key value pair."""
    try:
        store.delete(key)
    except ManagedAliasError as e:
        _fail(str(e))
    click.echo(f"✓ Deleted {key}")


@cli.command("go")
@click.argument("key")
@click.pass_obj
def go(store: AliasStore, key: str) -> None:
    """Navigates to the value of the specified key."""
    try:
        value = store.require(key)
    except ManagedAliasError as e:
        _fail(str(e))
    click.echo(launcher.go(value))


@cli.command("run", context_settings={"ignore_unknown_options": True})
@click.argument("key")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def run(store: AliasStore, key: str, args: tuple[str, ...]) -> None:
    """Execute the matching value for the provided key."""
    try:
        launcher.run(store.require(key), args)
    except ManagedAliasError as e:
        _fail(str(e))


@cli.command(OPEN_COMMAND, hidden=True, context_settings={"ignore_unknown_options": True})
@click.argument("key")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def open_alias(store: AliasStore, key: str, args: tuple[str, ...]) -> None:
    """Navigate to a path value, otherwise run the command value."""
    try:
        value = store.require(key)
        if launcher.is_path(value):
            click.echo(launcher.go(value))
        else:
            launcher.run(value, args)
    except ManagedAliasError as e:
        _fail(str(e))


if __name__ == "__main__":
    cli()

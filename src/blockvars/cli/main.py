"""blockvars CLI - inspect how a namespace would be resolved."""

import json

import click

from blockvars.config.constants import DEFAULT_SETTER_KIND
from blockvars.config.loader import load_config
from blockvars.context import RegistryContext
from blockvars.core.errors import BlockVarsError
from blockvars.core.logging import configure_logging
from blockvars.memory import BlockWorkspace, VariableBlock, default_catalog
from blockvars.variables import VariableOps


def build_ops(names: tuple[str, ...], *, verbose: bool = False) -> VariableOps:
    """VariableOps over an in-memory workspace holding one setter per name."""
    config = load_config()
    if verbose:
        config.logging.level = "DEBUG"
    configure_logging(config=config.logging)

    workspace = BlockWorkspace()
    for name in names:
        VariableBlock(workspace, DEFAULT_SETTER_KIND, name=name)
    context = RegistryContext.create(default_catalog(), config=config, default_workspace=workspace)
    return VariableOps(context)


@click.group()
@click.version_option(version="0.1.0", prog_name="blockvars")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """blockvars - variable names for block workspaces."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@cli.command("unique-name")
@click.argument("names", nargs=-1)
@click.option("--base", default=None, help="Derive the name from BASE instead of i, j, k...")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def unique_name_command(
    ctx: click.Context, names: tuple[str, ...], base: str | None, as_json: bool
) -> None:
    """Print a name not used by any of NAMES."""
    try:
        ops = build_ops(names, verbose=ctx.obj["verbose"])
        name = ops.generate_unique_name(base)
    except BlockVarsError as e:
        raise click.ClickException(str(e)) from e
    if as_json:
        click.echo(json.dumps({"name": name}))
    else:
        click.echo(name)


@cli.command("list")
@click.argument("names", nargs=-1)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def list_command(ctx: click.Context, names: tuple[str, ...], as_json: bool) -> None:
    """Print NAMES de-duplicated (ignoring case) and sorted."""
    try:
        ops = build_ops(names, verbose=ctx.obj["verbose"])
        variables = sorted(ops.all_variables(), key=str.lower)
    except BlockVarsError as e:
        raise click.ClickException(str(e)) from e
    if as_json:
        click.echo(json.dumps({"variables": variables}))
    else:
        for name in variables:
            click.echo(name)


if __name__ == "__main__":
    cli()

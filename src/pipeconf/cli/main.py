"""
Main CLI entry point.
"""

import json
import sys

import click

from pipeconf import __version__
from pipeconf.core.tree.types import ComponentCategory

_CATEGORIES = [c.value for c in ComponentCategory]


@click.group()
@click.version_option(version=__version__)
def main():
    """Pipeconf: insert default components into pipeline configuration files."""
    pass


@main.command()
@click.argument("category", type=click.Choice(_CATEGORIES))
@click.argument("type_name")
@click.option("--config", "-c", "config_path", required=True, type=click.Path(exists=True, dir_okay=False),
              help="Pipeline config file (YAML or JSON), rewritten in place")
@click.option("--output", "-o", "output_path", type=click.Path(dir_okay=False),
              help="Write the result here instead of overwriting --config")
@click.option("--settings", "-s", "settings_path", type=click.Path(exists=True, dir_okay=False),
              help="Mutator settings defaults (YAML or JSON)")
@click.option("--settings-local", type=click.Path(dir_okay=False),
              help="Optional local overrides for --settings")
@click.option("-v", "--verbose", is_flag=True, help="Print the mutation journal as JSON")
def add(category, type_name, config_path, output_path, settings_path, settings_local, verbose):
    """Add a default TYPE_NAME component of CATEGORY to a config file."""
    from pipeconf.core.config import ConfigError, MutatorSettings, dump_document, load_config, load_document
    from pipeconf.core.errors import exception_to_payload
    from pipeconf.core.exceptions import PipeconfException
    from pipeconf.core.mutator import Mutator
    from pipeconf.core.traceability import MutationJournal
    from pipeconf.core.tree import tree_from_dict, tree_to_dict

    if settings_local and not settings_path:
        raise click.UsageError("--settings-local requires --settings")

    journal = MutationJournal(meta={"config": config_path})

    try:
        settings = MutatorSettings()
        if settings_path:
            settings = MutatorSettings.from_config(
                load_config(defaults_path=settings_path, local_path=settings_local)
            )
        tree = tree_from_dict(load_document(config_path))
    except ConfigError as e:
        raise click.ClickException(str(e))

    mutator = Mutator.builtin(settings=settings, journal=journal)

    try:
        result = mutator.add(ComponentCategory(category), type_name, tree)
    except PipeconfException as e:
        click.echo(json.dumps(exception_to_payload(e).to_dict(), ensure_ascii=False, indent=2), err=True)
        if verbose:
            click.echo(json.dumps(journal.events, ensure_ascii=False, indent=2), err=True)
        sys.exit(1)

    try:
        dump_document(output_path or config_path, tree_to_dict(tree))
    except ConfigError as e:
        raise click.ClickException(str(e))

    click.echo(journal.events[-1]["message"])
    if result.key is not None:
        click.echo(f"key: {result.key}")
    if verbose:
        click.echo(json.dumps(journal.events, ensure_ascii=False, indent=2))


@main.command()
@click.argument("category", type=click.Choice(_CATEGORIES))
def types(category):
    """List the built-in type names of CATEGORY."""
    from pipeconf.core.catalog import builtin_catalog

    registries, _ = builtin_catalog()
    for name in registries.for_category(ComponentCategory(category)).list_ids():
        click.echo(name)


if __name__ == "__main__":
    main()

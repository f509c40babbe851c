"""Command line interface for microsponsors-deployments library."""

import json
import logging
from pathlib import Path

import click

from .exceptions import DeploymentError
from .ingestion import records_from_migrations
from .parsers import registry_document, write_registry_file
from .paths import get_default_export_path
from .registry import get_default_registry
from .validation import is_valid_address, validate


def _fail(error: DeploymentError) -> None:
    click.secho(str(error), fg="red", err=True)
    raise SystemExit(1)


@click.group()
def cli():
    """Inspect Microsponsors deployment parameters."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")


@cli.command("list")
def list_command():
    """List configured environments in authoring order."""
    try:
        registry = get_default_registry()
    except DeploymentError as e:
        _fail(e)
    for environment in registry.list_environments():
        click.echo(environment)


@cli.command()
@click.argument("environment")
def show(environment):
    """Show the record for ENVIRONMENT as JSON."""
    try:
        record = get_default_registry().get_record(environment)
    except DeploymentError as e:
        _fail(e)
    data = record.to_dict()
    if is_valid_address(record.registry_address) and record.explorer_url is not None:
        data["explorer_url"] = record.explorer_url
    click.echo(json.dumps(data, indent=2))


@cli.command()
@click.argument("environment")
def args(environment):
    """Print validated constructor arguments for ENVIRONMENT."""
    try:
        constructor_args = get_default_registry().constructor_args(environment)
    except DeploymentError as e:
        _fail(e)
    click.echo(json.dumps(list(constructor_args)))


@cli.command()
@click.argument("environment", required=False)
def check(environment):
    """Validate ENVIRONMENT, or every record when omitted."""
    try:
        registry = get_default_registry()
        if environment is not None:
            validate(registry.get_record(environment))
            click.secho(f"{environment}: ok", fg="green")
            return
    except DeploymentError as e:
        _fail(e)

    failures = registry.validate_all()
    for label in registry.list_environments():
        if label not in failures:
            click.secho(f"{label}: ok", fg="green")
            continue
        for error in failures[label]:
            click.secho(f"{label}: {error.field}: {error.message} ({error.value!r})", fg="red")

    if failures:
        raise SystemExit(1)


@cli.command()
@click.argument(
    "output",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
def export(output):
    """Write the active deployment table as a registry file."""
    if output is None:
        output = get_default_export_path()
    try:
        registry = get_default_registry()
    except DeploymentError as e:
        _fail(e)
    written = write_registry_file(registry.records(), output)
    click.echo(f"Wrote {len(registry)} records to {written}")


@cli.command("import-migrations")
@click.argument(
    "migrations_dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
def import_migrations(migrations_dir):
    """Print records recovered from Truffle migration scripts as a registry file."""
    records = records_from_migrations(migrations_dir)
    click.echo(json.dumps(registry_document(records), indent=2))


if __name__ == "__main__":
    cli()

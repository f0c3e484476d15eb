"""figwind CLI entry point."""
from __future__ import annotations

import json
import logging
import sys

import click

from figwind import __version__
from figwind.config import FigwindConfig
from figwind.errors import DictionaryError
from figwind.store import Database, DictionaryStore, run_migrations


def _open_store(db_path: str, storage_key: str) -> tuple[Database, DictionaryStore]:
    database = Database(db_path)
    database.connect()
    run_migrations(database)
    return database, DictionaryStore(database, storage_key=storage_key)


def _db_option(fn):
    fn = click.option(
        "--key",
        "storage_key",
        default=FigwindConfig.storage_key,
        show_default=True,
        help="Storage key of the variable dictionary",
    )(fn)
    return click.option(
        "--db",
        default=FigwindConfig.db_path,
        show_default=True,
        help="Database path",
    )(fn)


@click.group()
@click.version_option(version=__version__, prog_name="figwind")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """figwind: convert Figma CSS into Tailwind utility classes."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


@cli.command()
@click.option("--css", "css_text", default=None, help="CSS declarations to convert")
@click.option(
    "--file",
    "css_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Read CSS declarations from a file",
)
@click.option("--prefix", "prefixes", default="", help='Variant prefixes, e.g. "lg hover"')
@click.option("--existing", default="", help="Existing classes to merge into")
@_db_option
def convert(
    css_text: str | None,
    css_file: str | None,
    prefixes: str,
    existing: str,
    db: str,
    storage_key: str,
) -> None:
    """Convert CSS declarations into a Tailwind class string.

    CSS is taken from --css, --file, or standard input, in that order.
    """
    from figwind.pipeline import convert_css

    if css_text is None:
        if css_file is not None:
            with open(css_file, encoding="utf-8") as fh:
                css_text = fh.read()
        else:
            css_text = sys.stdin.read()

    database, store = _open_store(db, storage_key)
    try:
        click.echo(convert_css(css_text, store, prefixes=prefixes, existing=existing))
    finally:
        database.close()


@cli.group("vars")
def vars_group() -> None:
    """Manage the CSS variable dictionary."""


@vars_group.command("list")
@_db_option
def vars_list(db: str, storage_key: str) -> None:
    """Print the dictionary as JSON."""
    database, store = _open_store(db, storage_key)
    try:
        click.echo(json.dumps(store.all(), indent=2, sort_keys=True))
    finally:
        database.close()


@vars_group.command("add")
@click.argument("name")
@click.argument("value")
@_db_option
def vars_add(name: str, value: str, db: str, storage_key: str) -> None:
    """Map CSS variable NAME (e.g. --Heading-Font) to a Tailwind VALUE."""
    database, store = _open_store(db, storage_key)
    try:
        store.set(name, value)
    except DictionaryError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    finally:
        database.close()
    click.echo(f"Added {name.strip()} -> {value.strip()}")


@vars_group.command("remove")
@click.argument("name")
@_db_option
def vars_remove(name: str, db: str, storage_key: str) -> None:
    """Remove CSS variable NAME from the dictionary."""
    database, store = _open_store(db, storage_key)
    try:
        removed = store.remove(name)
    finally:
        database.close()
    if not removed:
        click.echo(f"Not found: {name}", err=True)
        sys.exit(1)
    click.echo(f"Removed {name}")


@vars_group.command("import")
@click.argument("json_file", type=click.Path(exists=True, dir_okay=False))
@_db_option
def vars_import(json_file: str, db: str, storage_key: str) -> None:
    """Import entries from a JSON object file."""
    with open(json_file, encoding="utf-8") as fh:
        try:
            data = json.load(fh)
        except ValueError as exc:
            click.echo(f"Invalid JSON: {exc}", err=True)
            sys.exit(1)
    if not isinstance(data, dict):
        click.echo("Invalid JSON: expected an object", err=True)
        sys.exit(1)

    database, store = _open_store(db, storage_key)
    try:
        added = store.update(data)
    finally:
        database.close()
    click.echo(f"Imported {added} variables")


@cli.command()
@click.option("--host", default=FigwindConfig.host, help="Host to bind to")
@click.option("--port", default=FigwindConfig.port, type=int, help="Port to bind to")
@_db_option
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def serve(host: str, port: int, db: str, storage_key: str, debug: bool) -> None:
    """Start the figwind web API."""
    from figwind.web.app import create_app

    config = FigwindConfig(db_path=db, storage_key=storage_key, host=host, port=port)
    database = Database(config.db_path)
    database.connect()
    run_migrations(database)

    app = create_app(db=database, config={"FIGWIND": config})
    click.echo(f"Starting figwind on {host}:{port}")
    app.run(host=host, port=port, debug=debug)

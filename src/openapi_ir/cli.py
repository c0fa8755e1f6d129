"""CLI entry point for openapi-ir."""

import logging
from pathlib import Path

import click
from pydantic import ValidationError

from openapi_ir.config import load_config
from openapi_ir.generator.document import generate_document
from openapi_ir.ir.bundle import IrBundle
from openapi_ir.parser.cache import CacheFormatError, dump_bundle, load_bundle, write_keyed_file


def _load(cache_path: Path) -> IrBundle:
    """Load a cache file, turning data errors into CLI errors."""
    try:
        return load_bundle(cache_path)
    except (CacheFormatError, ValidationError) as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """openapi-ir: normalize and emit cached OpenAPI IR."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@main.command()
@click.argument("cache_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output file (.json for JSON, otherwise YAML).")
def normalize(cache_path: Path, output: Path):
    """Rebuild cached IR and write its canonical keyed form."""
    click.echo(f"Loading {cache_path}...")
    bundle = _load(cache_path)

    dump_bundle(bundle, output)
    click.echo(f"Normalized IR saved to {output}")


@main.command()
@click.argument("cache_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output file (.json for JSON, otherwise YAML).")
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, path_type=Path), help="YAML settings file.")
def emit(cache_path: Path, output: Path, config_path: Path | None):
    """Fold cached IR into an OpenAPI document fragment."""
    click.echo(f"Loading {cache_path}...")
    bundle = _load(cache_path)

    try:
        config = load_config(config_path)
    except (CacheFormatError, ValidationError) as e:
        raise click.ClickException(str(e)) from e

    doc = generate_document(bundle, config)
    write_keyed_file(doc, output)
    click.echo(f"OpenAPI fragment saved to {output}")


@main.command()
@click.argument("cache_path", type=click.Path(exists=True, path_type=Path))
def inspect(cache_path: Path):
    """Print a summary of cached IR."""
    bundle = _load(cache_path)
    auth = bundle.authentication

    if bundle.info is not None:
        click.echo(f"Info: {bundle.info.title} {bundle.info.version}".rstrip())
    click.echo(f"Types: {', '.join(bundle.types) or '-'}")
    click.echo(f"Enum parameters: {len(bundle.enum_parameters)}")
    click.echo(f"Security schemes: {auth.count_schemes()} ({', '.join(auth.get_scheme_names()) or '-'})")
    click.echo(f"Authenticated routes: {auth.count_authenticated_routes()}")
    for index, route in sorted(auth.routes.items()):
        flag = "required" if route.is_required() else "optional"
        middleware = ", ".join(route.middleware) or "-"
        click.echo(f"  #{index}: {route.get_scheme_name()} ({flag}) [{middleware}]")
    click.echo(f"Callbacks: {len(bundle.callbacks)}")
    for group in bundle.tag_groups:
        click.echo(f"Tag group {group.name}: {', '.join(group.tags)}")

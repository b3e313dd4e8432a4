"""Command line interface for the operation catalog."""
import json
import logging
from dataclasses import replace
from typing import Dict, Optional, Tuple

import click
from colorama import Fore, Style, init

from ..collector import build_service_catalog, collect_service
from ..config import CollectorConfig, ServiceTarget
from ..errors import CatalogError
from ..introspection.models import OperationShape

# Initialize colorama
init(autoreset=True)


def print_banner():
    """Print application banner."""
    click.echo(f"{Fore.CYAN}{'=' * 44}")
    click.echo(f"{Fore.CYAN}║   {Fore.WHITE}SDK Operation Catalog{Fore.CYAN}                ║")
    click.echo(f"{Fore.CYAN}{'=' * 44}{Style.RESET_ALL}")
    click.echo()


def print_header(title: str):
    """Print a section header."""
    click.echo(f"\n{Fore.CYAN}{'━' * 45}")
    click.echo(f"{Fore.CYAN}{title}")
    click.echo(f"{Fore.CYAN}{'━' * 45}{Style.RESET_ALL}\n")


def summarize(shape: OperationShape) -> Dict[str, Optional[int]]:
    """Field counts per side (None for absent sides)."""
    return {
        "request": len(shape.request) if shape.request is not None else None,
        "response": len(shape.response) if shape.response is not None else None,
    }


def load_config() -> CollectorConfig:
    """Load configuration from the environment, reporting bad values as usage errors."""
    try:
        return CollectorConfig.from_env()
    except ValueError as e:
        raise click.UsageError(f"CATALOG_SERVICES: {e}")


def parse_targets(specs: Tuple[str, ...]) -> list:
    """Parse NAME=module:Class arguments, reporting bad ones as usage errors."""
    try:
        return [ServiceTarget.parse(spec) for spec in specs]
    except ValueError as e:
        raise click.BadParameter(str(e))


@click.group()
@click.version_option(version="0.1.0")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """SDK Operation Catalog - derive request/response shapes of API clients."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("services", nargs=-1)
@click.option("--output-dir", type=click.Path(file_okay=False), help="Directory for catalog files")
@click.option("--prefix", default=None, help="File name prefix (e.g. aws_)")
@click.option("--strict", is_flag=True, help="Fail on operations with several request/response candidates")
def collect(services, output_dir, prefix, strict):
    """Write <service>_operations.json for each NAME=module:Class."""
    print_banner()

    config = load_config()
    if services:
        config = replace(config, services=parse_targets(services))
    if output_dir:
        config = replace(config, output_dir=output_dir)
    if prefix is not None:
        config = replace(config, file_prefix=prefix)
    if strict:
        config = replace(config, strict=True)

    if not config.services:
        raise click.UsageError("No services given (pass NAME=module:Class or set CATALOG_SERVICES)")

    failed = 0
    for target in config.services:
        try:
            path = collect_service(target, config)
        except CatalogError as e:
            raise click.ClickException(str(e))

        if path is None:
            failed += 1
            click.echo(f"{Fore.RED}❌ {target.name}: catalog not written")
        else:
            click.echo(f"{Fore.GREEN}✅ {target.name}: {path}")

    if failed:
        raise SystemExit(1)


@cli.command()
@click.argument("service")
@click.option("--operation", "-o", default=None, help="Print the JSON entry of one operation")
def show(service, operation: Optional[str]):
    """Print a summary of the catalog of NAME=module:Class."""
    target = parse_targets((service,))[0]

    try:
        catalog = build_service_catalog(target, load_config())
    except CatalogError as e:
        raise click.ClickException(str(e))

    if operation:
        shape = catalog.get_operation(operation)
        if shape is None:
            raise click.ClickException(f"Operation '{operation}' not found in {target.name}")
        click.echo(json.dumps({operation: shape.to_dict()}, indent=2, sort_keys=True))
        return

    print_header(f"{target.name}: {len(catalog)} operations")
    for name in sorted(catalog.operations):
        shape = catalog.operations[name]
        counts = summarize(shape)
        request = "-" if counts["request"] is None else counts["request"]
        response = "-" if counts["response"] is None else counts["response"]
        click.echo(f"📍 {name}  {Fore.YELLOW}in: {request}  out: {response}{Style.RESET_ALL}")
        if shape.request:
            fields = list(shape.request.items())
            for field_name, field_type in fields[:3]:
                click.echo(f"    ├─ {field_name}: {field_type}")
            if len(fields) > 3:
                click.echo(f"    ... +{len(fields) - 3} more")

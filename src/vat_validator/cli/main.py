"""CLI entry point for vat-validator.

Invoked as::

    vat-validator [OPTIONS] COMMAND [ARGS]...

or during development::

    python -m vat_validator.cli.main

Commands
--------
- countries   List the countries whose VAT format can be checked
- format      Check the format of one or more VAT numbers (no network)
- validate    Check format and registration of a VAT number against VIES
- init        Write a default configuration file
- version     Show version information
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

console = Console()
err_console = Console(stderr=True)

_DEFAULT_CONFIG = Path("vat_validator.yaml")

_STATUS_STYLES: dict[str, str] = {
    "match": "[green]VALID FORMAT[/green]",
    "mismatch": "[red]INVALID FORMAT[/red]",
    "unsupported": "[yellow]UNSUPPORTED COUNTRY[/yellow]",
}


# ---------------------------------------------------------------------------
# Root command group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="vat-validator")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """VAT number validation tools."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# ---------------------------------------------------------------------------
# version
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from vat_validator import __version__

    console.print(
        Panel(
            f"[bold]vat-validator[/bold]  v[cyan]{__version__}[/cyan]\n"
            "VAT identification number format and VIES validation.",
            title="Version",
            border_style="blue",
        )
    )


# ---------------------------------------------------------------------------
# countries
# ---------------------------------------------------------------------------


@cli.command(name="countries")
@click.option(
    "--region",
    "-r",
    type=click.Choice(["eu", "non-eu", "all"]),
    default="all",
    show_default=True,
    help="Which rule table to list.",
)
def countries_command(region: str) -> None:
    """List the countries whose VAT number format can be checked."""
    from vat_validator.registry import DEFAULT_REGISTRY

    rules = [r for r in DEFAULT_REGISTRY.rules() if region == "all" or r.region.value == region]

    table = Table(title="Supported Countries", box=box.SIMPLE)
    table.add_column("Code", style="cyan", no_wrap=True)
    table.add_column("Region", style="magenta")
    table.add_column("Pattern")
    for rule in rules:
        table.add_row(rule.country_code, rule.region.value.upper(), rule.pattern)

    console.print(table)
    console.print(f"  Countries: [cyan]{len(rules)}[/cyan]")


# ---------------------------------------------------------------------------
# format
# ---------------------------------------------------------------------------


@cli.command(name="format")
@click.argument("vat_numbers", nargs=-1, required=True)
@click.option(
    "--country",
    "-c",
    default=None,
    help="Country code to check against instead of the number's prefix.",
)
def format_command(vat_numbers: tuple[str, ...], country: str | None) -> None:
    """Check the format of VAT numbers without contacting any registry."""
    from vat_validator.validation.format_validator import FormatStatus, FormatValidator

    validator = FormatValidator()

    table = Table(title="Format Check", box=box.SIMPLE)
    table.add_column("VAT Number", style="cyan")
    table.add_column("Result")

    all_match = True
    for vat_number in vat_numbers:
        status = validator.format_status(vat_number, country)
        all_match = all_match and status is FormatStatus.MATCH
        table.add_row(vat_number, _STATUS_STYLES[status.value])

    console.print(table)
    sys.exit(0 if all_match else 1)


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------


@cli.command(name="validate")
@click.argument("vat_number")
@click.option(
    "--country",
    "-c",
    default=None,
    help="Country code for the format check instead of the number's prefix.",
)
@click.option(
    "--config",
    "config_path",
    default=str(_DEFAULT_CONFIG),
    show_default=True,
    type=click.Path(),
    help="Path to vat_validator.yaml.",
)
def validate_command(vat_number: str, country: str | None, config_path: str) -> None:
    """Check format and registration of a VAT number against VIES."""
    from vat_validator.config_loader import ConfigLoader
    from vat_validator.validation.format_validator import FormatStatus
    from vat_validator.validation.validator import VatValidator
    from vat_validator.vies.client import ViesClient
    from vat_validator.vies.errors import RegistryError

    loader = ConfigLoader()
    cfg_path = Path(config_path)
    config = loader.load(cfg_path) if cfg_path.exists() else loader.defaults()

    validator = VatValidator(client=ViesClient.from_config(config.vies))
    status = validator.format_status(vat_number, country)
    if status is not FormatStatus.MATCH:
        console.print(Panel(_STATUS_STYLES[status.value], title=vat_number, border_style="blue"))
        sys.exit(1)

    try:
        registered = validator.validate_existence(vat_number)
    except RegistryError as exc:
        err_console.print(f"[red]Registry error:[/red] {exc}")
        sys.exit(2)

    if registered:
        status_str = "[green]VALID[/green]"
    else:
        status_str = "[red]NOT REGISTERED[/red]"
    console.print(Panel(status_str, title=vat_number, border_style="blue"))
    sys.exit(0 if registered else 1)


# ---------------------------------------------------------------------------
# init
# ---------------------------------------------------------------------------


@cli.command(name="init")
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    default=str(_DEFAULT_CONFIG),
    show_default=True,
    help="Output config file path.",
)
def init_command(output: str) -> None:
    """Write a default configuration file."""
    import yaml

    from vat_validator.config_loader import ConfigLoader

    output_path = Path(output)
    config = ConfigLoader().defaults()

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as fh:
        yaml.dump(config.model_dump(), fh, default_flow_style=False, sort_keys=False, allow_unicode=True)

    console.print(f"[green]Initialised[/green] config: [bold]{output_path}[/bold]")


if __name__ == "__main__":
    cli()

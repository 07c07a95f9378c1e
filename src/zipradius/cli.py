"""CLI entrypoint for zipradius."""

from __future__ import annotations

import json
import logging
import math

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from zipradius.dataset import load_dataset
from zipradius.formats import FORMATS
from zipradius.geo import great_circle_miles, km_to_miles, miles_to_km
from zipradius.models import ZipCode
from zipradius.parsers import ParseError
from zipradius.query import find, find_in_radius, sort_by_distance

console = Console()

FORMAT_CHOICE = click.Choice(sorted(FORMATS))


def _load(path: str, fmt: str) -> list[ZipCode]:
    try:
        return load_dataset(path, fmt)
    except ParseError as exc:
        raise click.ClickException(f"{path}: {exc}") from exc
    except OSError as exc:
        raise click.ClickException(f"cannot read {path}: {exc.strerror or exc}") from exc


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool):
    """Postal-code lookup and radius search over flat data files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@cli.command("find")
@click.argument("path", type=click.Path(dir_okay=False))
@click.argument("code")
@click.option("--format", "fmt", required=True, type=FORMAT_CHOICE, help="Input file format.")
@click.option("--json", "as_json", is_flag=True, help="Print the record as JSON.")
def find_cmd(path: str, code: str, fmt: str, as_json: bool):
    """Look up a single postal code."""
    zips = _load(path, fmt)
    z = find(code, zips)
    if z is None:
        raise click.ClickException(f"postal code {code!r} not found")

    if as_json:
        click.echo(z.to_json())
        return

    table = Table(title=f"Postal code {z.code}")
    table.add_column("Field", style="bold")
    table.add_column("Value")
    for key, value in z.to_dict().items():
        table.add_row(key, str(value))
    console.print(table)


@cli.command("radius")
@click.argument("path", type=click.Path(dir_okay=False))
@click.argument("code")
@click.argument("radius", type=float)
@click.option("--format", "fmt", required=True, type=FORMAT_CHOICE, help="Input file format.")
@click.option("--km", is_flag=True, help="Radius and distances in kilometers.")
@click.option("--sort", "sort_results", is_flag=True, help="Order results nearest first.")
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON.")
def radius_cmd(path: str, code: str, radius: float, fmt: str, km: bool, sort_results: bool, as_json: bool):
    """List postal codes within RADIUS miles of CODE."""
    if not math.isfinite(radius):
        raise click.BadParameter(f"{radius} is not a finite number", param_hint="RADIUS")
    zips = _load(path, fmt)
    radius_miles = km_to_miles(radius) if km else radius

    matches = find_in_radius(code, radius_miles, zips)
    if sort_results:
        matches = sort_by_distance(matches)

    unit = "km" if km else "mi"

    def _dist(miles: float) -> float:
        return miles_to_km(miles) if km else miles

    if as_json:
        rows = []
        for m in matches:
            d = m.to_dict()
            d["distance"] = _dist(m.distance)
            rows.append(d)
        click.echo(json.dumps(rows))
        return

    table = Table(title=f"Within {radius:g} {unit} of {code} ({len(matches)} found)")
    table.add_column("Code", style="bold")
    table.add_column("City")
    table.add_column("State", width=5)
    table.add_column("County")
    table.add_column(f"Distance ({unit})", justify="right")

    for m in matches:
        table.add_row(m.code, m.city, m.state, m.zip.county, f"{_dist(m.distance):.2f}")

    console.print(table)


@cli.command("distance")
@click.argument("lat1", type=float)
@click.argument("lon1", type=float)
@click.argument("lat2", type=float)
@click.argument("lon2", type=float)
@click.option("--km", is_flag=True, help="Print kilometers instead of miles.")
def distance_cmd(lat1: float, lon1: float, lat2: float, lon2: float, km: bool):
    """Great-circle distance between two coordinate pairs."""
    miles = great_circle_miles(lat1, lon1, lat2, lon2)
    if km:
        click.echo(f"{miles_to_km(miles):.2f} km")
    else:
        click.echo(f"{miles:.2f} mi")

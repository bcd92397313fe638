"""Command line interface for encoding and decoding C-squares cells."""

import json
import logging
from decimal import Decimal
from typing import NoReturn

import typer

from csquares.codec import CSquare, decode, encode
from csquares.config import get_settings
from csquares.earth_math import spherical_distance
from csquares.logger import configure_logging
from csquares.models import Position

logger = logging.getLogger(__name__)

# Point used by the demo command: Hobart, Tasmania.
DEMO_LATITUDE = "-42.80"
DEMO_LONGITUDE = "147.30"

app = typer.Typer(help="C-squares grid cell encoder", no_args_is_help=True)


@app.callback()
def main(
    log_level: str | None = typer.Option(
        None, "--log-level", help="Override the configured log level."
    ),
) -> None:
    configure_logging(level=log_level)


def _echo_square(square: CSquare, as_json: bool) -> None:
    if as_json:
        typer.echo(json.dumps(square.summary().to_dict(), indent=2))
        return
    typer.echo(square.identifier)
    typer.echo(f"resolution: {square.resolution}")
    lat_near, lat_far = square.latitude_boundary
    lng_near, lng_far = square.longitude_boundary
    typer.echo(f"latitude boundary: ({lat_near}, {lat_far})")
    typer.echo(f"longitude boundary: ({lng_near}, {lng_far})")
    typer.echo(f"center: ({square.center.latitude}, {square.center.longitude})")


def _fail(exception: ValueError) -> NoReturn:
    logger.debug(f"Command failed: {exception}")
    typer.secho(str(exception), fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


@app.command("encode")
def encode_cmd(
    latitude: str = typer.Argument(..., help="Latitude in degrees."),
    longitude: str = typer.Argument(..., help="Longitude in degrees."),
    decimals: int | None = typer.Option(
        None, "--decimals", "-d", help="Decimal places to resolve."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the cell summary as JSON."),
) -> None:
    """Encode a point into its C-squares cell.

    Put "--" before a negative latitude, e.g. "csquares encode -- -42.8 147.3".
    """
    if decimals is None:
        decimals = get_settings().codec.default_decimals
    try:
        square = encode(latitude, longitude, decimals)
    except ValueError as exception:
        _fail(exception)
    _echo_square(square, as_json)


@app.command("decode")
def decode_cmd(
    identifier: str = typer.Argument(..., help="C-squares identifier, e.g. 3414:227:383."),
    as_json: bool = typer.Option(False, "--json", help="Print the cell summary as JSON."),
) -> None:
    """Describe the cell named by a C-squares identifier."""
    try:
        square = decode(identifier)
    except ValueError as exception:
        _fail(exception)
    _echo_square(square, as_json)


@app.command("distance")
def distance_cmd(
    lat_a: float = typer.Argument(...),
    lng_a: float = typer.Argument(...),
    lat_b: float = typer.Argument(...),
    lng_b: float = typer.Argument(...),
) -> None:
    """Print the spherical distance in kilometers between two points."""
    km = spherical_distance(
        Position(Decimal(str(lat_a)), Decimal(str(lng_a))),
        Position(Decimal(str(lat_b)), Decimal(str(lng_b))),
    )
    typer.echo(f"{km:.3f} km")


@app.command("demo")
def demo_cmd() -> None:
    """Encode a sample point at one decimal place."""
    square = encode(DEMO_LATITUDE, DEMO_LONGITUDE, 1)
    typer.echo(f"point: ({DEMO_LATITUDE}, {DEMO_LONGITUDE})")
    _echo_square(square, as_json=False)

"""Batch CSV conversion commands."""

from pathlib import Path
from typing import TYPE_CHECKING

import typer

if TYPE_CHECKING:
    from pindrop.services.batch_service import BatchResult

batch_app = typer.Typer()


def _print_result(result: "BatchResult") -> None:
    typer.echo(f"Rows:       {result.total}")
    typer.echo(f"Succeeded:  {result.succeeded}")
    typer.echo(f"Failed:     {result.failed}")
    typer.echo(f"Output:     {result.output_path}")


@batch_app.command("encode")
def batch_encode(
    input_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="CSV with coordinate columns"),  # noqa: B008
    output_path: Path = typer.Argument(..., help="Output CSV path"),  # noqa: B008
    region: str | None = typer.Option(None, "--region", "-r", help="india or world"),  # noqa: B008
    lat_column: str = typer.Option("latitude", "--lat-column", help="Latitude column name"),
    lon_column: str = typer.Option("longitude", "--lon-column", help="Longitude column name"),
) -> None:
    """Add a PIN column to a CSV of coordinates."""
    from pindrop.core.config import get_settings
    from pindrop.services.batch_service import encode_csv

    settings = get_settings()
    try:
        result = encode_csv(
            input_path,
            output_path,
            region or settings.default_region,
            lat_column=lat_column,
            lon_column=lon_column,
            max_rows=settings.batch_max_rows,
        )
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e
    _print_result(result)


@batch_app.command("decode")
def batch_decode(
    input_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="CSV with a PIN column"),  # noqa: B008
    output_path: Path = typer.Argument(..., help="Output CSV path"),  # noqa: B008
    region: str | None = typer.Option(None, "--region", "-r", help="india or world"),  # noqa: B008
    pin_column: str = typer.Option("pin", "--pin-column", help="PIN column name"),
) -> None:
    """Add latitude and longitude columns to a CSV of PINs."""
    from pindrop.core.config import get_settings
    from pindrop.services.batch_service import decode_csv

    settings = get_settings()
    try:
        result = decode_csv(
            input_path,
            output_path,
            region or settings.default_region,
            pin_column=pin_column,
            max_rows=settings.batch_max_rows,
        )
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e
    _print_result(result)

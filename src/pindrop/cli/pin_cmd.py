"""Single-value PIN commands: encode, decode, validate, and region bounds."""

import typer

from pindrop.lib.pincodec import Coordinates, Region
from pindrop.services import pin_service


def _region_or_default(region: str | None) -> str:
    if region:
        return region
    from pindrop.core.config import get_settings

    return get_settings().default_region


def encode(
    lat: float = typer.Option(..., "--lat", help="Latitude"),  # noqa: B008
    lon: float = typer.Option(..., "--lon", help="Longitude"),  # noqa: B008
    region: str | None = typer.Option(None, "--region", "-r", help="india or world"),  # noqa: B008
) -> None:
    """Encode coordinates into a PIN."""
    result = pin_service.encode(Coordinates(latitude=lat, longitude=lon), _region_or_default(region))
    if not result.success:
        typer.echo(f"Error: {result.error}", err=True)
        raise typer.Exit(code=1)
    typer.echo(result.pin)


def decode(
    pin: str = typer.Argument(..., help="PIN, with or without hyphens"),  # noqa: B008
    region: str | None = typer.Option(None, "--region", "-r", help="india or world"),  # noqa: B008
) -> None:
    """Decode a PIN into the center of its grid cell."""
    result = pin_service.decode(pin, _region_or_default(region))
    if not result.success or result.coordinates is None or result.grid_bounds is None:
        typer.echo(f"Error: {result.error}", err=True)
        raise typer.Exit(code=1)

    cell = result.grid_bounds
    typer.echo(f"Latitude:   {result.coordinates.latitude}")
    typer.echo(f"Longitude:  {result.coordinates.longitude}")
    typer.echo(f"Cell:       lat {cell.min_lat} to {cell.max_lat}, lon {cell.min_lon} to {cell.max_lon}")


def validate(
    pin: str = typer.Argument(..., help="PIN to check"),  # noqa: B008
) -> None:
    """Check a PIN's format."""
    result = pin_service.validate_pin_format(pin)
    if not result.valid:
        for error in result.errors or []:
            typer.echo(f"Invalid: {error}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Valid: {result.normalized}")


def bounds(
    region: str | None = typer.Argument(None, help="india or world (all regions when omitted)"),  # noqa: B008
) -> None:
    """Show region bounds and cell precision."""
    names = [region] if region else [r.value for r in Region]
    for name in names:
        try:
            info = pin_service.describe_region(name)
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1) from e

        b = info.bounds
        typer.echo(f"{info.pin_name} ({info.region}):")
        typer.echo(f"  Latitude:   {b.min_lat} to {b.max_lat}")
        typer.echo(f"  Longitude:  {b.min_lon} to {b.max_lon}")
        typer.echo(f"  Cell size:  ~{info.cell_size.height_m:.2f} m x {info.cell_size.width_m:.2f} m")

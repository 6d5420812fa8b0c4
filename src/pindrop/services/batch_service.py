"""Batch CSV conversion: add PINs to coordinate files or coordinates to PIN files.

Per-row failures are recorded in an ``error`` column and never abort the
job. Missing columns or oversized inputs fail the whole job up front.
"""

import math
from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from pindrop.core.logging import structured_logger
from pindrop.lib.pincodec import Coordinates, Region
from pindrop.services import pin_service

ERROR_COLUMN = "error"


@dataclass
class BatchResult:
    """Outcome of a batch CSV conversion."""

    total: int
    succeeded: int
    failed: int
    output_path: Path


def _read_csv(input_path: Path, required: list[str], max_rows: int | None) -> pd.DataFrame:
    """Read a CSV as strings and check required columns and row count.

    Raises:
        ValueError: If a required column is missing or the file has too many rows.
    """
    df = pd.read_csv(input_path, dtype=str, keep_default_na=False)
    missing = [column for column in required if column not in df.columns]
    if missing:
        msg = f"Missing required column(s) {missing} in {input_path.name}. Found: {list(df.columns)}"
        raise ValueError(msg)
    if max_rows is not None and len(df) > max_rows:
        msg = f"{input_path.name} has {len(df)} rows, exceeding the limit of {max_rows}"
        raise ValueError(msg)
    return df


def _parse_float(value: str) -> float | None:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(number) else number


def _finish(df: pd.DataFrame, output_path: Path, label: str, region: Region) -> BatchResult:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_path, index=False)
    failed = int((df[ERROR_COLUMN] != "").sum())
    result = BatchResult(total=len(df), succeeded=len(df) - failed, failed=failed, output_path=output_path)
    structured_logger(
        "batch_complete",
        operation=label,
        region=region.value,
        total=result.total,
        succeeded=result.succeeded,
        failed=result.failed,
        output_path=str(output_path),
    ).info(f"Batch {label} complete: {result.succeeded}/{result.total} rows succeeded, written to {output_path}")
    return result


def encode_csv(
    input_path: Path,
    output_path: Path,
    region: Region | str,
    *,
    lat_column: str = "latitude",
    lon_column: str = "longitude",
    pin_column: str = "pin",
    max_rows: int | None = None,
) -> BatchResult:
    """Encode every row's coordinates into a PIN column.

    Args:
        input_path: CSV with latitude and longitude columns.
        output_path: Where to write the CSV with added ``pin`` and ``error`` columns.
        region: Region member or name.
        lat_column: Name of the latitude column.
        lon_column: Name of the longitude column.
        pin_column: Name of the output PIN column.
        max_rows: Optional row limit.

    Returns:
        BatchResult with row counts.

    Raises:
        ValueError: If the region is unknown, a column is missing, or the file is too large.
    """
    resolved = Region.parse(region)
    df = _read_csv(input_path, [lat_column, lon_column], max_rows)

    pins: list[str] = []
    errors: list[str] = []
    for lat_text, lon_text in zip(df[lat_column], df[lon_column], strict=True):
        lat, lon = _parse_float(lat_text), _parse_float(lon_text)
        if lat is None or lon is None:
            pins.append("")
            errors.append("Missing or non-numeric coordinates")
            continue
        result = pin_service.encode(Coordinates(latitude=lat, longitude=lon), resolved)
        pins.append(result.pin or "")
        errors.append(result.error or "")

    df[pin_column] = pins
    df[ERROR_COLUMN] = errors
    return _finish(df, output_path, "encode", resolved)


def decode_csv(
    input_path: Path,
    output_path: Path,
    region: Region | str,
    *,
    pin_column: str = "pin",
    lat_column: str = "latitude",
    lon_column: str = "longitude",
    max_rows: int | None = None,
) -> BatchResult:
    """Decode every row's PIN into latitude and longitude columns.

    Args:
        input_path: CSV with a PIN column.
        output_path: Where to write the CSV with added coordinate and ``error`` columns.
        region: Region member or name.
        pin_column: Name of the PIN column.
        lat_column: Name of the output latitude column.
        lon_column: Name of the output longitude column.
        max_rows: Optional row limit.

    Returns:
        BatchResult with row counts.

    Raises:
        ValueError: If the region is unknown, the PIN column is missing, or the file is too large.
    """
    resolved = Region.parse(region)
    df = _read_csv(input_path, [pin_column], max_rows)

    lats: list[float | None] = []
    lons: list[float | None] = []
    errors: list[str] = []
    for pin in df[pin_column]:
        result = pin_service.decode(pin, resolved)
        if result.coordinates is None:
            lats.append(None)
            lons.append(None)
        else:
            lats.append(result.coordinates.latitude)
            lons.append(result.coordinates.longitude)
        errors.append(result.error or "")

    df[lat_column] = lats
    df[lon_column] = lons
    df[ERROR_COLUMN] = errors
    return _finish(df, output_path, "decode", resolved)

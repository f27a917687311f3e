from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, List, Mapping, Tuple

import pandas as pd

from vehicle_sales.data_models import PASSTHROUGH_COLUMNS, REQUIRED_COLUMNS, VehicleRecord

logger = logging.getLogger(__name__)


class LoadError(Exception):
    """The input file could not be read as a vehicle CSV."""


class MalformedRowError(ValueError):
    """
    A data row whose numeric fields do not parse. ``row_number`` is the
    1-based position of the row among the data rows the reader delivered;
    blank lines and over-long rows dropped by the reader are not counted.
    """

    def __init__(self, row_number: int, reason: str) -> None:
        super().__init__(f"row {row_number}: {reason}")
        self.row_number = row_number
        self.reason = reason


@dataclass(frozen=True)
class LoadResult:
    records: Tuple[VehicleRecord, ...]
    skipped: Tuple[MalformedRowError, ...]


def _drop_long_row(fields: List[str]) -> None:
    logger.warning("Skipping row with %d fields: %s", len(fields), ",".join(fields))
    return None


def iter_raw_rows(path: str | Path, chunksize: int = 500) -> Iterator[Dict[str, str]]:
    """
    Lazily yields one text->text mapping per data row. Exhausting the
    generator is the end-of-stream signal.

    The header is read as an ordinary row, so its width fixes the row
    width: pandas never turns a leading column into an index. Rows with
    more fields than the header are logged and dropped; short rows come
    through with empty strings for the missing fields.
    """
    file_path = Path(path)
    try:
        reader = pd.read_csv(
            file_path,
            header=None,
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
            encoding="utf-8",
            engine="python",
            on_bad_lines=_drop_long_row,
            chunksize=chunksize,
        )
        with reader:
            header = None
            for chunk in reader:
                rows = chunk.fillna("").itertuples(index=False, name=None)
                if header is None:
                    header = [str(v).strip() for v in next(rows)]
                    _check_columns(header, file_path)
                for values in rows:
                    yield dict(zip(header, (str(v) for v in values)))
    except LoadError:
        raise
    except pd.errors.EmptyDataError as exc:
        raise LoadError(f"{file_path}: file is empty") from exc
    except (OSError, UnicodeDecodeError, pd.errors.ParserError) as exc:
        raise LoadError(f"{file_path}: {exc}") from exc


def _check_columns(columns, file_path: Path) -> None:
    present = set(columns)
    missing = [c for c in REQUIRED_COLUMNS if c not in present]
    if missing:
        raise LoadError(f"{file_path}: missing required columns: {', '.join(missing)}")


def _numeric_text(column: str, raw: str, row_number: int) -> str:
    text = raw.strip()
    # int() and float() accept digit-group underscores; CSV data should not.
    if "_" in text:
        raise MalformedRowError(row_number, f"{column} contains an underscore: {raw!r}")
    return text


def _parse_year(raw: str, row_number: int) -> int:
    text = _numeric_text("Year", raw, row_number)
    try:
        return int(text)
    except ValueError:
        raise MalformedRowError(row_number, f"Year is not an integer: {raw!r}") from None


def _parse_price(column: str, raw: str, row_number: int) -> float:
    text = _numeric_text(column, raw, row_number).replace(",", "")
    try:
        value = float(text)
    except ValueError:
        raise MalformedRowError(row_number, f"{column} is not a number: {raw!r}") from None
    if not math.isfinite(value):
        raise MalformedRowError(row_number, f"{column} is not finite: {raw!r}")
    if value < 0:
        raise MalformedRowError(row_number, f"{column} is negative: {raw!r}")
    return int(value) if value.is_integer() else value


def coerce_record(row: Mapping[str, str], row_number: int) -> VehicleRecord:
    known = set(REQUIRED_COLUMNS) | set(PASSTHROUGH_COLUMNS)
    return VehicleRecord(
        name=row["Car_Name"].strip(),
        year=_parse_year(row["Year"], row_number),
        selling_price=_parse_price("Selling_Price", row["Selling_Price"], row_number),
        present_price=_parse_price("Present_Price", row["Present_Price"], row_number),
        fuel_type=row["Fuel_Type"].strip(),
        kms_driven=row.get("Kms_Driven", ""),
        seller_type=row.get("Seller_Type", ""),
        transmission=row.get("Transmission", ""),
        owner=row.get("Owner", ""),
        extras=tuple((k, v) for k, v in row.items() if k not in known),
    )


def load_records(path: str | Path) -> LoadResult:
    """Skip-and-log policy: malformed rows never reach the batch."""
    logger.info("Loading vehicle records from %s", path)
    records: List[VehicleRecord] = []
    skipped: List[MalformedRowError] = []
    try:
        for row_number, row in enumerate(iter_raw_rows(path), start=1):
            try:
                records.append(coerce_record(row, row_number))
            except MalformedRowError as exc:
                logger.warning("Skipping malformed row in %s: %s", path, exc)
                skipped.append(exc)
    except LoadError:
        logger.error("Failed to load vehicle records from %s", path, exc_info=True)
        raise
    logger.info(
        "Loaded %d records from %s (%d skipped)",
        len(records),
        path,
        len(skipped),
        extra={"extra_data": {"path": str(path), "loaded": len(records), "skipped": len(skipped)}},
    )
    return LoadResult(records=tuple(records), skipped=tuple(skipped))

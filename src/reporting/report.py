from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence, TextIO

from vehicle_sales.config import AnalysisConfig
from vehicle_sales.data_models import VehicleRecord
from vehicle_sales.pipeline import (
    PriceStats,
    apply_markup,
    calculate_stats,
    compose,
    count_by,
    filter_by,
    fuel_type,
    price_range,
    round_price,
    sort_by_price,
    take,
)

CURRENCY = "₹"
NO_DATA = "no data"


def format_price(value: Optional[float]) -> str:
    if value is None:
        return NO_DATA
    if float(value).is_integer():
        return f"{CURRENCY}{int(value):,}"
    return f"{CURRENCY}{value:,.2f}"


def _record_line(record: VehicleRecord) -> str:
    return f"{record.name} ({record.year}, {record.fuel_type}) - {format_price(record.selling_price)}"


def _section(title: str) -> list[str]:
    return ["", title, "-" * len(title)]


def _stats_lines(stats: PriceStats) -> list[str]:
    lines = [f"Total cars: {stats.total}", f"Total value: {format_price(stats.total_value)}"]
    if not stats.has_data:
        lines.append(f"Average / max / min price: {NO_DATA}")
        return lines
    lines.extend([
        f"Average price: {format_price(round_price(stats.average_price))}",
        f"Max price: {format_price(stats.max_price)}",
        f"Min price: {format_price(stats.min_price)}",
    ])
    return lines


def build_report(records: Sequence[VehicleRecord], config: AnalysisConfig) -> list[str]:
    records = tuple(records)
    threshold = config.price_threshold
    under_threshold = price_range(0, threshold)

    lines = ["Car Sales Functional Analysis", "=" * 29]

    lines += _section("All cars")
    lines += [_record_line(r) for r in records] or [NO_DATA]

    lines += _section("Price filter")
    cheap = filter_by(under_threshold)(records)
    lines.append(f"Cars up to {format_price(threshold)}: {len(cheap)}")

    lines += _section("Fuel types")
    for label in config.fuel_types:
        lines.append(f"{label} cars: {count_by(fuel_type(label))(records)}")

    lines += _section("Sorted by price")
    lines += [_record_line(r) for r in sort_by_price(records)] or [NO_DATA]

    lines += _section(f"After {config.markup_percent:g}% markup (first {config.preview_count})")
    marked_up = apply_markup(config.markup_percent)(records)
    lines += [_record_line(r) for r in take(config.preview_count)(marked_up)] or [NO_DATA]

    lines += _section("Statistics")
    lines += _stats_lines(calculate_stats(records))

    lines += _section(f"Cheapest {config.top_n} up to {format_price(threshold)}")
    cheapest = compose(take(config.top_n), sort_by_price, filter_by(under_threshold))
    lines += [_record_line(r) for r in cheapest(records)] or [NO_DATA]

    return lines


def run_report(
    records: Iterable[VehicleRecord],
    config: AnalysisConfig | None = None,
    out: TextIO | None = None,
) -> None:
    stream = out if out is not None else sys.stdout
    for line in build_report(tuple(records), config or AnalysisConfig()):
        print(line, file=stream)

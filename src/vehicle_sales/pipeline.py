"""
Pure record operations. Every function here returns new tuples or
scalars and leaves its input untouched; console output belongs to the
report layer.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from functools import reduce
from typing import Any, Callable, Iterable, Optional, Tuple

from vehicle_sales.data_models import VehicleRecord

Predicate = Callable[[VehicleRecord], bool]
Records = Tuple[VehicleRecord, ...]


# ── Filtering ───────────────────────────────────────────────────────

def price_range(min_price: float, max_price: float) -> Predicate:
    if min_price > max_price:
        raise ValueError(f"min_price {min_price} is greater than max_price {max_price}")

    def _in_range(record: VehicleRecord) -> bool:
        return min_price <= record.selling_price <= max_price

    return _in_range


def fuel_type(label: str) -> Predicate:
    def _matches(record: VehicleRecord) -> bool:
        return record.fuel_type == label

    return _matches


def filter_by(predicate: Predicate) -> Callable[[Iterable[VehicleRecord]], Records]:
    def _filter(records: Iterable[VehicleRecord]) -> Records:
        return tuple(r for r in records if predicate(r))

    return _filter


# ── Transformation ──────────────────────────────────────────────────

def round_half_away(value: Decimal) -> int:
    # ROUND_HALF_UP in decimal rounds ties away from zero.
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def round_price(value: float) -> int:
    return round_half_away(Decimal(str(value)))


def marked_up_price(price: float, percentage: float) -> int:
    factor = (Decimal(100) + Decimal(str(percentage))) / Decimal(100)
    return round_half_away(Decimal(str(price)) * factor)


def apply_markup(percentage: float) -> Callable[[Iterable[VehicleRecord]], Records]:
    if percentage < -100:
        raise ValueError(f"markup {percentage}% would make prices negative")

    def _markup(records: Iterable[VehicleRecord]) -> Records:
        return tuple(r.with_selling_price(marked_up_price(r.selling_price, percentage)) for r in records)

    return _markup


# ── Ordering ────────────────────────────────────────────────────────

def sort_by_price(records: Iterable[VehicleRecord]) -> Records:
    # sorted() is stable, so equal prices keep their input order.
    return tuple(sorted(records, key=lambda r: r.selling_price))


def take(n: int) -> Callable[[Iterable[VehicleRecord]], Records]:
    if n < 0:
        raise ValueError("take() needs a non-negative count")

    def _take(records: Iterable[VehicleRecord]) -> Records:
        return tuple(records)[:n]

    return _take


# ── Aggregation ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class PriceStats:
    total: int
    total_value: float
    max_price: Optional[float]
    min_price: Optional[float]
    average_price: Optional[float]

    @property
    def has_data(self) -> bool:
        return self.total > 0


def count_by(predicate: Predicate) -> Callable[[Iterable[VehicleRecord]], int]:
    def _count(records: Iterable[VehicleRecord]) -> int:
        return sum(1 for r in records if predicate(r))

    return _count


def _accumulate(acc: tuple, record: VehicleRecord) -> tuple:
    count, total_value, high, low = acc
    price = record.selling_price
    return (
        count + 1,
        total_value + price,
        price if high is None or price > high else high,
        price if low is None or price < low else low,
    )


def calculate_stats(records: Iterable[VehicleRecord]) -> PriceStats:
    """
    Single reduce pass over the records. With no records, the total is
    0 and max/min/average are None rather than NaN or an error.
    """
    count, total_value, high, low = reduce(_accumulate, records, (0, 0, None, None))
    return PriceStats(
        total=count,
        total_value=total_value,
        max_price=high,
        min_price=low,
        average_price=total_value / count if count else None,
    )


# ── Composition ─────────────────────────────────────────────────────

def _identity(value: Any) -> Any:
    return value


def compose(*functions: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """compose(f, g, h)(x) == f(g(h(x))); compose() is the identity."""
    if not functions:
        return _identity

    def _composed(value: Any) -> Any:
        return reduce(lambda acc, fn: fn(acc), reversed(functions), value)

    return _composed


def pipe(*functions: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Left-to-right counterpart of compose()."""
    return compose(*reversed(functions))

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AnalysisConfig:
    price_threshold: float = 100_000
    fuel_types: tuple[str, ...] = ("Petrol", "Diesel")
    markup_percent: float = 10
    preview_count: int = 3  # markup preview rows
    top_n: int = 5

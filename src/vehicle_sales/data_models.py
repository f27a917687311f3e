from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple

REQUIRED_COLUMNS: Tuple[str, ...] = ("Car_Name", "Year", "Selling_Price", "Present_Price", "Fuel_Type")
PASSTHROUGH_COLUMNS: Tuple[str, ...] = ("Kms_Driven", "Seller_Type", "Transmission", "Owner")


@dataclass(frozen=True)
class VehicleRecord:
    name: str
    year: int
    selling_price: float
    present_price: float
    fuel_type: str
    kms_driven: str = ""
    seller_type: str = ""
    transmission: str = ""
    owner: str = ""
    extras: Tuple[Tuple[str, str], ...] = ()

    def with_selling_price(self, selling_price: float) -> VehicleRecord:
        return replace(self, selling_price=selling_price)

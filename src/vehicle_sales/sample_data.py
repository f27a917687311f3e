from __future__ import annotations

from typing import Tuple

from vehicle_sales.data_models import VehicleRecord

SAMPLE_VEHICLES: Tuple[VehicleRecord, ...] = (
    VehicleRecord("ritz", 2014, 335_000, 559_000, "Petrol", "27000", "Dealer", "Manual", "0"),
    VehicleRecord("sx4", 2013, 475_000, 954_000, "Diesel", "43000", "Dealer", "Manual", "0"),
    VehicleRecord("ciaz", 2017, 725_000, 985_000, "Petrol", "6900", "Dealer", "Manual", "0"),
    VehicleRecord("wagon r", 2011, 285_000, 415_000, "Petrol", "5200", "Dealer", "Manual", "0"),
    VehicleRecord("swift", 2014, 460_000, 687_000, "Diesel", "42450", "Dealer", "Manual", "0"),
    VehicleRecord("Royal Enfield Classic 350", 2017, 95_000, 120_000, "Petrol", "18000", "Individual", "Manual", "0"),
    VehicleRecord("Bajaj Pulsar 150", 2015, 45_000, 80_000, "Petrol", "24000", "Individual", "Manual", "0"),
    VehicleRecord("Honda Activa 4G", 2017, 48_000, 51_000, "Petrol", "4300", "Individual", "Automatic", "0"),
    VehicleRecord("fortuner", 2015, 2_300_000, 3_096_000, "Diesel", "40000", "Dealer", "Automatic", "0"),
    VehicleRecord("corolla altis", 2009, 350_000, 1_535_000, "Petrol", "59000", "Dealer", "Manual", "0"),
)

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from reporting.logging_config import configure_logging, get_run_id
from reporting.report import run_report
from reporting.settings import ReportSettings
from vehicle_sales.loader import LoadError, load_records
from vehicle_sales.sample_data import SAMPLE_VEHICLES

logger = logging.getLogger("reporting")


def main(argv: Sequence[str] | None = None, settings: ReportSettings | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="python -m reporting",
        description="Functional analysis report over vehicle sale records.",
    )
    parser.add_argument(
        "csv_path",
        nargs="?",
        help="CSV with Car_Name, Year, Selling_Price, Present_Price, Fuel_Type columns "
        "(defaults to CARSALES_DATA_PATH, then the built-in sample)",
    )
    args = parser.parse_args(argv)

    settings = settings or ReportSettings()
    configure_logging(settings.log_level, settings.log_format)
    logger.info("Report run %s started", get_run_id())

    path = args.csv_path or settings.data_path
    if path:
        try:
            records = load_records(path).records
        except LoadError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
    else:
        logger.info("No data path given, using %d sample records", len(SAMPLE_VEHICLES))
        records = SAMPLE_VEHICLES

    run_report(records, settings.to_analysis_config())
    return 0


if __name__ == "__main__":
    sys.exit(main())

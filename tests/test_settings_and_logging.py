import io
import json
import logging

import pytest
from pydantic import ValidationError

from reporting.logging_config import JSONFormatter, configure_logging, get_run_id, run_id
from reporting.settings import ReportSettings
from vehicle_sales.loader import load_records


def test_settings_defaults(monkeypatch):
    for name in ("CARSALES_DATA_PATH", "CARSALES_PRICE_THRESHOLD", "CARSALES_TOP_N", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    settings = ReportSettings(_env_file=None)
    assert settings.data_path == ""
    assert settings.log_level == "WARNING"
    cfg = settings.to_analysis_config()
    assert cfg.price_threshold == 100_000
    assert cfg.markup_percent == 10
    assert cfg.preview_count == 3
    assert cfg.top_n == 5
    assert cfg.fuel_types == ("Petrol", "Diesel")


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("CARSALES_PRICE_THRESHOLD", "250000")
    monkeypatch.setenv("CARSALES_TOP_N", "2")
    settings = ReportSettings(_env_file=None)
    cfg = settings.to_analysis_config()
    assert cfg.price_threshold == 250000
    assert cfg.top_n == 2


def test_json_formatter_includes_run_id():
    token = run_id.set("abc123")
    try:
        record = logging.LogRecord("vehicle_sales.loader", logging.WARNING, __file__, 1, "skipped %d", (2,), None)
        entry = json.loads(JSONFormatter().format(record))
    finally:
        run_id.reset(token)
    assert entry["message"] == "skipped 2"
    assert entry["level"] == "WARNING"
    assert entry["run_id"] == "abc123"


def test_get_run_id_is_stable_within_context():
    token = run_id.set("")
    try:
        first = get_run_id()
        assert first
        assert get_run_id() == first
    finally:
        run_id.reset(token)


def test_configure_logging_writes_to_given_stream():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    stream = io.StringIO()
    try:
        configure_logging("INFO", "json", stream=stream)
        logging.getLogger("vehicle_sales.test").info("hello")
        assert json.loads(stream.getvalue().strip())["message"] == "hello"
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_settings_reject_markup_below_minus_100(monkeypatch):
    monkeypatch.setenv("CARSALES_MARKUP_PERCENT", "-250")
    with pytest.raises(ValidationError):
        ReportSettings(_env_file=None)


def test_json_formatter_emits_extra_data():
    record = logging.LogRecord("vehicle_sales.loader", logging.INFO, __file__, 1, "Loaded %d records", (2,), None)
    record.extra_data = {"loaded": 2, "skipped": 1}
    entry = json.loads(JSONFormatter().format(record))
    assert entry["data"] == {"loaded": 2, "skipped": 1}


def test_load_summary_reaches_json_output(tmp_path):
    path = tmp_path / "cars.csv"
    path.write_text(
        "Car_Name,Year,Selling_Price,Present_Price,Fuel_Type\nA,2015,50000,60000,Petrol\nB,x,1,1,Diesel\n",
        encoding="utf-8",
    )
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    stream = io.StringIO()
    try:
        configure_logging("INFO", "json", stream=stream)
        load_records(path)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
    entries = [json.loads(line) for line in stream.getvalue().splitlines()]
    summary = entries[-1]
    assert summary["message"].startswith("Loaded 1 records")
    assert summary["data"] == {"path": str(path), "loaded": 1, "skipped": 1}

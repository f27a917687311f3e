from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from vehicle_sales.config import AnalysisConfig


class ReportSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Empty means the built-in sample records.
    data_path: str = Field(default="", alias="CARSALES_DATA_PATH")

    price_threshold: float = Field(default=100_000, ge=0, alias="CARSALES_PRICE_THRESHOLD")
    markup_percent: float = Field(default=10, ge=-100, alias="CARSALES_MARKUP_PERCENT")
    preview_count: int = Field(default=3, ge=0, alias="CARSALES_PREVIEW_COUNT")
    top_n: int = Field(default=5, ge=0, alias="CARSALES_TOP_N")

    # Logging
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")
    log_format: str = Field(default="text", alias="LOG_FORMAT")

    def to_analysis_config(self) -> AnalysisConfig:
        return AnalysisConfig(
            price_threshold=self.price_threshold,
            markup_percent=self.markup_percent,
            preview_count=self.preview_count,
            top_n=self.top_n,
        )

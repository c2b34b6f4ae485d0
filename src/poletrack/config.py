import os
from pydantic_settings import BaseSettings
from pydantic import field_validator

from .models.meet import TrendRange

class Settings(BaseSettings):
    # Logging
    log_level: str = os.environ.get("LOG_LEVEL", "INFO")
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Trends dashboard
    default_trend_range: str = os.environ.get("DEFAULT_TREND_RANGE", TrendRange.LAST_90.value)
    pole_length_step_ft: float = 0.5  # pole lengths are charted to the nearest half foot

    # Prometheus
    metrics_namespace: str = os.environ.get("METRICS_NAMESPACE", "poletrack")

    @field_validator("default_trend_range", mode="before")
    @classmethod
    def parse_default_trend_range(cls, v):
        if isinstance(v, TrendRange):
            return v.value
        value = str(v).strip().lower()
        # raises ValueError for anything other than "30", "90" or "all"
        return TrendRange(value).value

    @field_validator("pole_length_step_ft")
    @classmethod
    def check_pole_length_step(cls, v):
        if v <= 0:
            raise ValueError("pole_length_step_ft must be positive")
        return v

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

settings = Settings()

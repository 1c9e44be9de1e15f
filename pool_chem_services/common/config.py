from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


def _default_env_file() -> str:
    return str(Path.cwd() / ".env")


@dataclass(frozen=True)
class Settings:
    database_url: str
    log_level: str

    trend_threshold_ratio: float
    trend_max_points: int


def get_settings() -> Settings:
    # Load env file (if present) but still allow overriding via real environment variables.
    env_file = os.getenv("POOL_ENV_FILE", _default_env_file())
    if env_file and Path(env_file).exists():
        load_dotenv(env_file, override=False)

    database_url = os.getenv("DATABASE_URL", "sqlite:///./pool_chem.db")
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    # Banda de estabilidad del análisis de tendencia, como fracción de la media.
    trend_threshold_ratio = float(os.getenv("TREND_THRESHOLD_RATIO", "0.05"))
    trend_max_points = int(os.getenv("TREND_MAX_POINTS", "500"))

    return Settings(
        database_url=database_url,
        log_level=log_level,
        trend_threshold_ratio=trend_threshold_ratio,
        trend_max_points=trend_max_points,
    )

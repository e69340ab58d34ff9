"""Configuration management using Pydantic Settings"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

from apycalc.schemas.calculation import CompoundingMethod

# Flask config key holding the Settings instance an app was built with
SETTINGS_KEY = "APYCALC_SETTINGS"


class Settings(BaseSettings):
    """Application configuration loaded from APYCALC_* environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="APYCALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Service
    service_name: str = "apy-calculator"
    app_version: str = "1.0.0"
    log_level: str = "INFO"
    log_json: bool = True

    # Validation bounds (strictest variant of the calculator form)
    max_apy: float = 100.0
    max_principal: float = 10_000_000.0

    compounding_method: CompoundingMethod = CompoundingMethod.NOMINAL_DAILY

    cors_origins: List[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]


settings = Settings()

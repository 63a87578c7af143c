"""
Application configuration management
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Cinema Registry"
    APP_VERSION: str = "1.0.0"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"  # "text" | "json"

    # Booking ids: B001, B002, ...
    BOOKING_ID_PREFIX: str = "B"
    BOOKING_ID_WIDTH: int = 3
    DEFAULT_USER_NAME: str = "Guest"

    # Screen geometry for the demo seed and for screens created without rows/seats_per_row
    DEFAULT_ROWS: int = 10
    DEFAULT_SEATS_PER_ROW: int = 10

    # Demo catalog on startup
    SEED_DEMO_DATA: bool = True

    model_config = SettingsConfigDict(
        env_prefix="CINEMA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {v}")
        return v

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in {"text", "json"}:
            raise ValueError("LOG_FORMAT must be 'text' or 'json'")
        return v

    @field_validator("BOOKING_ID_WIDTH")
    @classmethod
    def validate_id_width(cls, v: int) -> int:
        if v < 1:
            raise ValueError("BOOKING_ID_WIDTH must be at least 1")
        return v

    @field_validator("DEFAULT_ROWS")
    @classmethod
    def validate_default_rows(cls, v: int) -> int:
        # rows are addressed by a single letter A..Z
        if not 1 <= v <= 26:
            raise ValueError("DEFAULT_ROWS must be between 1 and 26")
        return v

    @field_validator("DEFAULT_SEATS_PER_ROW")
    @classmethod
    def validate_default_seats(cls, v: int) -> int:
        if v < 1:
            raise ValueError("DEFAULT_SEATS_PER_ROW must be at least 1")
        return v


# Create global settings instance
settings = Settings()

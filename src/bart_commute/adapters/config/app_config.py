"""12-factor configuration adapter using environment variables and a .env file."""

import logging

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bart_commute.domain.models import CommuteSettings, Station

DEFAULTS = CommuteSettings()


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_prefix="BART_COMMUTE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # BART API configuration
    api_base_url: str = Field(
        default=DEFAULTS.api_base_url, description="Base URL of the BART legacy API"
    )
    api_key: str = Field(
        default=DEFAULTS.api_key,
        description="BART API access key (defaults to BART's public sample key)",
    )
    api_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Total timeout for the schedule request in seconds (unset waits indefinitely)",
    )

    # Stations
    work_station_code: str = Field(
        default=DEFAULTS.work_station.code, description="Station abbreviation near work"
    )
    work_station_name: str = Field(default=DEFAULTS.work_station.name, description="Display name")
    home_station_code: str = Field(
        default=DEFAULTS.home_station.code, description="Station abbreviation near home"
    )
    home_station_name: str = Field(default=DEFAULTS.home_station.name, description="Display name")

    # Buffers (in minutes)
    bike_home_station_minutes: int = Field(
        default=DEFAULTS.bike_home_station_minutes,
        description="Minutes to bike between home and the home-side station",
    )
    bike_work_station_minutes: int = Field(
        default=DEFAULTS.bike_work_station_minutes,
        description="Minutes to bike between the work-side station and work",
    )
    shower_minutes: int = Field(
        default=DEFAULTS.shower_minutes, description="Minutes to shower after arriving at work"
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Log level for messages on stderr")
    log_requests: bool = Field(
        default=False, description="Log each outgoing API request, with the access key redacted"
    )

    @field_validator("bike_home_station_minutes", "bike_work_station_minutes", "shower_minutes")
    @classmethod
    def validate_minutes(cls, v: int) -> int:
        """Validate buffers are not negative."""
        if v < 0:
            raise ValueError("buffer minutes must not be negative")
        return v

    @field_validator("work_station_code", "home_station_code")
    @classmethod
    def validate_station_code(cls, v: str) -> str:
        """Normalize station abbreviations to upper case."""
        v = v.strip().upper()
        if not v:
            raise ValueError("station code must not be empty")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one the logging module knows."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    @model_validator(mode="after")
    def validate_distinct_stations(self) -> "AppConfig":
        """Validate work and home are different stations."""
        if self.work_station_code == self.home_station_code:
            raise ValueError("work and home stations must be different")
        return self

    def to_commute_settings(self) -> CommuteSettings:
        """Build the immutable settings handed to the core components."""
        return CommuteSettings(
            work_station=Station(code=self.work_station_code, name=self.work_station_name),
            home_station=Station(code=self.home_station_code, name=self.home_station_name),
            bike_home_station_minutes=self.bike_home_station_minutes,
            bike_work_station_minutes=self.bike_work_station_minutes,
            shower_minutes=self.shower_minutes,
            api_base_url=self.api_base_url.rstrip("/"),
            api_key=self.api_key,
        )

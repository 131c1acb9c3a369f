"""
Configuration management using Pydantic models loaded from YAML.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator

from .adapters.http_repository import HttpCalendarRepository
from .adapters.json_repository import JsonCalendarRepository
from .domain.models import fixed_offset_timezone

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class DefaultsConfig(BaseModel):
    """Default settings for slot queries."""
    duration_minutes: int = 30

    @field_validator("duration_minutes")
    @classmethod
    def validate_duration(cls, value: int) -> int:
        """Ensure session duration is positive."""
        if value <= 0:
            raise ValueError("duration_minutes must be greater than zero")
        return value


class AppConfig(BaseModel):
    """Application configuration."""
    calendars_dir: Path = Path("calendars")
    calendars_url: Optional[str] = None
    timezone: str = "UTC"
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    log_level: str = "WARNING"

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        """Only UTC or a fixed +HH:MM offset; zones with DST shifts are rejected."""
        fixed_offset_timezone(value)
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept standard logging level names, case-insensitively."""
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value}")
        return level

    def get_log_level(self) -> int:
        return getattr(logging, self.log_level)

    def build_repository(self) -> Union[HttpCalendarRepository, JsonCalendarRepository]:
        """Calendar store described by this configuration; HTTP wins when set."""
        if self.calendars_url:
            return HttpCalendarRepository(base_url=self.calendars_url)
        return JsonCalendarRepository(calendars_dir=self.calendars_dir)

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Relative ``calendars_dir`` values are resolved against the directory
        holding the config file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"Please create a config.yaml file. See config.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        config = cls(**data)
        if not config.calendars_dir.is_absolute():
            config.calendars_dir = config_path.parent / config.calendars_dir
        return config


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for config.yaml in current directory
    current_dir = Path.cwd()
    config_path = current_dir / "config.yaml"

    if not config_path.exists():
        # Fall back to the repository root
        project_root = Path(__file__).parent.parent
        config_path = project_root / "config.yaml"

    return config_path

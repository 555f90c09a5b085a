"""12-factor configuration adapter using environment variables and a .env file."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
OUTPUT_FORMATS = ("text", "json")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    data_file: str = Field(
        default="data.json",
        description="Path to the schedule JSON file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level: DEBUG, INFO, WARNING or ERROR",
    )
    output_format: str = Field(
        default="text",
        description="Result output format: 'text' or 'json'",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known level name."""
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v.upper()

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        """Validate output format is either 'text' or 'json'."""
        if v.lower() not in OUTPUT_FORMATS:
            raise ValueError("output_format must be either 'text' or 'json'")
        return v.lower()

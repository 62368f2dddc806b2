"""
Shared settings base.

Every Recall settings class reads the same `.env` file and ignores keys that
belong to other sections.

Dependencies: pydantic_settings
System role: Common parent of the configuration classes
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Settings parent with `.env` support and the process log level."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Root log level for the API and maintenance scripts",
    )

"""
Gemini provider configuration settings.

Holds credentials, candidate model identifiers and call timeouts for the
embedding and generation clients. An absent or placeholder API key selects
mock mode.

Dependencies: pydantic, pydantic_settings
System role: Generative AI provider configuration
"""

import json
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import NoDecode, SettingsConfigDict

from recall.configs.base import BaseSettings

PLACEHOLDER_KEY_MARKER = "your_gemini_api_key"


class ProviderSettings(BaseSettings):
    """Google Gemini configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GEMINI_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(default=None, description="Gemini API key")
    chat_models: Annotated[list[str], NoDecode] = Field(
        default=["gemini-2.5-flash", "gemini-2.0-flash"],
        min_length=1,
        description=(
            "Chat models in order of preference, probed at startup; "
            "GEMINI_CHAT_MODELS accepts a comma-separated list or a JSON array"
        ),
    )
    embedding_model: str = Field(
        default="models/text-embedding-004",
        description="Embedding model; also stored as the version tag of each vector",
    )
    temperature: float = Field(default=0.0, description="Generation temperature")
    generation_timeout: float = Field(
        default=30.0,
        description="Seconds to wait for an answer before falling back",
    )
    probe_timeout: float = Field(
        default=10.0,
        description="Seconds allowed for the connectivity probe",
    )

    @field_validator("chat_models", mode="before")
    @classmethod
    def split_chat_models(cls, value):
        """Parse `a,b` or `["a", "b"]` from the environment."""
        if isinstance(value, str):
            text = value.strip()
            if text.startswith("["):
                return json.loads(text)
            return [name.strip() for name in text.split(",") if name.strip()]
        return value

    @property
    def has_valid_key(self) -> bool:
        """False when the key is missing, blank or still the template value."""
        key = (self.api_key or "").strip()
        return bool(key) and PLACEHOLDER_KEY_MARKER not in key

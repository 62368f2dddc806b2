"""
Test suite for configuration settings.

System role: Verification of environment-driven configuration
"""

import pydantic
import pytest

from recall.configs.base import BaseSettings
from recall.configs.database import DatabaseSettings
from recall.configs.provider import ProviderSettings
from recall.configs.retrieval import ChunkingSettings, RetrievalSettings
from recall.configs.settings import Settings


class TestDefaults:
    """Values used when nothing is configured."""

    def test_chunking_defaults(self, monkeypatch) -> None:
        monkeypatch.delenv("CHUNK_SIZE", raising=False)
        monkeypatch.delenv("CHUNK_OVERLAP", raising=False)

        settings = ChunkingSettings(_env_file=None)

        assert (settings.size, settings.overlap) == (800, 150)

    def test_retrieval_defaults(self) -> None:
        settings = RetrievalSettings(_env_file=None)

        assert settings.semantic_threshold == 0.5
        assert settings.relaxed_threshold == 0.35
        assert settings.top_k == 3

    def test_database_defaults_to_sqlite(self, monkeypatch) -> None:
        monkeypatch.delenv("DATABASE_URL", raising=False)

        settings = DatabaseSettings(_env_file=None)

        assert settings.url.startswith("sqlite+aiosqlite://")
        assert settings.is_sqlite is True


class TestEnvironmentOverrides:
    """Prefixed environment variables."""

    def test_chunk_settings_read_prefixed_env(self, monkeypatch) -> None:
        monkeypatch.setenv("CHUNK_SIZE", "400")
        monkeypatch.setenv("CHUNK_OVERLAP", "50")

        settings = ChunkingSettings(_env_file=None)

        assert (settings.size, settings.overlap) == (400, 50)

    def test_gemini_key_read_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("GEMINI_API_KEY", "AIza-from-env")

        assert ProviderSettings(_env_file=None).has_valid_key is True

    @pytest.mark.parametrize("key", ["", "your_gemini_api_key_here"])
    def test_placeholder_keys_are_not_valid(self, monkeypatch, key) -> None:
        monkeypatch.setenv("GEMINI_API_KEY", key)

        assert ProviderSettings(_env_file=None).has_valid_key is False


class TestChatModelList:
    """GEMINI_CHAT_MODELS parsing."""

    def test_comma_separated_env_is_split(self, monkeypatch) -> None:
        monkeypatch.setenv("GEMINI_CHAT_MODELS", "gemini-2.5-flash, gemini-2.0-flash")

        settings = ProviderSettings(_env_file=None)

        assert settings.chat_models == ["gemini-2.5-flash", "gemini-2.0-flash"]

    def test_json_array_env_is_parsed(self, monkeypatch) -> None:
        monkeypatch.setenv("GEMINI_CHAT_MODELS", '["gemini-pro"]')

        assert ProviderSettings(_env_file=None).chat_models == ["gemini-pro"]

    @pytest.mark.parametrize("value", [[], ""])
    def test_empty_model_list_is_rejected(self, value) -> None:
        with pytest.raises(pydantic.ValidationError):
            ProviderSettings(_env_file=None, chat_models=value)


class TestSharedBase:
    """Fields every settings section inherits."""

    def test_log_level_read_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        assert Settings(_env_file=None).log_level == "DEBUG"

    def test_only_log_level_is_shared(self) -> None:
        assert set(BaseSettings.model_fields) == {"log_level"}

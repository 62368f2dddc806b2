"""
Chunking and retrieval configuration settings.

Window sizes for the chunker plus thresholds and result caps for the
hybrid retrieval cascade.

Dependencies: pydantic, pydantic_settings
System role: Retrieval tuning configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from recall.configs.base import BaseSettings


class ChunkingSettings(BaseSettings):
    """Character-window chunker configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CHUNK_",
        case_sensitive=False,
        extra="ignore",
    )

    size: int = Field(default=800, gt=0, description="Chunk length in characters")
    overlap: int = Field(default=150, ge=0, description="Characters shared by adjacent chunks")


class RetrievalSettings(BaseSettings):
    """Hybrid retrieval cascade configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RETRIEVAL_",
        case_sensitive=False,
        extra="ignore",
    )

    semantic_threshold: float = Field(
        default=0.5,
        description="Cosine score a chunk must exceed in the semantic tier",
    )
    relaxed_threshold: float = Field(
        default=0.35,
        description="Cosine score a chunk must exceed in the last-resort tier",
    )
    top_k: int = Field(default=3, ge=1, description="Results handed to answer synthesis")

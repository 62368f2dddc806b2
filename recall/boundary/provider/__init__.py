"""
Generative provider boundary: operating mode, embeddings and generation.

Exports:
  - ProviderConfig, ProviderMode, resolve_provider_config: Startup resolution
  - EmbeddingClient: Text to vector (None when unavailable)
  - GenerationClient: Prompt to answer, typed failures
"""

from recall.boundary.provider.config import ProviderConfig, ProviderMode, resolve_provider_config
from recall.boundary.provider.embedding_client import EmbeddingClient
from recall.boundary.provider.generation_client import GenerationClient, classify_provider_exception

__all__ = [
    "ProviderConfig",
    "ProviderMode",
    "resolve_provider_config",
    "EmbeddingClient",
    "GenerationClient",
    "classify_provider_exception",
]

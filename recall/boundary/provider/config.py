"""
Provider operating mode and startup resolution.

The provider configuration is resolved once when the process starts: mock
mode when no usable API key is configured, otherwise the first chat model
that answers a short probe. The result is immutable and injected into the
embedding and generation clients.

Dependencies: langchain_core, recall.boundary.provider.factories, recall.configs
System role: Provider selection at startup
"""

import asyncio
import enum
import logging
from dataclasses import dataclass, field, replace

from langchain_core.messages import HumanMessage

from recall.boundary.provider import factories
from recall.configs.provider import ProviderSettings

logger = logging.getLogger(__name__)

PROBE_PROMPT = "hi"


class ProviderMode(str, enum.Enum):
    """How the application talks to the generative provider."""

    LIVE = "live"
    MOCK = "mock"


@dataclass(frozen=True)
class ProviderConfig:
    """Resolved, read-only provider configuration."""

    mode: ProviderMode
    chat_model: str
    embedding_model: str
    api_key: str | None = field(default=None, repr=False)
    temperature: float = 0.0
    generation_timeout: float = 30.0
    probe_timeout: float = 10.0

    @property
    def is_mock(self) -> bool:
        return self.mode is ProviderMode.MOCK

    @classmethod
    def from_settings(cls, settings: ProviderSettings) -> "ProviderConfig":
        """
        Build an unprobed configuration from settings.

        The chat model is the first preference; ``resolve_provider_config``
        may replace it after probing.
        """
        mode = ProviderMode.LIVE if settings.has_valid_key else ProviderMode.MOCK
        return cls(
            mode=mode,
            chat_model=settings.chat_models[0],
            embedding_model=settings.embedding_model,
            api_key=settings.api_key.strip() if settings.api_key else None,
            temperature=settings.temperature,
            generation_timeout=settings.generation_timeout,
            probe_timeout=settings.probe_timeout,
        )


async def resolve_provider_config(settings: ProviderSettings) -> ProviderConfig:
    """
    Resolve the provider configuration for this process.

    Probes each candidate chat model in order and keeps the first that
    responds. If none respond the first candidate is kept, so requests can
    still succeed once the provider recovers; answers fall back to keyword
    search meanwhile.

    Args:
        settings: Provider settings

    Returns:
        ProviderConfig: Immutable configuration for the process lifetime
    """
    config = ProviderConfig.from_settings(settings)
    if config.is_mock:
        logger.warning(f"{__name__}:resolve_provider_config - Running in MOCK MODE (no Gemini API key)")
        return config

    logger.info(f"{__name__}:resolve_provider_config - Checking Gemini API connection")
    last_error: Exception | None = None
    for model_name in settings.chat_models:
        try:
            chat = factories.build_chat_model(model_name, config.api_key, config.temperature)
            await asyncio.wait_for(
                chat.ainvoke([HumanMessage(content=PROBE_PROMPT)]),
                timeout=config.probe_timeout,
            )
        except Exception as e:
            logger.info(
                f"{__name__}:resolve_provider_config - Probe failed for {model_name}: "
                f"{type(e).__name__}: {e}"
            )
            last_error = e
            continue
        logger.info(f"{__name__}:resolve_provider_config - Gemini connected using model: {model_name}")
        return replace(config, chat_model=model_name)

    logger.error(
        f"{__name__}:resolve_provider_config - Gemini connection error: "
        f"{type(last_error).__name__}: {last_error}"
    )
    logger.warning(
        f"{__name__}:resolve_provider_config - Could not connect to Gemini API, "
        f"keeping {config.chat_model}; answers will use keyword search until it recovers"
    )
    return config

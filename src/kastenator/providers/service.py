# src/kastenator/providers/service.py
"""Provider selection and fault-tolerant completion."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kastenator.providers.base import LLMClient, LLMResult, ProviderType
from kastenator.providers.models import (
    CLAUDE_PREFIX,
    DEFAULT_CLAUDE_MODEL,
    DEFAULT_OPENROUTER_MODEL,
    OPENROUTER_PREFIX,
)

if TYPE_CHECKING:
    from kastenator.settings import Settings

logger = logging.getLogger(__name__)


def _with_prefix(model: str, prefix: str) -> str:
    return model if model.startswith(prefix) else f"{prefix}{model}"


def create_llm_client(settings: Settings) -> LLMClient | None:
    """Build the client for the configured provider.

    Returns None when no provider is selected or the selected one lacks
    the credentials or model it needs.
    """
    from kastenator.providers import LiteLLMClient

    provider = ProviderType(settings.llm_provider)

    try:
        if provider == ProviderType.CLAUDE:
            if not settings.claude_api_key:
                return None
            return LiteLLMClient(
                model=_with_prefix(settings.claude_model or DEFAULT_CLAUDE_MODEL, CLAUDE_PREFIX),
                provider_type=provider,
                name="Claude",
                api_key=settings.claude_api_key,
                num_retries=settings.num_retries,
            )

        if provider == ProviderType.OPENROUTER:
            if not settings.openrouter_api_key:
                return None
            return LiteLLMClient(
                model=_with_prefix(
                    settings.openrouter_model or DEFAULT_OPENROUTER_MODEL, OPENROUTER_PREFIX
                ),
                provider_type=provider,
                name="OpenRouter",
                api_key=settings.openrouter_api_key,
                num_retries=settings.num_retries,
            )

        if provider == ProviderType.LOCAL:
            if not settings.local_model:
                return None
            return LiteLLMClient(
                model=settings.local_model,
                provider_type=provider,
                name="Local model",
                api_base=settings.local_api_base,
                num_retries=settings.num_retries,
            )
    except ImportError as e:
        logger.warning("LLM provider '%s' unavailable: %s", provider.value, e)
        return None

    return None


class LLMService:
    """Wraps an optional LLMClient so callers never see provider exceptions.

    Example:
        service = LLMService(create_llm_client(settings))
        result = await service.complete(prompt)
        if result.success:
            print(result.content)
    """

    def __init__(self, client: LLMClient | None, temperature: float | None = None) -> None:
        self._client = client
        self.temperature = temperature

    @property
    def client(self) -> LLMClient | None:
        return self._client

    @property
    def provider_name(self) -> str:
        return self._client.name if self._client else "None"

    def is_available(self) -> bool:
        return self._client is not None and self._client.is_available()

    async def complete(self, prompt: str) -> LLMResult:
        """Request a completion, capturing every failure in the result."""
        if self._client is None:
            return LLMResult(
                success=False,
                content="",
                error="No LLM provider configured",
                provider=ProviderType.NONE.value,
            )

        provider = ProviderType(self._client.provider_type).value
        if not self._client.is_available():
            return LLMResult(
                success=False,
                content="",
                error=f"{self._client.name} is not available",
                provider=provider,
            )

        try:
            content = await self._client.acomplete(
                [{"role": "user", "content": prompt}],
                temperature=self.temperature,
            )
        except Exception as e:
            return LLMResult(success=False, content="", error=str(e), provider=provider)

        return LLMResult(success=True, content=content, provider=provider)

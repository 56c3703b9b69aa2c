# src/kastenator/providers/litellm/client.py
"""LiteLLM client implementation for critique completions."""

from __future__ import annotations

from typing import Any

import litellm

from kastenator.exceptions import ProviderError, ProviderUnavailable
from kastenator.providers.base import LLMClient, ProviderType

DEFAULT_MAX_TOKENS = 1024


class LiteLLMClient(LLMClient):
    """LiteLLM-based LLM client for text generation.

    One client class serves every provider type; only the model string,
    credentials and api base differ.

    Example:
        from kastenator.providers.litellm import LiteLLMClient
        from kastenator.providers import ProviderType

        client = LiteLLMClient(
            model="anthropic/claude-sonnet-4-20250514",
            provider_type=ProviderType.CLAUDE,
            name="Claude",
            api_key="sk-...",
        )
        text = client.complete([{"role": "user", "content": "Hello"}])
    """

    def __init__(
        self,
        model: str,
        provider_type: ProviderType = ProviderType.LOCAL,
        name: str | None = None,
        api_key: str | None = None,
        api_base: str | None = None,
        num_retries: int = 3,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> None:
        """Initialize the LiteLLM client.

        Args:
            model: LiteLLM model identifier, e.g. "ollama/llama3.2".
            provider_type: Which provider this client stands for.
            name: Display name. Defaults to the model identifier.
            api_key: Key passed to LiteLLM. Not needed for local models.
            api_base: Optional endpoint override (local bridges).
            num_retries: Retries on rate limit errors, handled by LiteLLM.
            max_tokens: Completion token limit.
        """
        self.model = model
        self.provider_type = provider_type
        self.name = name or model
        self.api_key = api_key
        self.api_base = api_base
        self.num_retries = num_retries
        self.max_tokens = max_tokens

    def is_available(self) -> bool:
        if not self.model:
            return False
        if self.provider_type == ProviderType.LOCAL:
            return True
        return bool(self.api_key)

    def _completion_kwargs(self, messages: list[dict], temperature: float | None) -> dict[str, Any]:
        if not self.is_available():
            raise ProviderUnavailable(f"{self.name} is not configured")

        completion_kwargs: dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "max_tokens": self.max_tokens,
            "drop_params": True,
            "num_retries": self.num_retries,
        }
        if self.api_key:
            completion_kwargs["api_key"] = self.api_key
        if self.api_base:
            completion_kwargs["api_base"] = self.api_base
        if temperature is not None:
            completion_kwargs["temperature"] = temperature
        return completion_kwargs

    def _extract_content(self, response: Any) -> str:
        if not response.choices:
            raise ProviderError(f"Empty response from {self.name} for model {self.model}")
        content = response.choices[0].message.content
        if not content:
            raise ProviderError(f"No content in {self.name} response for model {self.model}")
        return str(content)

    def complete(
        self,
        messages: list[dict],
        temperature: float | None = None,
    ) -> str:
        """Generate a completion using LiteLLM."""
        response = litellm.completion(**self._completion_kwargs(messages, temperature))
        return self._extract_content(response)

    async def acomplete(
        self,
        messages: list[dict],
        temperature: float | None = None,
    ) -> str:
        """Generate a completion using LiteLLM (async)."""
        response = await litellm.acompletion(**self._completion_kwargs(messages, temperature))
        return self._extract_content(response)

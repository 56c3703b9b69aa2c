# src/kastenator/providers/base.py
"""Abstract base class for text-generation providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class ProviderType(str, Enum):
    """Identifier of a text-generation provider."""

    NONE = "none"
    LOCAL = "local"  # Local bridge, e.g. an Ollama model
    CLAUDE = "claude"  # Direct Anthropic API
    OPENROUTER = "openrouter"  # OpenRouter unified API


@dataclass
class LLMResult:
    """Result of a completion request made through LLMService."""

    success: bool
    content: str
    provider: str
    error: str | None = None


class LLMClient(ABC):
    """Abstract base class for LLM completion providers.

    The critique generator only needs availability and a completion, so
    the interface stays minimal and every provider is treated the same way.

    Example:
        class MyLLMClient(LLMClient):
            name = "Mine"
            provider_type = ProviderType.LOCAL

            def complete(self, messages, temperature=None):
                return my_api.chat(messages, temp=temperature)
    """

    name: str = "LLM"
    provider_type: ProviderType = ProviderType.NONE

    def is_available(self) -> bool:
        """Whether the provider is configured well enough to be called."""
        return True

    @abstractmethod
    def complete(
        self,
        messages: list[dict],
        temperature: float | None = None,
    ) -> str:
        """Generate a completion for the given messages.

        Args:
            messages: List of message dicts with 'role' and 'content' keys.
                      Example: [{"role": "user", "content": "Hello"}]
            temperature: Optional temperature for generation (0.0-1.0).
                         If None, use provider default.

        Returns:
            The generated text response.
        """
        ...

    async def acomplete(
        self,
        messages: list[dict],
        temperature: float | None = None,
    ) -> str:
        """Generate a completion for the given messages (async).

        Default implementation calls sync complete(). Override in subclasses
        for true async behavior.
        """
        return self.complete(messages, temperature)

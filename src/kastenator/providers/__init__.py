# src/kastenator/providers/__init__.py
"""Text-generation providers for Kastenator.

This module contains the provider abstraction used for critique:
- LLMClient: Abstract base class for completion providers
- LLMService: Availability checks and error capture around a client
- LiteLLM implementation (requires: pip install kastenator[litellm])

Usage:
    from kastenator.providers import LLMService, create_llm_client

    service = LLMService(create_llm_client(settings))
"""

from kastenator.providers.base import LLMClient, LLMResult, ProviderType
from kastenator.providers.models import (
    DEFAULT_CLAUDE_MODEL,
    DEFAULT_OPENROUTER_MODEL,
    ChatModels,
)

try:
    from kastenator.providers.litellm import LiteLLMClient
except ImportError:

    class LiteLLMClient:  # type: ignore[no-redef]
        """Stands in for the LiteLLM client when the extra is not installed."""

        def __init__(self, *args, **kwargs) -> None:
            raise ImportError(
                "llm_provider 'local', 'claude' and 'openrouter' need LiteLLM. "
                "Install it with: pip install kastenator[litellm]"
            )

from kastenator.providers.service import LLMService, create_llm_client

__all__ = [
    # ABCs
    "LLMClient",
    "LLMResult",
    "ProviderType",
    # Model constants
    "ChatModels",
    "DEFAULT_CLAUDE_MODEL",
    "DEFAULT_OPENROUTER_MODEL",
    # LiteLLM client
    "LiteLLMClient",
    # Service
    "LLMService",
    "create_llm_client",
]

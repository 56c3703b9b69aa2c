# src/kastenator/providers/litellm/__init__.py
"""LiteLLM provider client for Kastenator.

Usage:
    from kastenator.providers.litellm import LiteLLMClient, ChatModels

    client = LiteLLMClient(model="anthropic/" + ChatModels.CLAUDE_SONNET_4, api_key="...")
"""

from kastenator.providers.litellm.client import LiteLLMClient
from kastenator.providers.models import (
    DEFAULT_CLAUDE_MODEL,
    DEFAULT_OPENROUTER_MODEL,
    ChatModels,
)

__all__ = [
    "ChatModels",
    "DEFAULT_CLAUDE_MODEL",
    "DEFAULT_OPENROUTER_MODEL",
    "LiteLLMClient",
]

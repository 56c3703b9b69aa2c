# src/kastenator/providers/models.py
"""Curated model constants for text-generation providers.

You can always pass any valid LiteLLM model string directly.
"""


class ChatModels:
    """Chat models offered for critique."""

    # Anthropic (direct API)
    CLAUDE_SONNET_4 = "claude-sonnet-4-20250514"
    CLAUDE_35_SONNET = "claude-3-5-sonnet-20241022"
    CLAUDE_35_HAIKU = "claude-3-5-haiku-20241022"
    CLAUDE_3_OPUS = "claude-3-opus-20240229"

    # OpenRouter
    OPENROUTER_CLAUDE_SONNET_4 = "anthropic/claude-sonnet-4"
    OPENROUTER_CLAUDE_35_SONNET = "anthropic/claude-3.5-sonnet"
    OPENROUTER_CLAUDE_35_HAIKU = "anthropic/claude-3.5-haiku"
    OPENROUTER_GPT_4O = "openai/gpt-4o"
    OPENROUTER_GPT_4O_MINI = "openai/gpt-4o-mini"
    OPENROUTER_GEMINI_PRO_15 = "google/gemini-pro-1.5"
    OPENROUTER_LLAMA_31_70B = "meta-llama/llama-3.1-70b-instruct"
    OPENROUTER_MISTRAL_LARGE = "mistralai/mistral-large"


DEFAULT_CLAUDE_MODEL = ChatModels.CLAUDE_SONNET_4
DEFAULT_OPENROUTER_MODEL = ChatModels.OPENROUTER_CLAUDE_SONNET_4

# LiteLLM routing prefixes per provider
CLAUDE_PREFIX = "anthropic/"
OPENROUTER_PREFIX = "openrouter/"

# tests/providers/test_litellm_client.py
"""Tests for the LiteLLM client."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

pytest.importorskip("litellm", reason="Tests require litellm package")

from kastenator.exceptions import ProviderError, ProviderUnavailable
from kastenator.providers import LLMClient, ProviderType
from kastenator.providers.litellm import LiteLLMClient

MESSAGES = [{"role": "user", "content": "Critique this"}]


def mock_completion_response(content: str | None):
    """Create a mock LiteLLM completion response."""
    mock_response = MagicMock()
    mock_response.choices = [MagicMock()]
    mock_response.choices[0].message.content = content
    return mock_response


class TestLiteLLMClient:
    def test_is_llm_client(self):
        assert isinstance(LiteLLMClient(model="ollama/llama3.2"), LLMClient)

    def test_name_defaults_to_model(self):
        assert LiteLLMClient(model="ollama/llama3.2").name == "ollama/llama3.2"

    def test_local_is_available_without_key(self):
        assert LiteLLMClient(model="ollama/llama3.2").is_available() is True

    def test_remote_requires_key(self):
        client = LiteLLMClient(model="anthropic/claude", provider_type=ProviderType.CLAUDE)
        assert client.is_available() is False
        client.api_key = "sk-test"
        assert client.is_available() is True

    def test_requires_model(self):
        assert LiteLLMClient(model="").is_available() is False

    @patch("kastenator.providers.litellm.client.litellm.completion")
    def test_complete(self, mock_completion):
        mock_completion.return_value = mock_completion_response("Looks atomic.")
        client = LiteLLMClient(
            model="anthropic/claude",
            provider_type=ProviderType.CLAUDE,
            api_key="sk-test",
            num_retries=5,
        )

        assert client.complete(MESSAGES, temperature=0.2) == "Looks atomic."

        kwargs = mock_completion.call_args.kwargs
        assert kwargs["model"] == "anthropic/claude"
        assert kwargs["messages"] == MESSAGES
        assert kwargs["api_key"] == "sk-test"
        assert kwargs["num_retries"] == 5
        assert kwargs["temperature"] == 0.2
        assert kwargs["max_tokens"] == 1024
        assert kwargs["drop_params"] is True

    @patch("kastenator.providers.litellm.client.litellm.completion")
    def test_local_passes_api_base(self, mock_completion):
        mock_completion.return_value = mock_completion_response("ok")
        client = LiteLLMClient(model="ollama/llama3.2", api_base="http://localhost:11434")

        client.complete(MESSAGES)

        kwargs = mock_completion.call_args.kwargs
        assert kwargs["api_base"] == "http://localhost:11434"
        assert "api_key" not in kwargs
        assert "temperature" not in kwargs

    @patch("kastenator.providers.litellm.client.litellm.completion")
    def test_unavailable_raises_before_calling(self, mock_completion):
        client = LiteLLMClient(model="openrouter/x", provider_type=ProviderType.OPENROUTER)

        with pytest.raises(ProviderUnavailable):
            client.complete(MESSAGES)
        mock_completion.assert_not_called()

    @patch("kastenator.providers.litellm.client.litellm.completion")
    def test_empty_content_raises(self, mock_completion):
        mock_completion.return_value = mock_completion_response(None)

        with pytest.raises(ProviderError):
            LiteLLMClient(model="ollama/llama3.2").complete(MESSAGES)

    @patch("kastenator.providers.litellm.client.litellm.completion")
    def test_no_choices_raises(self, mock_completion):
        response = MagicMock()
        response.choices = []
        mock_completion.return_value = response

        with pytest.raises(ProviderError):
            LiteLLMClient(model="ollama/llama3.2").complete(MESSAGES)

    @pytest.mark.asyncio
    async def test_acomplete(self):
        with patch(
            "kastenator.providers.litellm.client.litellm.acompletion",
            new_callable=AsyncMock,
        ) as mock_acompletion:
            mock_acompletion.return_value = mock_completion_response("Async critique")
            client = LiteLLMClient(model="ollama/llama3.2")

            assert await client.acomplete(MESSAGES) == "Async critique"
            mock_acompletion.assert_awaited_once()

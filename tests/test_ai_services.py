"""
Tests for the Gemini and OpenAI service modules.
"""

import pytest
from unittest.mock import patch, MagicMock

from pratilipi.errors import AIBackendError, ConfigurationError
from pratilipi.services.ai_service import is_usable_credential
from pratilipi.services.gemini_service import GeminiService
from pratilipi.services.openai_service import OpenAIService


@pytest.fixture
def sample_prompt():
    """Fixture providing a sample prompt for testing."""
    return "Decide whether this idea duplicates an existing venture."


@pytest.fixture
def mock_genai():
    """Fixture providing a mocked google-genai module."""
    with patch('pratilipi.services.gemini_service.genai') as mock_module:
        yield mock_module


@pytest.fixture
def mock_openai_client():
    """Fixture providing a mocked OpenAI client class."""
    with patch('pratilipi.services.openai_service.OpenAI') as mock_client:
        yield mock_client


class TestCredentials:
    """Tests for credential checks."""

    @pytest.mark.parametrize("api_key", [None, "", "   ", "your-gemini-api-key", "test-key", "YOUR-OPENAI-API-KEY", "your-key-here"])
    def test_unusable(self, api_key):
        assert not is_usable_credential(api_key)

    def test_usable(self):
        assert is_usable_credential("AIzaSyA-real-looking-key")


class TestGeminiService:
    """Tests for the GeminiService."""

    def test_generate_success(self, mock_genai, sample_prompt):
        mock_response = MagicMock()
        mock_response.text = '{"isSimilar": false}'
        mock_genai.Client.return_value.models.generate_content.return_value = mock_response

        service = GeminiService("real-key", "gemini-2.0-flash", timeout_seconds=10)
        result = service.generate(sample_prompt)

        assert result == '{"isSimilar": false}'
        call_kwargs = mock_genai.Client.return_value.models.generate_content.call_args.kwargs
        assert call_kwargs["model"] == "gemini-2.0-flash"
        assert call_kwargs["contents"] == sample_prompt

    def test_placeholder_key_creates_no_client(self, mock_genai, sample_prompt):
        service = GeminiService("your-gemini-api-key", "gemini-2.0-flash")

        assert service.client is None
        mock_genai.Client.assert_not_called()
        with pytest.raises(ConfigurationError):
            service.generate(sample_prompt)

    @patch('pratilipi.services.gemini_service.logger')
    def test_generate_exception(self, mock_logger, mock_genai, sample_prompt):
        mock_genai.Client.return_value.models.generate_content.side_effect = Exception("quota exceeded")
        service = GeminiService("real-key", "gemini-2.0-flash")

        with pytest.raises(AIBackendError, match="quota exceeded"):
            service.generate(sample_prompt)

        mock_logger.error.assert_not_called()
        mock_logger.warning.assert_not_called()

    def test_empty_response(self, mock_genai, sample_prompt):
        mock_genai.Client.return_value.models.generate_content.return_value = MagicMock(text="")
        service = GeminiService("real-key", "gemini-2.0-flash")

        with pytest.raises(AIBackendError):
            service.generate(sample_prompt)


class TestOpenAIService:
    """Tests for the OpenAIService."""

    def test_generate_success(self, mock_openai_client, sample_prompt):
        mock_completion = MagicMock()
        mock_completion.choices = [MagicMock()]
        mock_completion.choices[0].message.content = '{"isSimilar": true}'
        mock_openai_client.return_value.chat.completions.create.return_value = mock_completion

        service = OpenAIService("sk-real", "gpt-4o", timeout_seconds=12)
        result = service.generate(sample_prompt)

        assert result == '{"isSimilar": true}'
        mock_openai_client.assert_called_once_with(api_key="sk-real", timeout=12, max_retries=0)

    def test_missing_key(self, mock_openai_client, sample_prompt):
        service = OpenAIService(None, "gpt-4o")

        mock_openai_client.assert_not_called()
        with pytest.raises(ConfigurationError):
            service.generate(sample_prompt)

    def test_generate_exception(self, mock_openai_client, sample_prompt):
        mock_openai_client.return_value.chat.completions.create.side_effect = Exception("timeout")
        service = OpenAIService("sk-real", "gpt-4o")

        with pytest.raises(AIBackendError):
            service.generate(sample_prompt)

    def test_no_choices(self, mock_openai_client, sample_prompt):
        mock_openai_client.return_value.chat.completions.create.return_value = MagicMock(choices=[])
        service = OpenAIService("sk-real", "gpt-4o")

        with pytest.raises(AIBackendError):
            service.generate(sample_prompt)


if __name__ == "__main__":
    # This allows running the tests directly with python
    import sys
    sys.exit(pytest.main(["-v", __file__]))

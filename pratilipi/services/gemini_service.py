"""
Gemini service implementation for Pratilipi.
Handles synchronous text generation using Google's Gemini models.
"""

from google import genai
from google.genai import types

from pratilipi.errors import AIBackendError, ConfigurationError
from pratilipi.services.ai_service import AIService
from pratilipi.utils.constants import AI_TEMPERATURE
from pratilipi.utils.logger import logger


class GeminiService(AIService):
    """Gemini service implementation."""

    def __init__(self, api_key: str, model: str, timeout_seconds: float = 30.0):
        """
        Initialize the Gemini service.

        Args:
            api_key: Google AI API key
            model: Gemini model to use
            timeout_seconds: Transport timeout for a single request
        """
        self.api_key = api_key
        self.model = model
        self.timeout_seconds = timeout_seconds
        self.client = None
        if self.has_usable_credential():
            self.client = genai.Client(
                api_key=api_key,
                http_options=types.HttpOptions(timeout=int(timeout_seconds * 1000)),
            )

    def generate(self, prompt: str) -> str:
        if self.client is None:
            raise ConfigurationError("Gemini API key is missing or a placeholder")

        logger.info(f"Requesting similarity analysis from Gemini model {self.model}")
        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=prompt,
                config={
                    "temperature": AI_TEMPERATURE,
                    "response_mime_type": "application/json",
                },
            )
        except Exception as e:
            logger.debug(f"Error calling Gemini: {e}")
            raise AIBackendError(f"Gemini request failed: {e}") from e

        text = response.text
        if not text:
            raise AIBackendError("Gemini returned an empty response")
        return text

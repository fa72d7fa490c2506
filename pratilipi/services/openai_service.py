"""
OpenAI service implementation for Pratilipi.
Handles synchronous chat completions using OpenAI models.
"""

from openai import OpenAI

from pratilipi.errors import AIBackendError, ConfigurationError
from pratilipi.services.ai_service import AIService
from pratilipi.utils.constants import AI_TEMPERATURE
from pratilipi.utils.logger import logger


class OpenAIService(AIService):
    """OpenAI service implementation."""

    def __init__(self, api_key: str, model: str, timeout_seconds: float = 30.0):
        """
        Initialize the OpenAI service.

        Args:
            api_key: OpenAI API key
            model: OpenAI model to use
            timeout_seconds: Transport timeout for a single request
        """
        self.api_key = api_key
        self.model = model
        self.timeout_seconds = timeout_seconds
        self.client = None
        if self.has_usable_credential():
            # Retries belong to the caller, not the engine
            self.client = OpenAI(api_key=api_key, timeout=timeout_seconds, max_retries=0)

    def generate(self, prompt: str) -> str:
        if self.client is None:
            raise ConfigurationError("OpenAI API key is missing or a placeholder")

        logger.info(f"Requesting similarity analysis from OpenAI model {self.model}")
        try:
            completion = self.client.chat.completions.create(
                model=self.model,
                temperature=AI_TEMPERATURE,
                response_format={"type": "json_object"},
                messages=[{"role": "user", "content": prompt}],
            )
        except Exception as e:
            logger.debug(f"Error calling OpenAI: {e}")
            raise AIBackendError(f"OpenAI request failed: {e}") from e

        if not completion.choices or not completion.choices[0].message.content:
            raise AIBackendError("OpenAI returned an empty response")
        return completion.choices[0].message.content

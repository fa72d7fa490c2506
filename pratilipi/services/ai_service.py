"""
Abstract base class for AI services used in Pratilipi.
This provides a common interface for different hosted language models.
"""

from abc import ABC, abstractmethod
from typing import Optional

from pratilipi.utils.constants import PLACEHOLDER_API_KEYS


def is_usable_credential(api_key: Optional[str]) -> bool:
    """True when the key is set and is not a sample placeholder."""
    if not api_key or not api_key.strip():
        return False
    key = api_key.strip()
    return key.lower() not in PLACEHOLDER_API_KEYS and not key.lower().startswith("your-")


class AIService(ABC):
    """Abstract base class for AI services."""

    api_key: Optional[str] = None

    def has_usable_credential(self) -> bool:
        return is_usable_credential(self.api_key)

    @abstractmethod
    def generate(self, prompt: str) -> str:
        """
        Send one prompt to the model and return its text response.

        Args:
            prompt: The complete prompt

        Returns:
            The model's raw text response

        Raises:
            ConfigurationError: If no usable credential is configured
            AIBackendError: If the provider call fails or returns no text
        """
        pass

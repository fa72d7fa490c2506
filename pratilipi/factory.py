"""
Factory for creating AI services and analyzers from configuration.
"""

from typing import Optional

from pratilipi.analyzer import SimilarityAnalyzer
from pratilipi.engines.ai_engine import AIAssistedEngine
from pratilipi.engines.deterministic import DeterministicEngine
from pratilipi.services.ai_service import AIService
from pratilipi.services.gemini_service import GeminiService
from pratilipi.services.openai_service import OpenAIService
from pratilipi.similarity.policy import SimilarityPolicy
from pratilipi.utils.config import config
from pratilipi.utils.constants import AI_PROVIDERS
from pratilipi.utils.logger import logger


def validate_provider(provider: str) -> str:
    """Return the provider name in lower case, or raise ValueError if it is unknown."""
    provider = provider.lower()
    if provider not in AI_PROVIDERS:
        raise ValueError(f"Unsupported AI provider: {provider} (expected one of: {', '.join(AI_PROVIDERS)})")
    return provider


def create_ai_service(provider: str) -> Optional[AIService]:
    """
    Factory to create the AI service for a provider.

    Args:
        provider: "gemini", "openai" or "none"

    Returns:
        AIService instance, or None when AI analysis is disabled
    """
    provider = validate_provider(provider)
    if provider == "gemini":
        return GeminiService(config.gemini_api_key, config.gemini_model, config.ai_timeout_seconds)
    elif provider == "openai":
        return OpenAIService(config.openai_api_key, config.openai_model, config.ai_timeout_seconds)
    return None


def create_analyzer(provider: Optional[str] = None, policy: Optional[SimilarityPolicy] = None) -> SimilarityAnalyzer:
    """
    Build a SimilarityAnalyzer wired to the configured policy and AI backend.

    An unknown provider leaves the analyzer deterministic-only. The AI engine
    deadline and the provider client timeout share AI_TIMEOUT_SECONDS, so an
    abandoned call never outlives the deadline by more than one client timeout.

    Args:
        provider: Overrides AI_PROVIDER from the environment
        policy: Overrides the policy loaded from SIMILARITY_POLICY_FILE

    Raises:
        ConfigurationError: If the policy file is invalid
    """
    policy = policy or SimilarityPolicy.from_yaml(config.policy_file)
    try:
        ai_service = create_ai_service(provider or config.ai_provider)
    except ValueError as e:
        logger.warning(f"{e}; AI analysis disabled")
        ai_service = None

    ai_engine = None
    if ai_service is not None:
        ai_engine = AIAssistedEngine(ai_service, policy, timeout_seconds=config.ai_timeout_seconds)

    return SimilarityAnalyzer(DeterministicEngine(policy), ai_engine)

"""
Weighting and threshold policy for the similarity engines.

Every tunable number the engines use lives here so it can be injected,
overridden from YAML, and exercised in tests without touching module state.
"""

from pathlib import Path
from typing import Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from pratilipi.errors import ConfigurationError
from pratilipi.similarity.keywords import IMPORTANT_KEYWORDS, INDUSTRY_KEYWORDS
from pratilipi.utils.logger import logger


class SimilarityPolicy(BaseModel):
    """Weights, thresholds and keyword tables for one engine instance."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Concept similarity: blend of raw token overlap and important keyword overlap
    jaccard_weight: float = Field(0.4, ge=0.0, le=1.0)
    keyword_weight: float = Field(0.6, ge=0.0, le=1.0)

    # Composite channel weights
    problem_weight: float = Field(0.30, ge=0.0, le=1.0)
    industry_weight: float = Field(0.30, ge=0.0, le=1.0)
    solution_weight: float = Field(0.20, ge=0.0, le=1.0)
    business_model_weight: float = Field(0.05, ge=0.0, le=1.0)

    # Name short-circuit
    name_similarity_threshold: float = Field(0.85, ge=0.0, le=1.0)
    strict_name_similarity_threshold: float = Field(0.95, ge=0.0, le=1.0)
    strict_name_concept_threshold: float = Field(0.10, ge=0.0, le=1.0)
    loose_name_concept_threshold: float = Field(0.30, ge=0.0, le=1.0)
    containment_name_score: float = Field(0.95, ge=0.0, le=1.0)
    min_contained_name_length: int = Field(4, ge=1)

    # Decision thresholds
    rejection_threshold: float = Field(0.40, ge=0.0, le=1.0)
    internal_rejection_threshold: float = Field(0.50, ge=0.0, le=1.0)

    # AI prompt size
    ai_max_corpus_entries: int = Field(50, ge=1)

    important_keywords: Tuple[str, ...] = IMPORTANT_KEYWORDS
    industry_keywords: Tuple[str, ...] = INDUSTRY_KEYWORDS

    @model_validator(mode="after")
    def _check_weights(self):
        channel_total = self.problem_weight + self.industry_weight + self.solution_weight + self.business_model_weight
        if channel_total > 1.0 + 1e-9:
            raise ValueError(f"composite channel weights sum to {channel_total:.2f}, must be <= 1")
        if self.jaccard_weight + self.keyword_weight > 1.0 + 1e-9:
            raise ValueError("jaccard_weight + keyword_weight must be <= 1")
        if self.strict_name_similarity_threshold < self.name_similarity_threshold:
            raise ValueError("strict_name_similarity_threshold must not be below name_similarity_threshold")
        return self

    def threshold_for(self, internal_corpus_mode: bool) -> float:
        return self.internal_rejection_threshold if internal_corpus_mode else self.rejection_threshold

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "SimilarityPolicy":
        """
        Load a policy from YAML, falling back to defaults when the file is absent.

        Args:
            path: Path to a YAML mapping of policy field overrides

        Returns:
            SimilarityPolicy instance

        Raises:
            ConfigurationError: If the file is not valid YAML or holds invalid values
        """
        path = Path(path)
        if not path.exists():
            logger.debug(f"No policy file at {path}, using default similarity policy")
            return cls()

        try:
            with open(path, 'r') as file:
                overrides = yaml.safe_load(file) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Policy file {path} is not valid YAML: {e}") from e

        if not isinstance(overrides, dict):
            raise ConfigurationError(f"Policy file {path} must contain a mapping")

        try:
            policy = cls(**overrides)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid similarity policy in {path}: {e}") from e

        logger.info(f"Loaded similarity policy from {path}")
        return policy

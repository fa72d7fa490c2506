"""
Strategy selector for duplicate-idea analysis.

Chooses, per call, between the AI-assisted engine and the deterministic
engine. Callers always receive a Verdict unless the candidate itself is
invalid; AI backend problems degrade to the deterministic verdict.
"""

from typing import Any, Iterable, List, Mapping, Optional, Union

from pydantic import ValidationError

from pratilipi.engines.ai_engine import AIAssistedEngine
from pratilipi.engines.deterministic import DeterministicEngine, exclude_owner
from pratilipi.errors import AIBackendError, ConfigurationError, InvalidInputError
from pratilipi.models.idea import AnalyzeOptions, Idea, Verdict
from pratilipi.similarity.policy import SimilarityPolicy
from pratilipi.utils.logger import logger

IdeaLike = Union[Idea, Mapping[str, Any]]


def coerce_candidate(candidate: IdeaLike) -> Idea:
    """
    Turn the candidate into an Idea, insisting on a title and a description.

    Raises:
        InvalidInputError: If title or description is missing or blank
    """
    if not isinstance(candidate, Idea):
        try:
            candidate = Idea.model_validate(candidate)
        except ValidationError as e:
            raise InvalidInputError(f"Invalid candidate idea: {e}") from e

    if not candidate.title.strip():
        raise InvalidInputError("Candidate idea is missing a title")
    if not candidate.description.strip():
        raise InvalidInputError("Candidate idea is missing a description")
    return candidate


def coerce_corpus(corpus: Iterable[IdeaLike]) -> List[Idea]:
    """Turn corpus items into Ideas, skipping malformed entries."""
    entries = []
    for position, item in enumerate(corpus):
        if isinstance(item, Idea):
            entries.append(item)
            continue
        try:
            entries.append(Idea.model_validate(item))
        except ValidationError as e:
            logger.warning(f"Skipping malformed corpus entry at position {position}: {e.error_count()} error(s)")
    return entries


class SimilarityAnalyzer:
    """Runs the AI-assisted engine when possible and the deterministic engine otherwise."""

    def __init__(self, deterministic_engine: DeterministicEngine, ai_engine: Optional[AIAssistedEngine] = None):
        self.deterministic_engine = deterministic_engine
        self.ai_engine = ai_engine

    def prefers_ai(self) -> bool:
        return self.ai_engine is not None and self.ai_engine.is_available()

    def analyze(
        self,
        candidate: IdeaLike,
        corpus: Iterable[IdeaLike],
        options: Optional[Union[AnalyzeOptions, Mapping[str, Any]]] = None,
    ) -> Verdict:
        """
        Produce a verdict for the candidate against the corpus.

        Args:
            candidate: The idea being checked
            corpus: Ideas to compare against
            options: Owner exclusion and corpus mode, as AnalyzeOptions or a mapping

        Returns:
            Verdict from the AI engine, or from the deterministic engine on fallback

        Raises:
            InvalidInputError: If the candidate is missing its title or description, or the options are invalid
        """
        candidate = coerce_candidate(candidate)
        corpus = coerce_corpus(corpus)
        if options is None:
            options = AnalyzeOptions()
        elif not isinstance(options, AnalyzeOptions):
            try:
                options = AnalyzeOptions.model_validate(options)
            except ValidationError as e:
                raise InvalidInputError(f"Invalid analysis options: {e}") from e

        if not exclude_owner(corpus, options.exclude_owner_id):
            return self.deterministic_engine.analyze(candidate, corpus, options)

        if not self.prefers_ai():
            logger.debug("AI backend unavailable, using deterministic engine")
            return self.deterministic_engine.analyze(candidate, corpus, options)

        try:
            return self.ai_engine.analyze(candidate, corpus, options)
        except (ConfigurationError, AIBackendError) as e:
            logger.warning(f"AI analysis failed, falling back to deterministic engine: {e}")
            return self.deterministic_engine.analyze(candidate, corpus, options)


def analyze(
    candidate: IdeaLike,
    corpus: Iterable[IdeaLike],
    options: Optional[Union[AnalyzeOptions, Mapping[str, Any]]] = None,
    analyzer: Optional[SimilarityAnalyzer] = None,
) -> Verdict:
    """
    Analyze with the given analyzer, or one built from configuration.

    An invalid policy file is logged and the default policy is used instead.
    """
    if analyzer is None:
        from pratilipi.factory import create_analyzer
        try:
            analyzer = create_analyzer()
        except ConfigurationError as e:
            logger.warning(f"{e}; using the default similarity policy")
            analyzer = create_analyzer(policy=SimilarityPolicy())
    return analyzer.analyze(candidate, corpus, options)

"""
Deterministic decision engine.

Fallback strategy: pure computation over the candidate and the corpus, safe
to run concurrently and always producing the same verdict for the same input.
"""

from typing import List, Optional, Sequence

from pratilipi.models.idea import (
    AnalyzeOptions,
    Idea,
    MostSimilarEntry,
    Recommendation,
    SimilarityBreakdown,
    Verdict,
)
from pratilipi.similarity.concept import composite_score, concept_evidence, score_breakdown
from pratilipi.similarity.name_match import NameCollision, find_name_collision
from pratilipi.similarity.policy import SimilarityPolicy
from pratilipi.similarity.text import shared_terms
from pratilipi.utils.logger import logger

STRATEGY = "deterministic"


def exclude_owner(corpus: Sequence[Idea], owner_id: Optional[str]) -> List[Idea]:
    """Drop the requester's own submissions from the corpus."""
    if owner_id is None:
        return list(corpus)
    return [entry for entry in corpus if entry.ownerId != owner_id]


class DeterministicEngine:
    """Rule-based duplicate detection using the name short-circuit and composite scoring."""

    def __init__(self, policy: Optional[SimilarityPolicy] = None):
        self.policy = policy or SimilarityPolicy()

    def analyze(self, candidate: Idea, corpus: Sequence[Idea], options: Optional[AnalyzeOptions] = None) -> Verdict:
        """
        Decide whether the candidate duplicates an entry in the corpus.

        Args:
            candidate: The idea being checked
            corpus: Ideas to compare against, in priority order
            options: Owner exclusion and corpus mode

        Returns:
            Verdict with recommendation APPROVE or REJECT
        """
        options = options or AnalyzeOptions()
        corpus = exclude_owner(corpus, options.exclude_owner_id)

        if not corpus:
            logger.debug(f"Empty corpus for '{candidate.title}', approving")
            return Verdict(
                isSimilar=False,
                similarityScore=0.0,
                recommendation=Recommendation.APPROVE,
                mostSimilarEntry=None,
                feedback="No existing ideas to compare against. The idea is considered unique.",
                strategy=STRATEGY,
            )

        collision = find_name_collision(candidate, corpus, self.policy)
        if collision is not None:
            logger.info(f"Name collision for '{candidate.title}' with '{collision.entry.name}'")
            return self._name_collision_verdict(candidate, collision)

        best_entry = None
        best_score = 0.0
        best_breakdown = None
        for entry in corpus:
            breakdown = score_breakdown(candidate, entry, self.policy)
            score = composite_score(breakdown, self.policy)
            logger.debug(f"Composite similarity of '{candidate.title}' to '{entry.name}': {score:.3f}")
            # Strictly greater keeps the first entry on ties
            if score > best_score:
                best_entry, best_score, best_breakdown = entry, score, breakdown

        threshold = self.policy.threshold_for(options.internal_corpus_mode)
        rejected = best_score > threshold
        logger.info(
            f"Highest concept similarity for '{candidate.title}': {best_score:.3f} "
            f"(threshold {threshold:.2f}) -> {'REJECT' if rejected else 'APPROVE'}"
        )

        most_similar = None
        if best_entry is not None:
            most_similar = MostSimilarEntry(name=best_entry.name, reason=self._reason(candidate, best_entry, best_score))

        return Verdict(
            isSimilar=rejected,
            similarityScore=best_score,
            recommendation=Recommendation.REJECT if rejected else Recommendation.APPROVE,
            mostSimilarEntry=most_similar,
            feedback=self._feedback(best_entry, best_score, rejected, options.internal_corpus_mode),
            suggestions=self._suggestions(best_entry) if rejected else [],
            strategy=STRATEGY,
            breakdown=best_breakdown or SimilarityBreakdown(),
        )

    def _name_collision_verdict(self, candidate: Idea, collision: NameCollision) -> Verdict:
        entry = collision.entry
        kind = "identical" if collision.match.exact else "very similar"
        evidence = concept_evidence(candidate, entry, self.policy)
        reason = f"The name '{candidate.title}' is {kind} to '{entry.name}'"
        if evidence:
            reason += f" and both describe {', '.join(evidence)}"
        reason += f" ({collision.concept_score:.0%} concept overlap)."

        return Verdict(
            isSimilar=True,
            similarityScore=collision.score,
            recommendation=Recommendation.REJECT,
            mostSimilarEntry=MostSimilarEntry(name=entry.name, reason=reason),
            feedback=(
                f"Your idea appears to duplicate the existing venture '{entry.name}' "
                f"({collision.score:.0%} similarity). {reason}"
            ),
            suggestions=self._suggestions(entry),
            strategy=STRATEGY,
            breakdown=collision.breakdown,
        )

    def _reason(self, candidate: Idea, entry: Idea, score: float) -> str:
        evidence = concept_evidence(candidate, entry, self.policy)
        if evidence:
            return f"Shared business keywords: {', '.join(evidence)}."
        terms = sorted(shared_terms(f"{candidate.problemStatement} {candidate.description}", f"{entry.oneLiner} {entry.description}"))
        if terms:
            return f"Shared terms: {', '.join(terms[:8])}."
        return f"Highest composite business-concept similarity ({score:.0%})."

    def _feedback(self, entry: Optional[Idea], score: float, rejected: bool, internal: bool) -> str:
        source = "an existing application" if internal else "an existing venture"
        if entry is None:
            return "No meaningful overlap with existing ideas was found. The idea is considered unique."
        if rejected:
            return (
                f"Your idea is too similar to {source}: '{entry.name}' ({score:.0%} similarity). "
                f"Differentiate the problem, target market or business model before resubmitting."
            )
        return (
            f"The most similar existing idea is '{entry.name}' ({score:.0%} similarity), "
            f"which is below the rejection threshold. The idea is sufficiently unique."
        )

    def _suggestions(self, entry: Idea) -> List[str]:
        return [
            f"Explain what your idea does that '{entry.name}' does not.",
            "Target a different customer segment or vertical.",
            "Describe a distinct technical approach or business model.",
        ]

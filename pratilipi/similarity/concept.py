"""
Business-concept scorer.

Compares a candidate idea with one corpus entry over four channels (problem,
industry, solution, business model) and folds them into a composite score.
The channel weights deliberately sum to less than one so that only
near-duplicates score close to 1.0.
"""

from typing import List

from pratilipi.models.idea import Idea, SimilarityBreakdown
from pratilipi.similarity.keywords import keyword_similarity, shared_keywords
from pratilipi.similarity.policy import SimilarityPolicy
from pratilipi.similarity.text import jaccard_similarity


def _join(*parts: str) -> str:
    return " ".join(parts).lower()


def concept_similarity(text_a: str, text_b: str, policy: SimilarityPolicy) -> float:
    """Token overlap blended with important keyword overlap."""
    return (
        policy.jaccard_weight * jaccard_similarity(text_a, text_b)
        + policy.keyword_weight * keyword_similarity(policy.important_keywords, text_a, text_b)
    )


def candidate_problem_text(candidate: Idea) -> str:
    return _join(candidate.problemStatement, candidate.description)


def candidate_full_text(candidate: Idea) -> str:
    return _join(
        candidate.description,
        candidate.problemStatement,
        candidate.solution,
        candidate.targetMarket,
        candidate.industry,
    )


def entry_summary_text(entry: Idea) -> str:
    return _join(entry.oneLiner, entry.description)


def entry_full_text(entry: Idea) -> str:
    return _join(entry.oneLiner, entry.description, entry.industry)


def score_breakdown(candidate: Idea, entry: Idea, policy: SimilarityPolicy) -> SimilarityBreakdown:
    """
    Compute the per-channel similarity between a candidate and one corpus entry.

    Args:
        candidate: The idea being checked
        entry: One corpus entry
        policy: Weights and keyword tables to use

    Returns:
        SimilarityBreakdown with every channel in [0, 1]
    """
    entry_description = entry.description.lower()

    problem = concept_similarity(candidate_problem_text(candidate), entry_summary_text(entry), policy)
    solution = concept_similarity(candidate.solution.lower(), entry_description, policy)
    business_model = 0.0
    if candidate.businessModel.strip():
        business_model = concept_similarity(candidate.businessModel.lower(), entry_description, policy)
    industry = keyword_similarity(policy.industry_keywords, candidate_full_text(candidate), entry_full_text(entry))

    return SimilarityBreakdown(
        problemSimilarity=_clamp(problem),
        solutionSimilarity=_clamp(solution),
        businessModelSimilarity=_clamp(business_model),
        industrySimilarity=_clamp(industry),
    )


def composite_score(breakdown: SimilarityBreakdown, policy: SimilarityPolicy) -> float:
    score = (
        policy.problem_weight * breakdown.problemSimilarity
        + policy.industry_weight * breakdown.industrySimilarity
        + policy.solution_weight * breakdown.solutionSimilarity
        + policy.business_model_weight * breakdown.businessModelSimilarity
    )
    return _clamp(score)


def concept_evidence(candidate: Idea, entry: Idea, policy: SimilarityPolicy) -> List[str]:
    """Business keywords the candidate shares with the entry, important ones first."""
    candidate_text = candidate_full_text(candidate)
    entry_text = entry_full_text(entry)
    evidence = shared_keywords(policy.important_keywords, candidate_text, entry_text)
    for keyword in shared_keywords(policy.industry_keywords, candidate_text, entry_text):
        if keyword not in evidence:
            evidence.append(keyword)
    return evidence


def _clamp(value: float) -> float:
    return min(1.0, max(0.0, value))

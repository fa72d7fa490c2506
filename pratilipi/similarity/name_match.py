"""
Name-match short-circuit.

A candidate whose title collides with a corpus entry's name can be rejected
without scoring the rest of the corpus. An exact collision needs only weak
thematic overlap to be disqualifying; a merely similar-sounding name needs
real business overlap.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from pratilipi.models.idea import Idea, SimilarityBreakdown
from pratilipi.similarity.concept import composite_score, score_breakdown
from pratilipi.similarity.policy import SimilarityPolicy
from pratilipi.similarity.text import edit_similarity, normalize_name


@dataclass(frozen=True)
class NameMatch:
    edit_similarity: float
    name_score: float
    exact: bool
    contained: bool
    strict: bool


@dataclass(frozen=True)
class NameCollision:
    entry: Idea
    match: NameMatch
    breakdown: SimilarityBreakdown
    concept_score: float
    score: float


def match_name(title: str, entry_name: str, policy: SimilarityPolicy) -> Optional[NameMatch]:
    """
    Compare a candidate title with a corpus entry name.

    Args:
        title: Candidate title
        entry_name: Corpus entry name
        policy: Thresholds to apply

    Returns:
        NameMatch if the names match, None otherwise
    """
    similarity = edit_similarity(title.lower(), entry_name.lower())
    normalized_title = normalize_name(title)
    normalized_entry = normalize_name(entry_name)

    exact = bool(normalized_title) and normalized_title == normalized_entry
    min_length = policy.min_contained_name_length
    contained = (
        (len(normalized_title) >= min_length and normalized_title in normalized_entry)
        or (len(normalized_entry) >= min_length and normalized_entry in normalized_title)
    )
    similar = similarity > policy.name_similarity_threshold

    if not (similar or exact or contained):
        return None

    strict = exact or contained or similarity > policy.strict_name_similarity_threshold
    if exact:
        name_score = 1.0
    elif contained:
        name_score = max(similarity, policy.containment_name_score)
    else:
        name_score = similarity
    return NameMatch(
        edit_similarity=similarity,
        name_score=name_score,
        exact=exact,
        contained=contained,
        strict=strict,
    )


def rejects(match: NameMatch, concept_score: float, policy: SimilarityPolicy) -> bool:
    """Apply the asymmetric concept threshold for a name match."""
    threshold = policy.strict_name_concept_threshold if match.strict else policy.loose_name_concept_threshold
    return concept_score > threshold


def find_name_collision(candidate: Idea, corpus: Sequence[Idea], policy: SimilarityPolicy) -> Optional[NameCollision]:
    """Return the first corpus entry, in corpus order, whose name match trips the rejection rule."""
    for entry in corpus:
        match = match_name(candidate.title, entry.name, policy)
        if match is None:
            continue

        breakdown = score_breakdown(candidate, entry, policy)
        concept_score = composite_score(breakdown, policy)
        if rejects(match, concept_score, policy):
            return NameCollision(
                entry=entry,
                match=match,
                breakdown=breakdown,
                concept_score=concept_score,
                score=max(match.name_score, concept_score),
            )
    return None

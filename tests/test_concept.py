"""
Tests for the business-concept scorer.
"""

import pytest

from pratilipi.models.idea import Idea, SimilarityBreakdown
from pratilipi.similarity.concept import composite_score, concept_evidence, concept_similarity, score_breakdown
from pratilipi.similarity.policy import SimilarityPolicy


@pytest.fixture
def policy():
    """Fixture providing the default similarity policy."""
    return SimilarityPolicy()


@pytest.fixture
def stripe():
    """Fixture providing a payments reference venture."""
    return Idea(
        title="Stripe",
        oneLiner="Online payment processing",
        description="Stripe builds economic infrastructure for the internet. Businesses use Stripe to accept payments online.",
        industry="Fintech",
        tags=["Fintech", "Payments"],
    )


class TestConceptSimilarity:
    """Tests for concept_similarity."""

    def test_identical_text_with_keyword(self, policy):
        text = "payment platform for merchants"
        assert concept_similarity(text, text, policy) == pytest.approx(1.0)

    def test_disjoint_text(self, policy):
        assert concept_similarity("plant health monitoring", "cryptocurrency exchange", policy) == 0.0

    def test_empty_text(self, policy):
        assert concept_similarity("", "", policy) == 0.0


class TestScoreBreakdown:
    """Tests for score_breakdown and composite_score."""

    def test_minimal_candidate_never_fails(self, policy, stripe):
        candidate = Idea(title="Bare", description="Nothing else provided")

        breakdown = score_breakdown(candidate, stripe, policy)

        assert breakdown.solutionSimilarity == 0.0
        assert breakdown.businessModelSimilarity == 0.0
        assert 0.0 <= composite_score(breakdown, policy) <= 1.0

    def test_none_optional_fields_are_empty_strings(self, policy, stripe):
        candidate = Idea(title="Bare", description="Nothing else", solution=None, businessModel=None, tags=None)

        assert candidate.solution == ""
        assert candidate.tags == []
        assert score_breakdown(candidate, stripe, policy).solutionSimilarity == 0.0

    def test_business_model_channel(self, policy, stripe):
        candidate = Idea(
            title="PayFlow",
            description="Accept payment online",
            businessModel="Fee on each payment processed online",
        )

        breakdown = score_breakdown(candidate, stripe, policy)

        assert breakdown.businessModelSimilarity > 0.0
        # payment is shared, fintech only appears on the venture side
        assert breakdown.industrySimilarity == 0.5

    def test_channels_within_bounds(self, policy, stripe):
        breakdown = score_breakdown(Idea(**stripe.model_dump()), stripe, policy)
        for value in breakdown.model_dump().values():
            assert 0.0 <= value <= 1.0

    def test_composite_weights(self, policy):
        breakdown = SimilarityBreakdown(
            problemSimilarity=1.0,
            solutionSimilarity=1.0,
            businessModelSimilarity=1.0,
            industrySimilarity=1.0,
        )
        assert composite_score(breakdown, policy) == pytest.approx(0.85)

    def test_composite_single_channel(self, policy):
        breakdown = SimilarityBreakdown(industrySimilarity=0.5)
        assert composite_score(breakdown, policy) == pytest.approx(0.15)

    def test_injected_weights(self):
        policy = SimilarityPolicy(problem_weight=1.0, industry_weight=0.0, solution_weight=0.0, business_model_weight=0.0)
        breakdown = SimilarityBreakdown(problemSimilarity=0.7, industrySimilarity=1.0)
        assert composite_score(breakdown, policy) == pytest.approx(0.7)

    def test_concept_evidence(self, policy, stripe):
        candidate = Idea(title="PayFlow", description="Fintech payment links for freelancers")
        assert concept_evidence(candidate, stripe, policy) == ["payment", "fintech"]

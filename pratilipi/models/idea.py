"""
Shared data models for ideas, analysis options and verdicts.
"""

from enum import Enum
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator
from typing import Any, Dict, List, Optional


class Idea(BaseModel):
    """A venture or project idea: the candidate being checked or a corpus entry."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., validation_alias=AliasChoices("title", "name"), description="Idea title, or the venture name for corpus entries")
    description: str = Field(..., description="Free-form description of the idea")
    oneLiner: str = Field("", description="Short tagline, mostly present on reference ventures")
    problemStatement: str = Field("", description="The issue or opportunity the idea addresses")
    solution: str = Field("", validation_alias=AliasChoices("solution", "proposedSolution"), description="The proposed solution")
    targetMarket: str = Field("", description="Primary customers or beneficiaries")
    businessModel: str = Field("", description="How the idea makes money")
    techStack: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    industry: str = ""
    ownerId: Optional[str] = None
    status: Optional[str] = None
    isActive: bool = True

    @field_validator("oneLiner", "problemStatement", "solution", "targetMarket", "businessModel", "industry", mode="before")
    @classmethod
    def _none_as_empty_text(cls, value):
        return "" if value is None else value

    @field_validator("techStack", "tags", mode="before")
    @classmethod
    def _none_as_empty_list(cls, value):
        return [] if value is None else value

    @property
    def name(self) -> str:
        return self.title


class AnalyzeOptions(BaseModel):
    """Per-call options for an analysis request."""

    model_config = ConfigDict(populate_by_name=True)

    exclude_owner_id: Optional[str] = Field(None, alias="excludeOwnerId")
    internal_corpus_mode: bool = Field(False, alias="internalCorpusMode")


class Recommendation(str, Enum):
    APPROVE = "APPROVE"
    REJECT = "REJECT"
    NEEDS_DIFFERENTIATION = "NEEDS_DIFFERENTIATION"


class SimilarityBreakdown(BaseModel):
    """Per-channel similarity between a candidate and one corpus entry."""

    model_config = ConfigDict(frozen=True)

    problemSimilarity: float = Field(0.0, ge=0.0, le=1.0)
    solutionSimilarity: float = Field(0.0, ge=0.0, le=1.0)
    businessModelSimilarity: float = Field(0.0, ge=0.0, le=1.0)
    industrySimilarity: float = Field(0.0, ge=0.0, le=1.0)


class MostSimilarEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    reason: str


class Verdict(BaseModel):
    """The engine's decision for one candidate against one corpus."""

    model_config = ConfigDict(frozen=True)

    isSimilar: bool
    similarityScore: float = Field(..., ge=0.0, le=1.0)
    recommendation: Recommendation
    mostSimilarEntry: Optional[MostSimilarEntry] = None
    feedback: str
    suggestions: List[str] = Field(default_factory=list)
    strategy: str = "deterministic"
    breakdown: Optional[SimilarityBreakdown] = None


class MostSimilarCompany(BaseModel):
    name: StrictStr
    reason: StrictStr


class AIResponse(BaseModel):
    """Schema the AI backend must answer with. Nothing here is coerced."""

    isSimilar: StrictBool
    similarityScore: float = Field(..., ge=0.0, le=1.0, strict=True)
    recommendation: Recommendation
    mostSimilarCompany: Optional[MostSimilarCompany] = None
    analysis: Optional[Dict[str, Any]] = None
    feedback: StrictStr
    suggestions: List[StrictStr] = Field(default_factory=list)

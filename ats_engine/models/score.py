"""Result models produced by the scoring pipeline and the job-description matcher."""
from datetime import datetime
from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


# Composite weights in percent. Fixed, not configurable.
SCORE_WEIGHTS = {
    "structure": 25,
    "keywords": 30,
    "content": 20,
    "readability": 15,
    "completeness": 10,
}

SignalStatus = Literal["strong", "needs-improvement", "risk"]


class _ResultModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class ScoreBreakdown(_ResultModel):
    """The five sub-scores feeding the composite."""
    structure: int = Field(0, ge=0, le=100)
    keywords: int = Field(0, ge=0, le=100)
    content: int = Field(0, ge=0, le=100)
    readability: int = Field(0, ge=0, le=100)
    completeness: int = Field(0, ge=0, le=100)

    @property
    def weights(self) -> dict[str, int]:
        return dict(SCORE_WEIGHTS)

    def weighted_total(self) -> int:
        """Sum of weight * sub-score, i.e. 100x the unrounded composite."""
        return sum(weight * getattr(self, name) for name, weight in SCORE_WEIGHTS.items())


class SectionSignal(_ResultModel):
    """Per-section qualitative status."""
    section_id: str = Field(..., alias="sectionId")
    status: SignalStatus
    message: str


class ScoreTip(_ResultModel):
    """Actionable tip attached to a weak sub-score."""
    metric: str
    status: SignalStatus
    message: str


class ScoreFeedback(_ResultModel):
    """Change since the previous scoring pass of the same document lineage."""
    message: str
    delta: int
    timestamp: datetime


class ScoringResult(_ResultModel):
    """Output of one continuous scoring pass."""
    score: int = Field(..., ge=0, le=100)
    label: str
    breakdown: ScoreBreakdown
    section_signals: List[SectionSignal] = Field(default_factory=list, alias="sectionSignals")
    tips: List[ScoreTip] = Field(default_factory=list)
    feedback: Optional[ScoreFeedback] = None
    is_high_score: bool = Field(False, alias="isHighScore")


# ============================================
# Job-description matching
# ============================================


class KeywordCategory(str, Enum):
    SKILL = "skill"
    EXPERIENCE = "experience"
    QUALIFICATION = "qualification"
    SOFT_SKILL = "soft-skill"


class KeywordImportance(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class KeywordAnalysis(_ResultModel):
    """A classified job-description keyword and whether the resume covers it."""
    keyword: str
    category: KeywordCategory
    importance: KeywordImportance = KeywordImportance.MEDIUM
    found: bool


class KeywordSuggestion(_ResultModel):
    section: str
    keyword: str
    suggestion: str


class JDAnalysis(_ResultModel):
    """Matcher output, replaced wholesale on every invocation."""
    match_score: int = Field(0, ge=0, le=100, alias="matchScore")
    keywords: List[KeywordAnalysis] = Field(default_factory=list)
    matched_keywords: List[str] = Field(default_factory=list, alias="matchedKeywords")
    missing_keywords: List[str] = Field(default_factory=list, alias="missingKeywords")
    suggestions: List[KeywordSuggestion] = Field(default_factory=list)

    def keyword_texts(self) -> list[str]:
        """All classified keywords, suitable for the keyword sub-score."""
        return [k.keyword for k in self.keywords]


class DocumentDiff(_ResultModel):
    """Differences between two saved resume revisions."""
    added: List[str] = Field(default_factory=list)
    removed: List[str] = Field(default_factory=list)
    changed: List[str] = Field(default_factory=list)
    score_delta: Optional[int] = Field(None, alias="scoreDelta")

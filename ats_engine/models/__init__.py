"""Data models for the ATS scoring engine."""
from ats_engine.models.resume import (
    Certification,
    EducationEntry,
    ExperienceEntry,
    LanguageEntry,
    PersonalInfo,
    ProjectEntry,
    ResumeDocument,
    SkillGroup,
)
from ats_engine.models.score import (
    SCORE_WEIGHTS,
    DocumentDiff,
    JDAnalysis,
    KeywordAnalysis,
    KeywordCategory,
    KeywordImportance,
    KeywordSuggestion,
    ScoreBreakdown,
    ScoreFeedback,
    ScoreTip,
    ScoringResult,
    SectionSignal,
)

__all__ = [
    "Certification",
    "EducationEntry",
    "ExperienceEntry",
    "LanguageEntry",
    "PersonalInfo",
    "ProjectEntry",
    "ResumeDocument",
    "SkillGroup",
    "SCORE_WEIGHTS",
    "DocumentDiff",
    "JDAnalysis",
    "KeywordAnalysis",
    "KeywordCategory",
    "KeywordImportance",
    "KeywordSuggestion",
    "ScoreBreakdown",
    "ScoreFeedback",
    "ScoreTip",
    "ScoringResult",
    "SectionSignal",
]

"""Services for the ATS scoring engine."""
from ats_engine.services.ats_scorer import ATSScorer, get_ats_scorer
from ats_engine.services.composite import compute_score, score_label, track_delta
from ats_engine.services.jd_matcher import analyze_job_description
from ats_engine.services.version_diff import compare_documents

__all__ = [
    "ATSScorer",
    "get_ats_scorer",
    "compute_score",
    "score_label",
    "track_delta",
    "analyze_job_description",
    "compare_documents",
]

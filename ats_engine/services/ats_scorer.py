"""
ATS compatibility scoring service.

Wires the continuous scoring pipeline together:

    signal extractors -> composite scorer -> feedback emitter

and exposes the on-demand job-description matcher. The service holds no
per-document state: callers pass an immutable document snapshot in, along with
the previous composite score when they want delta feedback, and keep the
returned result themselves.
"""

import logging
from typing import Optional, Sequence

from ats_engine.config import Settings, get_settings
from ats_engine.models.resume import ResumeDocument
from ats_engine.models.score import JDAnalysis, ScoreBreakdown, ScoringResult
from ats_engine.services.analyzers import (
    SignalReport,
    completeness_report,
    content_report,
    keyword_report,
    readability_report,
    structure_report,
)
from ats_engine.services.composite import Clock, compute_score, track_delta
from ats_engine.services.feedback import build_section_signals, build_tips
from ats_engine.services.jd_matcher import analyze_job_description

logger = logging.getLogger(__name__)


class ATSScorer:
    """
    Stateless ATS scorer.

    Every call is a pure function of its arguments (and the settings the
    scorer was built with), so one instance can be shared freely.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def reports(
        self,
        document: ResumeDocument,
        jd_keywords: Optional[Sequence[str]] = None,
    ) -> list[SignalReport]:
        """Run the five signal extractors, in composite order."""
        return [
            structure_report(document),
            keyword_report(document, jd_keywords, self.settings),
            content_report(document),
            readability_report(document, self.settings),
            completeness_report(document),
        ]

    def breakdown(
        self,
        document: ResumeDocument,
        jd_keywords: Optional[Sequence[str]] = None,
    ) -> ScoreBreakdown:
        return ScoreBreakdown(**{r.name: r.score for r in self.reports(document, jd_keywords)})

    def score(
        self,
        document: ResumeDocument,
        jd_keywords: Optional[Sequence[str]] = None,
        previous_score: Optional[int] = None,
        clock: Optional[Clock] = None,
    ) -> ScoringResult:
        """
        Perform one scoring pass.

        Args:
            document: Snapshot of the resume being edited
            jd_keywords: Keywords from the most recent matcher run, if any
            previous_score: Composite from the previous pass of the same document
            clock: Time source for the feedback timestamp

        Returns:
            ScoringResult with breakdown, label, signals, tips and delta feedback
        """
        reports = self.reports(document, jd_keywords)
        by_name = {r.name: r for r in reports}
        breakdown = ScoreBreakdown(**{name: r.score for name, r in by_name.items()})
        composite = compute_score(breakdown)
        feedback = track_delta(previous_score, composite.score, clock)

        logger.debug(
            f"Scored document: {composite.score} ({composite.label}) "
            f"breakdown={breakdown.model_dump()}"
        )

        return ScoringResult(
            score=composite.score,
            label=composite.label,
            breakdown=breakdown,
            section_signals=build_section_signals(
                document, jd_keywords, self.settings, keywords=by_name["keywords"]
            ),
            tips=build_tips(reports),
            feedback=feedback,
            is_high_score=composite.is_high_score,
        )

    def match_job_description(
        self, job_description: str, document: ResumeDocument
    ) -> Optional[JDAnalysis]:
        """Run the matcher against the document's full text."""
        return analyze_job_description(job_description, document.resume_text())

    def analyze(
        self,
        document: ResumeDocument,
        job_description: Optional[str] = None,
        previous_score: Optional[int] = None,
        clock: Optional[Clock] = None,
    ) -> tuple[ScoringResult, Optional[JDAnalysis]]:
        """Match (when a job description is given) and feed the keywords into a scoring pass."""
        analysis = None
        if job_description:
            analysis = self.match_job_description(job_description, document)
        jd_keywords = analysis.keyword_texts() if analysis else None
        return self.score(document, jd_keywords, previous_score, clock), analysis


# Singleton instance
_ats_scorer: Optional[ATSScorer] = None


def get_ats_scorer() -> ATSScorer:
    """Get or create the ATS scorer singleton."""
    global _ats_scorer
    if _ats_scorer is None:
        _ats_scorer = ATSScorer()
    return _ats_scorer

"""Per-section signals and per-metric tips for presentation."""
from typing import Optional, Sequence

from ats_engine.config import Settings
from ats_engine.models.resume import ResumeDocument
from ats_engine.models.score import ScoreFeedback, ScoreTip, SectionSignal
from ats_engine.services.analyzers import (
    SignalReport,
    assess_bullet,
    distinct_keywords,
    keyword_report,
    ratio,
)


STRONG_THRESHOLD = 80
RISK_THRESHOLD = 50

# Fallback tip text when an analyzer produced no specific issue
TIP_MESSAGES = {
    "structure": "Use standard section headings and keep Experience above Education",
    "keywords": "Mirror the terminology of the roles you are targeting",
    "content": "Lead bullets with action verbs and quantify results",
    "readability": "Keep bullets between 8 and 25 words and the summary to a short paragraph",
    "completeness": "Fill in contact details and optional sections",
}


def _signal(section_id: str, status: str, message: str) -> SectionSignal:
    return SectionSignal(section_id=section_id, status=status, message=message)


def header_signal(document: ResumeDocument) -> SectionSignal:
    info = document.personal_info
    missing = [name for name in ("email", "phone") if not getattr(info, name).strip()]
    if not info.name.strip() or missing:
        detail = ", ".join((["name"] if not info.name.strip() else []) + missing)
        return _signal("header", "risk", f"Contact header is missing {detail}")
    if not info.location.strip():
        return _signal("header", "needs-improvement", "Add your location to the header")
    return _signal("header", "strong", "Contact details are complete")


def summary_signal(document: ResumeDocument) -> SectionSignal:
    length = len(document.summary.strip())
    if length < 100:
        return _signal("summary", "risk", "Summary too short for ATS impact")
    if length < 200:
        return _signal("summary", "needs-improvement", "Consider expanding your summary")
    return _signal("summary", "strong", "Summary is well-structured")


def experience_signal(document: ResumeDocument) -> SectionSignal:
    bullets = document.all_bullets()
    avg_bullets = ratio(len(bullets), len(document.experience))

    if avg_bullets < 2:
        return _signal("experience", "risk", "Add more bullet points to each role")
    if avg_bullets < 4:
        return _signal("experience", "needs-improvement", "Consider adding more achievements")
    if any(assess_bullet(b).weak_opener for b in bullets):
        return _signal(
            "experience", "needs-improvement", "Replace weak openers with strong action verbs"
        )
    return _signal("experience", "strong", "Experience section is comprehensive")


def skills_signal(document: ResumeDocument) -> SectionSignal:
    total = len(document.skill_terms())
    if total < 5:
        return _signal("skills", "risk", "Add more relevant skills")
    if total < 10:
        return _signal("skills", "needs-improvement", "Consider adding industry-specific skills")
    return _signal("skills", "strong", "Skills section is well-populated")


def education_signal(document: ResumeDocument) -> SectionSignal:
    if not document.education:
        return _signal("education", "risk", "Add your educational background")
    return _signal("education", "strong", "Education section is complete")


def keywords_signal(report: SignalReport) -> SectionSignal:
    missing = len(report.issues)
    if report.score >= STRONG_THRESHOLD:
        return _signal("keywords", "strong", "Resume covers the job's key terms")
    status = "needs-improvement" if report.score >= RISK_THRESHOLD else "risk"
    noun = "keyword is" if missing == 1 else "keywords are"
    return _signal("keywords", status, f"{missing} job {noun} not in your resume")


def build_section_signals(
    document: ResumeDocument,
    jd_keywords: Optional[Sequence[str]] = None,
    settings: Optional[Settings] = None,
    keywords: Optional[SignalReport] = None,
) -> list[SectionSignal]:
    """One signal per evaluated section, regenerated on every pass.

    A keyword report already computed for this pass can be passed in as
    `keywords` so the job keywords are not checked a second time.
    """
    signals = [
        header_signal(document),
        summary_signal(document),
        experience_signal(document),
        skills_signal(document),
        education_signal(document),
    ]
    if distinct_keywords(jd_keywords or []):
        if keywords is None:
            keywords = keyword_report(document, jd_keywords, settings)
        signals.append(keywords_signal(keywords))
    return signals


def tip_status(score: int) -> str:
    if score >= STRONG_THRESHOLD:
        return "strong"
    if score >= RISK_THRESHOLD:
        return "needs-improvement"
    return "risk"


def build_tips(reports: Sequence[SignalReport]) -> list[ScoreTip]:
    """A tip for every sub-score below the strong threshold."""
    tips = []
    for report in reports:
        if report.score >= STRONG_THRESHOLD:
            continue
        message = report.issues[0] if report.issues else TIP_MESSAGES[report.name]
        tips.append(ScoreTip(metric=report.name, status=tip_status(report.score), message=message))
    return tips


def format_delta(feedback: Optional[ScoreFeedback]) -> str:
    """Badge text such as '+3' or '-2'; empty when there is nothing to show."""
    if feedback is None or feedback.delta == 0:
        return ""
    return f"{feedback.delta:+d}"

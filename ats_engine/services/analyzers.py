"""
Signal extractors for ATS compatibility scoring.

Each analyzer inspects an immutable ResumeDocument and produces a 0-100
sub-score together with qualitative findings:

- Structure: required sections, Experience-before-Education ordering, header
- Keywords: job-description coverage, or skill breadth without one
- Content quality: quantified bullets, strong action verbs, weak openers
- Readability: bullet and summary length against target ranges
- Completeness: presence of every scorable field (photo excluded)

Analyzers never raise on sparse documents; every ratio is guarded so that an
empty denominator yields 0.
"""

import math
import re
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ats_engine.config import Settings, get_settings
from ats_engine.models.resume import ResumeDocument
from ats_engine.services.nlp_utils import TextIndex, tokenize


# Common ATS-friendly action verbs categorized by impact
ACTION_VERBS = {
    "leadership": [
        "led", "managed", "directed", "supervised", "coordinated", "oversaw",
        "headed", "guided", "mentored", "trained", "coached", "delegated",
        "spearheaded", "championed", "pioneered", "orchestrated", "drove",
    ],
    "achievement": [
        "achieved", "accomplished", "attained", "exceeded", "surpassed", "delivered",
        "earned", "completed", "won", "secured", "captured", "shipped",
    ],
    "creation": [
        "created", "developed", "designed", "built", "established", "founded",
        "initiated", "launched", "introduced", "originated", "produced", "generated",
    ],
    "improvement": [
        "improved", "enhanced", "increased", "boosted", "accelerated", "optimized",
        "streamlined", "upgraded", "maximized", "strengthened", "reduced", "cut",
        "scaled", "saved", "grew", "transformed", "modernized",
    ],
    "analysis": [
        "analyzed", "evaluated", "assessed", "researched", "investigated", "examined",
        "identified", "discovered", "diagnosed", "audited", "conducted",
    ],
    "communication": [
        "presented", "negotiated", "persuaded", "influenced", "collaborated",
        "partnered", "facilitated", "advocated",
    ],
    "technical": [
        "implemented", "engineered", "programmed", "automated", "integrated", "configured",
        "deployed", "architected", "debugged", "refactored", "migrated", "executed",
    ],
}

# Flatten action verbs for quick lookup
ALL_ACTION_VERBS = frozenset(verb for verbs in ACTION_VERBS.values() for verb in verbs)

# Generic openers that hide impact
WEAK_OPENERS = (
    "responsible for", "was responsible", "duties included", "worked on", "helped with",
    "helped", "assisted with", "participated in", "involved in", "tasked with",
    "handled",
)

QUANTIFIED_PATTERN = re.compile(r"\d|%")
WEAK_OPENER_PATTERN = re.compile(
    r"(?:" + "|".join(re.escape(opener) for opener in WEAK_OPENERS) + r")\b"
)

# Structure deductions (points off 100)
MISSING_SECTION_PENALTIES = {
    "header": 15,
    "summary": 15,
    "experience": 25,
    "skills": 10,
    "education": 10,
}
ORDER_VIOLATION_PENALTY = 15
HEADER_FIELD_PENALTIES = {"email": 10, "phone": 5, "location": 5}
THIN_ROLE_PENALTY = 8
MISSING_EDUCATION_YEAR_PENALTY = 5
MIN_SUMMARY_CHARS = 50

# Content quality weighting
QUANTIFIED_WEIGHT = 50
STRONG_VERB_WEIGHT = 50
WEAK_OPENER_PENALTY = 25


@dataclass
class SignalReport:
    """Sub-score and findings from one analyzer."""
    name: str
    score: int  # 0-100
    issues: list[str] = field(default_factory=list)
    highlights: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class BulletAssessment:
    """Quality signals for a single experience bullet."""
    text: str
    quantified: bool
    strong_verb: bool
    weak_opener: bool


def ratio(part: float, whole: float) -> float:
    """Division that resolves an empty denominator to 0."""
    return part / whole if whole > 0 else 0.0


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def to_score(value: float) -> int:
    """Round and clamp into the 0-100 range."""
    return max(0, min(100, round_half_up(value)))


def assess_bullet(bullet: str) -> BulletAssessment:
    text = bullet.strip()
    lowered = " ".join(text.lower().split())
    tokens = tokenize(text)
    first_word = tokens[0].lower() if tokens else ""
    return BulletAssessment(
        text=text,
        quantified=bool(QUANTIFIED_PATTERN.search(text)),
        strong_verb=first_word in ALL_ACTION_VERBS,
        weak_opener=bool(WEAK_OPENER_PATTERN.match(lowered)),
    )


# ============================================
# Structure
# ============================================


def structure_report(document: ResumeDocument) -> SignalReport:
    score = 100
    issues = []
    highlights = []
    info = document.personal_info

    present = {
        "header": bool(info.name.strip()),
        "summary": len(document.summary.strip()) >= MIN_SUMMARY_CHARS,
        "experience": bool(document.experience),
        "skills": bool(document.skill_terms()),
        "education": bool(document.education),
    }
    for section, penalty in MISSING_SECTION_PENALTIES.items():
        if not present[section]:
            score -= penalty
            issues.append(f"Missing or incomplete {section} section")

    # Experience must come before Education
    order = document.ordered_sections()
    if "experience" in order and "education" in order:
        if order.index("experience") > order.index("education"):
            score -= ORDER_VIOLATION_PENALTY
            issues.append("Place Experience before Education")

    for field_name, penalty in HEADER_FIELD_PENALTIES.items():
        if not getattr(info, field_name).strip():
            score -= penalty
            issues.append(f"Header is missing {field_name}")

    if any(len(entry.bullets) < 2 for entry in document.experience):
        score -= THIN_ROLE_PENALTY
        issues.append("Every role should have at least two bullets")

    if any(not edu.has_year() for edu in document.education):
        score -= MISSING_EDUCATION_YEAR_PENALTY
        issues.append("Add years to every education entry")

    if all(present.values()):
        highlights.append("All core sections present")

    return SignalReport(name="structure", score=max(0, score), issues=issues, highlights=highlights)


def analyze_structure(document: ResumeDocument) -> int:
    return structure_report(document).score


# ============================================
# Keywords
# ============================================


def distinct_keywords(keywords: Sequence[str]) -> list[str]:
    seen: set[str] = set()
    result = []
    for kw in keywords:
        key = " ".join(kw.lower().split())
        if key and key not in seen:
            seen.add(key)
            result.append(kw.strip())
    return result


def keyword_report(
    document: ResumeDocument,
    jd_keywords: Optional[Sequence[str]] = None,
    settings: Optional[Settings] = None,
) -> SignalReport:
    """Score keyword coverage.

    With job-description keywords, each one is re-checked against the current
    document so edits made after the last matcher run count immediately.
    Without any (or when the job description yielded none), fall back to skill
    breadth against the configured baseline.
    """
    settings = settings or get_settings()
    keywords = distinct_keywords(jd_keywords or [])

    if keywords:
        index = TextIndex.build(document.resume_text())
        missing = [kw for kw in keywords if not index.contains(kw)]
        matched = len(keywords) - len(missing)
        issues = [f"Missing job keyword: {kw}" for kw in missing]
        highlights = [f"{matched} of {len(keywords)} job keywords covered"] if matched else []
        return SignalReport(
            name="keywords",
            score=to_score(100 * ratio(matched, len(keywords))),
            issues=issues,
            highlights=highlights,
        )

    skill_count = len(document.skill_terms())
    score = to_score(100 * ratio(skill_count, settings.skill_baseline))
    issues = []
    if skill_count < settings.skill_baseline:
        issues.append(f"List more relevant skills ({skill_count} of {settings.skill_baseline})")
    return SignalReport(name="keywords", score=score, issues=issues)


def analyze_keywords(
    document: ResumeDocument,
    jd_keywords: Optional[Sequence[str]] = None,
    settings: Optional[Settings] = None,
) -> int:
    return keyword_report(document, jd_keywords, settings).score


# ============================================
# Content quality
# ============================================


def content_report(document: ResumeDocument) -> SignalReport:
    assessments = [assess_bullet(b) for b in document.all_bullets()]
    total = len(assessments)

    if total == 0:
        return SignalReport(
            name="content",
            score=0,
            issues=["Add achievement bullets to your experience"],
        )

    quantified = sum(1 for a in assessments if a.quantified)
    strong = sum(1 for a in assessments if a.strong_verb)
    weak = sum(1 for a in assessments if a.weak_opener)

    raw = (
        QUANTIFIED_WEIGHT * ratio(quantified, total)
        + STRONG_VERB_WEIGHT * ratio(strong, total)
        - WEAK_OPENER_PENALTY * ratio(weak, total)
    )

    issues = []
    highlights = []
    if ratio(quantified, total) < 0.5:
        issues.append("Add numbers and metrics to more bullet points (aim for 50%+)")
    else:
        highlights.append(f"{quantified} of {total} bullets have quantified results")
    if ratio(strong, total) < 0.5:
        issues.append("Start each bullet with a strong action verb (Led, Built, Architected)")
    else:
        highlights.append("Strong use of action verbs")
    if weak:
        issues.append(f"Replace weak openers like 'responsible for' ({weak} found)")

    return SignalReport(name="content", score=to_score(raw), issues=issues, highlights=highlights)


def analyze_content(document: ResumeDocument) -> int:
    return content_report(document).score


# ============================================
# Readability
# ============================================


def range_score(value: float, low: float, high: float) -> float:
    """100 inside [low, high], decaying linearly to 0 at 0 and at 2 * high."""
    if value <= 0:
        return 0.0
    if value < low:
        return 100 * value / low
    if value <= high:
        return 100.0
    return max(0.0, 100 - 100 * (value - high) / high)


def readability_report(
    document: ResumeDocument, settings: Optional[Settings] = None
) -> SignalReport:
    settings = settings or get_settings()
    issues = []

    bullets = document.all_bullets()
    avg_words = ratio(sum(len(b.split()) for b in bullets), len(bullets))
    bullet_component = range_score(avg_words, settings.bullet_words_min, settings.bullet_words_max)
    if not bullets:
        issues.append("No bullets to evaluate")
    elif avg_words < settings.bullet_words_min:
        issues.append("Bullet points are too short - add more detail")
    elif avg_words > settings.bullet_words_max:
        issues.append("Bullet points are too long - be more concise")

    summary_chars = len(document.summary.strip())
    summary_component = range_score(
        summary_chars, settings.summary_chars_min, settings.summary_chars_max
    )
    if summary_chars == 0:
        issues.append("Missing professional summary")
    elif summary_chars < settings.summary_chars_min:
        issues.append("Summary is too short")
    elif summary_chars > settings.summary_chars_max:
        issues.append("Summary is too long")

    return SignalReport(
        name="readability",
        score=to_score((bullet_component + summary_component) / 2),
        issues=issues,
    )


def analyze_readability(document: ResumeDocument, settings: Optional[Settings] = None) -> int:
    return readability_report(document, settings).score


# ============================================
# Completeness
# ============================================


def completeness_checks(document: ResumeDocument) -> dict[str, bool]:
    """Binary presence checks. Photo is never checked."""
    info = document.personal_info
    return {
        "name": bool(info.name.strip()),
        "title": bool(info.title.strip()),
        "email": bool(info.email.strip()),
        "phone": bool(info.phone.strip()),
        "location": bool(info.location.strip()),
        "profile link": info.has_link(),
        "summary": bool(document.summary.strip()),
        "experience": bool(document.experience),
        "education": bool(document.education),
        "skills": bool(document.skill_terms()),
        "certifications": bool(document.certifications),
        "languages": bool(document.languages),
        "projects": bool(document.projects),
    }


def completeness_report(document: ResumeDocument) -> SignalReport:
    checks = completeness_checks(document)
    filled = sum(1 for present in checks.values() if present)
    missing = [name for name, present in checks.items() if not present]
    return SignalReport(
        name="completeness",
        score=to_score(100 * ratio(filled, len(checks))),
        issues=[f"Add {name}" for name in missing],
    )


def analyze_completeness(document: ResumeDocument) -> int:
    return completeness_report(document).score

"""
Job-description keyword matching and gap analysis.

Phrases of one to three words are pulled from the job description, classified
with a fixed lexicon into skill / experience / qualification / soft-skill
terms, and checked against the resume text. Phrases the lexicon does not know
are dropped rather than defaulted to a category.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ats_engine.models.score import (
    JDAnalysis,
    KeywordAnalysis,
    KeywordCategory,
    KeywordImportance,
    KeywordSuggestion,
)
from ats_engine.services.analyzers import ratio, to_score
from ats_engine.services.nlp_utils import TextIndex, canonical, is_stopword, split_clauses

logger = logging.getLogger(__name__)

MAX_PHRASE_WORDS = 3

# Canonical spellings only; aliases are resolved before lookup.
KEYWORD_LEXICON: dict[KeywordCategory, frozenset[str]] = {
    KeywordCategory.SKILL: frozenset({
        # Languages
        "javascript", "typescript", "python", "java", "c++", "c#", "golang", "rust",
        "swift", "kotlin", "scala", "ruby", "php", "sql", "html", "css", "bash",
        # Frameworks
        "react", "react native", "vue", "angular", "next.js", "node.js", "express",
        "django", "flask", "fastapi", "spring", "spring boot", "rails",
        # Architecture
        "microservices", "rest api", "graphql", "grpc", "distributed systems",
        "system design", "event-driven", "serverless", "backend", "frontend",
        "full stack", "api design",
        # Cloud & DevOps
        "aws", "azure", "gcp", "cloud", "docker", "kubernetes", "terraform", "ansible",
        "jenkins", "github actions", "ci/cd", "devops", "linux", "nginx", "git",
        # Data
        "postgresql", "mysql", "mongodb", "redis", "dynamodb", "elasticsearch",
        "kafka", "rabbitmq", "spark", "hadoop", "snowflake", "bigquery", "pandas",
        "numpy", "etl", "data analysis", "data science", "data engineering",
        # ML/AI
        "machine learning", "deep learning", "artificial intelligence",
        "natural language processing", "computer vision", "tensorflow", "pytorch",
        "scikit-learn", "llm",
        # Business tools
        "excel", "tableau", "power bi", "salesforce", "hubspot", "jira", "confluence",
        "figma", "sketch",
        # Methodologies
        "agile", "scrum", "kanban", "tdd", "unit testing",
    }),
    KeywordCategory.EXPERIENCE: frozenset({
        "years of experience", "senior", "junior", "lead", "team lead", "tech lead",
        "manager", "engineering manager", "director", "architect", "principal",
        "staff", "intern", "internship", "entry-level", "mid-level", "hands-on",
        "end-to-end", "cross-functional", "production", "people management",
    }),
    KeywordCategory.QUALIFICATION: frozenset({
        "bachelor's degree", "bachelor's", "bachelors", "master's degree", "master's",
        "masters", "phd", "ph.d", "mba", "degree", "computer science",
        "certification", "certified", "aws certified", "pmp", "cpa", "cfa",
        "security clearance",
    }),
    KeywordCategory.SOFT_SKILL: frozenset({
        "leadership", "communication", "teamwork", "problem-solving", "analytical",
        "collaboration", "strategic", "initiative", "adaptability", "creativity",
        "time management", "attention to detail", "critical thinking", "mentoring",
        "stakeholder management", "interpersonal", "ownership", "presentation",
        "negotiation",
    }),
}


def _build_index() -> dict[str, KeywordCategory]:
    index: dict[str, KeywordCategory] = {}
    for category, terms in KEYWORD_LEXICON.items():
        for term in terms:
            # First category wins; the lexicon is kept disjoint.
            index.setdefault(term, category)
    return index


_LEXICON_INDEX = _build_index()

SENIORITY_MARKERS = ("senior", "lead", "principal", "staff", "director", "architect")

SUGGESTION_SECTIONS = {
    KeywordCategory.SKILL: "skills",
    KeywordCategory.EXPERIENCE: "experience",
    KeywordCategory.QUALIFICATION: "experience",
    KeywordCategory.SOFT_SKILL: "summary",
}

SUGGESTION_TEMPLATES = {
    "skills": 'Add "{keyword}" to your skills section if it reflects your hands-on experience',
    "experience": 'Show "{keyword}" in an experience bullet describing where you applied it',
    "summary": 'Mention "{keyword}" in your summary to highlight this strength',
}

_IMPORTANCE_RANK = {
    KeywordImportance.HIGH: 0,
    KeywordImportance.MEDIUM: 1,
    KeywordImportance.LOW: 2,
}


@dataclass(frozen=True)
class ExtractedKeyword:
    text: str  # surface spelling of the first occurrence
    key: str  # canonical form used for dedupe
    category: KeywordCategory


def classify(phrase: str) -> Optional[KeywordCategory]:
    """Lexicon category of a phrase, or None when it is unclassifiable."""
    return _LEXICON_INDEX.get(canonical(phrase))


def importance_of(keyword: str, category: KeywordCategory) -> KeywordImportance:
    if category == KeywordCategory.SKILL:
        return KeywordImportance.HIGH
    if category == KeywordCategory.EXPERIENCE:
        lowered = keyword.lower()
        if any(marker in lowered for marker in SENIORITY_MARKERS):
            return KeywordImportance.HIGH
    return KeywordImportance.MEDIUM


def extract_keywords(job_description: str) -> list[ExtractedKeyword]:
    """Classified keywords in order of first appearance.

    Within each clause the longest classifiable phrase wins at every
    position, so 'machine learning' is not also counted as 'learning'.
    """
    seen: set[str] = set()
    extracted = []

    for clause in split_clauses(job_description):
        i = 0
        while i < len(clause):
            for n in range(min(MAX_PHRASE_WORDS, len(clause) - i), 0, -1):
                tokens = clause[i:i + n]
                if all(is_stopword(t) for t in tokens):
                    continue
                phrase = " ".join(tokens)
                category = classify(phrase)
                if category is None:
                    continue
                key = canonical(phrase)
                if key not in seen:
                    seen.add(key)
                    extracted.append(ExtractedKeyword(text=phrase, key=key, category=category))
                i += n
                break
            else:
                i += 1

    return extracted


def build_suggestions(keywords: list[KeywordAnalysis]) -> list[KeywordSuggestion]:
    """One suggestion per missing keyword, most important first."""
    missing = [kw for kw in keywords if not kw.found]
    missing.sort(key=lambda kw: _IMPORTANCE_RANK[kw.importance])

    suggestions = []
    for kw in missing:
        section = SUGGESTION_SECTIONS[kw.category]
        suggestions.append(
            KeywordSuggestion(
                section=section,
                keyword=kw.keyword,
                suggestion=SUGGESTION_TEMPLATES[section].format(keyword=kw.keyword),
            )
        )
    return suggestions


def analyze_job_description(job_description: str, resume_text: str) -> Optional[JDAnalysis]:
    """Match a job description against resume text.

    Returns None for an empty or whitespace-only job description so callers
    can tell "not analyzed" apart from "analyzed and scored zero".
    """
    if not job_description or not job_description.strip():
        logger.debug("Job description empty; skipping analysis")
        return None

    extracted = extract_keywords(job_description)
    if not extracted:
        logger.debug("No classifiable keywords in job description")
        return JDAnalysis()

    index = TextIndex.build(resume_text or "")
    keywords = [
        KeywordAnalysis(
            keyword=item.text,
            category=item.category,
            importance=importance_of(item.text, item.category),
            found=index.contains(item.text),
        )
        for item in extracted
    ]

    matched = [kw.keyword for kw in keywords if kw.found]
    missing = [kw.keyword for kw in keywords if not kw.found]
    match_score = to_score(100 * ratio(len(matched), len(keywords)))

    logger.debug(
        f"JD analysis: {len(keywords)} keywords, {len(matched)} found, score={match_score}"
    )

    return JDAnalysis(
        match_score=match_score,
        keywords=keywords,
        matched_keywords=matched,
        missing_keywords=missing,
        suggestions=build_suggestions(keywords),
    )

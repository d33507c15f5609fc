"""Lightweight NLP utilities for ATS scoring.

Stdlib only; a scoring pass runs on every edit. Provides:
- Tokenization that keeps technical punctuation (Node.js, C++, CI/CD)
- Clause splitting for phrase candidates
- Plural folding (microservices -> microservice)
- Canonical alias resolution (k8s -> kubernetes)
- Boundary-aware term lookup with a singular-form fallback
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache


STOPWORDS = frozenset({
    "a", "an", "the", "and", "or", "but", "nor", "for", "of", "to", "in", "on", "at",
    "by", "as", "is", "are", "be", "been", "was", "were", "will", "would", "can",
    "could", "should", "may", "might", "must", "has", "have", "had", "do", "does",
    "with", "within", "without", "from", "into", "onto", "about", "across", "per",
    "this", "that", "these", "those", "it", "its", "we", "our", "us", "you", "your",
    "they", "their", "them", "who", "what", "which", "when", "where", "how", "all",
    "any", "some", "such", "very", "also", "more", "most", "other", "than", "then",
    "just", "like", "well", "including", "etc", "looking", "seeking", "join",
    "skilled", "strong", "excellent", "great", "good", "solid", "proven", "ideal",
    "candidate", "candidates", "role", "position", "job", "team", "company",
    "experience", "skills", "skill", "ability", "abilities", "knowledge",
    "responsibilities", "requirements", "required", "preferred", "plus", "nice",
    "work", "working", "least", "minimum", "need", "needs",
    "ensure", "ensuring", "help", "helping", "support", "supporting",
})

# Alias -> canonical spelling. Applied before lexicon lookup and term search.
CANONICAL_ALIASES = {
    "k8s": "kubernetes",
    "kube": "kubernetes",
    "nodejs": "node.js",
    "reactjs": "react",
    "react.js": "react",
    "vuejs": "vue",
    "vue.js": "vue",
    "angularjs": "angular",
    "nextjs": "next.js",
    "js": "javascript",
    "ts": "typescript",
    "go lang": "golang",
    "postgres": "postgresql",
    "mongo": "mongodb",
    "amazon web services": "aws",
    "google cloud": "gcp",
    "google cloud platform": "gcp",
    "microsoft azure": "azure",
    "ml": "machine learning",
    "ai": "artificial intelligence",
    "nlp": "natural language processing",
    "cicd": "ci/cd",
    "micro services": "microservices",
    "restful": "rest api",
    "restful api": "rest api",
    "restful apis": "rest api",
    "rest apis": "rest api",
    "back-end": "backend",
    "back end": "backend",
    "front-end": "frontend",
    "front end": "frontend",
    "full-stack": "full stack",
    "fullstack": "full stack",
    "powerbi": "power bi",
    "problem solving": "problem-solving",
    "team work": "teamwork",
}

TOKEN_PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9+#./'\-]*")

# Clause boundaries: list punctuation, brackets, newlines and sentence periods
CLAUSE_PATTERN = re.compile(r"[,;:!?()\[\]\n\r•|]+|\.(?=\s|$)")

_TRAILING = ".'-/"


def _reverse_aliases() -> dict[str, set[str]]:
    reverse: dict[str, set[str]] = {}
    for alias, canonical in CANONICAL_ALIASES.items():
        reverse.setdefault(canonical, set()).add(alias)
    return reverse


_ALIASES_BY_CANONICAL = _reverse_aliases()


def tokenize(text: str) -> list[str]:
    """Split text into surface tokens, keeping case."""
    tokens = []
    for raw in TOKEN_PATTERN.findall(text):
        token = raw.rstrip(_TRAILING)
        if token:
            tokens.append(token)
    return tokens


def split_clauses(text: str) -> list[list[str]]:
    """Tokenize each clause separately so phrases never span punctuation."""
    clauses = []
    for chunk in CLAUSE_PATTERN.split(text):
        tokens = tokenize(chunk)
        if tokens:
            clauses.append(tokens)
    return clauses


def singularize(token: str) -> str:
    """Fold a plural noun onto its singular; verb inflections are left alone."""
    token = token.lower()
    if len(token) <= 3:
        return token

    if token.endswith("ies") and len(token) > 4:
        return token[:-3] + "y"
    if token.endswith("es") and (token[-3] in "xz" or token[-4:-2] in ("ch", "sh")):
        return token[:-2]
    if token.endswith("s") and not token.endswith(("ss", "us", "is")):
        return token[:-1]
    return token


def singular_phrase(text: str) -> str:
    return " ".join(singularize(t) for t in tokenize(text))


def canonical(term: str) -> str:
    """Resolve a term to its canonical spelling."""
    lower = " ".join(term.lower().split())
    return CANONICAL_ALIASES.get(lower, lower)


def is_stopword(token: str) -> bool:
    return token.lower() in STOPWORDS


@lru_cache(maxsize=1024)
def _term_pattern(term: str) -> re.Pattern:
    return re.compile(r"(?<![a-z0-9.])" + re.escape(term) + r"(?![a-z0-9])")


@lru_cache(maxsize=1024)
def term_variants(lower: str) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Surface spellings of a term and its aliases, plus their singular forms."""
    canon = canonical(lower)
    variants = tuple(sorted({lower, canon} | _ALIASES_BY_CANONICAL.get(canon, set())))
    singulars = tuple(sorted({s for s in map(singular_phrase, variants) if s}))
    return variants, singulars


@dataclass(frozen=True)
class TextIndex:
    """Normalized views of a text used for repeated term lookups."""

    lowered: str
    singular: str

    @classmethod
    def build(cls, text: str) -> "TextIndex":
        return cls(lowered=" ".join(text.lower().split()), singular=singular_phrase(text))

    def contains(self, term: str) -> bool:
        """Case-insensitive, boundary-aware presence of a term or any alias of it.

        Falls back to singular forms so 'microservice' covers 'microservices';
        'reacted' never covers 'React'.
        """
        lower = " ".join(term.lower().split())
        if not lower:
            return False
        variants, singulars = term_variants(lower)

        for variant in variants:
            if _term_pattern(variant).search(self.lowered):
                return True

        for variant in singulars:
            if _term_pattern(variant).search(self.singular):
                return True
        return False

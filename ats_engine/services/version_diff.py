"""Comparison of two saved resume revisions.

Snapshots and their scores are stored by the caller; this module only
describes what changed between two of them.
"""
from typing import Optional

from ats_engine.models.resume import ResumeDocument
from ats_engine.models.score import DocumentDiff

PREVIEW_CHARS = 50


def bullet_label(bullet: str) -> str:
    return f'Bullet: "{bullet[:PREVIEW_CHARS]}..."'


def skill_label(skill: str) -> str:
    return f"Skill: {skill}"


def _skill_items(document: ResumeDocument) -> list[str]:
    return [item for group in document.skills for item in group.items]


def compare_documents(
    before: ResumeDocument,
    after: ResumeDocument,
    before_score: Optional[int] = None,
    after_score: Optional[int] = None,
) -> DocumentDiff:
    added = []
    removed = []
    changed = []

    if before.summary != after.summary:
        changed.append("Summary")
    if before.personal_info != after.personal_info:
        changed.append("Header")

    bullets_before = before.all_bullets()
    bullets_after = after.all_bullets()
    added.extend(bullet_label(b) for b in bullets_after if b not in bullets_before)
    removed.extend(bullet_label(b) for b in bullets_before if b not in bullets_after)

    skills_before = _skill_items(before)
    skills_after = _skill_items(after)
    added.extend(skill_label(s) for s in skills_after if s not in skills_before)
    removed.extend(skill_label(s) for s in skills_before if s not in skills_after)

    score_delta = None
    if before_score is not None and after_score is not None:
        score_delta = after_score - before_score

    return DocumentDiff(added=added, removed=removed, changed=changed, score_delta=score_delta)

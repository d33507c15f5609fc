"""Composite score, letter label and revision-to-revision delta feedback."""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional

from ats_engine.models.score import ScoreBreakdown, ScoreFeedback


# Inclusive lower bounds, highest first. Fixed constants.
LABEL_THRESHOLDS = (
    (90, "A+"),
    (80, "A"),
    (70, "B+"),
    (60, "B"),
)
FALLBACK_LABEL = "C"
HIGH_SCORE_THRESHOLD = 90

Clock = Callable[[], datetime]


@dataclass(frozen=True)
class CompositeScore:
    score: int
    label: str

    @property
    def is_high_score(self) -> bool:
        return self.score >= HIGH_SCORE_THRESHOLD


def score_label(score: int) -> str:
    """Convert numeric score to letter label."""
    for threshold, label in LABEL_THRESHOLDS:
        if score >= threshold:
            return label
    return FALLBACK_LABEL


def compute_score(breakdown: ScoreBreakdown) -> CompositeScore:
    # Weights are integer percents, so the total is 100x the composite;
    # adding 50 before flooring rounds half up without float error.
    score = (breakdown.weighted_total() + 50) // 100
    score = max(0, min(100, score))
    return CompositeScore(score=score, label=score_label(score))


def feedback_message(delta: int) -> str:
    if delta >= 5:
        return "Significant improvement in resume quality"
    if delta >= 3:
        return "Added measurable impact to experience"
    if delta > 0:
        return "Content improvement detected"
    if delta <= -5:
        return "Content may need more detail"
    if delta < 0:
        return "Minor adjustment detected"
    return ""


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def track_delta(
    previous_score: Optional[int],
    new_score: int,
    clock: Optional[Clock] = None,
) -> Optional[ScoreFeedback]:
    """Feedback for the change since the previous pass of the same document.

    Returns None on the first computation (no baseline) and when the score
    did not move.
    """
    if previous_score is None:
        return None
    delta = new_score - previous_score
    if delta == 0:
        return None
    now = (clock or _utc_now)()
    return ScoreFeedback(message=feedback_message(delta), delta=delta, timestamp=now)

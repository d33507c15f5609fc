import pytest

from ats_engine.models import SCORE_WEIGHTS, ScoreBreakdown
from ats_engine.services.composite import (
    compute_score,
    feedback_message,
    score_label,
    track_delta,
)


def breakdown(**scores):
    values = {name: 0 for name in SCORE_WEIGHTS}
    values.update(scores)
    return ScoreBreakdown(**values)


@pytest.mark.parametrize(
    "score,label",
    [(100, "A+"), (90, "A+"), (89, "A"), (80, "A"), (79, "B+"), (70, "B+"),
     (69, "B"), (60, "B"), (59, "C"), (0, "C")],
)
def test_score_label(score, label):
    assert score_label(score) == label


class TestComputeScore:
    def test_weighted_sum(self):
        result = compute_score(breakdown(
            structure=80, keywords=60, content=40, readability=100, completeness=20
        ))
        # 20 + 18 + 8 + 15 + 2
        assert result.score == 63
        assert result.label == "B"
        assert not result.is_high_score

    def test_rounds_half_up(self):
        # 0.10 * 5 = 0.5
        assert compute_score(breakdown(completeness=5)).score == 1
        # 0.15 * 3 = 0.45
        assert compute_score(breakdown(readability=3)).score == 0

    def test_full_marks(self):
        result = compute_score(breakdown(
            structure=100, keywords=100, content=100, readability=100, completeness=100
        ))
        assert result.score == 100
        assert result.label == "A+"
        assert result.is_high_score

    def test_zero(self):
        result = compute_score(ScoreBreakdown())
        assert result.score == 0
        assert result.label == "C"

    def test_keyword_change_moves_composite_by_its_weight(self):
        base = dict(structure=60, content=50, readability=40, completeness=70)
        low = compute_score(breakdown(keywords=20, **base)).score
        high = compute_score(breakdown(keywords=70, **base)).score
        assert high - low == 15  # 0.30 * 50

    def test_high_score_threshold(self):
        at_90 = compute_score(breakdown(
            structure=90, keywords=90, content=90, readability=90, completeness=90
        ))
        assert at_90.score == 90
        assert at_90.is_high_score


@pytest.mark.parametrize(
    "delta,message",
    [
        (7, "Significant improvement in resume quality"),
        (5, "Significant improvement in resume quality"),
        (4, "Added measurable impact to experience"),
        (3, "Added measurable impact to experience"),
        (2, "Content improvement detected"),
        (1, "Content improvement detected"),
        (-1, "Minor adjustment detected"),
        (-4, "Minor adjustment detected"),
        (-5, "Content may need more detail"),
        (-12, "Content may need more detail"),
    ],
)
def test_feedback_message(delta, message):
    assert feedback_message(delta) == message


class TestTrackDelta:
    def test_first_computation_has_no_feedback(self, fixed_clock):
        assert track_delta(None, 72, fixed_clock) is None

    def test_unchanged_score_has_no_feedback(self, fixed_clock):
        assert track_delta(72, 72, fixed_clock) is None

    def test_improvement(self, fixed_clock):
        feedback = track_delta(70, 73, fixed_clock)
        assert feedback.delta == 3
        assert feedback.message == "Added measurable impact to experience"
        assert feedback.timestamp == fixed_clock()

    def test_regression(self, fixed_clock):
        feedback = track_delta(80, 74, fixed_clock)
        assert feedback.delta == -6
        assert feedback.message == "Content may need more detail"

    def test_default_clock_is_utc(self):
        feedback = track_delta(10, 11)
        assert feedback.timestamp.tzinfo is not None

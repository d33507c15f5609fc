from datetime import datetime, timezone

from ats_engine.models import ResumeDocument, ScoreFeedback
from ats_engine.services.analyzers import SignalReport
from ats_engine.services.feedback import (
    build_section_signals,
    build_tips,
    experience_signal,
    format_delta,
    header_signal,
    keywords_signal,
    skills_signal,
    summary_signal,
)


def statuses(signals):
    return {s.section_id: s.status for s in signals}


class TestSectionSignals:
    def test_strong_resume(self, strong_resume):
        signals = build_section_signals(strong_resume)
        assert statuses(signals) == {
            "header": "strong",
            "summary": "strong",
            "experience": "strong",
            "skills": "strong",
            "education": "strong",
        }

    def test_sparse_resume(self, sparse_resume):
        assert statuses(build_section_signals(sparse_resume)) == {
            "header": "risk",
            "summary": "risk",
            "experience": "risk",
            "skills": "risk",
            "education": "risk",
        }

    def test_keywords_signal_only_with_job_keywords(self, strong_resume, settings):
        assert "keywords" not in statuses(build_section_signals(strong_resume))
        signals = build_section_signals(
            strong_resume, ["Node.js", "AWS", "microservices", "communication"], settings
        )
        keyword_signal = [s for s in signals if s.section_id == "keywords"][0]
        assert keyword_signal.status == "needs-improvement"
        assert "2 job keywords" in keyword_signal.message

    def test_blank_job_keywords_emit_no_keywords_signal(self, strong_resume, settings):
        assert "keywords" not in statuses(build_section_signals(strong_resume, ["  "], settings))
        assert "keywords" not in statuses(build_section_signals(strong_resume, ["", " \t"], settings))

    def test_single_missing_keyword_message(self, strong_resume, settings):
        signals = build_section_signals(strong_resume, ["AWS", "Rust"], settings)
        keyword_signal = [s for s in signals if s.section_id == "keywords"][0]
        assert keyword_signal.status == "needs-improvement"
        assert keyword_signal.message == "1 job keyword is not in your resume"

    def test_keywords_signal_pluralizes(self):
        missing = ["Missing job keyword: Kafka", "Missing job keyword: Rust"]
        report = SignalReport(name="keywords", score=0, issues=missing)
        assert keywords_signal(report).message == "2 job keywords are not in your resume"

    def test_precomputed_keyword_report_is_used(self, strong_resume, settings):
        report = SignalReport(name="keywords", score=100)
        signals = build_section_signals(strong_resume, ["Rust"], settings, keywords=report)
        assert statuses(signals)["keywords"] == "strong"

    def test_summary_thresholds(self):
        assert summary_signal(ResumeDocument(summary="x" * 99)).status == "risk"
        assert summary_signal(ResumeDocument(summary="x" * 100)).status == "needs-improvement"
        assert summary_signal(ResumeDocument(summary="x" * 200)).status == "strong"

    def test_header_thresholds(self):
        full = {"name": "A", "email": "a@b.co", "phone": "555", "location": "Oslo"}
        assert header_signal(ResumeDocument(personal_info=full)).status == "strong"
        no_location = {**full, "location": ""}
        assert header_signal(ResumeDocument(personal_info=no_location)).status == "needs-improvement"
        no_phone = {**full, "phone": ""}
        signal = header_signal(ResumeDocument(personal_info=no_phone))
        assert signal.status == "risk"
        assert "phone" in signal.message

    def test_experience_bullet_density(self):
        def role(n):
            return {"company": "Acme", "bullets": [f"Shipped feature {i}" for i in range(n)]}

        one = ResumeDocument.model_validate({"experience": [role(1), role(2)]})
        three = ResumeDocument.model_validate({"experience": [role(3), role(3)]})
        four = ResumeDocument.model_validate({"experience": [role(4)]})
        assert experience_signal(one).status == "risk"
        assert experience_signal(three).status == "needs-improvement"
        assert experience_signal(four).status == "strong"

    def test_weak_openers_demote_experience(self):
        doc = ResumeDocument.model_validate({"experience": [{"bullets": [
            "Shipped 3 apps", "Shipped 4 apps", "Shipped 5 apps", "Worked on the website",
        ]}]})
        assert experience_signal(doc).status == "needs-improvement"

    def test_skills_thresholds(self):
        def with_skills(n):
            return ResumeDocument.model_validate(
                {"skills": [{"category": "All", "items": [f"skill-{i}" for i in range(n)]}]}
            )

        assert skills_signal(with_skills(4)).status == "risk"
        assert skills_signal(with_skills(5)).status == "needs-improvement"
        assert skills_signal(with_skills(10)).status == "strong"


class TestTips:
    def test_tips_for_weak_metrics_only(self):
        reports = [
            SignalReport(name="structure", score=95),
            SignalReport(name="keywords", score=60, issues=["Missing job keyword: Kafka"]),
            SignalReport(name="content", score=10),
        ]
        tips = build_tips(reports)
        assert [(t.metric, t.status) for t in tips] == [
            ("keywords", "needs-improvement"),
            ("content", "risk"),
        ]
        assert tips[0].message == "Missing job keyword: Kafka"
        assert tips[1].message

    def test_no_tips_when_all_strong(self):
        assert build_tips([SignalReport(name="readability", score=80)]) == []


class TestFormatDelta:
    def _feedback(self, delta):
        return ScoreFeedback(
            message="x", delta=delta, timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc)
        )

    def test_positive(self):
        assert format_delta(self._feedback(3)) == "+3"

    def test_negative(self):
        assert format_delta(self._feedback(-2)) == "-2"

    def test_no_feedback(self):
        assert format_delta(None) == ""

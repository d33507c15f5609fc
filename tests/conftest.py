"""Shared fixtures and pytest markers."""
from datetime import datetime, timezone
from pathlib import Path

import pytest
import yaml

from ats_engine.config import Settings
from ats_engine.models import ResumeDocument

FIXTURES_DIR = Path(__file__).parent / "fixtures"

FIXED_NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "scenario: end-to-end behaviour checks on sample resumes"
    )


def load_payload(name: str) -> dict:
    """Load a camelCase resume payload from tests/fixtures."""
    with open(FIXTURES_DIR / f"{name}.yaml", encoding="utf-8") as f:
        return yaml.safe_load(f)


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def strong_payload():
    return load_payload("strong_resume")


@pytest.fixture
def strong_resume(strong_payload):
    return ResumeDocument.model_validate(strong_payload)


@pytest.fixture
def sparse_resume():
    return ResumeDocument.model_validate(load_payload("sparse_resume"))


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW

"""Shared fixtures for vitae tests."""

import json
from pathlib import Path

import pytest
from loguru import logger

from vitae.contexts.intake import ResumeRecord

FIXTURES_PATH = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def reset_loguru():
    """Start each test without sinks and drop any a test adds."""
    logger.remove()
    yield
    logger.remove()


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH


@pytest.fixture
def full_resume_data() -> dict:
    return json.loads((FIXTURES_PATH / "cv_full.json").read_text(encoding="utf-8"))


@pytest.fixture
def full_record(full_resume_data) -> ResumeRecord:
    return ResumeRecord.from_dict(full_resume_data)

"""Unit tests for the JSON Resume loader."""

import pytest
from loguru import logger

from vitae.contexts.intake import ResumeLoadError, ResumeRecord, load_resume


@pytest.mark.unit
def test_load_full_fixture(fixtures_path, full_record):
    record = load_resume(fixtures_path / "cv_full.json")
    assert isinstance(record, ResumeRecord)
    assert record == full_record


@pytest.mark.unit
def test_load_accepts_str_path(fixtures_path):
    record = load_resume(str(fixtures_path / "cv_minimal.json"))
    assert record.basics.name == "Jane Doe"


@pytest.mark.unit
def test_missing_file(tmp_path):
    missing = tmp_path / "nope.json"
    with pytest.raises(ResumeLoadError) as exc_info:
        load_resume(missing)
    assert exc_info.value.source_path == missing
    assert isinstance(exc_info.value.original_error, OSError)


@pytest.mark.unit
def test_invalid_json(tmp_path):
    source = tmp_path / "cv.json"
    source.write_text('{"basics": {"name": "Jane"', encoding="utf-8")
    with pytest.raises(ResumeLoadError, match="not valid JSON"):
        load_resume(source)


@pytest.mark.unit
def test_top_level_must_be_object(tmp_path):
    source = tmp_path / "cv.json"
    source.write_text("[1, 2, 3]", encoding="utf-8")
    with pytest.raises(ResumeLoadError, match="JSON object, got list"):
        load_resume(source)


@pytest.mark.unit
def test_load_error_is_value_error(tmp_path):
    """Callers catching ValueError also catch load failures."""
    source = tmp_path / "cv.json"
    source.write_text("", encoding="utf-8")
    with pytest.raises(ValueError):
        load_resume(source)


@pytest.mark.unit
def test_load_failures_are_logged(tmp_path):
    messages = []
    logger.add(messages.append, level="ERROR", format="{message}")

    source = tmp_path / "cv.json"
    source.write_text("[]", encoding="utf-8")
    with pytest.raises(ResumeLoadError):
        load_resume(source)
    with pytest.raises(ResumeLoadError):
        load_resume(tmp_path / "missing.json")

    assert len(messages) == 2
    assert messages[0].startswith("[intake] Top-level value")
    assert messages[1].startswith("[intake] Could not read")

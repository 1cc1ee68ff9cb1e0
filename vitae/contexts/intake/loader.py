"""
Resume Loader

Reads a JSON Resume file from disk and builds an immutable ResumeRecord.
"""

import json
from pathlib import Path

from vitae.contexts.intake.exceptions import ResumeLoadError
from vitae.contexts.intake.logger import _log_debug, _log_error, _log_info
from vitae.contexts.intake.record import ResumeRecord


def load_resume(source_path: Path) -> ResumeRecord:
    """
    Load and deserialize a JSON Resume document.

    Args:
        source_path: Path to the .json source

    Returns:
        ResumeRecord built from the document

    Raises:
        ResumeLoadError: If the file can't be read, isn't valid JSON, or its
                         top-level value isn't an object
    """
    source_path = Path(source_path)
    _log_debug(f"Reading {source_path}")

    try:
        raw = source_path.read_text(encoding="utf-8")
    except OSError as e:
        _log_error(f"Could not read {source_path}: {e}")
        raise ResumeLoadError(
            "Could not read resume source", source_path=source_path, original_error=e
        ) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        _log_error(f"Invalid JSON in {source_path}: {e}")
        raise ResumeLoadError(
            "Resume source is not valid JSON", source_path=source_path, original_error=e
        ) from e

    if not isinstance(data, dict):
        _log_error(f"Top-level value in {source_path} is {type(data).__name__}, not an object")
        raise ResumeLoadError(
            f"Resume source must contain a JSON object, got {type(data).__name__}",
            source_path=source_path,
        )

    record = ResumeRecord.from_dict(data)
    _log_info(
        f"Loaded {source_path.name}: {len(record.work)} roles, "
        f"{len(record.education)} schools, {len(record.skills)} skills, "
        f"{len(record.publications)} publications"
    )
    return record

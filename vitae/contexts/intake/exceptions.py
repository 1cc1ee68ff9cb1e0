"""Custom exceptions for the intake context."""

from pathlib import Path
from typing import Optional


class ResumeLoadError(ValueError):
    """
    Exception raised when the résumé source cannot be loaded.

    Covers a missing or unreadable file, invalid JSON, and a top-level value
    that is not a JSON object. Loading is all-or-nothing: no record is produced.

    Attributes:
        message: Error description
        source_path: Path of the source that failed to load
        original_error: The underlying OSError / JSONDecodeError, if any
    """

    def __init__(
        self,
        message: str,
        source_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.source_path = source_path
        self.original_error = original_error

        parts = [message]

        if source_path:
            parts.append(f"Source: {source_path}")

        if original_error:
            parts.append(f"Original error: {str(original_error)}")

        super().__init__("\n".join(parts))

"""
Resume Converter

Orchestrates a full generation run: load the JSON source, render the LaTeX
and plain-text documents, and write both files.

Writing happens only after both renderings succeed, and both files are
staged beside their destinations before either is moved into place, so a
failed run never leaves a partial pair of outputs behind.
"""

import os
import tempfile
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Tuple

from dotenv import load_dotenv

from vitae.contexts.intake import ResumeLoadError, load_resume
from vitae.contexts.templating.exceptions import InvalidStyleError, TemplateRenderError
from vitae.contexts.templating.latex_generator import RecordToLaTeXConverter
from vitae.contexts.templating.logger import (
    _log_debug,
    log_generation_result,
    log_generation_start,
    setup_templating_logger,
)
from vitae.contexts.templating.plaintext_generator import generate_plaintext
from vitae.contexts.templating.style_resolver import load_style

load_dotenv()
CV_SOURCE_PATH = Path(os.getenv("CV_SOURCE_PATH", "cv.json"))
CV_TEX_PATH = Path(os.getenv("CV_TEX_PATH", "cv.tex"))
CV_TEXT_PATH = Path(os.getenv("CV_TEXT_PATH", "cv.text"))
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


@dataclass
class ConversionResult:
    """Result from generate_cv() orchestration function."""

    success: bool
    input_path: Optional[Path] = None
    tex_path: Optional[Path] = None
    text_path: Optional[Path] = None
    error: Optional[str] = None
    time_s: float = 0.0
    log_dir: Optional[Path] = None


def generate_cv(
    source_path: Path = CV_SOURCE_PATH,
    tex_path: Path = CV_TEX_PATH,
    text_path: Path = CV_TEXT_PATH,
    style_path: Path = None,
    log_dir: Path = None,
    setup_logging: bool = True,
) -> ConversionResult:
    """
    Generate the LaTeX and plain-text résumés from a JSON Resume file.

    Args:
        source_path: JSON Resume source
        tex_path: Destination for the LaTeX document
        text_path: Destination for the plain-text document
        style_path: Optional moderncv style preset (defaults to CV_STYLE_PATH)
        log_dir: Directory for the session log file (None for console only)
        setup_logging: Configure loguru sinks for this run

    Returns:
        ConversionResult with output paths on success, error message on failure
    """
    source_path = Path(source_path)
    tex_path = Path(tex_path)
    text_path = Path(text_path)

    log_file = setup_templating_logger(log_dir, source_path) if setup_logging else None
    log_generation_start(source_path, log_file)

    start_time = time.time()
    result = ConversionResult(success=False, input_path=source_path, log_dir=log_dir)

    try:
        record = load_resume(source_path)
        style = load_style(style_path)
        latex = RecordToLaTeXConverter(style=style).generate_document(record)
        text = generate_plaintext(record)
    except (ResumeLoadError, InvalidStyleError, TemplateRenderError) as e:
        result.error = str(e)
        result.time_s = time.time() - start_time
        log_generation_result(result, result.time_s)
        return result

    try:
        write_outputs(((tex_path, latex), (text_path, text)))
    except OSError as e:
        result.error = f"Could not write outputs: {e}"
        result.time_s = time.time() - start_time
        log_generation_result(result, result.time_s)
        return result

    result.success = True
    result.tex_path = tex_path
    result.text_path = text_path
    result.time_s = time.time() - start_time
    log_generation_result(result, result.time_s)
    return result


def write_outputs(outputs: Sequence[Tuple[Path, str]]) -> None:
    """
    Write several files so that either all of them land or none do.

    Each content is first written to a temporary file in its destination's
    directory; the temporaries are renamed into place only once every one of
    them has been written.

    Args:
        outputs: (destination, content) pairs

    Raises:
        OSError: If a directory can't be created, a destination is a
                 directory, or a write or rename fails
    """
    staged = []
    try:
        for output_path, content in outputs:
            if output_path.is_dir():
                raise IsADirectoryError(f"Output path is a directory: {output_path}")

            output_path.parent.mkdir(parents=True, exist_ok=True)
            fd, temp_name = tempfile.mkstemp(
                dir=output_path.parent, prefix=f".{output_path.name}.", suffix=".tmp"
            )
            staged.append((Path(temp_name), output_path))
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            # mkstemp creates owner-only files
            os.chmod(temp_name, 0o644)

        for temp_path, output_path in staged:
            os.replace(temp_path, output_path)
            _log_debug(f"Wrote {output_path}")
    finally:
        for temp_path, _ in staged:
            temp_path.unlink(missing_ok=True)

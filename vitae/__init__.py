"""
vitae - JSON Resume to moderncv LaTeX and plain text

Renders a JSON-Resume-shaped record into a typeset LaTeX source (moderncv
document class) and a plain-text résumé.

Architecture:
- Intake Context: Loading the JSON source into an immutable record
- Templating Context: Section rendering and document assembly (LaTeX + text)
"""

__version__ = "0.1.0"

from vitae.contexts.intake import ResumeLoadError, ResumeRecord, load_resume
from vitae.contexts.templating import (
    ConversionResult,
    generate_cv,
    generate_latex,
    generate_plaintext,
)
from vitae.utils.latex_tools import to_latex
from vitae.utils.timestamp import normalize_date

__all__ = [
    "ResumeRecord",
    "ResumeLoadError",
    "load_resume",
    "generate_latex",
    "generate_plaintext",
    "generate_cv",
    "ConversionResult",
    "to_latex",
    "normalize_date",
]

"""
Templating Context

Responsibilities:
- Escapes record values for LaTeX and renders each résumé section
- Assembles the moderncv LaTeX document and the plain-text document
- Manages the Jinja2 template set and the moderncv style preset
- Orchestrates a full generation run (load, render, write)

Owns: Section rendering, document assembly, LaTeX template system
Never: Interprets or validates the résumé schema beyond field defaults
"""

from vitae.contexts.templating.converter import ConversionResult, generate_cv
from vitae.contexts.templating.exceptions import InvalidStyleError, TemplateRenderError
from vitae.contexts.templating.latex_generator import RecordToLaTeXConverter, generate_latex
from vitae.contexts.templating.plaintext_generator import generate_plaintext
from vitae.contexts.templating.registries import TemplateRegistry
from vitae.contexts.templating.style_resolver import load_style

__all__ = [
    # Orchestration
    "generate_cv",
    "ConversionResult",
    # Document assemblers
    "RecordToLaTeXConverter",
    "generate_latex",
    "generate_plaintext",
    # Templates and style
    "TemplateRegistry",
    "load_style",
    # Errors
    "TemplateRenderError",
    "InvalidStyleError",
]

"""
Shared utilities for vitae.

Common functionality used across contexts:
- LaTeX escaping helpers
- Date normalization and timestamps
- Text block assembly
- Logger setup
"""

from vitae.utils.latex_tools import to_latex
from vitae.utils.timestamp import normalize_date, now

__all__ = ["to_latex", "normalize_date", "now"]

"""
Text processing utilities for assembling rendered output.
"""

from typing import Iterable, Optional


def join_blocks(blocks: Iterable[Optional[str]], separator: str = "\n\n") -> str:
    """
    Join rendered blocks, dropping the empty ones entirely.

    An absent block leaves no trace in the output (no stray separator), which
    is what lets optional header fields and empty sections disappear cleanly.

    Args:
        blocks: Rendered blocks (None and "" are skipped)
        separator: String placed between kept blocks (default: one blank line)

    Returns:
        Joined text

    Example:
        >>> join_blocks(["\\\\begin{document}", "", None, "\\\\end{document}"])
        '\\\\begin{document}\\n\\n\\\\end{document}'
    """
    return separator.join(block for block in blocks if block)


def join_nonempty(values: Iterable[Optional[str]], separator: str) -> str:
    """
    Join the non-empty values with separator.

    Example:
        >>> join_nonempty(["Berlin", None, "j@x.com"], " | ")
        'Berlin | j@x.com'
    """
    return separator.join(value for value in values if value)


def finalize_text(content: str) -> str:
    """Strip surrounding whitespace and terminate with exactly one newline."""
    return content.strip() + "\n"

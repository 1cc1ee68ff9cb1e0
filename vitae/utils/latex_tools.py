"""
LaTeX Tools

Escaping and command-building helpers for generating LaTeX source.

Self-contained module with no project dependencies.
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass(frozen=True)
class LaTeXEscapes:
    """
    Display tokens for characters with syntactic meaning in LaTeX.

    Declared in precedence order. Backslash comes first: it is the only rule
    whose replacement could otherwise be produced by another rule.
    """

    BACKSLASH: str = r"\textbackslash{}"
    CARET: str = r"\textasciicircum{}"
    TILDE: str = r"\textasciitilde{}"
    BAR: str = r"\textbar{}"
    LINE_BREAK: str = r" \\ "

    def table(self) -> Dict[str, str]:
        """Character -> replacement mapping in precedence order."""
        return {
            "\\": self.BACKSLASH,
            "&": r"\&",
            "#": r"\#",
            "%": r"\%",
            "_": r"\_",
            "$": r"\$",
            "{": r"\{",
            "}": r"\}",
            "^": self.CARET,
            "~": self.TILDE,
            "|": self.BAR,
            "\n": self.LINE_BREAK,
        }


ESCAPE_TABLE = LaTeXEscapes().table()
ESCAPE_PATTERN = re.compile("|".join(re.escape(char) for char in ESCAPE_TABLE))


def to_latex(plaintext_str: Optional[str]) -> str:
    """
    Convert plaintext to LaTeX by escaping special characters.

    Every special character is substituted in a single left-to-right pass, so
    the braces and backslashes inside a replacement token (e.g. the ``{}`` of
    ``\\textbackslash{}``) are never escaped a second time.

    Conversions:
    - \\ → \\textbackslash{}
    - & # % _ $ → \\& \\# \\% \\_ \\$
    - { } → \\{ \\}
    - ^ → \\textasciicircum{}
    - ~ → \\textasciitilde{}
    - | → \\textbar{}
    - newline → " \\\\ " (forced line break)

    Args:
        plaintext_str: Plain text string (None is treated as empty)

    Returns:
        LaTeX string with special characters escaped

    Example:
        >>> to_latex("R&D: 87% on-time")
        'R\\\\&D: 87\\\\% on-time'
        >>> to_latex(None)
        ''
    """
    if not plaintext_str:
        return ""

    return ESCAPE_PATTERN.sub(lambda match: ESCAPE_TABLE[match.group(0)], str(plaintext_str))


def format_latex_command(
    command: str,
    mandatory_args: List[str] = None,
    optional_args: List[str] = None,
) -> str:
    """
    Generate a LaTeX command invocation.

    Builds: \\command[opt1][opt2]{arg1}{arg2}

    Arguments are inserted verbatim; escape data values with to_latex() first.

    Args:
        command: Command name without the leading backslash (e.g., "social")
        mandatory_args: Arguments in {...} (default: None)
        optional_args: Arguments in [...] (default: None)

    Returns:
        LaTeX command string

    Example:
        >>> format_latex_command("social", ["jdoe"], optional_args=["github"])
        '\\\\social[github]{jdoe}'
    """
    result = f"\\{command}"

    if optional_args:
        for arg in optional_args:
            result += f"[{arg}]"

    if mandatory_args:
        for arg in mandatory_args:
            result += f"{{{arg}}}"

    return result


def format_latex_environment(
    env_name: str,
    content: str,
    optional_args: List[str] = None,
    mandatory_args: List[str] = None,
) -> str:
    """
    Generate LaTeX environment with arguments.

    Builds: \\begin{env}[opt1][opt2]{arg1}{arg2}
            content
            \\end{env}

    Args:
        env_name: Environment name (e.g., "itemize")
        content: Inner content
        optional_args: Optional arguments in [...] (default: None)
        mandatory_args: Mandatory arguments in {...} (default: None)

    Returns:
        Complete LaTeX environment string

    Example:
        >>> format_latex_environment("itemize", "\\\\item One")
        '\\\\begin{itemize}\\n\\\\item One\\n\\\\end{itemize}'
    """
    opening = format_latex_command("begin", [env_name])

    if optional_args:
        for arg in optional_args:
            opening += f"[{arg}]"

    if mandatory_args:
        for arg in mandatory_args:
            opening += f"{{{arg}}}"

    closing = format_latex_command("end", [env_name])

    return f"{opening}\n{content}\n{closing}"

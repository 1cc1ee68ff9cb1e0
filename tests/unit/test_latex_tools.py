"""
Unit tests for LaTeX tools.

Tests escaping and command helpers in vitae.utils.latex_tools.
"""

import pytest

from vitae.utils.latex_tools import format_latex_command, format_latex_environment, to_latex


class TestToLatex:
    """Tests for to_latex function."""

    def test_none_returns_empty_string(self):
        """Absent input escapes to empty string."""
        assert to_latex(None) == ""

    def test_empty_string(self):
        """Test empty string returns empty string."""
        assert to_latex("") == ""

    def test_no_special_chars(self):
        """Test text without special characters passes through unchanged."""
        assert to_latex("Hello World") == "Hello World"

    @pytest.mark.parametrize(
        "char, expected",
        [
            ("&", r"\&"),
            ("#", r"\#"),
            ("%", r"\%"),
            ("_", r"\_"),
            ("$", r"\$"),
            ("{", r"\{"),
            ("}", r"\}"),
        ],
    )
    def test_backslash_prefixed_chars(self, char, expected):
        """Reserved characters get a backslash prefix."""
        assert to_latex(f"a{char}b") == f"a{expected}b"

    def test_backslash(self):
        """Backslash becomes \\textbackslash{} with its braces left alone."""
        assert to_latex("C:\\Users") == r"C:\textbackslash{}Users"

    def test_caret_tilde_bar(self):
        """Characters without a backslash form use display commands."""
        assert to_latex("x^2") == r"x\textasciicircum{}2"
        assert to_latex("~/src") == r"\textasciitilde{}/src"
        assert to_latex("a|b") == r"a\textbar{}b"

    def test_newline_becomes_line_break(self):
        """Newlines become a forced line break surrounded by spaces."""
        assert to_latex("line one\nline two") == r"line one \\ line two"

    def test_tokens_are_not_reescaped(self):
        """Replacement tokens are never escaped a second time."""
        assert to_latex("\\{") == r"\textbackslash{}\{"
        assert to_latex("\\\n") == r"\textbackslash{} \\ "

    def test_all_special_chars(self):
        """Every special character in one string."""
        result = to_latex("\\&#%_${}^~|\n")
        assert result == (
            r"\textbackslash{}\&\#\%\_\$\{\}"
            r"\textasciicircum{}\textasciitilde{}\textbar{} \\ "
        )

    def test_realistic_text(self):
        assert to_latex("R&D: cut costs by 40% (#1 team)") == r"R\&D: cut costs by 40\% (\#1 team)"


class TestFormatLatexCommand:
    """Tests for format_latex_command function."""

    def test_mandatory_args(self):
        assert format_latex_command("name", ["Jane", "Doe"]) == r"\name{Jane}{Doe}"

    def test_optional_args(self):
        result = format_latex_command("phone", ["555"], optional_args=["mobile"])
        assert result == r"\phone[mobile]{555}"

    def test_no_args(self):
        assert format_latex_command("makecvtitle") == r"\makecvtitle"

    def test_empty_argument_kept(self):
        assert format_latex_command("address", ["Virtual", "", ""]) == r"\address{Virtual}{}{}"


class TestFormatLatexEnvironment:
    """Tests for format_latex_environment function."""

    def test_itemize(self):
        result = format_latex_environment("itemize", r"\item One")
        assert result == "\\begin{itemize}\n\\item One\n\\end{itemize}"

    def test_with_arguments(self):
        result = format_latex_environment(
            "tabular", "a & b", optional_args=["t"], mandatory_args=["ll"]
        )
        assert result.startswith(r"\begin{tabular}[t]{ll}")
        assert result.endswith(r"\end{tabular}")

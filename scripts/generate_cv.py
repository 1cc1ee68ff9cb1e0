#!/usr/bin/env python3
"""
Resume Generation CLI

Renders a JSON Resume file into a moderncv LaTeX document and a plain-text résumé.

Commands:
    generate - Write cv.tex and cv.text from cv.json
    show     - Print the LaTeX or plain-text rendering to stdout

Examples:\n

    generate_cv.py generate                                  # cv.json -> cv.tex, cv.text

    generate_cv.py generate data/cv.json --tex out/cv.tex    # Explicit paths

    generate_cv.py show cv.json --format tex                 # Preview LaTeX
"""

from vitae.cli import app

if __name__ == "__main__":
    app()

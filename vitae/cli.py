"""
Command-line interface for generating the LaTeX and plain-text résumés.

Reads a JSON Resume file (cv.json by default) and writes cv.tex and cv.text.
Paths default to CV_SOURCE_PATH, CV_TEX_PATH and CV_TEXT_PATH from .env.
"""

from enum import Enum
from pathlib import Path

import typer

from vitae.contexts.intake import ResumeLoadError, load_resume
from vitae.contexts.templating import (
    InvalidStyleError,
    RecordToLaTeXConverter,
    TemplateRenderError,
    generate_cv,
    generate_plaintext,
    load_style,
)
from vitae.contexts.templating.converter import (
    CV_SOURCE_PATH,
    CV_TEX_PATH,
    CV_TEXT_PATH,
    LOGS_PATH,
)
from vitae.utils.timestamp import now

app = typer.Typer(
    add_completion=False,
    help="Generate moderncv LaTeX and plain-text résumés from a JSON Resume file",
    invoke_without_command=True,
)


class OutputFormat(str, Enum):
    tex = "tex"
    text = "text"


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("generate")
def generate_command(
    source: Path = typer.Argument(
        CV_SOURCE_PATH,
        help="Path to the JSON Resume source",
        dir_okay=False,
    ),
    tex: Path = typer.Option(
        CV_TEX_PATH,
        "--tex",
        "-t",
        help="Destination for the LaTeX document",
        dir_okay=False,
    ),
    text: Path = typer.Option(
        CV_TEXT_PATH,
        "--text",
        "-x",
        help="Destination for the plain-text document",
        dir_okay=False,
    ),
    style: Path = typer.Option(
        None,
        "--style",
        "-s",
        help="moderncv style preset (YAML); defaults to CV_STYLE_PATH",
        dir_okay=False,
    ),
    no_log: bool = typer.Option(
        False,
        "--no-log",
        help="Log to the console only (no session log file)",
    ),
):
    """
    Render both résumés and write them to disk.

    Examples:
        # Defaults from .env (cv.json -> cv.tex, cv.text)
        $ python scripts/generate_cv.py generate

        # Explicit paths
        $ python scripts/generate_cv.py generate data/cv.json --tex out/cv.tex --text out/cv.text
    """
    log_dir = None if no_log else LOGS_PATH / f"generate_{now()}"

    result = generate_cv(
        source_path=source,
        tex_path=tex,
        text_path=text,
        style_path=style,
        log_dir=log_dir,
    )

    if not result.success:
        typer.secho(f"Error: {result.error}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(f"Generated {result.tex_path} and {result.text_path}", fg=typer.colors.GREEN)


@app.command("show")
def show_command(
    source: Path = typer.Argument(
        CV_SOURCE_PATH,
        help="Path to the JSON Resume source",
        dir_okay=False,
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.text,
        "--format",
        "-f",
        help="Which rendering to print",
    ),
    style: Path = typer.Option(
        None,
        "--style",
        "-s",
        help="moderncv style preset (YAML), used with --format tex",
        dir_okay=False,
    ),
):
    """
    Print one rendering to stdout without writing files.

    Examples:
        $ python scripts/generate_cv.py show cv.json --format tex
    """
    try:
        record = load_resume(source)
        if output_format == OutputFormat.tex:
            output = RecordToLaTeXConverter(style=load_style(style)).generate_document(record)
        else:
            output = generate_plaintext(record)
    except (ResumeLoadError, InvalidStyleError, TemplateRenderError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(output, nl=False)


if __name__ == "__main__":
    app()

#!/usr/bin/env python3
"""
JSON Resume to Markdown CLI

Renders a JSON Resume document (JSON or YAML) to Markdown. Output goes to
stdout unless --output is given. The locale defaults to the
JSONRESUME_THEME_MARKDOWN_COUNTRY_LANG environment variable (.env supported).

Usage:
    # Print Markdown to stdout
    python scripts/render_resume.py resume.json

    # Write to a file with German labels
    python scripts/render_resume.py resume.yaml -o resume.md --locale de

    # Use a YAML render config and keep a debug log
    python scripts/render_resume.py resume.json --config render.yaml --log-dir outs/logs
"""

import time
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from jsonresume_md.contexts.intake.loader import load_resume_file
from jsonresume_md.contexts.rendering.config import load_render_config
from jsonresume_md.contexts.rendering.exceptions import RenderConfigError, ResumeLoadError
from jsonresume_md.contexts.rendering.logger import (
    _log_error,
    log_render_result,
    log_render_start,
    setup_rendering_logger,
)
from jsonresume_md.contexts.rendering.renderer import render

app = typer.Typer(
    help="Render a JSON Resume document as Markdown",
    add_completion=False,
)

VALID_LOCALES = {"en", "de"}


def validate_locale(value: Optional[str]) -> Optional[str]:
    """
    Validate the --locale option.

    Raises:
        typer.BadParameter: If the locale is not supported
    """
    if value is None:
        return None
    value = value.strip().lower()
    if value not in VALID_LOCALES:
        raise typer.BadParameter(
            f"Invalid locale: {value}. Valid locales are: {', '.join(sorted(VALID_LOCALES))}"
        )
    return value


@app.command()
def main(
    resume_file: Annotated[
        Path,
        typer.Argument(
            help="Resume file (.json, .yaml or .yml)",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Markdown output file (default: stdout)", dir_okay=False),
    ] = None,
    locale: Annotated[
        Optional[str],
        typer.Option("--locale", "-l", help="Output locale: en or de", callback=validate_locale),
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="YAML render config", exists=True, dir_okay=False),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Write a DEBUG log file to this directory"),
    ] = None,
):
    """Render RESUME_FILE to Markdown."""
    try:
        render_config = load_render_config(config, locale=locale)
    except RenderConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    setup_rendering_logger(log_dir, locale=render_config.locale.value)
    log_render_start(resume_file.stem, resume_file)
    start = time.time()

    try:
        document = load_resume_file(resume_file)
    except ResumeLoadError as e:
        _log_error(str(e))
        raise typer.Exit(code=1)

    markdown = render(document, render_config)

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(markdown, encoding="utf-8")
    else:
        typer.echo(markdown, nl=False)

    log_render_result(resume_file.stem, output, markdown.count("\n"), time.time() - start)


if __name__ == "__main__":
    app()

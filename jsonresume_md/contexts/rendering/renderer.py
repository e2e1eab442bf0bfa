"""
Markdown Renderer

Pipeline driver: parses the resume document once, runs every section renderer
in a fixed order against a single line buffer and serializes the result.
"""

from typing import Any, Callable, List, Optional, Tuple

from jsonresume_md.contexts.intake.resume_data_structure import ResumeDocument
from jsonresume_md.contexts.rendering.config import RenderConfig
from jsonresume_md.contexts.rendering.logger import _log_debug
from jsonresume_md.contexts.rendering.markdown_writer import MarkdownLineBuffer
from jsonresume_md.contexts.rendering.sections import (
    render_awards,
    render_basics,
    render_certificates,
    render_education,
    render_interests,
    render_languages,
    render_projects,
    render_publications,
    render_references,
    render_skills,
    render_volunteer,
    render_work,
)

SectionRenderer = Callable[[MarkdownLineBuffer, ResumeDocument, RenderConfig], None]

SECTION_RENDERERS: List[Tuple[str, SectionRenderer]] = [
    ("basics", render_basics),
    ("work", render_work),
    ("projects", render_projects),
    ("volunteer", render_volunteer),
    ("education", render_education),
    ("skills", render_skills),
    ("languages", render_languages),
    ("interests", render_interests),
    ("awards", render_awards),
    ("certificates", render_certificates),
    ("publications", render_publications),
    ("references", render_references),
]


def render(document: Any, config: Optional[RenderConfig] = None) -> str:
    """
    Render a JSON Resume document as Markdown.

    Total for any input: missing, null, mistyped or blank fields are treated
    as absent, and None renders as an empty resume (just a "# Resume" title).

    Args:
        document: Decoded JSON Resume data
        config: Render settings; None reads them from the environment on
            every call (see RenderConfig.from_env)

    Returns:
        Markdown text ending in exactly one newline

    Example:
        >>> render({"basics": {"name": "Alex Doe", "label": "Engineer"}})
        '# Alex Doe — Engineer\\n'
    """
    if config is None:
        config = RenderConfig.from_env()

    resume = ResumeDocument.from_dict(document)
    buffer = MarkdownLineBuffer()

    _log_debug(f"Rendering resume (locale={config.locale.value})")

    for section_name, renderer in SECTION_RENDERERS:
        before = len(buffer)
        renderer(buffer, resume, config)
        if section_name != "basics":
            _log_debug(
                f"  {section_name}: {len(getattr(resume, section_name))} entries, "
                f"{len(buffer) - before} lines"
            )

    return buffer.to_markdown()

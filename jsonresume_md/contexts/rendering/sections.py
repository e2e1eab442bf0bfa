"""
Section Renderers

One renderer per JSON Resume section. Each takes the shared line buffer, the
parsed ResumeDocument and the RenderConfig, and appends its Markdown block.

Layout conventions:
- # for the document title (basics), ## for section titles, ### for entries
- A section with no entries writes nothing, not even its title
- Entry fields that are absent are skipped without leaving blank lines behind
"""

from typing import List

from jsonresume_md.contexts.intake.resume_data_structure import Basics, Profile, ResumeDocument
from jsonresume_md.contexts.rendering.config import RenderConfig
from jsonresume_md.contexts.rendering.markdown_writer import MarkdownLineBuffer
from jsonresume_md.utils.localization import country_name
from jsonresume_md.utils.text_processing import (
    display_url,
    format_date_range,
    join_nonblank,
    link_label,
)
from jsonresume_md.utils.text_processing import normalize_markdown_text as md

DEFAULT_TITLE = "Resume"
TITLE_SEPARATOR = " — "

SECTION_TITLES = {
    "work": "Work Experience",
    "projects": "Projects",
    "volunteer": "Volunteer",
    "education": "Education",
    "skills": "Skills",
    "languages": "Languages",
    "interests": "Interests",
    "awards": "Awards",
    "certificates": "Certificates",
    "publications": "Publications",
    "references": "References",
}

# Contact block markers
LOCATION_ICON = "📍"
EMAIL_ICON = "✉️"
PHONE_ICON = "📞"
URL_ICON = "🔗"
PROFILE_ICON = "👤"


def _write_section_heading(buffer: MarkdownLineBuffer, section: str) -> None:
    buffer.write_heading(2, SECTION_TITLES[section])
    buffer.write_line()


def _write_highlights(buffer: MarkdownLineBuffer, highlights: List[str]) -> None:
    # Blank separator always; write_bullets adds its own trailing blank line
    buffer.write_line()
    buffer.write_bullets(highlights)


def _with_url_suffix(header: str, url: str) -> str:
    """Append a bare url in parentheses, or use it alone when header is empty."""
    return f"{header} ({url})" if header else url


# =============================================================================
# BASICS
# =============================================================================


def _format_profile(profile: Profile) -> str:
    """
    Format one profile for the contact block.

    With a URL the shortened URL is the link text and the network is appended
    in parentheses (unless it would just repeat the link text). Without a URL
    the username and/or network are shown as plain text.
    """
    if profile.url:
        display = display_url(profile.url) or profile.url
        text = f"[{md(display)}]({profile.url})"
        if profile.network and profile.network != display:
            text += f" ({md(profile.network)})"
        return text
    if profile.username and profile.network:
        return f"{md(profile.username)} ({md(profile.network)})"
    return md(profile.username or profile.network or "")


def contact_lines(basics: Basics, config: RenderConfig) -> List[str]:
    """
    Build the contact bullets (location, email, phone, url, profiles).

    Args:
        basics: Parsed basics block
        config: Render configuration (locale and country resolver)

    Returns:
        Bullet texts in display order, each prefixed by its icon
    """
    lines = []

    location = basics.location
    country = country_name(location.country_code, config.locale, config.country_resolver)
    place = join_nonblank(
        [location.address, location.postal_code, location.city, location.region, country],
        ", ",
    )
    if place:
        lines.append(f"{LOCATION_ICON} {md(place)}")

    if basics.email:
        lines.append(f"{EMAIL_ICON} [{md(basics.email)}](mailto:{basics.email})")

    if basics.phone:
        lines.append(f"{PHONE_ICON} [{md(basics.phone)}](tel:{basics.phone})")

    if basics.url:
        display = display_url(basics.url) or basics.url
        lines.append(f"{URL_ICON} [{md(display)}]({basics.url})")

    for profile in basics.profiles:
        text = _format_profile(profile)
        if text:
            lines.append(f"{PROFILE_ICON} {text}")

    return lines


def render_basics(buffer: MarkdownLineBuffer, resume: ResumeDocument, config: RenderConfig) -> None:
    """Render the document title, summary and contact block."""
    basics = resume.basics

    title = join_nonblank([basics.name, basics.label], TITLE_SEPARATOR) or DEFAULT_TITLE
    buffer.write_heading(1, md(title))

    buffer.write_paragraph(basics.summary)

    contacts = contact_lines(basics, config)
    if contacts:
        buffer.write_line()
        buffer.write_bullets(contacts)


# =============================================================================
# WORK, PROJECTS, VOLUNTEER
# =============================================================================


def render_work(buffer: MarkdownLineBuffer, resume: ResumeDocument, config: RenderConfig) -> None:
    """
    Render work experience.

    Entry layout:
        ### Position
        **[Company](url)**

        *2021-01 → 2023-06*
        Location

        Summary

        - Highlight
    """
    if not resume.work:
        return

    _write_section_heading(buffer, "work")

    for entry in resume.work:
        header = entry.position or link_label(entry.name, entry.url) or entry.url
        if header:
            buffer.write_heading(3, md(header))

        # Company gets its own line when the heading is taken by the position
        if entry.position and entry.name:
            buffer.write_line(f"**{md(link_label(entry.name, entry.url))}**")

        date_range = format_date_range(
            entry.start_date, entry.end_date, config.present_label, config.date_separator
        )
        if date_range:
            buffer.write_line()
            buffer.write_line(f"*{md(date_range)}*")

        if entry.location:
            buffer.write_line(md(entry.location))

        buffer.write_paragraph(entry.summary)
        _write_highlights(buffer, entry.highlights)


def render_projects(buffer: MarkdownLineBuffer, resume: ResumeDocument, config: RenderConfig) -> None:
    """Render projects: linked name heading, plain date range, description, highlights."""
    if not resume.projects:
        return

    _write_section_heading(buffer, "projects")

    for entry in resume.projects:
        if entry.name:
            header = link_label(entry.name, entry.url)
        elif entry.url:
            header = f"Project ({entry.url})"
        else:
            header = "Project"
        buffer.write_heading(3, md(header))

        date_range = format_date_range(
            entry.start_date, entry.end_date, config.present_label, config.date_separator
        )
        if date_range:
            buffer.write_line(md(date_range))

        buffer.write_paragraph(entry.description)
        _write_highlights(buffer, entry.highlights)


def render_volunteer(buffer: MarkdownLineBuffer, resume: ResumeDocument, config: RenderConfig) -> None:
    """Render volunteer work as "### Position @ [Organization](url)" entries."""
    if not resume.volunteer:
        return

    _write_section_heading(buffer, "volunteer")

    for entry in resume.volunteer:
        header = join_nonblank([entry.position, link_label(entry.organization, entry.url)], " @ ")
        if not entry.organization and entry.url:
            header = _with_url_suffix(header, entry.url)
        if header:
            buffer.write_heading(3, md(header))

        date_range = format_date_range(
            entry.start_date, entry.end_date, config.present_label, config.date_separator
        )
        if date_range:
            buffer.write_line(md(date_range))

        buffer.write_paragraph(entry.summary)
        _write_highlights(buffer, entry.highlights)


# =============================================================================
# EDUCATION, SKILLS, LANGUAGES, INTERESTS
# =============================================================================


def render_education(buffer: MarkdownLineBuffer, resume: ResumeDocument, config: RenderConfig) -> None:
    """
    Render education.

    Entry layout:
        ### Institution
        **Area**
        *2016 - 2020*
        Study type
        Course A, Course B
        - **GPA**: 3.9
    """
    if not resume.education:
        return

    _write_section_heading(buffer, "education")

    for entry in resume.education:
        if entry.institution:
            buffer.write_heading(3, md(entry.institution))

        if entry.area:
            buffer.write_line(f"**{md(entry.area)}**")

        date_range = format_date_range(
            entry.start_date,
            entry.end_date,
            config.present_label,
            config.education_date_separator,
        )
        if date_range:
            buffer.write_line(f"*{md(date_range)}*")

        if entry.study_type:
            buffer.write_line(md(entry.study_type))

        if entry.courses:
            buffer.write_line(", ".join(md(course) for course in entry.courses))

        buffer.write_key_value("GPA", entry.gpa)
        buffer.write_line()


def render_skills(buffer: MarkdownLineBuffer, resume: ResumeDocument, config: RenderConfig) -> None:
    """Render skills as "### Name — Level" with a comma-joined keyword line."""
    if not resume.skills:
        return

    _write_section_heading(buffer, "skills")

    for entry in resume.skills:
        header = join_nonblank([entry.name, entry.level], TITLE_SEPARATOR)
        if header:
            buffer.write_heading(3, md(header))

        if entry.keywords:
            buffer.write_line(", ".join(md(keyword) for keyword in entry.keywords))
        buffer.write_line()


def render_languages(buffer: MarkdownLineBuffer, resume: ResumeDocument, config: RenderConfig) -> None:
    if not resume.languages:
        return

    _write_section_heading(buffer, "languages")
    buffer.write_bullets(
        join_nonblank([entry.language, entry.fluency], TITLE_SEPARATOR) for entry in resume.languages
    )


def render_interests(buffer: MarkdownLineBuffer, resume: ResumeDocument, config: RenderConfig) -> None:
    if not resume.interests:
        return

    _write_section_heading(buffer, "interests")

    items = []
    for entry in resume.interests:
        if not entry.name:
            continue
        if entry.keywords:
            keywords = ", ".join(md(keyword) for keyword in entry.keywords)
            items.append(f"**{md(entry.name)}**: {keywords}")
        else:
            items.append(md(entry.name))
    buffer.write_bullets(items)


# =============================================================================
# AWARDS, CERTIFICATES, PUBLICATIONS, REFERENCES
# =============================================================================


def render_awards(buffer: MarkdownLineBuffer, resume: ResumeDocument, config: RenderConfig) -> None:
    if not resume.awards:
        return

    _write_section_heading(buffer, "awards")

    for entry in resume.awards:
        header = join_nonblank([entry.title, entry.awarder], TITLE_SEPARATOR)
        if header:
            buffer.write_heading(3, md(header))
        if entry.date:
            buffer.write_line(md(entry.date))
        buffer.write_paragraph(entry.summary)
        buffer.write_line()


def render_certificates(buffer: MarkdownLineBuffer, resume: ResumeDocument, config: RenderConfig) -> None:
    """
    Render certificates as a two-level list.

        - [Name](url) — Issuer
          - 2021-05
    """
    if not resume.certificates:
        return

    _write_section_heading(buffer, "certificates")

    wrote_any = False
    for entry in resume.certificates:
        header = join_nonblank([link_label(entry.name, entry.url), entry.issuer], TITLE_SEPARATOR)
        if not entry.name and entry.url:
            header = _with_url_suffix(header, entry.url)
        if not header:
            continue

        buffer.write_line(f"- {md(header)}")
        if entry.date:
            buffer.write_line(f"  - {md(entry.date)}")
        wrote_any = True

    if wrote_any:
        buffer.write_line()


def render_publications(buffer: MarkdownLineBuffer, resume: ResumeDocument, config: RenderConfig) -> None:
    if not resume.publications:
        return

    _write_section_heading(buffer, "publications")

    for entry in resume.publications:
        header = join_nonblank([entry.name, entry.publisher], TITLE_SEPARATOR)
        if entry.url:
            header = _with_url_suffix(header, entry.url)
        if header:
            buffer.write_heading(3, md(header))
        if entry.release_date:
            buffer.write_line(md(entry.release_date))
        buffer.write_paragraph(entry.summary)
        buffer.write_line()


def render_references(buffer: MarkdownLineBuffer, resume: ResumeDocument, config: RenderConfig) -> None:
    if not resume.references:
        return

    _write_section_heading(buffer, "references")

    for entry in resume.references:
        if entry.name:
            buffer.write_heading(3, md(entry.name))
        buffer.write_paragraph(entry.reference)
        buffer.write_line()

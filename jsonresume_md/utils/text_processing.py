"""
Text processing utilities for Markdown output.

Blank detection, whitespace normalization, joining, link construction and
date-range formatting shared by all section renderers.
"""

import re
from typing import Any, Iterable, Optional

_LINE_BREAKS = re.compile(r"\r\n?")
_INLINE_SPACES = re.compile(r"[\t\u00a0]+")
_LINE_RUNS = re.compile(r"[ \t]*[\r\n]+[ \t]*")
_URL_SCHEME = re.compile(r"^https?://", re.IGNORECASE)

DEFAULT_DATE_SEPARATOR = " → "


def is_present(value: Any) -> bool:
    """True only for strings that are non-empty after stripping whitespace."""
    return isinstance(value, str) and value.strip() != ""


def clean_text(value: Any) -> Optional[str]:
    """Return the trimmed string if present, else None."""
    if is_present(value):
        return value.strip()
    return None


def normalize_markdown_text(text: Any) -> str:
    """
    Normalize free text so it cannot break the line-based Markdown layout.

    Converts CRLF and lone CR to LF, and collapses runs of tabs and no-break
    spaces to a single space. Markdown syntax characters are left untouched,
    since entries may legitimately contain emphasis or links.

    Args:
        text: Text to normalize (None becomes "")

    Returns:
        Normalized text
    """
    out = "" if text is None else str(text)
    out = _LINE_BREAKS.sub("\n", out)
    return _INLINE_SPACES.sub(" ", out)


def single_line(text: Any) -> str:
    """
    Collapse every run of line breaks (and the spaces around it) to one space.

    Example:
        >>> single_line("Alex\\n\\n#### Doe")
        'Alex #### Doe'
    """
    return _LINE_RUNS.sub(" ", "" if text is None else str(text))


def join_nonblank(parts: Iterable[Any], sep: str) -> str:
    """
    Join the present parts with a separator.

    Args:
        parts: Candidate values; non-strings and blank strings are dropped
        sep: Separator placed between surviving parts

    Returns:
        Joined string of trimmed parts, or "" if none survive

    Example:
        >>> join_nonblank(["Berlin", "  ", None, "Germany"], ", ")
        'Berlin, Germany'
    """
    return sep.join(part.strip() for part in parts if is_present(part))


def display_url(url: Any) -> str:
    """
    Shorten a URL for use as link text.

    Strips a leading http:// or https:// (case-insensitive) and one trailing
    slash. The link target should always keep the original URL.

    Example:
        >>> display_url("https://example.dev/")
        'example.dev'
    """
    trimmed = "" if url is None else str(url).strip()
    if not trimmed:
        return ""
    trimmed = _URL_SCHEME.sub("", trimmed)
    if trimmed.endswith("/"):
        trimmed = trimmed[:-1]
    return trimmed


def link_label(label: Any, url: Any) -> str:
    """
    Build a Markdown link, or the bare label when there is no URL.

    Returns "" when the label itself is absent.
    """
    if not is_present(label):
        return ""
    clean_label = label.strip()
    if is_present(url):
        return f"[{clean_label}]({url.strip()})"
    return clean_label


def format_date_range(
    start: Any,
    end: Any,
    present_label: str,
    sep: str = DEFAULT_DATE_SEPARATOR,
) -> str:
    """
    Format a start/end date pair.

    An open-ended range (start without end) gets present_label as its end.
    Without a start date nothing is rendered, whatever the end date says.

    Args:
        start: Start date text (e.g. "2020-01")
        end: End date text
        present_label: Locale-dependent label for ongoing ranges
        sep: Separator between start and end

    Returns:
        Formatted range such as "2020-01 → present", or ""
    """
    start_value = clean_text(start)
    if start_value is None:
        return ""
    end_value = clean_text(end) or present_label
    return join_nonblank([start_value, end_value], sep)

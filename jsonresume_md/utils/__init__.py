"""
Shared utilities for jsonresume_md.

Common functionality used across contexts:
- Defensive field access
- Text processing (blank detection, normalization, links, date ranges)
- Localization (present label, country names)
- Logger configuration
"""

from jsonresume_md.utils.field_access import as_list, as_mapping, get_path
from jsonresume_md.utils.localization import Locale, country_name, present_label, resolve_locale
from jsonresume_md.utils.text_processing import (
    display_url,
    format_date_range,
    is_present,
    join_nonblank,
    link_label,
    normalize_markdown_text,
    single_line,
)

__all__ = [
    "as_list",
    "as_mapping",
    "get_path",
    "Locale",
    "country_name",
    "present_label",
    "resolve_locale",
    "display_url",
    "format_date_range",
    "is_present",
    "join_nonblank",
    "link_label",
    "normalize_markdown_text",
    "single_line",
]

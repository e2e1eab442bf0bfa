"""
Localization Utilities

The renderer knows exactly two locales: English (default) and German. The
locale drives the label used for open-ended date ranges and the language of
resolved country names.
"""

import re
from enum import Enum
from typing import Any, Optional, Protocol

import babel
from loguru import logger

from jsonresume_md.utils.text_processing import is_present

# ISO 3166-1 alpha-2 or UN M49 numeric; "ZZ" is CLDR's placeholder for an unknown region
_REGION_CODE = re.compile(r"[A-Z]{2}|[0-9]{3}")
_UNKNOWN_REGION = "ZZ"

PRESENT_LABELS = {
    "en": "present",
    "de": "heute",
}


class Locale(str, Enum):
    """Supported output locales."""

    EN = "en"
    DE = "de"


def resolve_locale(value: Any) -> Locale:
    """
    Collapse an arbitrary locale setting to one of the supported locales.

    "de" (case-insensitive, surrounding whitespace ignored) selects German.
    Anything else, including None and blank strings, selects English.
    """
    if isinstance(value, Locale):
        return value
    if not is_present(value):
        return Locale.EN
    return Locale.DE if value.strip().lower() == Locale.DE.value else Locale.EN


def present_label(locale: Locale) -> str:
    """Label substituted for a missing end date ("present" / "heute")."""
    return PRESENT_LABELS[resolve_locale(locale).value]


class CountryNameResolver(Protocol):
    """Strategy for turning ISO 3166 region codes into display names."""

    def region_name(self, code: str, locale: Locale) -> Optional[str]:
        ...


class BabelCountryNameResolver:
    """Resolve region names from Babel's CLDR territory data."""

    def region_name(self, code: str, locale: Locale) -> Optional[str]:
        if code == _UNKNOWN_REGION or not _REGION_CODE.fullmatch(code):
            return None
        territories = babel.Locale.parse(resolve_locale(locale).value).territories
        return territories.get(code)


class RawCodeResolver:
    """Resolver for environments without region-name data: always defers to the code."""

    def region_name(self, code: str, locale: Locale) -> Optional[str]:
        return None


DEFAULT_COUNTRY_RESOLVER = BabelCountryNameResolver()


def country_name(
    code: Any,
    locale: Locale = Locale.EN,
    resolver: Optional[CountryNameResolver] = None,
) -> str:
    """
    Resolve a two-letter country code to a localized country name.

    Falls back to the upper-cased code when the resolver has no name for it or
    fails in any way. Never raises.

    Args:
        code: Region code such as "DE" (case-insensitive)
        locale: Output locale
        resolver: Name resolution strategy (default: Babel/CLDR)

    Returns:
        Country name (e.g. "Germany" / "Deutschland"), the upper-cased code, or
        "" when no code was given

    Example:
        >>> country_name("de", Locale.DE)
        'Deutschland'
        >>> country_name("zz")
        'ZZ'
    """
    if not is_present(code):
        return ""
    region = code.strip().upper()
    if resolver is None:
        resolver = DEFAULT_COUNTRY_RESOLVER

    try:
        name = resolver.region_name(region, resolve_locale(locale))
    except Exception as e:
        logger.debug(f"Region name lookup failed for {region!r}: {e}")
        return region

    if is_present(name) and name.strip() != region:
        return name.strip()
    return region

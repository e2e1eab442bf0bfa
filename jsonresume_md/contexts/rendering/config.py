"""
Render Configuration

Explicit configuration passed into render(). The locale used to be a
process-wide environment flag; it is now a field of RenderConfig, and the
environment is only consulted by RenderConfig.from_env().

Config files are YAML, loaded with OmegaConf:

    locale: de
    date_separator: " → "
    education_date_separator: " - "
"""

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

from dotenv import load_dotenv
from omegaconf import OmegaConf

from jsonresume_md.contexts.rendering.exceptions import RenderConfigError
from jsonresume_md.utils.localization import (
    DEFAULT_COUNTRY_RESOLVER,
    CountryNameResolver,
    Locale,
    present_label,
    resolve_locale,
)
from jsonresume_md.utils.text_processing import DEFAULT_DATE_SEPARATOR

load_dotenv()

LOCALE_ENV_VAR = "JSONRESUME_THEME_MARKDOWN_COUNTRY_LANG"
EDUCATION_DATE_SEPARATOR = " - "

SEPARATOR_KEYS = {"date_separator", "education_date_separator"}
CONFIG_FILE_KEYS = {"locale"} | SEPARATOR_KEYS


@dataclass(frozen=True)
class RenderConfig:
    """
    Settings for a single render pass.

    Attributes:
        locale: Output locale (English or German)
        date_separator: Separator for work/project/volunteer date ranges
        education_date_separator: Separator for education date ranges
        country_resolver: Strategy resolving country codes to names
    """

    locale: Locale = Locale.EN
    date_separator: str = DEFAULT_DATE_SEPARATOR
    education_date_separator: str = EDUCATION_DATE_SEPARATOR
    country_resolver: CountryNameResolver = field(default=DEFAULT_COUNTRY_RESOLVER, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "locale", resolve_locale(self.locale))

    @property
    def present_label(self) -> str:
        return present_label(self.locale)

    @classmethod
    def from_env(cls) -> "RenderConfig":
        """Build a config from the environment (read on every call)."""
        return cls(locale=resolve_locale(os.getenv(LOCALE_ENV_VAR)))


def load_render_config(
    config_path: Optional[Union[str, Path]] = None, **overrides: Any
) -> RenderConfig:
    """
    Load a RenderConfig from a YAML file, with optional keyword overrides.

    Starts from RenderConfig.from_env(), applies the file's values, then the
    overrides (None-valued overrides are ignored).

    Args:
        config_path: Optional path to a YAML config file
        **overrides: Field values taking precedence over the file

    Returns:
        RenderConfig instance

    Raises:
        RenderConfigError: If the file cannot be loaded, is not a mapping,
            contains unknown keys, or gives a separator that is not a string

    Examples:
        >>> load_render_config(locale="de").present_label
        'heute'
    """
    config = RenderConfig.from_env()
    values: Dict[str, Any] = {}

    if config_path is not None:
        try:
            loaded = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)
        except Exception as e:
            raise RenderConfigError(f"Could not load render config {config_path}: {e}") from e

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise RenderConfigError(f"Render config {config_path} must be a mapping")

        unknown = set(loaded) - CONFIG_FILE_KEYS
        if unknown:
            raise RenderConfigError(
                f"Unknown render config keys: {sorted(unknown)}. "
                f"Valid keys are: {sorted(CONFIG_FILE_KEYS)}"
            )
        values.update(loaded)

    values.update({key: value for key, value in overrides.items() if value is not None})

    for key in SEPARATOR_KEYS & set(values):
        if not isinstance(values[key], str):
            raise RenderConfigError(
                f"Render config {key} must be a string, got {type(values[key]).__name__}"
            )

    if "locale" in values:
        values["locale"] = resolve_locale(values["locale"])

    return replace(config, **values)

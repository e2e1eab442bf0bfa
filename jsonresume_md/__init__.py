"""
jsonresume_md - JSON Resume to Markdown

Converts a JSON Resume document (basics, work, education, skills, ...) into a
human-readable Markdown document.

Architecture:
- Intake Context: Resume file loading and parsing into a typed model
- Rendering Context: Section templates, line buffer and pipeline driver
"""

from loguru import logger

logger.disable("jsonresume_md")

from jsonresume_md.contexts.rendering import RenderConfig, load_render_config, render  # noqa: E402
from jsonresume_md.utils.localization import Locale  # noqa: E402

__version__ = "0.1.0"

__all__ = ["render", "RenderConfig", "load_render_config", "Locale"]

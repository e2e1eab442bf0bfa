"""
Rendering Context

Responsibilities:
- Renders parsed resume documents to Markdown
- Owns the line buffer, the per-section templates and the render configuration

Owns: Markdown layout, section order, locale-dependent labels
Never: Reads files or validates resume content
"""

from jsonresume_md.contexts.rendering.config import RenderConfig, load_render_config
from jsonresume_md.contexts.rendering.exceptions import RenderConfigError, ResumeLoadError
from jsonresume_md.contexts.rendering.renderer import SECTION_RENDERERS, render

__all__ = [
    "render",
    "SECTION_RENDERERS",
    "RenderConfig",
    "load_render_config",
    "RenderConfigError",
    "ResumeLoadError",
]

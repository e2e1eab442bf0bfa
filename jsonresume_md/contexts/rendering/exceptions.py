"""Custom exceptions for loading resumes and render configuration.

render() itself never raises on malformed resume content; these exceptions
only surface at the file-handling edges (CLI, config files).
"""

from pathlib import Path
from typing import Optional


class ResumeLoadError(Exception):
    """
    Exception raised when a resume file cannot be read or decoded.

    Attributes:
        message: Error description
        path: Path of the resume file that failed to load
        original_error: The underlying decode/IO error, if any
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.path = path
        self.original_error = original_error

        parts = [message]

        if path:
            parts.append(f"\nResume file: {path}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))


class RenderConfigError(ValueError):
    """
    Exception raised when a render configuration file is invalid.

    Raised for unreadable YAML, a non-mapping root, or unknown config keys.
    """

    pass

"""
Markdown line buffer.

Ordered, append-only accumulation of output lines for one render pass, with
helpers for the handful of Markdown constructs the renderers use.
"""

from typing import Any, Iterable, List

from jsonresume_md.utils.text_processing import is_present, normalize_markdown_text, single_line


class MarkdownLineBuffer:
    """
    Append-only list of Markdown lines.

    Helpers that receive free text trim and normalize it (see
    normalize_markdown_text) and silently skip blank values.
    """

    def __init__(self):
        self.lines: List[str] = []

    def __len__(self) -> int:
        return len(self.lines)

    def write_line(self, text: str = "") -> None:
        """Append one line (default: a blank line)."""
        self.lines.append(text)

    def write_heading(self, level: int, title: str) -> None:
        """
        Append an ATX heading, e.g. level 2 -> "## title".

        Headings are single-line: line breaks in title collapse to one space.
        """
        self.write_line(f"{'#' * level} {single_line(title)}")

    def write_key_value(self, label: str, value: Any) -> None:
        """Append "- **label**: value" if value is present; otherwise do nothing."""
        if is_present(value):
            self.write_line(f"- **{label}**: {normalize_markdown_text(value.strip())}")

    def write_bullets(self, items: Iterable[Any]) -> bool:
        """
        Append one "- item" line per present item.

        Blank items are skipped. A single blank line follows the list only if
        at least one bullet was written, so an empty list leaves no trace.

        Args:
            items: Candidate bullet texts

        Returns:
            True if any bullet was written
        """
        wrote_any = False
        for item in items:
            if is_present(item):
                self.write_line(f"- {normalize_markdown_text(item.strip())}")
                wrote_any = True
        if wrote_any:
            self.write_line()
        return wrote_any

    def write_paragraph(self, text: Any) -> None:
        """Append a blank line followed by text, if text is present."""
        if is_present(text):
            self.write_line()
            self.write_line(normalize_markdown_text(text.strip()))

    def to_markdown(self) -> str:
        """
        Serialize the buffer.

        Trailing whitespace is stripped from every physical line and from the
        end of the document, which then ends with exactly one newline.
        """
        text = "\n".join(self.lines)
        text = "\n".join(line.rstrip() for line in text.split("\n"))
        return text.rstrip() + "\n"

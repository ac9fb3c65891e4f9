"""Markdown rendering helpers shared by Qt and web clients.

Prompts and explanations are authored as markdown in the question files.
Both the Qt card and the practice page display the same HTML fragment, so the
rendering lives here rather than in either view.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from markdown_it import MarkdownIt


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts markdown into HTML fragments."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html})
            .enable("table")
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str | None) -> str:
        """Render a markdown string into an HTML fragment."""

        sanitized = (markdown_text or "").strip()
        if not sanitized:
            return "<p><em>No content provided.</em></p>"
        return self._markdown.render(sanitized)


renderer = MarkdownRenderer()
# Shared instance; MarkdownIt is safe to reuse for read-only renders from both
# the Qt thread and the API thread.

from __future__ import annotations

import enum


class ParseMode(str, enum.Enum):
    """Formatting syntax applied by the server to a text or caption."""

    MARKDOWN = "Markdown"
    MARKDOWN_V2 = "MarkdownV2"
    HTML = "HTML"

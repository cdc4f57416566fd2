"""HTML fragment to plain text conversion."""

import re

from markdownify import markdownify


def clean_html_text(html: str) -> str:
    """Strip tags, decode entities and collapse whitespace in an HTML fragment."""
    if not html or not html.strip():
        return ""
    text = markdownify(
        html,
        convert=[],
        escape_asterisks=False,
        escape_underscores=False,
        escape_misc=False,
    )
    return re.sub(r"\s+", " ", text).strip()

"""Render markdown to HTML and sanitize the result."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

import markdown

from mdsanitize.core.defaults import OptionsInput
from mdsanitize.sanitize import sanitize_markdown


def render_markdown(
    text: Optional[str],
    options: OptionsInput = None,
    *,
    strict: bool = False,
    extensions: Sequence[str] = ("extra",),
) -> str:
    """Convert markdown content to HTML (sanitized against XSS)."""
    if not text:
        return ""
    html = markdown.markdown(text, extensions=list(extensions))
    return sanitize_markdown(html, options, strict=strict)

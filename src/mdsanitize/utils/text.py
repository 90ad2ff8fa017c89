"""Text and tag formatting helpers."""

from __future__ import annotations

from collections.abc import Mapping
from html import escape


def escape_text(text: str) -> str:
    """Escape character data. Quotes are left alone outside attributes."""
    return escape(text, quote=False)


def escape_attribute(value: str) -> str:
    return escape(value, quote=True)


def format_start_tag(tag: str, attrs: Mapping[str, str], self_closing: bool = False) -> str:
    """Serialize a start tag. Empty values are written as bare attributes."""
    parts = [tag]
    for name, value in attrs.items():
        if value:
            parts.append(f'{name}="{escape_attribute(value)}"')
        else:
            parts.append(name)
    if self_closing:
        parts.append("/")
    return f"<{' '.join(parts)}>"


def format_end_tag(tag: str) -> str:
    return f"</{tag}>"

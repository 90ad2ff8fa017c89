"""XSS sanitization for markdown-to-HTML output."""

from __future__ import annotations

from mdsanitize.core.defaults import DEFAULTS, OptionsInput, resolve_options
from mdsanitize.sanitizer.handler import SanitizingHandler
from mdsanitize.sanitizer.parser import tokenize


def sanitize_markdown(html: str, options: OptionsInput = None, strict: bool = False) -> str:
    """Sanitize an HTML fragment against an allowlist.

    ``options`` may be a ``SanitizeOptions`` or a mapping of its fields. Unless
    ``strict`` is set they are merged over :data:`DEFAULTS`, one field at a
    time. Disallowed markup is dropped silently; only an exception raised by
    the ``filter`` callback propagates.
    """
    configuration = resolve_options(options, strict=strict)
    buffer: list[str] = []
    tokenize(html or "", SanitizingHandler(buffer, configuration))
    return "".join(buffer)


sanitize_markdown.defaults = DEFAULTS

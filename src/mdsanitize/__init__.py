"""Allowlist sanitizer for HTML rendered from user-authored markdown."""

from mdsanitize.core.defaults import DEFAULTS, resolve_options
from mdsanitize.core.models import SanitizeOptions, TagRules, TagToken
from mdsanitize.sanitize import sanitize_markdown

__version__ = "1.0.0"

__all__ = [
    "DEFAULTS",
    "SanitizeOptions",
    "TagRules",
    "TagToken",
    "resolve_options",
    "sanitize_markdown",
]

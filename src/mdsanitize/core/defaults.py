"""Built-in sanitizer defaults and option resolution."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Optional, Union

from mdsanitize.core.models import SanitizeOptions

DEFAULTS: Mapping[str, Any] = MappingProxyType({
    "allowed_tags": (
        "a", "abbr", "article", "b", "blockquote", "br", "caption", "code",
        "del", "details", "div", "em",
        "h1", "h2", "h3", "h4", "h5", "h6",
        "hr", "i", "img", "ins", "kbd", "li", "main", "mark",
        "ol", "p", "pre", "section", "span", "strike", "strong",
        "sub", "summary", "sup",
        "table", "tbody", "td", "th", "thead", "tr",
        "u", "ul",
    ),
    "allowed_attributes": MappingProxyType({
        "a": ("href", "name", "target", "title", "aria-label"),
        "img": ("src", "alt", "title", "aria-label"),
    }),
    "allowed_classes": MappingProxyType({}),
    "allowed_schemes": ("http", "https", "mailto"),
    "url_attributes": ("href", "src"),
    "filter": None,
})

OptionsInput = Union[SanitizeOptions, Mapping[str, Any], None]


def _provided(options: OptionsInput) -> dict[str, Any]:
    """Return only the option fields the caller actually set."""
    if options is None:
        return {}
    if isinstance(options, SanitizeOptions):
        return {name: getattr(options, name) for name in options.model_fields_set}
    return dict(options)


def resolve_options(options: OptionsInput = None, strict: bool = False) -> SanitizeOptions:
    """Build the options for one sanitize call.

    With ``strict`` the given options are used as they are and anything left
    out allows nothing. Otherwise each given field replaces the default field
    wholesale (a shallow merge, no per-tag merging).
    """
    if strict:
        if isinstance(options, SanitizeOptions):
            return options
        return SanitizeOptions.model_validate(_provided(options))

    merged = dict(DEFAULTS)
    merged.update(_provided(options))
    return SanitizeOptions.model_validate(merged)


def default_options() -> SanitizeOptions:
    return resolve_options()


def describe(options: SanitizeOptions) -> dict[str, Optional[str]]:
    """Flatten options into display strings, one entry per field."""
    def names(values) -> str:
        return " ".join(sorted(values)) or "-"

    def rules(rule_set) -> str:
        mapping = rule_set.to_mapping()
        if not mapping:
            return "-"
        return "; ".join(f"{tag}: {' '.join(values) or '-'}" for tag, values in sorted(mapping.items()))

    return {
        "allowed_tags": names(options.allowed_tags),
        "allowed_attributes": rules(options.allowed_attributes),
        "allowed_classes": rules(options.allowed_classes),
        "allowed_schemes": names(options.allowed_schemes),
        "url_attributes": names(options.url_attributes),
        "filter": getattr(options.filter, "__name__", repr(options.filter)) if options.filter else None,
    }

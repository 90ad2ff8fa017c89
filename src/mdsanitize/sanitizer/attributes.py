"""Attribute allowlisting for admitted tags."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from mdsanitize.core.models import SanitizeOptions
from mdsanitize.sanitizer.urls import is_safe_url

logger = logging.getLogger(__name__)


def filter_classes(value: str, allowed: frozenset[str]) -> str:
    return " ".join(token for token in value.split() if token in allowed)


def filter_attributes(tag: str, attrs: Mapping[str, str], options: SanitizeOptions) -> dict[str, str]:
    """Reduce a tag's raw attributes to the ones the options admit.

    Surviving attributes keep their original order. ``class`` follows its own
    rules: kept verbatim when it is an allowed attribute name, otherwise
    trimmed to the allowed class tokens when the tag has a class entry.
    """
    admitted = options.allowed_attributes.for_tag(tag)
    kept: dict[str, str] = {}

    for name, value in attrs.items():
        if name == "class" and name not in admitted:
            if options.allowed_classes.covers(tag):
                classes = filter_classes(value, options.allowed_classes.for_tag(tag))
                if classes:
                    kept[name] = classes
            continue

        if name not in admitted:
            continue

        if name in options.url_attributes and not is_safe_url(value, options.allowed_schemes):
            logger.debug("Dropping unsafe %s=%r on <%s>", name, value, tag)
            continue

        kept[name] = value

    return kept

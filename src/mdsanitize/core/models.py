"""Pydantic models for sanitizer options and application config."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

WILDCARD = "*"


# --- Filter hook ---

@dataclass(frozen=True)
class TagToken:
    """A tag occurrence as handed to the filter callback.

    ``attrs`` is the raw attribute mapping, before any attribute filtering.
    """

    tag: str
    attrs: dict[str, str] = field(default_factory=dict)


# --- Allowlist rules ---

class TagRules(BaseModel):
    """Per-tag name sets with an explicit catch-all entry.

    Built from plain mappings such as ``{"div": ["id"], "*": ["title"]}``;
    the ``*`` key lands in ``wildcard`` and is unioned with every tag at
    lookup time.
    """

    model_config = ConfigDict(frozen=True)

    by_tag: dict[str, frozenset[str]] = Field(default_factory=dict)
    wildcard: Optional[frozenset[str]] = None

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "TagRules":
        by_tag: dict[str, frozenset[str]] = {}
        wildcard = None
        for key, names in mapping.items():
            values = frozenset(_as_names(names))
            if key == WILDCARD:
                wildcard = values
            else:
                by_tag[key] = values
        return cls(by_tag=by_tag, wildcard=wildcard)

    def covers(self, tag: str) -> bool:
        """True when the tag or the wildcard has an entry, even an empty one."""
        return tag in self.by_tag or self.wildcard is not None

    def for_tag(self, tag: str) -> frozenset[str]:
        names = self.by_tag.get(tag, frozenset())
        if self.wildcard:
            return names | self.wildcard
        return names

    def to_mapping(self) -> dict[str, list[str]]:
        mapping = {tag: sorted(names) for tag, names in self.by_tag.items()}
        if self.wildcard is not None:
            mapping[WILDCARD] = sorted(self.wildcard)
        return mapping


def _as_names(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return value.split()
    return [str(v) for v in value]


class SanitizeOptions(BaseModel):
    """Resolved sanitizer configuration. Everything left unset allows nothing."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    allowed_tags: frozenset[str] = frozenset()
    allowed_attributes: TagRules = Field(default_factory=TagRules)
    allowed_classes: TagRules = Field(default_factory=TagRules)
    allowed_schemes: frozenset[str] = frozenset()
    url_attributes: frozenset[str] = frozenset({"href", "src"})
    filter: Optional[Callable[[TagToken], Any]] = None

    @field_validator("allowed_tags", "allowed_schemes", "url_attributes", mode="before")
    @classmethod
    def _coerce_names(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return frozenset(_as_names(value))
        return value

    @field_validator("allowed_schemes")
    @classmethod
    def _lowercase_schemes(cls, value: frozenset[str]) -> frozenset[str]:
        return frozenset(scheme.lower() for scheme in value)

    @field_validator("allowed_attributes", "allowed_classes", mode="before")
    @classmethod
    def _coerce_rules(cls, value: Any) -> Any:
        if value is None:
            return TagRules()
        if isinstance(value, Mapping):
            return TagRules.from_mapping(value)
        return value


# --- Config models ---

class MarkdownConfig(BaseModel):
    extensions: list[str] = Field(default_factory=lambda: ["extra"])


class AppConfig(BaseModel):
    options: SanitizeOptions = Field(default_factory=SanitizeOptions)
    strict: bool = False
    log_level: str = "WARNING"
    markdown: MarkdownConfig = Field(default_factory=MarkdownConfig)

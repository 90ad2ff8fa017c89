"""URL scheme checks for URL-bearing attributes."""

from __future__ import annotations

from collections.abc import Collection

# A scheme ends at the first ":" and cannot contain any of these.
_NOT_IN_SCHEME = ("/", "?", "#")


def is_safe_url(value: str, allowed_schemes: Collection[str]) -> bool:
    """Classify a URL as safe to emit.

    Fragments, absolute paths and protocol-relative references are safe, as is
    anything without a ``:``. A ``:`` that comes after a ``/``, ``?`` or ``#``
    belongs to a relative path, query or fragment (``search?q=a:b``), so that
    reference is safe too. Otherwise the text before the first ``:`` must
    match an allowed scheme, ignoring case.
    """
    if not value or value.startswith(("#", "/")):
        return True

    scheme, sep, _ = value.partition(":")
    if not sep or any(ch in scheme for ch in _NOT_IN_SCHEME):
        return True
    scheme = scheme.lower()
    return any(scheme == allowed.lower() for allowed in allowed_schemes)

"""Tokenizer that turns HTML into balanced tag/text events.

``HTMLParser`` reports tags as written. This layer adds the guarantees the
sanitizing handler relies on: void elements arrive as self-closing events,
stray end tags are discarded, and every reported open is matched by exactly
one close at the right depth.
"""

from __future__ import annotations

from html.parser import HTMLParser
from typing import Optional, Protocol

VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "param", "source", "track", "wbr",
})


class EventSink(Protocol):
    def open(self, tag: str, attrs: dict[str, str]) -> None: ...

    def self_close(self, tag: str, attrs: dict[str, str]) -> None: ...

    def close(self, tag: str) -> None: ...

    def text(self, chars: str) -> None: ...


def _collect(attrs: list[tuple[str, Optional[str]]]) -> dict[str, str]:
    # First occurrence wins on duplicate names, as in HTML.
    collected: dict[str, str] = {}
    for name, value in attrs:
        collected.setdefault(name, value or "")
    return collected


class Tokenizer(HTMLParser):
    """Feeds parse events for one document into an :class:`EventSink`."""

    def __init__(self, sink: EventSink) -> None:
        super().__init__(convert_charrefs=True)
        self.sink = sink
        self.open_elements: list[str] = []

    def handle_starttag(self, tag: str, attrs: list[tuple[str, Optional[str]]]) -> None:
        if tag in VOID_ELEMENTS:
            self.sink.self_close(tag, _collect(attrs))
            return
        self.open_elements.append(tag)
        self.sink.open(tag, _collect(attrs))

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, Optional[str]]]) -> None:
        self.sink.self_close(tag, _collect(attrs))

    def handle_endtag(self, tag: str) -> None:
        if tag not in self.open_elements:
            return
        while self.open_elements:
            name = self.open_elements.pop()
            self.sink.close(name)
            if name == tag:
                break

    def handle_data(self, data: str) -> None:
        if data:
            self.sink.text(data)

    def close(self) -> None:
        super().close()
        while self.open_elements:
            self.sink.close(self.open_elements.pop())


def tokenize(html: str, sink: EventSink) -> None:
    """Run ``html`` through the tokenizer, delivering every event to ``sink``."""
    tokenizer = Tokenizer(sink)
    tokenizer.feed(html)
    tokenizer.close()

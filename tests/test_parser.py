"""Tests for the balancing tokenizer."""

from __future__ import annotations

from mdsanitize.sanitizer.parser import tokenize


class TestTokenize:
    """Tests for tokenize event output."""

    def test_nested_elements(self, sink) -> None:
        """Open, text and close events arrive in document order."""
        tokenize("<div>bar<span>foo</span></div>", sink)
        assert sink.events == [
            ("open", "div", {}),
            ("text", "bar"),
            ("open", "span", {}),
            ("text", "foo"),
            ("close", "span"),
            ("close", "div"),
        ]

    def test_void_elements_are_self_closing(self, sink) -> None:
        """A void element without a slash never opens a frame."""
        tokenize("<p>a<br>b</p>", sink)
        assert sink.events == [
            ("open", "p", {}),
            ("text", "a"),
            ("self_close", "br", {}),
            ("text", "b"),
            ("close", "p"),
        ]

    def test_explicit_self_closing_syntax(self, sink) -> None:
        """The slash form is reported as self-closing."""
        tokenize('foo <img a="a"/> bar', sink)
        assert sink.events == [
            ("text", "foo "),
            ("self_close", "img", {"a": "a"}),
            ("text", " bar"),
        ]

    def test_stray_end_tag_is_discarded(self, sink) -> None:
        """An end tag with nothing to close produces no event."""
        tokenize("a</span>b", sink)
        assert [e for e in sink.events if e[0] != "text"] == []

    def test_end_tag_closes_intervening_elements(self, sink) -> None:
        """Closing an outer element closes the ones opened inside it first."""
        tokenize("<div><span>x</div>", sink)
        assert sink.events[-2:] == [("close", "span"), ("close", "div")]

    def test_unclosed_elements_closed_at_end(self, sink) -> None:
        """Elements left open are closed innermost first."""
        tokenize("<div><em>x", sink)
        assert sink.events == [
            ("open", "div", {}),
            ("open", "em", {}),
            ("text", "x"),
            ("close", "em"),
            ("close", "div"),
        ]

    def test_attribute_normalization(self, sink) -> None:
        """Names are lowercased, bare values become empty, first duplicate wins."""
        tokenize('<DIV CLASS="x" hidden id="1" id="2"></DIV>', sink)
        assert sink.events[0] == ("open", "div", {"class": "x", "hidden": "", "id": "1"})

    def test_entities_are_decoded(self, sink) -> None:
        """Character references reach the sink decoded."""
        tokenize('<a title="a &amp; b">&lt;x&gt;</a>', sink)
        assert sink.events[0] == ("open", "a", {"title": "a & b"})
        assert ("text", "<x>") in sink.events

    def test_comments_are_dropped(self, sink) -> None:
        """Comments and doctypes produce no events."""
        tokenize("<!DOCTYPE html><!-- hidden -->shown", sink)
        assert sink.events == [("text", "shown")]

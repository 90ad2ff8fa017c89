"""Event handler that decides, token by token, what reaches the output.

The handler mirrors the open elements on a stack of frames. A frame that
fails admission is suppressed, and suppression is inherited by every frame
pushed above it, so one rejected ancestor blanks out its whole subtree even
when descendants are allowed on their own. Nothing is written for a
suppressed subtree, so no output ever has to be taken back.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from mdsanitize.core.models import SanitizeOptions, TagToken
from mdsanitize.sanitizer.attributes import filter_attributes
from mdsanitize.sanitizer.parser import VOID_ELEMENTS
from mdsanitize.utils.text import escape_text, format_end_tag, format_start_tag

logger = logging.getLogger(__name__)


@dataclass
class Frame:
    tag: str
    admitted: bool
    suppressed: bool


class SanitizingHandler:
    """Consumes tokenizer events and appends admitted markup to ``buffer``."""

    def __init__(self, buffer: list[str], options: SanitizeOptions) -> None:
        self.buffer = buffer
        self.options = options
        self.stack: list[Frame] = []

    def _inside_suppressed(self) -> bool:
        return bool(self.stack) and self.stack[-1].suppressed

    def _admit(self, tag: str, attrs: Mapping[str, str]) -> bool:
        if tag not in self.options.allowed_tags:
            logger.debug("Dropping disallowed <%s>", tag)
            return False
        hook = self.options.filter
        if hook is not None and not hook(TagToken(tag=tag, attrs=dict(attrs))):
            logger.debug("Filter vetoed <%s>", tag)
            return False
        return True

    def _start(self, tag: str, attrs: Mapping[str, str], self_closing: bool) -> None:
        if self._inside_suppressed():
            if not self_closing:
                self.stack.append(Frame(tag, admitted=False, suppressed=True))
            return

        if not self._admit(tag, attrs):
            if not self_closing:
                self.stack.append(Frame(tag, admitted=False, suppressed=True))
            return

        kept = filter_attributes(tag, attrs, self.options)
        if self_closing and tag not in VOID_ELEMENTS:
            # Only void elements may be written in "<tag />" form.
            self.buffer.append(format_start_tag(tag, kept) + format_end_tag(tag))
        else:
            self.buffer.append(format_start_tag(tag, kept, self_closing=self_closing))
        if not self_closing:
            self.stack.append(Frame(tag, admitted=True, suppressed=False))

    # --- Tokenizer events ---

    def open(self, tag: str, attrs: Mapping[str, str]) -> None:
        self._start(tag, attrs, self_closing=False)

    def self_close(self, tag: str, attrs: Mapping[str, str]) -> None:
        self._start(tag, attrs, self_closing=True)

    def close(self, tag: str) -> None:
        # The tokenizer only reports closes for elements it opened.
        frame = self.stack.pop()
        if frame.admitted:
            self.buffer.append(format_end_tag(frame.tag))

    def text(self, chars: str) -> None:
        if not self._inside_suppressed():
            self.buffer.append(escape_text(chars))

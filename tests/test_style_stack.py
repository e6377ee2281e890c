# test_style_stack.py

import pytest
from io import StringIO
from unittest.mock import Mock

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from termdown.errors import StructuralError
from termdown.events import Tag, TagKind
from termdown.style.definitions import PLAIN, StyleAttributes
from termdown.style.stack import (
    CodeContext, HeadingContext, LinkContext, ListContext, ParagraphContext,
    StrongContext, StyleStack, closes,
)


class MockLogger:
    def __init__(self):
        self.debug = Mock()
        self.info = Mock()
        self.warning = Mock()
        self.error = Mock()


class TestStyleStack:
    """Push, verified pop and text dispatch."""

    def setup_method(self):
        self.code_renderer = Mock()
        self.logger = MockLogger()
        self.stack = StyleStack(self.code_renderer, logger=self.logger)
        self.sink = StringIO()

    def test_starts_empty(self):
        assert len(self.stack) == 0
        assert self.stack.top is None
        assert self.stack.inherited_style() == PLAIN

    def test_push_and_pop_matching_tags(self):
        self.stack.push_start(Tag(TagKind.PARAGRAPH))
        self.stack.push_start(Tag(TagKind.STRONG))
        assert [c.kind for c in self.stack.contexts] == [TagKind.PARAGRAPH, TagKind.STRONG]

        self.stack.pop_end(Tag(TagKind.STRONG))
        self.stack.pop_end(Tag(TagKind.PARAGRAPH))
        assert len(self.stack) == 0

    def test_mismatched_pop_fails(self):
        self.stack.push_start(Tag(TagKind.PARAGRAPH))
        with pytest.raises(StructuralError, match="Unmatched pair found on stack"):
            self.stack.pop_end(Tag(TagKind.STRONG))
        self.logger.error.assert_called_once()

    def test_pop_on_empty_stack_fails(self):
        with pytest.raises(StructuralError):
            self.stack.pop_end(Tag(TagKind.PARAGRAPH))

    def test_every_supported_kind_pairs_up(self):
        tags = [
            Tag.code_block('rust'), Tag.link('http://example.com'), Tag(TagKind.STRONG),
            Tag(TagKind.EMPHASIS), Tag(TagKind.PARAGRAPH), Tag.list(1), Tag(TagKind.ITEM),
            Tag.heading(2), Tag(TagKind.BLOCK_QUOTE),
        ]
        for tag in tags:
            self.stack.push_start(tag)
        for tag in reversed(tags):
            self.stack.pop_end(tag)
        assert len(self.stack) == 0

    def test_unsupported_tags_are_ignored(self):
        self.stack.push_start(Tag(TagKind.PARAGRAPH))
        self.stack.push_start(Tag(TagKind.STRIKETHROUGH))
        assert len(self.stack) == 1
        self.stack.write_text("gone", self.sink)
        self.stack.pop_end(Tag(TagKind.STRIKETHROUGH))
        assert len(self.stack) == 1
        assert self.logger.debug.call_count == 2
        assert self.sink.getvalue() == "gone"

    def test_paragraph_inherits_strong(self):
        self.stack.push_start(Tag(TagKind.STRONG))
        self.stack.push_start(Tag(TagKind.PARAGRAPH))
        assert self.stack.top == ParagraphContext(style=StyleAttributes(bold=True))

        self.stack.write_text("x", self.sink)
        assert self.sink.getvalue() == "\x1b[1mx\x1b[0m"

    def test_paragraph_without_styled_ancestor_is_plain(self):
        self.stack.push_start(Tag(TagKind.PARAGRAPH))
        self.stack.write_text("plain words", self.sink)
        assert self.sink.getvalue() == "plain words"

    def test_paragraph_takes_nearest_ancestor(self):
        self.stack.push_start(Tag(TagKind.BLOCK_QUOTE))
        self.stack.push_start(Tag(TagKind.EMPHASIS))
        self.stack.push_start(Tag(TagKind.PARAGRAPH))
        assert self.stack.top.style == StyleAttributes(italic=True)

    def test_paragraph_in_block_quote_is_green(self):
        self.stack.push_start(Tag(TagKind.BLOCK_QUOTE))
        self.stack.push_start(Tag(TagKind.PARAGRAPH))
        self.stack.write_text("quoted", self.sink)
        assert self.sink.getvalue() == "\x1b[32mquoted\x1b[0m"

    def test_paragraph_skips_code_context(self):
        self.stack.push_start(Tag(TagKind.STRONG))
        self.stack.push_start(Tag.code_block('python'))
        assert self.stack.inherited_style() == StyleAttributes(bold=True)

    def test_paragraph_in_list_item_is_plain(self):
        self.stack.push_start(Tag(TagKind.STRONG))
        self.stack.push_start(Tag.list())
        self.stack.push_start(Tag(TagKind.ITEM))
        self.stack.push_start(Tag(TagKind.PARAGRAPH))
        assert self.stack.top.style == PLAIN

    def test_link_text(self):
        self.stack.push_start(Tag.link('http://example.com'))
        self.stack.write_text("click", self.sink)
        assert self.sink.getvalue() == "\x1b[32mclick (http://example.com)\x1b[0m"

    def test_link_title_only_when_present(self):
        self.stack.push_start(Tag.link('http://example.com', ''))
        self.stack.push_start(Tag.link('http://example.com', 'Example'))
        first, second = self.stack.contexts
        assert first == LinkContext(style=StyleAttributes(color='green'), url='http://example.com')
        assert first.title is None
        assert second.title == 'Example'

    def test_list_item_text(self):
        self.stack.push_start(Tag.list())
        self.stack.push_start(Tag(TagKind.ITEM))
        self.stack.write_text("one", self.sink)
        assert self.sink.getvalue() == " * one\n"

    def test_list_text_is_dropped(self):
        self.stack.push_start(Tag.list(3))
        self.stack.write_text("ignored", self.sink)
        assert self.sink.getvalue() == ""
        assert self.stack.top == ListContext(style=PLAIN, start=3)

    def test_heading_text_is_dropped(self):
        self.stack.push_start(Tag.heading(2))
        self.stack.write_text("Title", self.sink)
        assert self.sink.getvalue() == ""
        assert self.stack.top == HeadingContext(style=StyleAttributes(bold=True), level=2)

    def test_code_text_goes_to_code_renderer(self):
        self.stack.push_start(Tag.code_block('rust'))
        self.stack.write_text("fn main() {}\n", self.sink)
        self.code_renderer.render.assert_called_once_with("fn main() {}\n", 'rust', self.sink)

    def test_indented_code_leaves_language_to_renderer(self):
        self.stack.push_start(Tag.code_block(None))
        assert self.stack.top == CodeContext(language=None, indented=True)
        self.stack.write_text("x = 1\n", self.sink)
        self.code_renderer.render.assert_called_once_with("x = 1\n", None, self.sink)

    def test_text_without_context_is_a_contract_violation(self):
        with pytest.raises(RuntimeError):
            self.stack.write_text("orphan", self.sink)


class TestCloses:

    def test_same_kind(self):
        assert closes(StrongContext(style=PLAIN), Tag(TagKind.STRONG))

    def test_different_kind(self):
        assert not closes(StrongContext(style=PLAIN), Tag(TagKind.EMPHASIS))

    def test_payload_is_not_compared(self):
        assert closes(CodeContext(language='rust'), Tag.code_block('python'))

# parser.py

from typing import Iterable, Iterator

from markdown_it import MarkdownIt
from markdown_it.token import Token
from mdit_py_plugins.tasklists import tasklists_plugin

from .events import Code, End, Event, Other, Start, Tag, TagKind, Text

# markdown-it open/close token types that map onto a plain tag
SIMPLE_TAGS = {
    'paragraph': TagKind.PARAGRAPH,
    'blockquote': TagKind.BLOCK_QUOTE,
    'list_item': TagKind.ITEM,
    'strong': TagKind.STRONG,
    'em': TagKind.EMPHASIS,
    's': TagKind.STRIKETHROUGH,
}

TASK_CHECKBOX = 'task-list-item-checkbox'
TASK_LIST_MARKER = 'task_list_marker'

class MarkdownParser:
    """
    Turns markdown source into a flat sequence of structural events.

    markdown-it reports containers as *_open/*_close token pairs and keeps
    inline content in the children of `inline` tokens; both levels are
    flattened into one event stream here. Paragraphs that markdown-it hides
    inside tight lists are dropped so the item text lands in the item itself.

    Task list items ("- [ ] todo") report their checkbox as an Other event
    with content '[ ]' or '[x]', followed by the item text without the marker.
    """
    def __init__(self, strikethrough: bool = True, tasklists: bool = True):
        self._md = MarkdownIt('commonmark')
        if strikethrough:
            self._md.enable('strikethrough')
        if tasklists:
            self._md.use(tasklists_plugin)

    def parse(self, source: str) -> Iterator[Event]:
        """Yield the events for `source` in document order."""
        return self._events(self._md.parse(source))

    def _events(self, tokens: Iterable[Token]) -> Iterator[Event]:
        after_marker = False
        for token in tokens:
            if token.type == 'inline':
                yield from self._events(token.children or [])
            elif token.type in ('fence', 'code_block'):
                tag = Tag.code_block(self._fence_language(token) if token.type == 'fence' else None)
                yield Start(tag)
                if token.content:
                    yield Text(token.content)
                yield End(tag)
            elif token.type == 'html_inline' and TASK_CHECKBOX in token.content:
                yield Other(TASK_LIST_MARKER, '[x]' if 'checked=' in token.content else '[ ]')
                after_marker = True
                continue
            elif token.type == 'text':
                text = token.content
                # the plugin leaves the space that followed the marker
                if after_marker and text.startswith(' '):
                    text = text[1:]
                if text:
                    yield Text(text)
            elif token.type == 'code_inline':
                yield Code(token.content)
            elif token.nesting != 0 and not token.hidden:
                tag = self._tag_for(token)
                if tag is None:
                    yield Other(token.type, token.content)
                else:
                    yield Start(tag) if token.nesting == 1 else End(tag)
            elif not token.hidden:
                yield Other(token.type, token.content)
            after_marker = False

    def _tag_for(self, token: Token):
        name = token.type.rsplit('_', 1)[0]
        if name in SIMPLE_TAGS:
            return Tag(SIMPLE_TAGS[name])
        if name == 'heading':
            return Tag.heading(int(token.tag[1:]))
        if name == 'link':
            return Tag.link(str(token.attrGet('href') or ''), str(token.attrGet('title') or ''))
        if name == 'bullet_list':
            return Tag.list()
        if name == 'ordered_list':
            return Tag.list(int(token.attrGet('start') or 1))
        return None

    @staticmethod
    def _fence_language(token: Token) -> str:
        words = token.info.strip().split()
        return words[0] if words else ''

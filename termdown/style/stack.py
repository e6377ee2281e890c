# style/stack.py

from dataclasses import dataclass
from typing import ClassVar, List, Optional, TextIO, Tuple

from ..errors import StructuralError
from ..events import Tag, TagKind
from .definitions import PLAIN, StyleAttributes, get_style

@dataclass(frozen=True)
class StyleContext:
    """Styling in effect while inside one open structural tag."""
    KIND: ClassVar[TagKind]

    @property
    def kind(self) -> TagKind:
        return self.KIND

    @property
    def inherited_style(self) -> Optional[StyleAttributes]:
        """Style offered to nested paragraphs, None if this context has none."""
        return None

    def write(self, text: str, sink: TextIO, code_renderer) -> None:
        """Text inside contexts without a text rule is dropped."""

@dataclass(frozen=True)
class StyledContext(StyleContext):
    style: StyleAttributes

    @property
    def inherited_style(self) -> Optional[StyleAttributes]:
        return self.style

    def write(self, text: str, sink: TextIO, code_renderer) -> None:
        sink.write(self.style.paint(text))

@dataclass(frozen=True)
class StrongContext(StyledContext):
    KIND: ClassVar[TagKind] = TagKind.STRONG

@dataclass(frozen=True)
class EmphasisContext(StyledContext):
    KIND: ClassVar[TagKind] = TagKind.EMPHASIS

@dataclass(frozen=True)
class ParagraphContext(StyledContext):
    KIND: ClassVar[TagKind] = TagKind.PARAGRAPH

@dataclass(frozen=True)
class BlockQuoteContext(StyledContext):
    KIND: ClassVar[TagKind] = TagKind.BLOCK_QUOTE

@dataclass(frozen=True)
class LinkContext(StyledContext):
    KIND: ClassVar[TagKind] = TagKind.LINK
    url: str = ''
    title: Optional[str] = None  # carried, not rendered

    def write(self, text: str, sink: TextIO, code_renderer) -> None:
        sink.write(self.style.paint(f"{text} ({self.url})"))

@dataclass(frozen=True)
class ListContext(StyledContext):
    KIND: ClassVar[TagKind] = TagKind.LIST
    start: Optional[int] = None

    def write(self, text: str, sink: TextIO, code_renderer) -> None:
        # list spacing is written by the dispatcher
        pass

@dataclass(frozen=True)
class ListItemContext(StyledContext):
    KIND: ClassVar[TagKind] = TagKind.ITEM

    def write(self, text: str, sink: TextIO, code_renderer) -> None:
        sink.write(self.style.paint(f" * {text}\n"))

@dataclass(frozen=True)
class HeadingContext(StyledContext):
    KIND: ClassVar[TagKind] = TagKind.HEADING
    level: int = 1

    def write(self, text: str, sink: TextIO, code_renderer) -> None:
        # TODO write heading text in self.style instead of dropping it
        pass

@dataclass(frozen=True)
class CodeContext(StyleContext):
    KIND: ClassVar[TagKind] = TagKind.CODE_BLOCK
    language: Optional[str] = None
    indented: bool = False

    def write(self, text: str, sink: TextIO, code_renderer) -> None:
        code_renderer.render(text, self.language, sink)


def closes(context: StyleContext, tag: Tag) -> bool:
    """True if an End event for `tag` closes `context`."""
    return context.kind is tag.kind


SUPPORTED_KINDS = frozenset({
    TagKind.CODE_BLOCK, TagKind.LINK, TagKind.STRONG, TagKind.EMPHASIS,
    TagKind.PARAGRAPH, TagKind.LIST, TagKind.ITEM, TagKind.HEADING,
    TagKind.BLOCK_QUOTE,
})

class StyleStack:
    """
    Stack of open style contexts for a single render.

    Start events push a context, End events pop it again after checking the
    kinds agree, and text is written through whatever context is on top.
    """
    def __init__(self, code_renderer, logger=None):
        """
        Args:
            code_renderer: CodeBlockRenderer used for text inside code blocks
            logger: optional Logger for skipped tags and mismatches
        """
        self.code_renderer = code_renderer
        self.logger = logger
        self._stack: List[StyleContext] = []

    def __len__(self) -> int:
        return len(self._stack)

    @property
    def contexts(self) -> Tuple[StyleContext, ...]:
        """Open contexts, bottom first."""
        return tuple(self._stack)

    @property
    def top(self) -> Optional[StyleContext]:
        return self._stack[-1] if self._stack else None

    def inherited_style(self) -> StyleAttributes:
        """Return the style of the nearest context that exposes one."""
        for context in reversed(self._stack):
            style = context.inherited_style
            if style is not None:
                return style
        return PLAIN

    def push_start(self, tag: Tag) -> None:
        """Push the context for an opening tag; unsupported tags are skipped."""
        context = self._context_for(tag)
        if context is None:
            if self.logger:
                self.logger.debug(f"Ignoring unsupported tag: {tag.kind.value}")
            return
        self._stack.append(context)

    def pop_end(self, tag: Tag) -> None:
        """
        Pop the context closed by `tag`.

        Raises:
            StructuralError: the stack is empty or its top is another kind
        """
        if tag.kind not in SUPPORTED_KINDS:
            if self.logger:
                self.logger.debug(f"Ignoring end of unsupported tag: {tag.kind.value}")
            return
        context = self._stack.pop() if self._stack else None
        if context is None or not closes(context, tag):
            if self.logger:
                self.logger.error(f"tag: {tag.kind.value} state: {context}")
            raise StructuralError("Unmatched pair found on stack")

    def write_text(self, text: str, sink: TextIO) -> None:
        """Write text through the context on top of the stack."""
        if not self._stack:
            raise RuntimeError("Text event before Start event")
        self._stack[-1].write(text, sink, self.code_renderer)

    def _context_for(self, tag: Tag) -> Optional[StyleContext]:
        kind = tag.kind
        if kind is TagKind.CODE_BLOCK:
            return CodeContext(language=tag.language, indented=tag.is_indented)
        if kind is TagKind.LINK:
            return LinkContext(style=get_style('LINK'), url=tag.url, title=tag.title or None)
        if kind is TagKind.STRONG:
            return StrongContext(style=get_style('STRONG'))
        if kind is TagKind.EMPHASIS:
            return EmphasisContext(style=get_style('EMPHASIS'))
        if kind is TagKind.PARAGRAPH:
            return ParagraphContext(style=self.inherited_style())
        if kind is TagKind.LIST:
            return ListContext(style=PLAIN, start=tag.start)
        if kind is TagKind.ITEM:
            return ListItemContext(style=PLAIN)
        if kind is TagKind.HEADING:
            return HeadingContext(style=get_style('HEADING'), level=tag.level)
        if kind is TagKind.BLOCK_QUOTE:
            return BlockQuoteContext(style=get_style('BLOCK_QUOTE'))
        return None

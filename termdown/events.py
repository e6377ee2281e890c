# events.py

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

class TagKind(Enum):
    """Structural tags the parser reports."""
    CODE_BLOCK = 'code_block'
    LINK = 'link'
    STRONG = 'strong'
    EMPHASIS = 'emphasis'
    PARAGRAPH = 'paragraph'
    LIST = 'list'
    ITEM = 'item'
    HEADING = 'heading'
    BLOCK_QUOTE = 'block_quote'
    # Reported by the parser but never styled
    STRIKETHROUGH = 'strikethrough'

@dataclass(frozen=True)
class Tag:
    """
    A structural tag and its payload.

    Only the fields relevant to the kind are set: `language` for code blocks
    (None for an indented block), `url`/`title` for links, `start` for ordered
    lists and `level` for headings.
    """
    kind: TagKind
    language: Optional[str] = None
    url: str = ''
    title: str = ''
    start: Optional[int] = None
    level: int = 0

    @classmethod
    def code_block(cls, language: Optional[str] = None) -> 'Tag':
        return cls(TagKind.CODE_BLOCK, language=language)

    @classmethod
    def link(cls, url: str, title: str = '') -> 'Tag':
        return cls(TagKind.LINK, url=url, title=title)

    @classmethod
    def list(cls, start: Optional[int] = None) -> 'Tag':
        return cls(TagKind.LIST, start=start)

    @classmethod
    def heading(cls, level: int) -> 'Tag':
        return cls(TagKind.HEADING, level=level)

    @property
    def is_indented(self) -> bool:
        return self.kind is TagKind.CODE_BLOCK and self.language is None

@dataclass(frozen=True)
class Start:
    tag: Tag

@dataclass(frozen=True)
class End:
    tag: Tag

@dataclass(frozen=True)
class Text:
    text: str

@dataclass(frozen=True)
class Code:
    """An inline code span."""
    text: str

@dataclass(frozen=True)
class Other:
    """Anything the renderer does not interpret: breaks, rules, html, images."""
    kind: str
    content: str = ''

Event = Union[Start, End, Text, Code, Other]

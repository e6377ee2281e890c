# highlight/code_block.py

from typing import Any, Iterable, Iterator, List, NamedTuple, Optional, TextIO, Tuple

from ..style.definitions import RESET, StyleAttributes
from ..style.palette import PaletteMapper
from .engine import HighlightEngine

TokenPair = Tuple[Any, str]  # (pygments token type, text)

class TokenSpan(NamedTuple):
    """One highlighted fragment of code."""
    style: StyleAttributes
    text: str


def lines_with_endings(tokens: Iterable[TokenPair]) -> Iterator[List[TokenPair]]:
    """Regroup a token stream into physical lines, keeping the '\\n' endings."""
    line: List[TokenPair] = []
    for ttype, value in tokens:
        while value:
            head, newline, value = value.partition('\n')
            line.append((ttype, head + newline))
            if newline:
                yield line
                line = []
    if line:
        yield line


class CodeBlockRenderer:
    """
    Writes code as syntax highlighted terminal text.

    Colors come from the engine's Solarized theme and are reduced to the
    terminal palette by PaletteMapper; background colors are ignored so the
    terminal's own background shows through.
    """
    def __init__(self, engine: HighlightEngine, palette: Optional[PaletteMapper] = None,
                 fallback_language: str = 'js', logger=None):
        """
        Args:
            engine: shared HighlightEngine providing theme and lexers
            palette: color reduction table, Solarized by default
            fallback_language: language token used for indented code blocks
            logger: optional Logger
        """
        self.engine = engine
        self.palette = palette or PaletteMapper()
        self.fallback_language = fallback_language
        self.logger = logger

    def spans(self, source: str, language: Optional[str]) -> Iterator[TokenSpan]:
        """Yield the styled spans for `source`, line by line."""
        if language is None:
            language = self.fallback_language
        lexer = self.engine.lexer_for(language)
        if self.logger:
            self.logger.debug(f"Highlighting {len(source)} chars as {lexer.name} (token '{language}')")
        for line in lines_with_endings(lexer.get_tokens(source)):
            for ttype, text in line:
                yield TokenSpan(self.style_for(ttype), text)

    def style_for(self, ttype) -> StyleAttributes:
        """Translate the theme's style for a token type into StyleAttributes."""
        theme = self.engine.theme
        # lexer specific token types fall back to their nearest styled parent
        while ttype.parent is not None and not theme.styles_token(ttype):
            ttype = ttype.parent
        style = theme.style_for_token(ttype)
        return StyleAttributes(
            color=self.palette.map_hex(style['color']),
            bold=bool(style['bold']),
            italic=bool(style['italic']),
            underline=bool(style['underline']),
        )

    def render(self, source: str, language: Optional[str], sink: TextIO) -> None:
        """Write highlighted `source` to `sink`, then clear formatting."""
        for span in self.spans(source, language):
            sink.write(span.style.paint(span.text))
        sink.write(RESET)

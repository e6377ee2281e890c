# highlight/engine.py

import threading
from typing import Optional, Type

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name, get_lexer_for_filename
from pygments.lexers.special import TextLexer
from pygments.style import Style as PygmentsStyle
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

# Both variants use the same sixteen colors, which is what the palette expects.
THEMES = ('solarized-dark', 'solarized-light')

# Keep the source exactly as written; pygments strips leading/trailing
# newlines and appends one by default.
LEXER_OPTIONS = {'stripnl': False, 'ensurenl': False}

class HighlightEngine:
    """
    Highlighting resources shared by every render.

    The theme is loaded on first use, exactly once, and never changes after
    that, so one engine can serve any number of renders. Lexers are created
    per call and keep no state between renders.
    """
    def __init__(self, theme: str = 'solarized-dark'):
        if theme not in THEMES:
            raise ValueError(f"Unsupported theme '{theme}', expected one of {', '.join(THEMES)}")
        self.theme_name = theme
        self._theme: Optional[Type[PygmentsStyle]] = None
        self._lock = threading.Lock()

    @property
    def theme(self) -> Type[PygmentsStyle]:
        if self._theme is None:
            with self._lock:
                if self._theme is None:
                    self._theme = get_style_by_name(self.theme_name)
        return self._theme

    def lexer_for(self, token: str) -> Lexer:
        """
        Find a lexer for a language token such as 'python', 'rs' or 'js'.

        The token is tried as a lexer alias, then as a file extension. Unknown
        tokens fall back to plain text.
        """
        if token:
            try:
                return get_lexer_by_name(token, **LEXER_OPTIONS)
            except ClassNotFound:
                pass
            try:
                return get_lexer_for_filename(f"source.{token}", **LEXER_OPTIONS)
            except ClassNotFound:
                pass
        return TextLexer(**LEXER_OPTIONS)


_default_engine: Optional[HighlightEngine] = None
_default_lock = threading.Lock()

def get_default_engine() -> HighlightEngine:
    """Return the process-wide engine, creating it on first call."""
    global _default_engine
    if _default_engine is None:
        with _default_lock:
            if _default_engine is None:
                _default_engine = HighlightEngine()
    return _default_engine

# options.py

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .highlight.engine import THEMES

@dataclass(frozen=True)
class RenderOptions:
    """
    Render settings.

    fallback_language is the language token used to highlight indented code
    blocks, which carry no language of their own. It is a best guess; use
    'text' to leave them unhighlighted.
    """
    fallback_language: str = 'js'
    theme: str = 'solarized-dark'
    strikethrough: bool = True
    tasklists: bool = True

    def __post_init__(self):
        if self.theme not in THEMES:
            raise ValueError(f"Unsupported theme '{self.theme}', expected one of {', '.join(THEMES)}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'RenderOptions':
        """Build options from TERMDOWN_* environment variables."""
        environ = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            fallback_language=environ.get('TERMDOWN_FALLBACK_LANGUAGE', defaults.fallback_language),
            theme=environ.get('TERMDOWN_THEME', defaults.theme),
        )

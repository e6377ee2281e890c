# highlight/__init__.py

from .engine import HighlightEngine, get_default_engine
from .code_block import CodeBlockRenderer, TokenSpan

__all__ = ['HighlightEngine', 'get_default_engine', 'CodeBlockRenderer', 'TokenSpan']

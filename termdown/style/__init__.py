# style/__init__.py

from .definitions import StyleAttributes, PLAIN, RESET, get_style
from .palette import ColorSample, PaletteMapper
from .stack import StyleContext, StyleStack, closes

__all__ = [
    'StyleAttributes', 'PLAIN', 'RESET', 'get_style',
    'ColorSample', 'PaletteMapper',
    'StyleContext', 'StyleStack', 'closes',
]

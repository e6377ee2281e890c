# __init__.py

from .logger import Logger
from .errors import RenderError, StructuralError, PaletteError, EncodingError
from .options import RenderOptions
from .parser import MarkdownParser
from .interface import Renderer, render

__all__ = [
    "render", "Renderer", "RenderOptions", "MarkdownParser", "Logger",
    "RenderError", "StructuralError", "PaletteError", "EncodingError",
]

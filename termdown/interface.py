# interface.py

import threading
from io import StringIO
from typing import Optional, TextIO

from .logger import Logger
from .errors import EncodingError
from .options import RenderOptions
from .parser import MarkdownParser
from .dispatcher import EventDispatcher
from .style.stack import StyleStack
from .highlight.engine import HighlightEngine, get_default_engine
from .highlight.code_block import CodeBlockRenderer

class Renderer:
    """
    Main entry point that assembles the parser, style stack and code renderer.

    Component Hierarchy:
    MarkdownParser → EventDispatcher → StyleStack → CodeBlockRenderer → HighlightEngine
    """

    def __init__(self, options: Optional[RenderOptions] = None,
                 logging_enabled: bool = False,
                 log_file: Optional[str] = None,
                 engine: Optional[HighlightEngine] = None):
        """
        Args:
            options: render settings, defaults if None
            logging_enabled: Enable detailed logging.
            log_file: Path to log file. Use "-" for stdout.
            engine: shared HighlightEngine; one matching options.theme is
                    created if None
        """
        self.options = options or RenderOptions()
        self.logger = Logger(__name__, logging_enabled, log_file)
        if engine is None:
            engine = HighlightEngine(self.options.theme)
        elif engine.theme_name != self.options.theme:
            raise ValueError(f"Engine theme '{engine.theme_name}' does not match options theme '{self.options.theme}'")
        self.engine = engine
        self.parser = MarkdownParser(
            strikethrough=self.options.strikethrough,
            tasklists=self.options.tasklists
        )
        self.code_renderer = CodeBlockRenderer(
            self.engine,
            fallback_language=self.options.fallback_language,
            logger=self.logger
        )

    def render_to(self, source: str, sink: TextIO) -> None:
        """Render markdown straight into a text sink."""
        stack = StyleStack(self.code_renderer, logger=self.logger)
        dispatcher = EventDispatcher(stack, sink, logger=self.logger)
        dispatcher.run(self.parser.parse(source))
        if len(stack):
            self.logger.debug(f"{len(stack)} context(s) left open at end of input")

    def render(self, source: str) -> str:
        """
        Render markdown to a styled string.

        Raises:
            StructuralError: start and end events did not pair up
            EncodingError: the output is not valid UTF-8
        """
        sink = StringIO()
        self.render_to(source, sink)
        output = sink.getvalue()
        try:
            output.encode('utf-8')
        except UnicodeEncodeError as e:
            self.logger.error(f"Render produced invalid UTF-8: {e}")
            raise EncodingError(str(e)) from e
        return output


_default_renderer: Optional[Renderer] = None
_default_lock = threading.Lock()

def get_default_renderer() -> Renderer:
    """Return the process-wide Renderer, creating it on first use."""
    global _default_renderer
    if _default_renderer is None:
        with _default_lock:
            if _default_renderer is None:
                _default_renderer = Renderer(engine=get_default_engine())
    return _default_renderer

def render(source: str) -> str:
    """Render markdown with default options and the shared engine."""
    return get_default_renderer().render(source)

# dispatcher.py

from typing import Iterable, TextIO

from .events import Code, End, Event, Other, Start, TagKind, Text
from .style.definitions import RESET, get_style
from .style.stack import StyleStack

class EventDispatcher:
    """
    Drives parser events through a StyleStack into an output sink.

    Lists are spaced here rather than in the stack: two newlines before a
    list and one after it.
    """
    def __init__(self, stack: StyleStack, sink: TextIO, logger=None):
        self.stack = stack
        self.sink = sink
        self.logger = logger

    def dispatch(self, event: Event) -> None:
        """Apply a single event."""
        if isinstance(event, Start):
            if event.tag.kind is TagKind.LIST:
                self.sink.write("\n\n")
            self.stack.push_start(event.tag)
        elif isinstance(event, End):
            if event.tag.kind is TagKind.LIST:
                self.sink.write("\n")
            self.stack.pop_end(event.tag)
        elif isinstance(event, Text):
            self.stack.write_text(event.text, self.sink)
        elif isinstance(event, Code):
            # Code like `foo && bar`
            self.sink.write(get_style('INLINE_CODE').paint(event.text))
        elif isinstance(event, Other):
            if self.logger:
                self.logger.debug(f"Ignoring event: {event.kind}")
        else:
            raise TypeError(f"Not a markup event: {event!r}")

    def run(self, events: Iterable[Event]) -> None:
        """Apply every event, then clear formatting."""
        for event in events:
            self.dispatch(event)
        self.sink.write(RESET)

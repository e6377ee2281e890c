# style/definitions.py

from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Optional

from rich.color import ColorSystem
from rich.style import Style

RESET = '\033[0m'

# Names understood by rich that stay inside the 16 color standard palette.
TERMINAL_COLORS = frozenset({
    'black', 'red', 'green', 'yellow', 'blue', 'magenta', 'cyan', 'white',
    'bright_red', 'bright_magenta',
})

@dataclass(frozen=True)
class StyleAttributes:
    """
    Foreground color and font flags applied to a run of text.

    A color of None leaves the terminal's default foreground in place.
    """
    color: Optional[str] = None
    bold: bool = False
    italic: bool = False
    underline: bool = False

    def __post_init__(self):
        if self.color is not None and self.color not in TERMINAL_COLORS:
            raise ValueError(f"Unsupported terminal color '{self.color}'")

    @property
    def is_plain(self) -> bool:
        return self.color is None and not (self.bold or self.italic or self.underline)

    def to_rich(self) -> Style:
        """Return the equivalent rich Style."""
        return _rich_style(self)

    def paint(self, text: str) -> str:
        """
        Wrap text in the escape codes for this style.

        Plain styles and empty strings are returned unchanged, otherwise the
        text is followed by a full reset.
        """
        return self.to_rich().render(text, color_system=ColorSystem.STANDARD)


@lru_cache(maxsize=64)
def _rich_style(attributes: StyleAttributes) -> Style:
    return Style(
        color=attributes.color,
        bold=attributes.bold,
        italic=attributes.italic,
        underline=attributes.underline,
    )


PLAIN = StyleAttributes()

STYLES: Dict[str, StyleAttributes] = {
    'STRONG': StyleAttributes(bold=True),
    'EMPHASIS': StyleAttributes(italic=True),
    'LINK': StyleAttributes(color='green'),
    'BLOCK_QUOTE': StyleAttributes(color='green'),
    'HEADING': StyleAttributes(bold=True),
    'INLINE_CODE': StyleAttributes(color='yellow'),
}

def get_style(name: str) -> StyleAttributes:
    """Get a fixed style by name, plain if unknown."""
    return STYLES.get(name, PLAIN)

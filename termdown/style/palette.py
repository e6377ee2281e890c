# style/palette.py

from typing import Dict, NamedTuple, Optional, Tuple

from ..errors import PaletteError

RGB = Tuple[int, int, int]

# base03, base02, base01, base00, base0, base1, base2 and base3. These swap
# roles between light and dark Solarized, so they are left to the terminal's
# own foreground to stay legible on either background.
SOLARIZED_BASE = frozenset({
    (0x00, 0x2b, 0x36),
    (0x07, 0x36, 0x42),
    (0x58, 0x6e, 0x75),
    (0x65, 0x7b, 0x83),
    (0x83, 0x94, 0x96),
    (0x93, 0xa1, 0xa1),
    (0xee, 0xe8, 0xd5),
    (0xfd, 0xf6, 0xe3),
})

SOLARIZED_ACCENTS: Dict[RGB, str] = {
    (0xb5, 0x89, 0x00): 'yellow',
    (0xcb, 0x4b, 0x16): 'bright_red',      # orange
    (0xdc, 0x32, 0x2f): 'red',
    (0xd3, 0x36, 0x82): 'magenta',
    (0x6c, 0x71, 0xc4): 'bright_magenta',  # violet
    (0x26, 0x8b, 0xd2): 'blue',
    (0x2a, 0xa1, 0x98): 'cyan',
    (0x85, 0x99, 0x00): 'green',
}


class ColorSample(NamedTuple):
    """A 24-bit color taken from a highlighter theme."""
    r: int
    g: int
    b: int

    @classmethod
    def from_hex(cls, value: str) -> 'ColorSample':
        """Parse 'rrggbb' or '#rrggbb'."""
        digits = value.lstrip('#')
        if len(digits) != 6:
            raise PaletteError(f"Malformed RGB colour: {value!r}")
        try:
            return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
        except ValueError as e:
            raise PaletteError(f"Malformed RGB colour: {value!r}") from e

    def __str__(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


class PaletteMapper:
    """
    Reduces Solarized theme colors to terminal palette names.

    Solarized maps cleanly onto the 8/16 color ANSI palette, which every
    terminal theme provides, so the accent colors are translated back to their
    ANSI names. Base colors map to None (terminal default foreground).
    """
    def __init__(self, accents: Optional[Dict[RGB, str]] = None,
                 base: Optional[frozenset] = None):
        self.accents = accents if accents is not None else dict(SOLARIZED_ACCENTS)
        self.base = base if base is not None else SOLARIZED_BASE

    def map_color(self, r: int, g: int, b: int) -> Optional[str]:
        """
        Map an RGB triple to a terminal color name.

        Returns:
            The palette name, or None for the terminal default foreground

        Raises:
            PaletteError: the color is not part of the palette
        """
        rgb = (r, g, b)
        if rgb in self.base:
            return None
        try:
            return self.accents[rgb]
        except KeyError:
            raise PaletteError(f"Unexpected RGB colour: {ColorSample(*rgb)}") from None

    def map_hex(self, value: Optional[str]) -> Optional[str]:
        """Map a hex color string; an absent color inherits the default."""
        if not value:
            return None
        return self.map_color(*ColorSample.from_hex(value))

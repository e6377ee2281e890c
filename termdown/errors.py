# errors.py


class RenderError(Exception):
    """Base class for everything that aborts a render."""


class StructuralError(RenderError):
    """An End event did not close the context on top of the style stack."""


class PaletteError(RenderError):
    """
    A highlighter color outside the fixed theme palette.

    Only colors of the configured theme ever reach the palette, so this means
    the theme and the palette table disagree. It is never approximated.
    """


class EncodingError(RenderError):
    """Rendered output could not be encoded as UTF-8."""

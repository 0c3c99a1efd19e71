"""Functions that print colors to the console in a human-readable form,
together with the exact bytes that end up in the drawing buffer.
"""

from colorama import Back, Style
from hexdump import dump

from wlcolor.color import Color

__all__ = ("format_color", "print_color")


#: Background styles of the eight basic terminal colors, indexed by a three-bit
#: number where bit 0 is red, bit 1 is green and bit 2 is blue
_SWATCHES = (
    Back.BLACK,
    Back.RED,
    Back.GREEN,
    Back.YELLOW,
    Back.BLUE,
    Back.MAGENTA,
    Back.CYAN,
    Back.WHITE,
)


def _swatch_for(color: Color) -> str:
    """Returns a short block of text with the terminal background color that
    is closest to how the compositor will paint the given color.

    The compositor paints the stored red channel as blue and vice versa.
    """
    index = (
        (1 if color.blue >= 128 else 0)
        | (2 if color.green >= 128 else 0)
        | (4 if color.red >= 128 else 0)
    )
    return _SWATCHES[index] + "  " + Style.RESET_ALL


def format_color(color: Color, description: str = "") -> str:
    """Formats a color for the console.

    Parameters:
        color: the color to format
        description: optional textual description to show in front of the
            color

    Returns:
        a single line with the description, a color swatch, the stored
        channels in ``#AARRGGBB`` form and a hex dump of the bytes that are
        written into the drawing buffer
    """
    data = dump(color.to_bytes(), sep=" ")
    parts = [_swatch_for(color), str(color), Style.DIM + data + Style.RESET_ALL]
    if description:
        parts.insert(0, f"{description}:")
    return " ".join(parts)


def print_color(color: Color, description: str = "") -> None:
    """Prints a color to the console; see `format_color()` for the format."""
    print(format_color(color, description))

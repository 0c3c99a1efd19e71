"""Colors used for drawing to a buffer that is handed over to the compositor.

The compositor backend that receives our drawing buffers swaps the red and
blue channels of every color it paints. Colors in this module are therefore
stored with red and blue already swapped, so that they come out right on
the screen. For instance, ``"00FF0000"`` is drawn as red, but the `Color`
object parsed from it contains 0 in `red` and 255 in `blue`.

The swap happens in `Color.rgba()` and nowhere else; every other way of
creating a color goes through it.
"""

from dataclasses import dataclass
from struct import Struct
from typing import ClassVar, Dict, Optional, Tuple

__all__ = (
    "Color",
    "decode_channel",
    "from_int",
    "parse",
    "parse_argb",
    "parse_rgb",
    "rgba",
    "values",
)


#: Mapping from hexadecimal digit characters to their values
_HEX_DIGITS: Dict[str, int] = {
    char: int(char, 16) for char in "0123456789abcdefABCDEF"
}


@dataclass(frozen=True)
class Color:
    """Color to draw to the screen, including the alpha channel.

    Do not instantiate this class directly; use `Color.rgba()`,
    `Color.from_int()` or `Color.parse()` instead. The fields hold the
    channels as stored, i.e. with red and blue swapped.
    """

    red: int
    """Stored red channel; holds the blue component of the intended color."""

    green: int
    """Stored green channel."""

    blue: int
    """Stored blue channel; holds the red component of the intended color."""

    alpha: int
    """Stored alpha channel; 255 is fully opaque."""

    _struct: ClassVar[Struct] = Struct("BBBB")
    size_in_bytes: ClassVar[int] = _struct.size

    @classmethod
    def rgba(cls, r: int, g: int, b: int, a: int) -> "Color":
        """Creates a new color with an alpha channel.

        Parameters:
            r: the red component of the intended color
            g: the green component of the intended color
            b: the blue component of the intended color
            a: the alpha component of the intended color

        Returns:
            the color, with red and blue swapped in storage

        Raises:
            ValueError: if any of the components is not an integer in the range
                [0; 255]
        """
        for name, value in (("red", r), ("green", g), ("blue", b), ("alpha", a)):
            if not isinstance(value, int):
                raise ValueError(
                    f"{name} component must be an integer, got {value!r}"
                )
            if value < 0 or value > 255:
                raise ValueError(f"{name} component must be in [0; 255], got {value}")

        # The compositor paints red as blue and vice versa; swapping them
        # here cancels that out. Remove the swap (and fix the tests) once
        # the backend is fixed.
        return cls(red=b, green=g, blue=r, alpha=a)

    @classmethod
    def from_int(cls, value: int) -> "Color":
        """Creates a fully opaque color from an integer of the form
        ``0xRRGGBB``. Bits above the lowest 24 bits are ignored.
        """
        red = (value & 0xFF0000) >> 16
        green = (value & 0x00FF00) >> 8
        blue = value & 0x0000FF
        return cls.rgba(red, green, blue, 255)

    @classmethod
    def parse(cls, text: str) -> Optional["Color"]:
        """Parses a string into a color.

        The following formats are supported:

        * ``RRGGBB``
        * ``AARRGGBB``
        * ``#RRGGBB``
        * ``#AARRGGBB``
        * ``0xRRGGBB``
        * ``0xAARRGGBB``

        Prefixes are stripped one at a time, and the remainder is checked
        for prefixes again, so ``#0xRRGGBB`` is also accepted.

        Parameters:
            text: the string to parse

        Returns:
            the parsed color or `None` if the string is not a valid color
        """
        while True:
            if text.startswith("#"):
                text = text[1:]
            elif text.startswith("0x"):
                text = text[2:]
            elif len(text) == 8:
                return parse_argb(text)
            elif len(text) == 6:
                return parse_rgb(text)
            else:
                return None

    def to_bytes(self) -> bytes:
        """Converts the color into the four bytes that are written into the
        drawing buffer: red, green, blue and alpha, as stored.
        """
        return self._struct.pack(*self.values())

    def values(self) -> Tuple[int, int, int, int]:
        """Returns the stored channels of the color in the following order:
        red, green, blue, alpha.
        """
        return (self.red, self.green, self.blue, self.alpha)

    def __str__(self) -> str:
        return "#{3:02X}{0:02X}{1:02X}{2:02X}".format(*self.values())


def _hex_to_int(char: Optional[str]) -> Optional[int]:
    """Converts a hex digit into its value."""
    return _HEX_DIGITS.get(char) if char is not None else None


def decode_channel(text: str) -> Optional[int]:
    """Parses exactly one channel value (e.g., ``AA``, ``RR``, ``GG`` or
    ``BB``) from the first two characters of a string.

    Returns:
        the value of the channel or `None` if the string has less than two
        characters or if any of the first two characters is not a hex digit
    """
    high = _hex_to_int(text[0] if len(text) > 0 else None)
    if high is None:
        return None

    low = _hex_to_int(text[1] if len(text) > 1 else None)
    if low is None:
        return None

    return (high << 4) | low


def parse_argb(text: str) -> Optional[Color]:
    """Parses an ``AARRGGBB`` string into a color."""
    if len(text) != 8:
        return None

    alpha = decode_channel(text[:2])
    if alpha is None:
        return None

    rgb = parse_rgb(text[2:])
    if rgb is None:
        return None

    # rgb has red and blue swapped already and rgba() swaps them again, so
    # swap them back first
    return Color.rgba(rgb.blue, rgb.green, rgb.red, alpha)


def parse_rgb(text: str) -> Optional[Color]:
    """Parses an ``RRGGBB`` string into a fully opaque color."""
    if len(text) != 6:
        return None

    red = decode_channel(text[0:2])
    if red is None:
        return None

    green = decode_channel(text[2:4])
    if green is None:
        return None

    blue = decode_channel(text[4:6])
    if blue is None:
        return None

    return Color.rgba(red, green, blue, 255)


rgba = Color.rgba
from_int = Color.from_int
parse = Color.parse


def values(color: Color) -> Tuple[int, int, int, int]:
    """Returns the stored channels of the given color; see `Color.values()`."""
    return color.values()

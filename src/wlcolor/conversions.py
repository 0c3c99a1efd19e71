"""Functions for converting arbitrary color-like objects into colors."""

from colour import Color as NamedColor
from typing import Tuple, Union

from .color import Color
from .errors import ColorError

__all__ = ("ColorLike", "to_color")


#: Typing for objects that can be converted into a color
ColorLike = Union[Color, int, str, Tuple[int, int, int], Tuple[int, int, int, int]]


def _channels_of_named_color(name: str) -> Tuple[int, int, int]:
    """Looks up a color by its name (or any other textual form that the
    ``colour`` library understands, like ``#fc0``) and returns its RGB
    components in the [0; 255] range.

    Raises:
        ColorError: if the name is empty or not known
    """
    if not name.strip():
        raise ColorError("color name must not be empty", name)

    try:
        rgb = NamedColor(name).rgb
    except (AttributeError, ValueError):
        raise ColorError(f"unknown color: {name!r}", name) from None
    return tuple(max(0, min(255, round(x * 255))) for x in rgb)  # type: ignore


def to_color(value: ColorLike) -> Color:
    """Converts a color-like object into a color.

    Integers are interpreted as ``0xRRGGBB``. Tuples must specify the red,
    green, blue and optionally the alpha components of the intended color
    in the [0; 255] range. Strings are parsed with `Color.parse()` first;
    if that fails, they are treated as color names.

    Raises:
        ColorError: if the object cannot be converted into a color
    """
    if isinstance(value, Color):
        return value

    if isinstance(value, bool):
        raise ColorError(value=value)

    if isinstance(value, int):
        return Color.from_int(value)

    if isinstance(value, str):
        color = Color.parse(value)
        if color is not None:
            return color
        r, g, b = _channels_of_named_color(value)
        return Color.rgba(r, g, b, 255)

    if isinstance(value, tuple) and len(value) in (3, 4):
        r, g, b, a = value if len(value) == 4 else (*value, 255)
        try:
            return Color.rgba(r, g, b, a)
        except (TypeError, ValueError) as ex:
            raise ColorError(value=value) from ex

    raise ColorError(value=value)

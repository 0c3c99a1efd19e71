"""Color values for drawing to a buffer that is painted by a compositor
which swaps the red and blue channels.
"""

from .color import (
    Color,
    decode_channel,
    from_int,
    parse,
    parse_argb,
    parse_rgb,
    rgba,
    values,
)
from .conversions import ColorLike, to_color
from .errors import ColorError
from .version import __version__

__all__ = (
    "Color",
    "ColorError",
    "ColorLike",
    "decode_channel",
    "from_int",
    "parse",
    "parse_argb",
    "parse_rgb",
    "rgba",
    "to_color",
    "values",
    "__version__",
)

"""Various utilities that are not needed for parsing colors but come handy
when debugging the drawing code that uses them.
"""

from .debug import format_color, print_color

__all__ = ("format_color", "print_color")

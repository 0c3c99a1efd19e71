"""Errors raised by the convenience layers of the color library.

Note that the parser functions in `wlcolor.color` never raise; they return
`None` for malformed input.
"""

from typing import Any, Optional

__all__ = ("ColorError",)


class ColorError(ValueError):
    """Error thrown when an object cannot be converted into a color."""

    def __init__(self, message: Optional[str] = None, value: Any = None):
        message = message or f"cannot convert {value!r} into a color"
        super().__init__(message)
        self.value = value

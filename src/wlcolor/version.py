"""Version information for the color library."""

__version__ = "0.1.0"

"""Shop Server: shops, their opening hours and products."""

__version__ = "1.0.0"

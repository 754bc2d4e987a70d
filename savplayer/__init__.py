"""A small pygame MP3 player with a draggable panel, track list and colour themes."""

__version__ = "0.1.0"
__all__ = ["__version__"]
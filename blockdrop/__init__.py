"""blockdrop: a falling-block puzzle game engine with a pygame front-end."""

__version__ = "0.1.0"

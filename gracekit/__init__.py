"""Lenient JSON values and a declarative registry of named blocks."""

__version__ = "0.1.0"
__all__ = ["declarative", "jsonvalue"]
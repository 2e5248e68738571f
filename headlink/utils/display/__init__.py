"""Display abstractions."""

from .Display import Display

__all__ = ["Display"]

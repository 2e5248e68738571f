"""CLI display implementations."""

from .CLIDisplay import CLIDisplay

__all__ = ["CLIDisplay"]

"""headlink - Markdown heading lookup and wiki link generation."""

__version__ = "0.1.0"

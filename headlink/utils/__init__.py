"""Shared helpers (paths, logging, templating, display)."""

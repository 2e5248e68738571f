"""Utility to discover the headlink home directory."""

import os
from pathlib import Path


def get_headlink_home() -> Path:
    """Get headlink home directory based on HEADLINK_HOME or default to ~/.headlink."""
    from .normalize_path import normalize_path

    home_env = os.environ.get("HEADLINK_HOME")
    if home_env:
        return normalize_path(home_env)
    return Path.home() / ".headlink"

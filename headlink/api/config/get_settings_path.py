"""Settings file location."""

from pathlib import Path


def get_settings_path() -> Path:
    """Get path to settings file based on HEADLINK_HOME or default to ~/.headlink."""
    from headlink.utils.get_headlink_home import get_headlink_home

    return get_headlink_home() / "settings.json"

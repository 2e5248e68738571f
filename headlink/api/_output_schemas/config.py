"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command."""

    settings: dict[str, Any] = Field(..., description="Effective settings (stored values merged over defaults)")
    placeholders: list[str] = Field(..., description="Placeholder tokens available in linkFormat")
    settings_path: str = Field(..., description="Path to the settings file")


class ConfigSetFormatOutput(BaseOutputSchema):
    """Output schema for config set_format command."""

    link_format: str = Field(..., description="Link format now in effect")
    previous: str = Field(..., description="Link format before the change, empty string if unknown")
    placeholders: list[str] = Field(..., description="Placeholder tokens the new format uses")
    settings_path: str = Field(..., description="Path to the settings file")


class ConfigResetOutput(BaseOutputSchema):
    """Output schema for config reset command."""

    link_format: str = Field(..., description="Default link format now in effect")
    settings_path: str = Field(..., description="Path to the settings file")


register_output_schema("config", "show", ConfigShowOutput)
register_output_schema("config", "set_format", ConfigSetFormatOutput)
register_output_schema("config", "reset", ConfigResetOutput)

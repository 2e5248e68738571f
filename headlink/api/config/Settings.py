"""User settings."""

from __future__ import annotations

__all__ = ["Settings"]

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..template._constants import DEFAULT_LINK_FORMAT
from ..template.migrate_legacy_template import migrate_legacy_template


class Settings(BaseModel):
    """Persisted user settings.

    Stored as ``{"linkFormat": ...}``. Keys this release does not know about
    are kept so that saving does not drop them.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, validate_assignment=True)

    link_format: str = Field(DEFAULT_LINK_FORMAT, alias="linkFormat", description="Wiki link template")

    @classmethod
    def from_stored(cls, raw: dict[str, Any] | None) -> Settings:
        """Merge a stored blob over the defaults.

        A ``${filePath}`` token in a stored format is rewritten to
        ``${fileDir}``. Formats set later are taken as given.

        Raises:
            ValueError: If the blob is not a mapping or fails validation
        """
        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ValueError(f"Settings must be a JSON object, got {type(raw).__name__}")
        try:
            settings = cls.model_validate(raw)
        except ValidationError as e:
            first = (e.errors() or [{"msg": str(e), "loc": ()}])[0]
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {first.get('msg', str(e))}" if field else first.get("msg", str(e))
            raise ValueError(f"Settings validation error: {detail}") from e
        settings.link_format = migrate_legacy_template(settings.link_format)
        return settings

    def to_stored(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)

# src/app/domain/models.py
"""
Domain model for recipes served by the remote catalogue.

The remote JSON uses its own key names (``uuid`` for the identifier); the
model keeps Python field names in memory and translates in both directions.
Construct instances with the wire keyword, e.g. ``Recipe(uuid=..., ...)``.
Media links must be absolute URLs.
"""
from __future__ import annotations

from typing import Any, Optional
from uuid import UUID

from pydantic import AnyUrl, BaseModel, ConfigDict, Field


class Recipe(BaseModel):
    """A single dish with its metadata and optional media links."""

    # Validation goes through the alias only: a wire record keyed "id" has no uuid.
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
    )

    id: UUID = Field(alias="uuid")
    name: str
    cuisine: str
    photo_url_small: Optional[AnyUrl] = None
    photo_url_large: Optional[AnyUrl] = None
    source_url: Optional[AnyUrl] = None
    youtube_url: Optional[AnyUrl] = None

    @classmethod
    def from_wire(cls, payload: Any) -> Recipe:
        """
        Decode one recipe object as it appears on the wire.

        Raises:
            pydantic.ValidationError: when a required field is missing or a
                value has the wrong type (the error location uses wire keys).
        """
        return cls.model_validate(payload)

    def to_wire(self) -> dict[str, Any]:
        """Encode back to wire keys, leaving out absent optional links."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

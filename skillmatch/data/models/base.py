"""
Base model classes for SkillMatch data models.

Provides common fields and functionality shared across all models.
Documents serialize with camelCase keys, the wire format used by the
student network's REST API and by the stored documents.
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class EmbeddedModel(BaseModel):
    """
    Base model for embedded documents and view objects.

    Accepts both snake_case attribute names and camelCase aliases on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_json_dict(self, **kwargs: Any) -> dict[str, Any]:
        """Dump to a JSON-compatible dict keyed by camelCase aliases."""
        return self.model_dump(mode="json", by_alias=True, **kwargs)


class TimestampMixin(EmbeddedModel):
    """Mixin providing timestamp fields for models."""

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class BaseDocument(TimestampMixin):
    """
    Base document model for directory collections.

    Identifiers are opaque strings (e.g. ``"user-1"`` or a UUID).
    """

    id: str

    def model_dump_document(self) -> dict[str, Any]:
        """Convert model to a storage document keyed by camelCase aliases."""
        return self.model_dump(by_alias=True)

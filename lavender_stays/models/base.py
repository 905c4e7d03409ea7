"""Shared pydantic bases for stored records and validated inputs."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class StoredRecord(BaseModel):
    """Base for every record persisted in the hotel data document.

    Unknown keys already present in the document are kept so that a
    rewrite never drops data written by another version of the app.
    """

    id: str
    created_at: Optional[str] = Field(None, alias="createdAt")
    updated_at: Optional[str] = Field(None, alias="updatedAt")

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_document(self) -> dict[str, Any]:
        """Serialize with camelCase keys, omitting unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class RecordInput(BaseModel):
    """Base for validated create/update payloads."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @classmethod
    def alias_keys(cls, data: dict[str, Any]) -> dict[str, Any]:
        """Rewrite snake_case field names in ``data`` to their camelCase aliases.

        Keys that are already aliases, or unknown to the model, pass through.
        """
        aliased = {}
        for key, value in data.items():
            field = cls.model_fields.get(key)
            aliased[(field.alias or key) if field else key] = value
        return aliased

    def to_fields(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

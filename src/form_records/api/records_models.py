"""Pydantic models for the records JSON API."""

from pydantic import BaseModel, Field, field_validator

from form_records.domain.records import Record


class RecordPayload(BaseModel):
    """Record body accepted on create and update."""

    id: int | None = None
    name: str | None = Field(default=None, validate_default=True)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str | None) -> str:
        if value is None or not value.strip():
            raise ValueError("must not be blank")
        return value


class RecordRead(BaseModel):
    """Record as returned by the API."""

    id: int
    name: str

    @classmethod
    def from_domain(cls, record: Record) -> "RecordRead":
        return cls(id=record.id, name=record.name)

"""Pydantic model for the durable per-item record."""

from __future__ import annotations

import re
from datetime import datetime  # noqa: TC003

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Jira renders offsets without a colon ("+0000").
_COMPACT_OFFSET = re.compile(r"([+-]\d{2})(\d{2})$")


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class RecordBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ItemRecord(RecordBaseModel):
    name: str
    number: int
    status: str | None = None
    created: datetime | None = None
    updated: datetime | None = None
    release: str | None = None
    discussion: str | None = None
    issue: str | None = None
    body: str | None = None
    related: list[int] = Field(default_factory=list[int])
    depends: list[int] = Field(default_factory=list[int])
    groups: list[str] = Field(default_factory=list[str])

    _normalize_optional = field_validator(
        "status", "release", "discussion", "issue", mode="before"
    )(_blank_to_none)

    @field_validator("created", "updated", mode="before")
    @classmethod
    def _parse_timestamp(cls, value: object) -> object:
        value = _blank_to_none(value)
        if isinstance(value, str):
            return _COMPACT_OFFSET.sub(r"\1:\2", value)
        return value

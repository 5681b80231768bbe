"""Shared wire models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Links(BaseModel):
    """Hypermedia links attached to API responses."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    self_: str | None = Field(default=None, alias="self")
    next: str | None = None
    prev: str | None = None

"""Label data models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .common import Links


class Label(BaseModel):
    """A label as returned by the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = None
    org_id: str | None = Field(default=None, alias="orgID")
    name: str | None = None
    properties: dict[str, str] | None = None


class LabelResponse(BaseModel):
    """A single label with its links."""

    label: Label | None = None
    links: Links | None = None


class LabelsResponse(BaseModel):
    """A list of labels with their links."""

    labels: list[Label] = Field(default_factory=list)
    links: Links | None = None

    @model_validator(mode="before")
    @classmethod
    def wrap_bare_list(cls, data: Any) -> Any:
        """Accept a bare JSON array of labels as well as the envelope."""
        if isinstance(data, list):
            return {"labels": data}
        return data


class LabelCreateRequest(BaseModel):
    """Body sent to create a label."""

    model_config = ConfigDict(populate_by_name=True)

    org_id: str = Field(alias="orgID")
    name: str
    properties: dict[str, str] | None = None


class LabelUpdate(BaseModel):
    """Body sent to update a label. Fields left as None are not changed."""

    name: str | None = None
    properties: dict[str, str] | None = None

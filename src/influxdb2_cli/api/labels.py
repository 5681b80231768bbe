"""Labels API endpoints."""

from http import HTTPStatus
from typing import Optional
from urllib.parse import quote

from influxdb2_cli.api.client import APIClient
from influxdb2_cli.models import (
    LabelCreateRequest,
    LabelResponse,
    LabelsResponse,
    LabelUpdate,
)

LABELS_PATH = "/api/v2/labels"


def _label_path(label_id: str) -> str:
    return f"{LABELS_PATH}/{quote(label_id, safe='')}"


class LabelsAPI:
    """Labels API client."""

    def __init__(self, client: APIClient):
        self.client = client

    async def list_labels(self) -> LabelsResponse:
        """List all labels."""
        return await self._list(None)

    async def list_labels_by_org(self, org_id: str) -> LabelsResponse:
        """List all labels of an organization."""
        return await self._list(org_id)

    async def _list(self, org_id: Optional[str]) -> LabelsResponse:
        return await self.client.send(
            "GET",
            LABELS_PATH,
            expected_status=HTTPStatus.OK,
            result_type=LabelsResponse,
            params={"orgID": org_id},
        )

    async def find_label(self, label_id: str) -> LabelResponse:
        """Get a specific label by ID."""
        return await self.client.send(
            "GET",
            _label_path(label_id),
            expected_status=HTTPStatus.OK,
            result_type=LabelResponse,
        )

    async def create_label(
        self,
        org_id: str,
        name: str,
        properties: Optional[dict[str, str]] = None,
    ) -> LabelResponse:
        """Create a new label."""
        body = LabelCreateRequest(org_id=org_id, name=name, properties=properties)
        return await self.client.send(
            "POST",
            LABELS_PATH,
            expected_status=HTTPStatus.CREATED,
            result_type=LabelResponse,
            body=body,
        )

    async def update_label(
        self,
        label_id: str,
        *,
        name: Optional[str] = None,
        properties: Optional[dict[str, str]] = None,
    ) -> LabelResponse:
        """Update a label. Only the fields that are given are changed."""
        body = LabelUpdate(name=name, properties=properties)
        return await self.client.send(
            "PATCH",
            _label_path(label_id),
            expected_status=HTTPStatus.OK,
            result_type=LabelResponse,
            body=body,
        )

    async def delete_label(self, label_id: str) -> None:
        """Delete a label."""
        await self.client.send(
            "DELETE",
            _label_path(label_id),
            expected_status=HTTPStatus.NO_CONTENT,
        )

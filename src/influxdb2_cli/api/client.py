"""API client for the InfluxDB 2.x HTTP API."""

import functools
import json
import logging
from collections.abc import Mapping
from typing import Any, Optional, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from influxdb2_cli.api.exceptions import (
    DeserializationError,
    SerializationError,
    TransportError,
    UnexpectedStatusError,
)
from influxdb2_cli.config import get_config_manager

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0

# Any 2xx status
SUCCESS = range(200, 300)

T = TypeVar("T")


def serialize(model: BaseModel | Mapping[str, Any] | None) -> dict[str, Any]:
    """Dump a model using its wire names, leaving out absent fields."""
    if model is None:
        return {}
    if isinstance(model, BaseModel):
        return model.model_dump(mode="json", by_alias=True, exclude_none=True)
    return {key: value for key, value in model.items() if value is not None}


@functools.lru_cache(maxsize=None)
def _type_adapter(result_type: type) -> TypeAdapter:
    return TypeAdapter(result_type)


def _is_expected(status_code: int, expected: int | range) -> bool:
    if isinstance(expected, range):
        return status_code in expected
    return status_code == expected


class APIClient:
    """HTTP client for the InfluxDB 2.x API.

    Holds the server URL, the default organization and the API token, and
    turns each operation into a single request/response round trip through
    :meth:`send`. Can be used as an async context manager.
    """

    def __init__(
        self,
        url: str,
        token: str,
        *,
        org: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            url: Server URL, e.g. ``http://localhost:8086``.
            token: API token sent as ``Authorization: Token <token>``.
            org: Default organization used by callers that need one.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport, mostly for tests.

        Raises:
            ValueError: If url is empty or timeout is not positive.
        """
        if not url:
            raise ValueError("url cannot be empty")
        if timeout <= 0:
            raise ValueError("timeout must be positive")

        self.base_url = url.rstrip("/")
        self.org = org
        self.timeout = timeout
        self._token = token
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "APIClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _get_headers(self) -> dict[str, str]:
        """Get HTTP headers with authentication."""
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "Authorization": f"Token {self._token}",
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def build_request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any]] = None,
        content: Optional[str] = None,
    ) -> httpx.Request:
        """Build an unsent request for ``path`` with the auth header attached."""
        return httpx.Request(
            method,
            f"{self.base_url}{path}",
            params=params or None,
            headers=self._get_headers(),
            content=content,
            extensions={"timeout": httpx.Timeout(self.timeout).as_dict()},
        )

    async def send(
        self,
        method: str,
        path: str,
        *,
        expected_status: int | range,
        result_type: Optional[type[T]] = None,
        params: BaseModel | Mapping[str, Any] | None = None,
        body: Optional[BaseModel] = None,
    ) -> Optional[T]:
        """Run one API operation.

        Args:
            method: HTTP method.
            path: Path below the server URL, e.g. ``/api/v2/labels``.
            expected_status: The status code treated as success, or a range
                of them (see :data:`SUCCESS`).
            result_type: Type the response body is parsed into. When None,
                the body is ignored and None is returned.
            params: Query filters; absent fields are left out.
            body: Request payload; absent fields are left out.

        Returns:
            The parsed response body, or None.

        Raises:
            SerializationError: If the body cannot be encoded.
            TransportError: If the request fails or the response body
                cannot be read.
            UnexpectedStatusError: If the status is not the expected one.
            DeserializationError: If the body does not parse into result_type.
        """
        content = None
        if body is not None:
            try:
                content = json.dumps(serialize(body))
            except (TypeError, ValueError) as e:
                raise SerializationError(
                    f"Cannot encode {type(body).__name__}: {e}"
                ) from e

        try:
            request = self.build_request(
                method, path, params=serialize(params), content=content
            )
            client = await self._get_client()
            logger.debug("sending %s %s", method, request.url)
            response = await client.send(request)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise TransportError(f"{method} {path} failed: {e}") from e

        if not _is_expected(response.status_code, expected_status):
            try:
                await response.aread()
                text = response.text
            except (httpx.RequestError, httpx.StreamError) as e:
                raise TransportError(
                    f"Could not read response body of {method} {path}: {e}"
                ) from e
            logger.warning(
                "%s %s returned unexpected status %s", method, path, response.status_code
            )
            raise UnexpectedStatusError(response.status_code, text)

        logger.debug("%s %s returned %s", method, path, response.status_code)
        if result_type is None:
            return None

        try:
            return _type_adapter(result_type).validate_json(response.content)
        except ValidationError as e:
            raise DeserializationError(response.status_code, response.text, str(e)) from e


def get_client(profile: str = "default") -> APIClient:
    """Get an API client configured from the stored profile."""
    config_manager = get_config_manager(profile)
    api_config = config_manager.config.api
    credentials = config_manager.load_credentials() or {}
    return APIClient(
        api_config.url,
        credentials.get("token", ""),
        org=api_config.org,
        timeout=api_config.timeout,
    )

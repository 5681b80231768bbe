"""Errors raised by the API client."""


class APIError(Exception):
    """Base exception for all API client errors."""


class TransportError(APIError):
    """Raised when the request could not be sent or the response not read."""


class SerializationError(APIError):
    """Raised when a request body cannot be encoded as JSON."""


class UnexpectedStatusError(APIError):
    """Raised when the server answers with a status other than the expected one.

    Attributes:
        status_code: HTTP status code of the response.
        text: Raw response body, unchanged.
    """

    def __init__(self, status_code: int, text: str):
        super().__init__(f"HTTP {status_code}: {text}")
        self.status_code = status_code
        self.text = text


class DeserializationError(APIError):
    """Raised when a successful response body does not match the expected shape."""

    def __init__(self, status_code: int, text: str, reason: str):
        super().__init__(f"Malformed response (HTTP {status_code}): {reason}")
        self.status_code = status_code
        self.text = text
        self.reason = reason

"""Exceptions raised by the VyOS client."""

import json
from typing import Any, Optional


class VyOSError(Exception):
    """Base class for all client errors."""


class VyOSConfigError(VyOSError):
    """Raised when client configuration is missing or invalid."""


class VyOSValidationError(VyOSError, ValueError):
    """Raised when arguments are rejected before any request is sent."""


class VyOSHTTPError(VyOSError):
    """Raised when the API answers with a status outside 200-299."""

    def __init__(self, status: int, body: bytes):
        self.status = status
        self.body = body
        super().__init__(
            f"non 2xx response code received, code: {status}, "
            f"resp: {body.decode('utf-8', errors='replace')}"
        )


class VyOSDecodeError(VyOSError):
    """Raised when the response body is not a valid API envelope."""

    def __init__(self, message: str, body: Optional[bytes] = None):
        super().__init__(message)
        self.body = body


class VyOSAPIError(VyOSError):
    """Raised when the API reports ``success: false``."""

    def __init__(self, error: Any, data: Any = None):
        super().__init__(format_api_error(error))
        self.error = error
        self.data = data


def format_api_error(error: Any) -> str:
    if error is None:
        return "unknown error"
    if isinstance(error, str):
        return error
    return json.dumps(error, ensure_ascii=False)

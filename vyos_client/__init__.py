"""vyos-client — async client for the VyOS HTTP configuration API."""

from vyos_client.config import ClientConfig, __version__
from vyos_client.errors import (
    VyOSAPIError,
    VyOSConfigError,
    VyOSDecodeError,
    VyOSError,
    VyOSHTTPError,
    VyOSValidationError,
)
from vyos_client.domain.models import Action, ApiResponse
from vyos_client.ports.outbound import TransportPort
from vyos_client.transport import HttpTransport
from vyos_client.client import VyOSClient

__all__ = [
    "__version__",
    "ClientConfig",
    "VyOSError",
    "VyOSConfigError",
    "VyOSValidationError",
    "VyOSHTTPError",
    "VyOSDecodeError",
    "VyOSAPIError",
    "Action",
    "ApiResponse",
    "TransportPort",
    "HttpTransport",
    "VyOSClient",
]

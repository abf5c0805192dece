"""Outbound ports — interfaces for the HTTP layer."""

from typing import Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class TransportPort(Protocol):
    """Interface for posting a request body to an API endpoint."""

    async def post(
        self,
        endpoint: str,
        body: bytes,
        content_type: str = "",
        params: Optional[Mapping[str, str]] = None,
    ) -> bytes: ...

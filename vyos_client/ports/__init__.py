"""Port interfaces (Hexagonal Architecture)."""

from vyos_client.ports.outbound import TransportPort

__all__ = ["TransportPort"]

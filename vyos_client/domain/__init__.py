"""Domain layer — pure Python, no framework dependencies."""

from vyos_client.domain.models import Action, ApiResponse, encode_actions
from vyos_client.domain.validation import (
    ensure_family,
    ensure_same_family,
    ensure_version,
    ip_family,
    parse_cidr,
    parse_ip,
    validate_interface,
    validate_rule_id,
)

__all__ = [
    "Action",
    "ApiResponse",
    "encode_actions",
    "ensure_family",
    "ensure_same_family",
    "ensure_version",
    "ip_family",
    "parse_cidr",
    "parse_ip",
    "validate_interface",
    "validate_rule_id",
]

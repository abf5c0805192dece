"""Address and argument validation.

Pure Python, no network access. Every helper raises
VyOSValidationError so callers can reject input before building actions.
"""

import ipaddress
from typing import Union

from vyos_client.domain.models import IP_VERSION_4, IP_VERSION_6
from vyos_client.errors import VyOSValidationError

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]
IPInterface = Union[ipaddress.IPv4Interface, ipaddress.IPv6Interface]

CIDR_HINT = "address must be in CIDR format, e.g. 192.168.1.1/24"


def _reject_scope(address, label: str, value: str) -> None:
    # Zoned IPv6 (fe80::1%eth0) is not valid in a config path
    if getattr(address, "scope_id", None):
        raise VyOSValidationError(f"invalid {label} {value!r}, scoped addresses are not supported")


def parse_cidr(value: str, label: str = "address") -> IPInterface:
    """Parse ``ip/prefix``. Host bits may be set."""
    if not isinstance(value, str) or "/" not in value:
        raise VyOSValidationError(f"invalid {label} {value!r}, {CIDR_HINT}")
    prefix = value.rsplit("/", 1)[1]
    # ipaddress also takes netmask notation (10.0.0.1/255.0.0.0); prefixes only
    if not prefix.isdigit():
        raise VyOSValidationError(f"invalid {label} {value!r}, {CIDR_HINT}")
    try:
        iface = ipaddress.ip_interface(value)
    except ValueError:
        raise VyOSValidationError(f"invalid {label} {value!r}, {CIDR_HINT}")
    _reject_scope(iface, label, value)
    return iface


def parse_ip(value: str, label: str = "ip") -> IPAddress:
    try:
        address = ipaddress.ip_address(value)
    except ValueError:
        raise VyOSValidationError(f"invalid {label} {value!r}")
    _reject_scope(address, label, value)
    return address


def ip_family(address: IPAddress) -> int:
    """Address family, counting IPv4-mapped IPv6 addresses as IPv4."""
    if isinstance(address, ipaddress.IPv6Address) and address.ipv4_mapped:
        return IP_VERSION_4
    return address.version


def ensure_same_family(first: IPAddress, second: IPAddress) -> None:
    if ip_family(first) != ip_family(second):
        raise VyOSValidationError(
            f"address family mismatch: {first} is IPv{ip_family(first)}, "
            f"{second} is IPv{ip_family(second)}"
        )


def ensure_version(version: int) -> int:
    if version not in (IP_VERSION_4, IP_VERSION_6):
        raise VyOSValidationError(f"invalid ip version {version!r}, expected 4 or 6")
    return version


def ensure_family(address: Union[IPAddress, IPInterface], version: int, label: str) -> None:
    actual = ip_family(address)
    if actual != version:
        raise VyOSValidationError(
            f"{label} {address} is IPv{actual}, expected IPv{version}"
        )


def validate_rule_id(rule_id: int) -> str:
    """Return the rule number as a path segment."""
    if isinstance(rule_id, bool) or not isinstance(rule_id, int) or rule_id < 1:
        raise VyOSValidationError(f"invalid rule id {rule_id!r}, must be a positive integer")
    return str(rule_id)


def validate_interface(name: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise VyOSValidationError("interface name must not be empty")
    return name

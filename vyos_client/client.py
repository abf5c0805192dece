"""VyOS HTTP API client.

Every operation validates its arguments, sends one request carrying one
action (or one ordered batch of actions) and decodes the
``{success, error, data}`` envelope. Changes made through ``configure``
are not persisted across reboots until ``save_config()`` is called.
"""

import logging
from typing import Any, List, Optional, Sequence, Union
from urllib.parse import urlencode

from vyos_client.config import ClientConfig
from vyos_client.domain.models import (
    DEFAULT_MTU,
    ENDPOINT_CONFIG_FILE,
    ENDPOINT_CONFIGURE,
    ENDPOINT_RETRIEVE,
    FORM_CONTENT_TYPE,
    IP_VERSION_6,
    OP_DELETE,
    OP_SAVE,
    OP_SET,
    OP_SHOW_CONFIG,
    Action,
    ApiResponse,
    encode_actions,
)
from vyos_client.domain.validation import (
    ensure_family,
    ensure_same_family,
    ensure_version,
    parse_cidr,
    parse_ip,
    validate_interface,
    validate_rule_id,
)
from vyos_client.errors import VyOSAPIError, VyOSValidationError
from vyos_client.ports.outbound import TransportPort
from vyos_client.transport import HttpTransport

logger = logging.getLogger(__name__)


def _ethernet_path(interface: str, *rest: str) -> List[str]:
    return ["interfaces", "ethernet", interface, *rest]


class VyOSClient:
    """Async client for the VyOS configuration API."""

    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[TransportPort] = None,
    ):
        self._config = config
        self._transport = transport or HttpTransport(config)

    @property
    def config(self) -> ClientConfig:
        return self._config

    # ── Executor ─────────────────────────────────────────────

    async def execute_action(self, endpoint: str, action: Action) -> bytes:
        """Send a single action."""
        return await self._execute(endpoint, action)

    async def execute_batch_action(self, endpoint: str, actions: Sequence[Action]) -> bytes:
        """Send several actions as one request, applied in order."""
        if not actions:
            raise VyOSValidationError("action batch must not be empty")
        return await self._execute(endpoint, list(actions))

    async def _execute(self, endpoint: str, actions: Union[Action, List[Action]]) -> bytes:
        payload = encode_actions(actions)
        body = urlencode({"data": payload, "key": self._config.api_key})
        logger.debug("%s <- %s", endpoint, payload)
        return await self._transport.post(
            endpoint, body.encode("utf-8"), FORM_CONTENT_TYPE,
        )

    @staticmethod
    def decode_response(body: Union[bytes, str]) -> ApiResponse:
        """Parse the envelope; raise VyOSAPIError when success is false."""
        resp = ApiResponse.from_json(body)
        if not resp.success:
            logger.warning("VyOS API reported failure: %s", resp.error)
            raise VyOSAPIError(resp.error, resp.data)
        return resp

    async def _run(self, endpoint: str, actions: Union[Action, List[Action]]) -> ApiResponse:
        if isinstance(actions, Action):
            body = await self.execute_action(endpoint, actions)
        else:
            body = await self.execute_batch_action(endpoint, actions)
        return self.decode_response(body)

    # ── Interfaces ───────────────────────────────────────────

    async def set_address(self, interface: str, address: str = "") -> None:
        """Set the interface MTU and, if given, a CIDR address on it.

        The MTU is always set. ``address`` is ip/prefix, e.g. 192.168.1.1/24.
        """
        validate_interface(interface)
        actions = [Action(OP_SET, _ethernet_path(interface, "mtu", DEFAULT_MTU))]
        if address:
            parse_cidr(address)
            actions.append(Action(OP_SET, _ethernet_path(interface, "address", address)))
        await self._run(ENDPOINT_CONFIGURE, actions)

    async def delete_address(self, interface: str, address: str = "") -> None:
        """Delete one address, or every address when none is given."""
        validate_interface(interface)
        path = _ethernet_path(interface, "address")
        if address:
            parse_cidr(address)
            path.append(address)
        await self._run(ENDPOINT_CONFIGURE, Action(OP_DELETE, path))

    async def delete_interface(self, interface: str) -> None:
        validate_interface(interface)
        await self._run(ENDPOINT_CONFIGURE, Action(OP_DELETE, _ethernet_path(interface)))

    # ── Persistence ──────────────────────────────────────────

    async def save_config(self) -> None:
        """Persist the running configuration to the boot config file."""
        await self._run(ENDPOINT_CONFIG_FILE, Action(OP_SAVE))

    # ── NAT ──────────────────────────────────────────────────

    async def add_snat(
        self,
        rule_id: int,
        source_ip: str,
        translation_ip: str,
        interface: str,
    ) -> None:
        """Create source NAT rule ``rule_id`` translating source_ip on egress."""
        rule = validate_rule_id(rule_id)
        validate_interface(interface)
        src = parse_ip(source_ip, "source ip")
        translation = parse_ip(translation_ip, "translation ip")
        ensure_same_family(src, translation)

        base = ["nat", "source", "rule", rule]
        await self._run(ENDPOINT_CONFIGURE, [
            Action(OP_SET, base + ["outbound-interface", interface]),
            Action(OP_SET, base + ["source", "address", source_ip]),
            Action(OP_SET, base + ["translation", "address", translation_ip]),
        ])

    async def delete_snat(self, rule_id: int) -> None:
        rule = validate_rule_id(rule_id)
        await self._run(ENDPOINT_CONFIGURE, Action(OP_DELETE, ["nat", "source", "rule", rule]))

    async def add_dnat(
        self,
        rule_id: int,
        destination_ip: str,
        translation_ip: str,
        interface: str,
    ) -> None:
        """Create destination NAT rule ``rule_id`` on the inbound interface."""
        rule = validate_rule_id(rule_id)
        validate_interface(interface)
        dst = parse_ip(destination_ip, "destination ip")
        translation = parse_ip(translation_ip, "translation ip")
        ensure_same_family(dst, translation)

        base = ["nat", "destination", "rule", rule]
        await self._run(ENDPOINT_CONFIGURE, [
            Action(OP_SET, base + ["inbound-interface", interface]),
            Action(OP_SET, base + ["destination", "address", destination_ip]),
            Action(OP_SET, base + ["translation", "address", translation_ip]),
        ])

    async def delete_dnat(self, rule_id: int) -> None:
        rule = validate_rule_id(rule_id)
        await self._run(ENDPOINT_CONFIGURE, Action(OP_DELETE, ["nat", "destination", "rule", rule]))

    # ── Routing ──────────────────────────────────────────────

    async def add_route(self, destination: str, next_hop: str, version: int) -> None:
        """Add a static route.

        ``destination`` is normalized to its network address, so
        192.168.1.5/24 is configured as 192.168.1.0/24.
        """
        ensure_version(version)
        dest = parse_cidr(destination, "destination")
        hop = parse_ip(next_hop, "next hop")
        ensure_family(dest, version, "destination")
        ensure_family(hop, version, "next hop")

        route_type = "route6" if version == IP_VERSION_6 else "route"
        path = ["protocols", "static", route_type, str(dest.network), "next-hop", next_hop]
        await self._run(ENDPOINT_CONFIGURE, Action(OP_SET, path))

    # ── Query ────────────────────────────────────────────────

    async def show_configuration(self, path: Optional[Sequence[str]] = None) -> Any:
        """Return the running configuration (or the subtree under ``path``)."""
        resp = await self._run(ENDPOINT_RETRIEVE, Action(OP_SHOW_CONFIG, path or []))
        return resp.data

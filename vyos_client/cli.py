"""Command line front-end for VyOSClient.

Usage:
    python -m vyos_client --host https://192.0.2.1 --insecure --save set-address eth1 10.0.0.1/24
    python -m vyos_client show

Connection options fall back to VYOS_HOST / VYOS_API_KEY /
VYOS_SKIP_TLS_VERIFY / VYOS_TIMEOUT (a .env file is honoured).
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, List, Optional

import aiohttp

from vyos_client.client import VyOSClient
from vyos_client.config import ClientConfig, __version__
from vyos_client.errors import VyOSError

logger = logging.getLogger(__name__)

# Subcommands that change the running configuration (eligible for --save)
MUTATING_COMMANDS = (
    "set-address",
    "delete-address",
    "delete-interface",
    "add-snat",
    "delete-snat",
    "add-dnat",
    "delete-dnat",
    "add-route",
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vyos-client",
        description="Configure a VyOS router through its HTTP API.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--host", help="API base URL, e.g. https://192.0.2.1")
    parser.add_argument("--api-key", help="API key sent with every request")
    parser.add_argument(
        "--insecure", action="store_true", default=None,
        help="Skip TLS certificate verification",
    )
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument(
        "--save", action="store_true",
        help="Persist the configuration after a successful change",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("set-address", help="Set MTU and optional CIDR address")
    p.add_argument("interface")
    p.add_argument("address", nargs="?", default="")

    p = sub.add_parser("delete-address", help="Delete one or all interface addresses")
    p.add_argument("interface")
    p.add_argument("address", nargs="?", default="")

    p = sub.add_parser("delete-interface", help="Delete an ethernet interface")
    p.add_argument("interface")

    sub.add_parser("save", help="Save the running configuration")

    for name, addr in (("add-snat", "source_ip"), ("add-dnat", "destination_ip")):
        p = sub.add_parser(name, help=f"Create a {name[4:].upper()} rule")
        p.add_argument("rule_id", type=int)
        p.add_argument(addr)
        p.add_argument("translation_ip")
        p.add_argument("interface")

    for name in ("delete-snat", "delete-dnat"):
        p = sub.add_parser(name, help=f"Delete a {name[7:].upper()} rule")
        p.add_argument("rule_id", type=int)

    p = sub.add_parser("add-route", help="Add a static route")
    p.add_argument("destination")
    p.add_argument("next_hop")
    p.add_argument("--ipv6", dest="version", action="store_const", const=6, default=4)

    p = sub.add_parser("show", help="Print the running configuration as JSON")
    p.add_argument("path", nargs="*", help="Optional configuration path")

    return parser


async def run_command(client: VyOSClient, args: argparse.Namespace) -> Any:
    cmd = args.command
    result = None
    if cmd == "set-address":
        await client.set_address(args.interface, args.address)
    elif cmd == "delete-address":
        await client.delete_address(args.interface, args.address)
    elif cmd == "delete-interface":
        await client.delete_interface(args.interface)
    elif cmd == "save":
        await client.save_config()
    elif cmd == "add-snat":
        await client.add_snat(args.rule_id, args.source_ip, args.translation_ip, args.interface)
    elif cmd == "delete-snat":
        await client.delete_snat(args.rule_id)
    elif cmd == "add-dnat":
        await client.add_dnat(args.rule_id, args.destination_ip, args.translation_ip, args.interface)
    elif cmd == "delete-dnat":
        await client.delete_dnat(args.rule_id)
    elif cmd == "add-route":
        await client.add_route(args.destination, args.next_hop, args.version)
    elif cmd == "show":
        result = await client.show_configuration(args.path)
    else:
        raise ValueError(f"Unknown command: {cmd}")

    if args.save and cmd in MUTATING_COMMANDS:
        logger.info("Saving configuration")
        await client.save_config()
    return result


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = ClientConfig.from_env(
            host=args.host,
            api_key=args.api_key,
            skip_tls_verify=args.insecure,
            timeout=args.timeout,
        )
        result = asyncio.run(run_command(VyOSClient(config), args))
    except (VyOSError, aiohttp.ClientError, asyncio.TimeoutError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.command == "show":
        print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0

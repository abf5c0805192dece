"""Tests for the command line front-end."""

import json
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from vyos_client import cli
from vyos_client.errors import VyOSAPIError, VyOSValidationError


@pytest.fixture(autouse=True)
def _no_dotenv(monkeypatch):
    monkeypatch.setattr("vyos_client.config.load_dotenv", lambda: None)
    for name in ("VYOS_HOST", "VYOS_API_KEY", "VYOS_SKIP_TLS_VERIFY", "VYOS_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_client(monkeypatch):
    """Replace VyOSClient in the cli module; returns (client mock, captured configs)."""
    client = MagicMock()
    for name in (
        "set_address", "delete_address", "delete_interface", "save_config",
        "add_snat", "delete_snat", "add_dnat", "delete_dnat", "add_route",
        "show_configuration",
    ):
        setattr(client, name, AsyncMock(return_value=None))
    configs = []

    def factory(config):
        configs.append(config)
        return client

    monkeypatch.setattr("vyos_client.cli.VyOSClient", factory)
    return client, configs


class TestMain:
    def test_set_address(self, fake_client):
        client, configs = fake_client
        rc = cli.main(["--host", "http://r", "set-address", "eth1", "10.0.0.1/24"])
        assert rc == 0
        client.set_address.assert_awaited_once_with("eth1", "10.0.0.1/24")
        client.save_config.assert_not_awaited()
        assert configs[0].host == "http://r"

    def test_connection_options(self, fake_client):
        _, configs = fake_client
        cli.main([
            "--host", "https://r", "--api-key", "k", "--insecure", "--timeout", "3",
            "delete-interface", "eth2",
        ])
        assert configs[0].api_key == "k"
        assert configs[0].skip_tls_verify is True
        assert configs[0].timeout == 3.0

    def test_host_from_env(self, fake_client, monkeypatch):
        _, configs = fake_client
        monkeypatch.setenv("VYOS_HOST", "http://env-host")
        assert cli.main(["save"]) == 0
        assert configs[0].host == "http://env-host"

    def test_save_after_change(self, fake_client):
        client, _ = fake_client
        cli.main(["--host", "http://r", "--save", "add-snat", "10", "10.0.0.1", "8.8.8.8", "eth2"])
        client.add_snat.assert_awaited_once_with(10, "10.0.0.1", "8.8.8.8", "eth2")
        client.save_config.assert_awaited_once()

    def test_save_flag_ignored_for_show(self, fake_client):
        client, _ = fake_client
        cli.main(["--host", "http://r", "--save", "show"])
        client.save_config.assert_not_awaited()

    def test_add_dnat(self, fake_client):
        client, _ = fake_client
        cli.main(["--host", "http://r", "add-dnat", "7", "8.8.8.8", "10.0.0.5", "eth0"])
        client.add_dnat.assert_awaited_once_with(7, "8.8.8.8", "10.0.0.5", "eth0")

    def test_delete_rules(self, fake_client):
        client, _ = fake_client
        cli.main(["--host", "http://r", "delete-snat", "3"])
        cli.main(["--host", "http://r", "delete-dnat", "4"])
        client.delete_snat.assert_awaited_once_with(3)
        client.delete_dnat.assert_awaited_once_with(4)

    def test_add_route_versions(self, fake_client):
        client, _ = fake_client
        cli.main(["--host", "http://r", "add-route", "10.1.0.0/16", "10.0.0.1"])
        client.add_route.assert_awaited_with("10.1.0.0/16", "10.0.0.1", 4)
        cli.main(["--host", "http://r", "add-route", "fd00::/64", "fd00::1", "--ipv6"])
        client.add_route.assert_awaited_with("fd00::/64", "fd00::1", 6)

    def test_delete_address_default(self, fake_client):
        client, _ = fake_client
        cli.main(["--host", "http://r", "delete-address", "eth1"])
        client.delete_address.assert_awaited_once_with("eth1", "")

    def test_show_prints_json(self, fake_client, capsys):
        client, _ = fake_client
        client.show_configuration.return_value = {"interfaces": {"ethernet": {}}}
        rc = cli.main(["--host", "http://r", "show", "interfaces"])
        assert rc == 0
        client.show_configuration.assert_awaited_once_with(["interfaces"])
        assert json.loads(capsys.readouterr().out) == {"interfaces": {"ethernet": {}}}


class TestErrors:
    def test_missing_host(self, fake_client, capsys):
        assert cli.main(["save"]) == 1
        assert "VYOS_HOST" in capsys.readouterr().err

    def test_api_error(self, fake_client, capsys):
        client, _ = fake_client
        client.delete_interface.side_effect = VyOSAPIError("no such interface")
        assert cli.main(["--host", "http://r", "delete-interface", "eth9"]) == 1
        assert "no such interface" in capsys.readouterr().err

    def test_validation_error(self, fake_client):
        client, _ = fake_client
        client.add_route.side_effect = VyOSValidationError("bad")
        assert cli.main(["--host", "http://r", "add-route", "x", "y"]) == 1

    def test_network_error(self, fake_client, capsys):
        client, _ = fake_client
        client.save_config.side_effect = aiohttp.ClientConnectionError("refused")
        assert cli.main(["--host", "http://r", "save"]) == 1
        assert "refused" in capsys.readouterr().err

    def test_usage_error(self):
        with pytest.raises(SystemExit) as exc:
            cli.main(["add-snat", "not-a-number"])
        assert exc.value.code == 2


class TestParser:
    def test_mutating_commands_exist(self):
        parser = cli.build_parser()
        subparsers = next(
            a for a in parser._actions if a.dest == "command"
        )
        for name in cli.MUTATING_COMMANDS:
            assert name in subparsers.choices

    def test_usage_examples_parse(self):
        parser = cli.build_parser()
        examples = [
            line.split("python -m vyos_client", 1)[1].split()
            for line in cli.__doc__.splitlines()
            if "python -m vyos_client" in line
        ]
        assert examples
        for argv in examples:
            args = parser.parse_args(argv)
            assert args.command in ("set-address", "show")
        assert parser.parse_args(examples[0]).save is True

"""Tests for the command-line interface."""

import json

import pytest
from typer.testing import CliRunner

from pvelxc import __version__
from pvelxc.cli import _shared
from pvelxc.cli.main import app
from pvelxc.commands import CommandFacade
from pvelxc.models.config import DisplayConfig
from pvelxc.utils import console

from conftest import HOST, NODE

LXC = f"/nodes/{NODE}/lxc"

runner = CliRunner()


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    monkeypatch.setattr(console, "width", 200)


@pytest.fixture
def use_facade(monkeypatch, make_client):
    """Make CLI commands use a client wired to the fake API."""

    def _install(initialized: bool = True) -> None:
        def factory(env_file=None):
            client = make_client() if initialized else None
            return CommandFacade(client, DisplayConfig(host=HOST, node=NODE))

        monkeypatch.setattr(_shared, "create_facade", factory)

    return _install


def test_version():
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_list_table(use_facade, fake_api):
    use_facade()
    fake_api.add_json(
        "GET",
        LXC,
        [
            {"vmid": 101, "status": "running", "name": "web", "maxmem": 1024, "mem": 512},
            {"vmid": 100, "status": "stopped"},
        ],
    )
    fake_api.add_json("GET", f"{LXC}/101/interfaces", [{"name": "eth0", "inet": "10.0.0.5/24"}])

    result = runner.invoke(app, ["ct", "list"])

    assert result.exit_code == 0, result.output
    assert "web" in result.output
    assert "CT-100" in result.output
    assert "10.0.0.5" in result.output


def test_list_json_with_status_filter(use_facade, fake_api):
    use_facade()
    fake_api.add_json(
        "GET",
        LXC,
        [{"vmid": 101, "status": "stopped"}, {"vmid": 102, "status": "paused"}],
    )

    result = runner.invoke(app, ["ct", "list", "--status", "stopped", "--json"])

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert [ct["vmid"] for ct in data] == [101]
    assert data[0]["name"] == "CT-101"


def test_list_api_error(use_facade, fake_api):
    use_facade()
    fake_api.add("GET", LXC, (500, {"data": None}))

    result = runner.invoke(app, ["ct", "list"])

    assert result.exit_code == 1
    assert "500" in result.output


def test_start(use_facade, fake_api):
    use_facade()
    fake_api.add_json("POST", f"{LXC}/101/status/start", "UPID:pve:1")

    result = runner.invoke(app, ["ct", "start", "101"])

    assert result.exit_code == 0, result.output
    assert "Container 101 started successfully" in result.output


def test_start_http_500(use_facade, fake_api):
    use_facade()
    fake_api.add("POST", f"{LXC}/101/status/start", (500, {"data": None}))

    result = runner.invoke(app, ["ct", "start", "101"])

    assert result.exit_code == 1
    assert "500" in result.output
    assert "started successfully" not in result.output


def test_stop_with_yes(use_facade, fake_api):
    use_facade()
    fake_api.add_json("POST", f"{LXC}/101/status/stop", "UPID:pve:1")

    result = runner.invoke(app, ["ct", "stop", "101", "--yes"])

    assert result.exit_code == 0, result.output
    assert len(fake_api.calls("POST", f"{LXC}/101/status/stop")) == 1


def test_delete_cancelled(use_facade, fake_api):
    use_facade()

    result = runner.invoke(app, ["ct", "delete", "101"], input="n\n")

    assert result.exit_code == 0
    assert "Cancelled" in result.output
    assert fake_api.requests == []


def test_delete_confirmed(use_facade, fake_api):
    use_facade()
    fake_api.add_json("DELETE", f"{LXC}/101", "UPID:pve:1")

    result = runner.invoke(app, ["ct", "delete", "101"], input="y\n")

    assert result.exit_code == 0, result.output
    assert "Container 101 deleted successfully" in result.output


def test_not_initialized(use_facade, fake_api):
    use_facade(initialized=False)

    result = runner.invoke(app, ["ct", "start", "101"])

    assert result.exit_code == 1
    assert "Proxmox client not initialized" in result.output
    assert fake_api.requests == []


def test_node_config(use_facade):
    use_facade(initialized=False)

    result = runner.invoke(app, ["node", "config"])

    assert result.exit_code == 0
    assert HOST in result.output
    assert "not initialized" in result.output


def test_node_status(use_facade, fake_api):
    use_facade()
    fake_api.add_json(
        "GET",
        f"/nodes/{NODE}/status",
        {"cpu": 0.1, "cpuinfo": {"cpus": 4, "model": "Xeon"}, "uptime": 90061},
    )
    fake_api.add_json("GET", f"/nodes/{NODE}/version", {"version": "8.3.0"})

    result = runner.invoke(app, ["node", "status"])

    assert result.exit_code == 0, result.output
    assert "8.3.0" in result.output
    assert "1d 1h 1m" in result.output

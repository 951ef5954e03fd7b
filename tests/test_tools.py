"""Tests for MCP report tools."""

import pytest
from mcp.server.fastmcp import FastMCP

from devmatrix.devices import REGISTRY
from devmatrix.project.config import CONFIG_PATH
from devmatrix.tools import report as report_tools


@pytest.fixture
def tools():
    mcp = FastMCP("test")
    report_tools.register_tools(mcp)
    return {t.name: t.fn for t in mcp._tool_manager._tools.values()}


class TestToolRegistration:
    def test_all_tools_register(self, tools):
        assert set(tools) == {
            "print_target",
            "supported_devices",
            "list_devices",
            "device_logs",
        }

    def test_server_module_registers(self):
        from devmatrix.server import mcp

        names = {t.name for t in mcp._tool_manager._tools.values()}
        assert "supported_devices" in names


class TestPrintTarget:
    def test_explicit_root(self, tools, tmp_path):
        path = tmp_path / CONFIG_PATH
        path.parent.mkdir()
        path.write_text('[build]\ntarget = "thumbv7em-none-eabihf"\n')
        result = tools["print_target"](project_root=str(tmp_path))
        assert result["target"] == "thumbv7em-none-eabihf"
        assert result["project_root"] == str(tmp_path.resolve())

    def test_discovered_root(self, tools, tmp_path, monkeypatch):
        monkeypatch.setenv("CARGO_MANIFEST_DIR", str(tmp_path))
        result = tools["print_target"]()
        assert "error" in result
        assert CONFIG_PATH in result["error"]


class TestSupportedDevices:
    def test_matrix(self, tools):
        result = tools["supported_devices"]()
        assert result["count"] == len(REGISTRY)
        first = result["devices"][0]
        assert first["name"] == "nrf52840"
        assert first["probes"]["bmp"] == {
            "supported": True,
            "logs": ["swoprobe", "swoserial", "dsoserial"],
        }

    def test_unsupported_probe(self, tools):
        result = tools["supported_devices"]()
        f103 = next(d for d in result["devices"] if d["name"] == "stm32f103")
        assert f103["probes"]["jlink"] == {"supported": False, "logs": []}


class TestListDevices:
    def test_summaries(self, tools):
        result = tools["list_devices"]()
        assert [d["name"] for d in result["devices"]] == [d.name for d in REGISTRY]


class TestDeviceLogs:
    def test_known_pair(self, tools):
        result = tools["device_logs"](device="gd32vf103", probe="jlink")
        assert result == {
            "device": "gd32vf103",
            "probe": "jlink",
            "supported": True,
            "logs": ["dsoserial"],
        }

    def test_unknown_device(self, tools):
        assert "error" in tools["device_logs"](device="nope", probe="bmp")

    def test_unknown_probe(self, tools):
        assert "error" in tools["device_logs"](device="nrf52840", probe="stlink")

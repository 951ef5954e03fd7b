"""Report tools: print_target, supported_devices, list_devices, device_logs."""

from __future__ import annotations

from pathlib import Path

from devmatrix.compat import resolve
from devmatrix.devices import REGISTRY, Device, get_device
from devmatrix.errors import DevmatrixError
from devmatrix.probes import Probe, get_probe
from devmatrix.project.config import resolve_target
from devmatrix.project.root import find_project_root


def _probe_entry(device: Device, probe: Probe) -> dict:
    if not device.supports(probe):
        return {"supported": False, "logs": []}
    return {
        "supported": True,
        "logs": [c.value for c in resolve(device, probe)],
    }


def register_tools(mcp) -> None:
    """Register reporting tools with the MCP server."""

    @mcp.tool()
    def print_target(project_root: str | None = None) -> dict:
        """Report the build target triple configured for a firmware project.

        Args:
            project_root: Project directory. Discovered from the working
                directory (nearest Cargo.toml) if omitted.
        """
        try:
            if project_root:
                root = Path(project_root).resolve()
            else:
                root = find_project_root()
            return {"project_root": str(root), "target": resolve_target(root)}
        except DevmatrixError as e:
            return {"error": str(e)}

    @mcp.tool()
    def supported_devices() -> dict:
        """Device x probe compatibility matrix with usable log channels."""
        devices = [
            {
                "name": device.name,
                "probes": {p.value: _probe_entry(device, p) for p in Probe},
            }
            for device in REGISTRY
        ]
        return {"devices": devices, "count": len(devices)}

    @mcp.tool()
    def list_devices() -> dict:
        """List known devices with their target triple and memory layout."""
        return {"devices": [d.to_dict() for d in REGISTRY]}

    @mcp.tool()
    def device_logs(device: str, probe: str) -> dict:
        """Log channels usable for one device over one probe.

        Args:
            device: Device name (see list_devices).
            probe: Probe kind: bmp, jlink, or openocd.
        """
        try:
            dev = get_device(device)
            kind = get_probe(probe)
        except ValueError as e:
            return {"error": str(e)}
        return {"device": dev.name, "probe": kind.value, **_probe_entry(dev, kind)}

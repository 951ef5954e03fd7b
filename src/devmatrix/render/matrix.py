"""Device x probe compatibility table."""

from __future__ import annotations

from collections.abc import Iterable

from rich import box
from rich.console import Console
from rich.measure import Measurement
from rich.table import Table

from devmatrix.compat import resolve
from devmatrix.devices import REGISTRY, Device
from devmatrix.errors import OutputWriteError
from devmatrix.probes import LOG_AVAILABILITY, LogChannel, Probe
from devmatrix.render.color import Color

UNSUPPORTED = "--"
LOG_PREFIX = "--log"

Availability = frozenset[tuple[Probe, LogChannel]]

# Upper bound used when measuring the table's natural width.
_MEASURE_WIDTH = 10_000


def header_row(color: Color) -> list[str]:
    return ["--device", *(f"--probe {color.bold(p.value)}" for p in Probe)]


def probe_cell(
    device: Device,
    probe: Probe,
    color: Color,
    availability: Availability = LOG_AVAILABILITY,
) -> str:
    """Format one (device, probe) cell.

    "--" when the device can't be driven by the probe, a bare "--log"
    when it can but no log channel is usable, otherwise "--log" followed
    by the channel ids joined with "/".
    """
    if not device.supports(probe):
        return UNSUPPORTED
    channels = resolve(device, probe, availability)
    if not channels:
        return LOG_PREFIX
    return f"{LOG_PREFIX} " + "/".join(color.bold(c.value) for c in channels)


def matrix_rows(
    devices: Iterable[Device] = REGISTRY,
    color: Color = Color.NEVER,
    availability: Availability = LOG_AVAILABILITY,
) -> list[list[str]]:
    """Body rows of the table, one per device in the given order."""
    return [
        [color.bold(device.name)]
        + [probe_cell(device, probe, color, availability) for probe in Probe]
        for device in devices
    ]


def build_table(
    devices: Iterable[Device] = REGISTRY,
    color: Color = Color.NEVER,
    availability: Availability = LOG_AVAILABILITY,
) -> Table:
    """Borderless table with a single rule under the header.

    Cells never wrap or truncate; column widths come from their content.
    """
    table = Table(box=box.SIMPLE_HEAD, show_edge=False, header_style="")
    for header in header_row(color):
        table.add_column(header, no_wrap=True, overflow="ignore")
    for row in matrix_rows(devices, color, availability):
        table.add_row(*row)
    return table


def supported_devices(
    color: Color,
    console: Console | None = None,
    devices: Iterable[Device] = REGISTRY,
    availability: Availability = LOG_AVAILABILITY,
) -> None:
    """Print the compatibility table.

    Raises OutputWriteError if the output stream can't be written.
    """
    if console is None:
        console = color.console()
    table = build_table(devices, color, availability)
    # Lay out at natural width even when the console is narrower.
    table.width = Measurement.get(
        console, console.options.update_width(_MEASURE_WIDTH), table
    ).maximum
    try:
        console.print(table, crop=False)
    except OSError as e:
        raise OutputWriteError(f"Failed to write output: {e}") from e

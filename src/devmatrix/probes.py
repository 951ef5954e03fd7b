"""Probe kinds, log channels, and which probes can carry which channels."""

from __future__ import annotations

from enum import Enum


class Probe(Enum):
    """Debug/flash probe kinds, in matrix column order."""

    BMP = "bmp"
    JLINK = "jlink"
    OPENOCD = "openocd"


class LogSource(Enum):
    """Device-level log output sources."""

    SWO = "swo"
    DSO = "dso"


class LogChannel(Enum):
    """Log transports, in display priority order."""

    SWO_PROBE = "swoprobe"
    SWO_SERIAL = "swoserial"
    DSO_SERIAL = "dsoserial"

    @property
    def source(self) -> LogSource:
        """The device log source this channel reads from."""
        if self is LogChannel.SWO_PROBE or self is LogChannel.SWO_SERIAL:
            return LogSource.SWO
        if self is LogChannel.DSO_SERIAL:
            return LogSource.DSO
        raise AssertionError(f"Unhandled log channel {self!r}")


# Which probe kinds can physically carry which log channels,
# independent of any device.
LOG_AVAILABILITY: frozenset[tuple[Probe, LogChannel]] = frozenset({
    (Probe.BMP, LogChannel.SWO_PROBE),
    (Probe.BMP, LogChannel.SWO_SERIAL),
    (Probe.BMP, LogChannel.DSO_SERIAL),
    (Probe.JLINK, LogChannel.DSO_SERIAL),
    (Probe.OPENOCD, LogChannel.SWO_PROBE),
    (Probe.OPENOCD, LogChannel.SWO_SERIAL),
    (Probe.OPENOCD, LogChannel.DSO_SERIAL),
})


def probe_carries(
    probe: Probe,
    channel: LogChannel,
    availability: frozenset[tuple[Probe, LogChannel]] = LOG_AVAILABILITY,
) -> bool:
    """Return True if the probe kind can carry the log channel."""
    return (probe, channel) in availability


def get_probe(name: str) -> Probe:
    """Look up a probe kind by its identifier.

    Raises ValueError if the identifier is unknown.
    """
    try:
        return Probe(name.lower())
    except ValueError:
        available = ", ".join(p.value for p in Probe)
        raise ValueError(
            f"Unknown probe '{name}'. Available: {available}"
        ) from None

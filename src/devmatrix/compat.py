"""Resolve which log channels are usable over a device/probe pairing."""

from __future__ import annotations

import logging

from devmatrix.devices import Device
from devmatrix.probes import LOG_AVAILABILITY, LogChannel, Probe, probe_carries

logger = logging.getLogger(__name__)


def resolve(
    device: Device,
    probe: Probe,
    availability: frozenset[tuple[Probe, LogChannel]] = LOG_AVAILABILITY,
) -> tuple[LogChannel, ...]:
    """Return the log channels available for a device over a probe.

    A channel is included when the device declares the channel's log
    source and the probe kind can carry the channel. Channels come back
    in LogChannel declaration order. A probe the device doesn't support
    yields no channels; callers should check Device.supports() first to
    tell that case apart from "supported, no logging".
    """
    if not device.supports(probe):
        return ()

    channels = tuple(
        channel
        for channel in LogChannel
        if device.has_log_source(channel.source)
        and probe_carries(probe, channel, availability)
    )
    logger.debug(
        "%s over %s: %s",
        device.name,
        probe.value,
        "/".join(c.value for c in channels) or "no log channels",
    )
    return channels

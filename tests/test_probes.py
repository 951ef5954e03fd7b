"""Tests for probe kinds, log channels, and the availability table."""

import pytest

from devmatrix.probes import (
    LOG_AVAILABILITY,
    LogChannel,
    LogSource,
    Probe,
    get_probe,
    probe_carries,
)


class TestEnums:
    def test_probe_order(self):
        assert [p.value for p in Probe] == ["bmp", "jlink", "openocd"]

    def test_channel_order(self):
        assert [c.value for c in LogChannel] == ["swoprobe", "swoserial", "dsoserial"]

    def test_channel_sources(self):
        assert LogChannel.SWO_PROBE.source is LogSource.SWO
        assert LogChannel.SWO_SERIAL.source is LogSource.SWO
        assert LogChannel.DSO_SERIAL.source is LogSource.DSO


class TestAvailability:
    def test_bmp_carries_everything(self):
        for channel in LogChannel:
            assert probe_carries(Probe.BMP, channel)

    def test_jlink_only_dso(self):
        assert probe_carries(Probe.JLINK, LogChannel.DSO_SERIAL)
        assert not probe_carries(Probe.JLINK, LogChannel.SWO_PROBE)
        assert not probe_carries(Probe.JLINK, LogChannel.SWO_SERIAL)

    def test_custom_table(self):
        table = frozenset({(Probe.OPENOCD, LogChannel.SWO_SERIAL)})
        assert probe_carries(Probe.OPENOCD, LogChannel.SWO_SERIAL, table)
        assert not probe_carries(Probe.BMP, LogChannel.SWO_SERIAL, table)

    def test_entries_are_typed(self):
        for probe, channel in LOG_AVAILABILITY:
            assert isinstance(probe, Probe)
            assert isinstance(channel, LogChannel)


class TestGetProbe:
    def test_known(self):
        assert get_probe("jlink") is Probe.JLINK

    def test_case_insensitive(self):
        assert get_probe("OpenOCD") is Probe.OPENOCD

    def test_unknown_lists_available(self):
        with pytest.raises(ValueError, match="Unknown probe 'stlink'.*bmp, jlink, openocd"):
            get_probe("stlink")

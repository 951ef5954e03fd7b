"""Registry of supported devices and their probe and log support."""

from __future__ import annotations

from dataclasses import dataclass

from devmatrix.probes import LogSource, Probe


@dataclass(frozen=True)
class ProbeBmp:
    """Black Magic Probe configuration."""

    target_name: str


@dataclass(frozen=True)
class ProbeJlink:
    """SEGGER J-Link configuration."""

    device: str
    interface: str = "SWD"
    speed: int = 4000


@dataclass(frozen=True)
class ProbeOpenocd:
    """OpenOCD configuration (script arguments)."""

    arguments: tuple[str, ...]


@dataclass(frozen=True)
class LogSwo:
    """Device exposes an ITM/SWO log source."""

    reset_freq: int


@dataclass(frozen=True)
class LogDso:
    """Device exposes a debug-serial-output log source."""


@dataclass(frozen=True)
class Device:
    """A supported hardware target."""

    name: str
    target: str
    flash_origin: int
    ram_origin: int
    ram_size: int
    probe_bmp: ProbeBmp | None = None
    probe_jlink: ProbeJlink | None = None
    probe_openocd: ProbeOpenocd | None = None
    log_swo: LogSwo | None = None
    log_dso: LogDso | None = None

    def probe_support(self, probe: Probe) -> ProbeBmp | ProbeJlink | ProbeOpenocd | None:
        """Return the descriptor for a probe kind, or None if unsupported."""
        if probe is Probe.BMP:
            return self.probe_bmp
        if probe is Probe.JLINK:
            return self.probe_jlink
        if probe is Probe.OPENOCD:
            return self.probe_openocd
        raise AssertionError(f"Unhandled probe {probe!r}")

    def supports(self, probe: Probe) -> bool:
        return self.probe_support(probe) is not None

    def has_log_source(self, source: LogSource) -> bool:
        if source is LogSource.SWO:
            return self.log_swo is not None
        if source is LogSource.DSO:
            return self.log_dso is not None
        raise AssertionError(f"Unhandled log source {source!r}")

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "target": self.target,
            "flash_origin": f"0x{self.flash_origin:08X}",
            "ram_origin": f"0x{self.ram_origin:08X}",
            "ram_size": self.ram_size,
            "probes": [p.value for p in Probe if self.supports(p)],
            "log_sources": [s.value for s in LogSource if self.has_log_source(s)],
        }


def _openocd(*scripts: str) -> ProbeOpenocd:
    args: list[str] = []
    for script in scripts:
        args.extend(["-f", script])
    return ProbeOpenocd(arguments=tuple(args))


_STM32_SWO = LogSwo(reset_freq=16_000_000)

# Declaration order is the row order of the supported-devices table.
REGISTRY: tuple[Device, ...] = (
    Device(
        name="nrf52840",
        target="thumbv7em-none-eabihf",
        flash_origin=0x0000_0000,
        ram_origin=0x2000_0000,
        ram_size=256 * 1024,
        probe_bmp=ProbeBmp(target_name="nRF52"),
        probe_jlink=ProbeJlink(device="nRF52840_xxAA"),
        probe_openocd=_openocd("interface/jlink.cfg", "target/nrf52.cfg"),
        log_swo=LogSwo(reset_freq=64_000_000),
        log_dso=LogDso(),
    ),
    Device(
        name="nrf9160",
        target="thumbv8m.main-none-eabihf",
        flash_origin=0x0000_0000,
        ram_origin=0x2000_0000,
        ram_size=256 * 1024,
        probe_jlink=ProbeJlink(device="nRF9160_xxAA"),
        log_dso=LogDso(),
    ),
    Device(
        name="stm32f103",
        target="thumbv7m-none-eabi",
        flash_origin=0x0800_0000,
        ram_origin=0x2000_0000,
        ram_size=20 * 1024,
        probe_bmp=ProbeBmp(target_name="STM32F1 medium density"),
        probe_openocd=_openocd("interface/stlink.cfg", "target/stm32f1x.cfg"),
        log_swo=LogSwo(reset_freq=8_000_000),
    ),
    Device(
        name="stm32f303",
        target="thumbv7em-none-eabihf",
        flash_origin=0x0800_0000,
        ram_origin=0x2000_0000,
        ram_size=40 * 1024,
        probe_bmp=ProbeBmp(target_name="STM32F3"),
        probe_openocd=_openocd("interface/stlink.cfg", "target/stm32f3x.cfg"),
        log_swo=LogSwo(reset_freq=8_000_000),
    ),
    Device(
        name="stm32f401",
        target="thumbv7em-none-eabihf",
        flash_origin=0x0800_0000,
        ram_origin=0x2000_0000,
        ram_size=96 * 1024,
        probe_bmp=ProbeBmp(target_name="STM32F4"),
        probe_jlink=ProbeJlink(device="STM32F401RE"),
        probe_openocd=_openocd("interface/stlink.cfg", "target/stm32f4x.cfg"),
        log_swo=_STM32_SWO,
    ),
    Device(
        name="stm32f407",
        target="thumbv7em-none-eabihf",
        flash_origin=0x0800_0000,
        ram_origin=0x2000_0000,
        ram_size=112 * 1024,
        probe_bmp=ProbeBmp(target_name="STM32F4"),
        probe_jlink=ProbeJlink(device="STM32F407VG"),
        probe_openocd=_openocd("interface/stlink.cfg", "target/stm32f4x.cfg"),
        log_swo=_STM32_SWO,
    ),
    Device(
        name="stm32f429",
        target="thumbv7em-none-eabihf",
        flash_origin=0x0800_0000,
        ram_origin=0x2000_0000,
        ram_size=112 * 1024,
        probe_bmp=ProbeBmp(target_name="STM32F4"),
        probe_jlink=ProbeJlink(device="STM32F429ZI"),
        probe_openocd=_openocd("interface/stlink.cfg", "target/stm32f4x.cfg"),
        log_swo=_STM32_SWO,
    ),
    Device(
        name="stm32l4r5",
        target="thumbv7em-none-eabihf",
        flash_origin=0x0800_0000,
        ram_origin=0x2000_0000,
        ram_size=192 * 1024,
        probe_bmp=ProbeBmp(target_name="STM32L4"),
        probe_openocd=_openocd("interface/stlink.cfg", "target/stm32l4x.cfg"),
        log_swo=LogSwo(reset_freq=4_000_000),
    ),
    Device(
        name="gd32vf103",
        target="riscv32imac-unknown-none-elf",
        flash_origin=0x0800_0000,
        ram_origin=0x2000_0000,
        ram_size=32 * 1024,
        probe_bmp=ProbeBmp(target_name="GD32VF103"),
        probe_jlink=ProbeJlink(device="GD32VF103VBT6", interface="JTAG"),
        log_dso=LogDso(),
    ),
)


def get_device(name: str) -> Device:
    """Look up a device by name.

    Raises ValueError if the device isn't in the registry.
    """
    for device in REGISTRY:
        if device.name == name:
            return device
    available = ", ".join(list_devices())
    raise ValueError(f"Unknown device '{name}'. Available: {available}")


def list_devices() -> list[str]:
    """Return device names in registry order."""
    return [d.name for d in REGISTRY]

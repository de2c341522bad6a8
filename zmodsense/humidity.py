"""Common pieces of the HS3xxx / HS4xxx humidity and temperature sensors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .hal import HalError, HalErrorCode, Interface, hal_error_string

HS3XXX_ADDRESS = 0x44
HS4XXX_ADDRESS = 0x54

_DURATIONS_MS = {
    HS3XXX_ADDRESS: 35,
    HS4XXX_ADDRESS: 2,
}

RAW_FULL_SCALE = 0x3FFF


@dataclass
class HumidityResult:
    """One humidity/temperature reading."""

    temperature: float
    humidity: float

    @classmethod
    def from_raw(cls, raw_humidity, raw_temperature):
        """Convert 14-bit raw readings to degrees Celsius and percent."""
        return cls(
            temperature=165 * raw_temperature / RAW_FULL_SCALE - 40,
            humidity=100 * raw_humidity / RAW_FULL_SCALE,
        )


class HumiditySensor:
    """A humidity sensor reached through an interface at an I2C address."""

    def __init__(self, interface: Optional[Interface], i2c_address):
        self.interface = interface
        self.i2c_address = i2c_address

    def measurement_duration(self):
        """Milliseconds one measurement cycle takes; 0 for an unknown sensor."""
        return _DURATIONS_MS.get(self.i2c_address, 0)

    def _hal_error(self, code, scope=None):
        scope = self.i2c_address if scope is None else scope
        return HalError(code, scope, hal_error_string(code, scope))

    def _bus(self) -> Interface:
        if self.interface is None:
            raise self._hal_error(HalErrorCode.NO_INTERFACE)
        return self.interface

    def _read(self, write_data, size):
        bus = self._bus()
        data = bytes(bus.i2c_read(bus.handle, self.i2c_address, bytes(write_data), size))
        if len(data) < size:
            raise ValueError(
                f"sensor at 0x{self.i2c_address:02X} returned {len(data)} of {size} bytes"
            )
        return data[:size]

    def _write(self, data1=b"", data2=b""):
        bus = self._bus()
        bus.i2c_write(bus.handle, self.i2c_address, bytes(data1), bytes(data2))
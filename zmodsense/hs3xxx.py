"""Driver for HS3xxx humidity and temperature sensors."""

from __future__ import annotations

from enum import IntEnum

from .hal import HalError, HalErrorCode, Interface
from .humidity import HS3XXX_ADDRESS, HumidityResult, HumiditySensor

MEASUREMENT_TIME_MS = 35


class HS3xxxErrorCode(IntEnum):
    """Errors specific to the HS3xxx."""

    STALE_DATA = 1


def _hs3xxx_error_string(error):
    if error == HS3xxxErrorCode.STALE_DATA:
        return "HS3xxx Error: Stale data - new data is not yet ready for readout."
    return f"HS3xxx Error: Unkown error code {error}"


class HS3xxx(HumiditySensor):
    """An HS3xxx sensor at its fixed address 0x44."""

    def __init__(self, hal: Interface):
        super().__init__(None, HS3XXX_ADDRESS)
        if hal.i2c_write is None:
            raise self._hal_error(HalErrorCode.I2C_WRITE_MISSING)
        if hal.i2c_read is None:
            raise self._hal_error(HalErrorCode.I2C_READ_MISSING)
        self.interface = hal
        try:
            self._write()
        except Exception:
            self.interface = None
            raise

    def read_id(self):
        """Not supported by the HS3xxx."""
        raise self._hal_error(HalErrorCode.NOT_IMPLEMENTED)

    def measure(self):
        """Start a measurement, wait for it and return the result."""
        bus = self._bus()
        if bus.ms_sleep is None:
            raise self._hal_error(HalErrorCode.SLEEP_MISSING)
        self.measure_start()
        bus.ms_sleep(MEASUREMENT_TIME_MS)
        return self.measure_read()

    def measure_start(self):
        """Request a measurement (an empty write)."""
        self._write()

    def measure_read(self):
        """Read the result of a measurement started earlier."""
        buf = self._read(b"", 4)
        if buf[3] & 0x01:
            code = HS3xxxErrorCode.STALE_DATA
            raise HalError(code, self.i2c_address, _hs3xxx_error_string(code))
        raw_humidity = ((buf[0] & 0x3F) << 8) | buf[1]
        raw_temperature = ((buf[2] << 8) | (buf[3] & 0xFC)) >> 2
        return HumidityResult.from_raw(raw_humidity, raw_temperature)
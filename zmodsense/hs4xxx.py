"""Driver for HS4xxx humidity and temperature sensors."""

from __future__ import annotations

from enum import IntEnum

from .hal import ErrorScope, HalError, HalErrorCode, Interface
from .humidity import HS4XXX_ADDRESS, HumidityResult, HumiditySensor

CMD_READ_ID = 0xD7
CMD_MEASURE_NO_HOLD = 0xF5
CMD_MEASURE_HOLD = 0xE5
MEASUREMENT_TIME_MS = 2

_CRC_POLY = 0x11D
_CRC_INIT = 0xFF


class HS4xxxErrorCode(IntEnum):
    """Errors specific to the HS4xxx."""

    CRC_ERROR = 1


def _hs4xxx_error_string(error):
    if error == HS4xxxErrorCode.CRC_ERROR:
        return "HS4xxx ERROR: Checksum verification failed"
    return f"HS4xxx ERROR: Unkown error {error}"


def compute_crc(data):
    """CRC-8 (polynomial 0x1D, initial value 0xFF) used by the HS4xxx."""
    crc = _CRC_INIT
    for byte in bytes(data):
        crc ^= byte
        for _ in range(8):
            crc <<= 1
            if crc & 0x100:
                crc ^= _CRC_POLY
    return crc & 0xFF


def _process_raw(raw):
    if compute_crc(raw[:4]) != raw[4]:
        code = HS4xxxErrorCode.CRC_ERROR
        raise HalError(code, ErrorScope.SENSOR, _hs4xxx_error_string(code))
    raw_humidity = ((raw[0] & 0x3F) << 8) | raw[1]
    raw_temperature = ((raw[2] & 0x3F) << 8) | raw[3]
    return HumidityResult.from_raw(raw_humidity, raw_temperature)


class HS4xxx(HumiditySensor):
    """An HS4xxx sensor at its fixed address 0x54."""

    def __init__(self, hal: Interface):
        super().__init__(None, HS4XXX_ADDRESS)
        if hal.i2c_read is None:
            raise self._hal_error(HalErrorCode.I2C_READ_MISSING)
        if hal.i2c_write is None:
            raise self._hal_error(HalErrorCode.I2C_WRITE_MISSING)
        self.interface = hal
        try:
            self._write()
        except Exception:
            self.interface = None
            raise

    def read_id(self):
        """Return the sensor's unique 32-bit id."""
        return int.from_bytes(self._read(bytes([CMD_READ_ID]), 4), "big")

    def measure(self):
        """Start a no-hold measurement, wait for it and return the result."""
        bus = self._bus()
        if bus.ms_sleep is None:
            raise self._hal_error(HalErrorCode.SLEEP_MISSING)
        self.measure_start()
        bus.ms_sleep(MEASUREMENT_TIME_MS)
        return self.measure_read()

    def measure_hold(self):
        """Measure in hold mode in a single transaction (needs at least 200 kHz I2C)."""
        return _process_raw(self._read(bytes([CMD_MEASURE_HOLD]), 5))

    def measure_start(self):
        """Start a measurement in no-hold mode."""
        if self._bus().i2c_write is None:
            raise self._hal_error(HalErrorCode.I2C_WRITE_MISSING)
        self._write(bytes([CMD_MEASURE_NO_HOLD]))

    def measure_read(self):
        """Read and check the result of a no-hold measurement."""
        return _process_raw(self._read(b"", 5))
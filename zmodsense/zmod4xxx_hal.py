"""Connect a ZMOD4xxx device record to a generic I2C interface."""

from __future__ import annotations

from .hal import HalError, Interface
from .zmod_types import Device, ZmodError, ZmodErrorCode

STARTUP_DELAY_MS = 200


def attach_interface(dev: Device, hal: Interface):
    """Give ``dev`` register callbacks over ``hal`` and check that the sensor answers."""
    try:
        hal.require("i2c_read", "i2c_write", "ms_sleep")
    except HalError as exc:
        raise ZmodError(ZmodErrorCode.NULL_PTR) from exc

    def read(slave_addr, register, length):
        return hal.i2c_read(hal.handle, slave_addr, bytes([register]), length)

    def write(slave_addr, register, data):
        hal.i2c_write(hal.handle, slave_addr, bytes([register]), bytes(data))

    dev.read = read
    dev.write = write
    dev.delay_ms = hal.ms_sleep
    dev.delay_ms(STARTUP_DELAY_MS)

    try:
        hal.i2c_write(hal.handle, dev.i2c_addr, b"", b"")
    except Exception as exc:
        raise ZmodError(ZmodErrorCode.I2C) from exc
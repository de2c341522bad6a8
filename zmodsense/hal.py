"""Hardware abstraction: the I2C interface object and the errors it raises."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Optional

HAL_ERROR = 0x100
"""Generic code reported for every error whose scope is not the sensor."""

NO_INFORMATION = "No additional error information available"


class ErrorScope(IntEnum):
    """Component that produced an error."""

    SENSOR = 0x0000
    ALGORITHM = 0x1000
    INTERFACE = 0x2000
    HAL = 0x3000


class HalErrorCode(IntEnum):
    """Errors raised when an interface lacks something a sensor needs."""

    NO_INTERFACE = 1
    NOT_IMPLEMENTED = 2
    I2C_READ_MISSING = 3
    I2C_WRITE_MISSING = 4
    SLEEP_MISSING = 5
    RESET_MISSING = 6


_MESSAGES = {
    HalErrorCode.NO_INTERFACE: "Interface not found",
    HalErrorCode.NOT_IMPLEMENTED: "Function not implemented",
    HalErrorCode.I2C_READ_MISSING: "I2CRead function pointer not set in interface object.",
    HalErrorCode.I2C_WRITE_MISSING: "I2CWrite function pointer not set in interface object.",
    HalErrorCode.SLEEP_MISSING: "msSleep function pointer not set in interface object.",
    HalErrorCode.RESET_MISSING: "reset function pointer not set in interface object.",
}

_REQUIRED_CODES = {
    "i2c_read": HalErrorCode.I2C_READ_MISSING,
    "i2c_write": HalErrorCode.I2C_WRITE_MISSING,
    "ms_sleep": HalErrorCode.SLEEP_MISSING,
    "reset": HalErrorCode.RESET_MISSING,
}


def hal_error_string(error, scope=None):
    """Describe a HAL-scoped error code."""
    message = _MESSAGES.get(int(error), f"Unknown error {int(error)}")
    return f"HAL Error: {message}"


class HalError(Exception):
    """An error reported by the hardware layer or a sensor driver."""

    def __init__(self, error, scope, message=None):
        self.error = int(error)
        self.scope = int(scope)
        self.message = NO_INFORMATION if message is None else message
        super().__init__(self.message)

    @property
    def code(self):
        """The error code a caller sees: sensor errors pass through, others are generic."""
        if self.scope == ErrorScope.SENSOR:
            return self.error
        return HAL_ERROR


I2CRead = Callable[[Any, int, bytes, int], bytes]
"""read(handle, slave_address, write_data, read_size) -> bytes; raises on failure."""

I2CWrite = Callable[[Any, int, bytes, bytes], None]
"""write(handle, slave_address, data1, data2); raises on failure."""


@dataclass
class Interface:
    """Callbacks that give access to a physical I2C bus.

    ``i2c_read`` writes ``write_data`` (if any) followed by a repeated start
    and returns up to ``read_size`` bytes. ``i2c_write`` sends both buffers in
    one transaction. Both raise an exception when the transfer fails.
    """

    handle: Any = None
    i2c_read: Optional[I2CRead] = None
    i2c_write: Optional[I2CWrite] = None
    ms_sleep: Optional[Callable[[int], None]] = None
    reset: Optional[Callable[[Any], None]] = None

    def require(self, *args):
        """Raise HalError for the first named callback that is not set."""
        for name in args:
            code = _REQUIRED_CODES.get(name)
            if code is None:
                raise ValueError(f"unknown interface function {name!r}")
            if getattr(self, name) is None:
                raise HalError(code, ErrorScope.HAL, hal_error_string(code, ErrorScope.HAL))
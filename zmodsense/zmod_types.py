"""Error codes, configuration records and the device record for ZMOD4xxx sensors."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Optional

CONFIG_LEN = 6


class ZmodErrorCode(IntEnum):
    """Error codes of the ZMOD4xxx sensor API."""

    OK = 0
    INIT_OUT_OF_RANGE = -1
    GAS_TIMEOUT = -2
    I2C = -3
    SENSOR_UNSUPPORTED = -4
    CONFIG_MISSING = -5
    ACCESS_CONFLICT = -6
    POR_EVENT = -7
    CLEANING = -8
    NULL_PTR = -9


_DESCRIPTIONS = {
    ZmodErrorCode.INIT_OUT_OF_RANGE: "The initialization value is out of range.",
    ZmodErrorCode.GAS_TIMEOUT: (
        "A previous measurement is running that could not be stopped "
        "or sensor does not respond."
    ),
    ZmodErrorCode.I2C: "I2C communication was not successful.",
    ZmodErrorCode.SENSOR_UNSUPPORTED: (
        "The Firmware configuration used does not match the sensor module."
    ),
    ZmodErrorCode.CONFIG_MISSING: "There is no pointer to a valid configuration.",
    ZmodErrorCode.ACCESS_CONFLICT: (
        "Invalid ADC results due to a still running measurement while results readout."
    ),
    ZmodErrorCode.POR_EVENT: "Power-on reset event. Check power supply and reset pin.",
    ZmodErrorCode.CLEANING: (
        "The maximum numbers of cleaning cycles ran on this sensor. "
        "Cleaning function has no effect anymore."
    ),
    ZmodErrorCode.NULL_PTR: (
        "The dev structure did not receive the pointers for I2C read, "
        "write and/or delay."
    ),
}


class ZmodError(Exception):
    """A failure reported by the ZMOD4xxx sensor API."""

    def __init__(self, code, message=None):
        code = ZmodErrorCode(code)
        if code is ZmodErrorCode.OK:
            raise ValueError("ZmodError needs a failure code")
        self.code = code
        self.message = _DESCRIPTIONS[code] if message is None else message
        super().__init__(self.message)


@dataclass(frozen=True)
class ConfigSet:
    """One register block: start address, byte count and, for writes, the bytes."""

    addr: int
    length: int
    data: bytes = b""

    def __post_init__(self):
        object.__setattr__(self, "data", bytes(self.data))
        if self.data and len(self.data) != self.length:
            raise ValueError(
                f"data holds {len(self.data)} bytes, block length is {self.length}"
            )


@dataclass(frozen=True)
class SensorConfig:
    """A complete sequencer configuration for the gas sensor module."""

    start: int
    h: ConfigSet
    d: ConfigSet
    m: ConfigSet
    s: ConfigSet
    r: ConfigSet
    prod_data_len: int = 0


RegisterRead = Callable[[int, int, int], bytes]
"""read(i2c_addr, register, length) -> bytes; raises on failure."""

RegisterWrite = Callable[[int, int, bytes], None]
"""write(i2c_addr, register, data); raises on failure."""


@dataclass
class Device:
    """State of one ZMOD4xxx sensor and the callbacks used to reach it."""

    i2c_addr: int
    pid: int
    init_conf: Optional[SensorConfig] = None
    meas_conf: Optional[SensorConfig] = None
    read: Optional[RegisterRead] = None
    write: Optional[RegisterWrite] = None
    delay_ms: Optional[Callable[[int], None]] = None
    config: bytes = field(default=bytes(CONFIG_LEN))
    mox_er: int = 0
    mox_lr: int = 0
    prod_data: bytes = b""

    def __post_init__(self):
        self.config = bytes(self.config)
        if len(self.config) != CONFIG_LEN:
            raise ValueError(f"config must hold {CONFIG_LEN} bytes")
        self.prod_data = bytes(self.prod_data)
"""ZMOD4510 sequencer configuration for the NO2/O3 measurement."""

from __future__ import annotations

from .zmod_types import ConfigSet, Device, SensorConfig

ZMOD4510_PID = 0x6320
ZMOD4510_I2C_ADDR = 0x33
ZMOD4510_PROD_DATA_LEN = 10
ZMOD4510_ADC_DATA_LEN = 32
ZMOD4510_NO2_O3_SAMPLE_TIME_MS = 6000

H_ADDR = 0x40
D_ADDR = 0x50
M_ADDR = 0x60
S_ADDR = 0x68
R_ADDR = 0x97

# Byte offset of the fourth MOx resistance inside the ADC result.
RMOX3_OFFSET = 30


def _block(addr: int, hex_data: str) -> ConfigSet:
    data = bytes.fromhex(hex_data)
    return ConfigSet(addr, len(data), data)


INIT_CONFIG = SensorConfig(
    start=0x80,
    h=_block(H_ADDR, "0050"),
    d=_block(D_ADDR, "0028"),
    m=_block(M_ADDR, "c3e3"),
    s=_block(S_ADDR, "0000 8040"),
    r=ConfigSet(R_ADDR, 4),
)

MEASUREMENT_CONFIG = SensorConfig(
    start=0x80,
    h=_block(H_ADDR, "0050 ff06 fea2 fe3e"),
    d=_block(D_ADDR, "0010 0052 3f66 0042"),
    m=_block(M_ADDR, "2303"),
    s=_block(
        S_ADDR,
        "0000 0241 0041 0041 0049 0050 0242 0042 "
        "0042 004a 0050 0243 0043 0043 0043 805b",
    ),
    r=ConfigSet(R_ADDR, ZMOD4510_ADC_DATA_LEN),
    prod_data_len=ZMOD4510_PROD_DATA_LEN,
)

SENSOR_CONFIGS = (INIT_CONFIG, MEASUREMENT_CONFIG)


def _joined(conf: SensorConfig) -> bytes:
    return b"".join(block.data for block in (conf.h, conf.d, conf.m, conf.s))


DATA_SET_INIT = _joined(INIT_CONFIG)
DATA_SET_NO2_O3 = _joined(MEASUREMENT_CONFIG)


def make_no2_o3_device(read=None, write=None, delay_ms=None):
    """Return a fresh ZMOD4510 device record set up for NO2/O3 measurement."""
    return Device(
        i2c_addr=ZMOD4510_I2C_ADDR,
        pid=ZMOD4510_PID,
        init_conf=INIT_CONFIG,
        meas_conf=MEASUREMENT_CONFIG,
        read=read,
        write=write,
        delay_ms=delay_ms,
    )
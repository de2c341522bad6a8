"""Register-level driver for ZMOD4xxx gas sensors."""

from __future__ import annotations

import struct

from .zmod_types import CONFIG_LEN, Device, SensorConfig, ZmodError, ZmodErrorCode

ADDR_PID = 0x00
ADDR_CONF = 0x20
ADDR_PROD_DATA = 0x26
ADDR_CMD = 0x93
ADDR_STATUS = 0x94
ADDR_TRACKING = 0x3A
ADDR_ERROR_EVENT = 0xB7

LEN_PID = 2
LEN_CONF = CONFIG_LEN
LEN_TRACKING = 6

HSP_MAX = 8
RSLT_MAX = 32

STATUS_SEQUENCER_RUNNING_MASK = 0x80
STATUS_SLEEP_TIMER_ENABLED_MASK = 0x40
STATUS_ALARM_MASK = 0x20
STATUS_LAST_SEQ_STEP_MASK = 0x1F
STATUS_POR_EVENT_MASK = 0x80
STATUS_ACCESS_CONFLICT_MASK = 0x40

RMOX_MIN = 1e2
RMOX_MAX = 1e12

_SENSOR_INFO_ATTEMPTS = 1000


def _f32(value):
    """Round a number to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _int16(high, low):
    value = (high << 8) + low
    return value - 0x10000 if value >= 0x8000 else value


def calc_factor(conf: SensorConfig, config) -> bytes:
    """Compute the heater set-point bytes for ``conf`` from the sensor's config bytes."""
    config = bytes(config)
    data = conf.h.data
    gain = -_f32(_f32(config[2] * 256.0) + config[3])
    offset = _f32(config[4] + 640.0)
    out = bytearray()
    for high, low in zip(data[0::2], data[1::2]):
        temp = config[5] + _int16(high, low)
        inner = _f32(_f32(offset * temp) - 512000.0)
        hspf = _f32(_f32(gain * inner) / 12288000.0)
        value = int(hspf) & 0xFFFF
        out += value.to_bytes(2, "big")
    return bytes(out)


class Zmod4xxx:
    """Operations on one ZMOD4xxx sensor described by a :class:`Device` record."""

    def __init__(self, device: Device):
        self.device = device

    # -- bus access -------------------------------------------------------

    def _read(self, register, length):
        read = self.device.read
        if read is None:
            raise ZmodError(ZmodErrorCode.NULL_PTR)
        try:
            data = bytes(read(self.device.i2c_addr, register, length))
        except Exception as exc:
            raise ZmodError(ZmodErrorCode.I2C) from exc
        if len(data) != length:
            raise ZmodError(
                ZmodErrorCode.I2C,
                f"read of register 0x{register:02X} returned {len(data)} of {length} bytes",
            )
        return data

    def _write(self, register, data):
        write = self.device.write
        if write is None:
            raise ZmodError(ZmodErrorCode.NULL_PTR)
        try:
            write(self.device.i2c_addr, register, bytes(data))
        except Exception as exc:
            raise ZmodError(ZmodErrorCode.I2C) from exc

    def _delay(self, ms):
        if self.device.delay_ms is None:
            raise ZmodError(ZmodErrorCode.NULL_PTR)
        self.device.delay_ms(ms)

    def _conf(self, which):
        conf = getattr(self.device, which)
        if conf is None:
            raise ZmodError(ZmodErrorCode.CONFIG_MISSING)
        return conf

    def _write_sequence(self, conf, hsp):
        self._write(conf.h.addr, hsp)
        for block in (conf.d, conf.m, conf.s):
            self._write(block.addr, block.data)

    # -- public API -------------------------------------------------------

    def check_callbacks(self):
        """Raise NULL_PTR unless read, write and delay callbacks are all set."""
        dev = self.device
        if dev.read is None or dev.write is None or dev.delay_ms is None:
            raise ZmodError(ZmodErrorCode.NULL_PTR)

    def read_status(self):
        """Return the status register."""
        return self._read(ADDR_STATUS, 1)[0]

    def check_error_event(self):
        """Raise if the sensor reports a power-on reset or an access conflict."""
        event = self._read(ADDR_ERROR_EVENT, 1)[0]
        if event & STATUS_POR_EVENT_MASK:
            raise ZmodError(ZmodErrorCode.POR_EVENT)
        if event & STATUS_ACCESS_CONFLICT_MASK:
            raise ZmodError(ZmodErrorCode.ACCESS_CONFLICT)

    def read_sensor_info(self):
        """Stop the sequencer, verify the product id and read config and production data."""
        self.check_callbacks()
        meas_conf = self._conf("meas_conf")
        attempts = 0
        while True:
            self._write(ADDR_CMD, b"\x00")
            status = self.read_status()
            attempts += 1
            self._delay(200)
            if not (status & 0x80) or attempts >= _SENSOR_INFO_ATTEMPTS:
                break
        if attempts >= _SENSOR_INFO_ATTEMPTS:
            raise ZmodError(ZmodErrorCode.GAS_TIMEOUT)

        pid = int.from_bytes(self._read(ADDR_PID, LEN_PID), "big")
        if pid != self.device.pid:
            raise ZmodError(ZmodErrorCode.SENSOR_UNSUPPORTED)

        self.device.config = self._read(ADDR_CONF, LEN_CONF)
        self.device.prod_data = self._read(ADDR_PROD_DATA, meas_conf.prod_data_len)

    def read_tracking_number(self):
        """Return the sensor's 6-byte tracking number."""
        return self._read(ADDR_TRACKING, LEN_TRACKING)

    def init_sensor(self):
        """Run the initialisation sequence and store the mox_lr / mox_er parameters."""
        init_conf = self._conf("init_conf")
        self._read(ADDR_ERROR_EVENT, 1)
        hsp = calc_factor(init_conf, self.device.config)
        self._write_sequence(init_conf, hsp)
        self._write(ADDR_CMD, bytes([init_conf.start]))
        while True:
            status = self.read_status()
            self._delay(50)
            if not status & STATUS_SEQUENCER_RUNNING_MASK:
                break
        data = self._read(init_conf.r.addr, init_conf.r.length)
        self.device.mox_lr = int.from_bytes(data[0:2], "big")
        self.device.mox_er = int.from_bytes(data[2:4], "big")

    def init_measurement(self):
        """Load the measurement sequence into the sensor."""
        meas_conf = self._conf("meas_conf")
        hsp = calc_factor(meas_conf, self.device.config)
        self._write_sequence(meas_conf, hsp)

    def start_measurement_at(self, step):
        """Start the sequencer at the given step."""
        self._write(ADDR_CMD, bytes([step & 0xFF]))

    def start_measurement(self):
        """Start the sequencer at the measurement configuration's start step."""
        self.start_measurement_at(self._conf("meas_conf").start)

    def read_adc_result(self):
        """Return the raw ADC result bytes of the measurement configuration."""
        conf = self._conf("meas_conf")
        return self._read(conf.r.addr, conf.r.length)

    def calc_single_rmox(self, adc_result):
        """Return the MOx resistance for the big-endian ADC value in the first two bytes."""
        dev = self.device
        adc_value = (adc_result[0] << 8) | adc_result[1]
        if adc_value <= dev.mox_lr:
            rmox = RMOX_MIN
        elif dev.mox_er <= adc_value:
            rmox = RMOX_MAX
        else:
            scaled = _f32(_f32(dev.config[0] * 1e3) * (adc_value - dev.mox_lr))
            rmox = _f32(scaled / (dev.mox_er - adc_value))
        return min(max(rmox, RMOX_MIN), RMOX_MAX)

    def calc_rmox(self, adc_result):
        """Return the MOx resistances for every ADC value of the measurement configuration."""
        length = self._conf("meas_conf").r.length
        adc_result = bytes(adc_result)
        return [
            self.calc_single_rmox(adc_result[offset:offset + 2])
            for offset in range(0, length, 2)
        ]

    def prepare_sensor(self):
        """Initialise the sensor and load the measurement sequence."""
        self.init_sensor()
        self._delay(50)
        self.init_measurement()

    def read_rmox(self):
        """Read the ADC results and return ``(adc_result, rmox_values)``."""
        adc_result = self.read_adc_result()
        self._delay(50)
        return adc_result, self.calc_rmox(adc_result)
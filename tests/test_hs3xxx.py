import pytest

from zmodsense.hal import HAL_ERROR, HalError, HalErrorCode, Interface
from zmodsense.hs3xxx import HS3xxx


class FakeBus:
    def __init__(self, response=b"\x00\x00\x00\x00", present=True):
        self.response = response
        self.present = present
        self.writes = []
        self.reads = []
        self.sleeps = []

    def write(self, handle, addr, d1, d2):
        self.writes.append((addr, d1, d2))
        if not self.present:
            raise OSError("nack")

    def read(self, handle, addr, wr, size):
        self.reads.append((addr, wr, size))
        return self.response

    def interface(self, sleep=True):
        return Interface(
            handle="bus",
            i2c_read=self.read,
            i2c_write=self.write,
            ms_sleep=self.sleeps.append if sleep else None,
        )


def test_init_probes_address():
    bus = FakeBus()
    sensor = HS3xxx(bus.interface())
    assert sensor.i2c_address == 0x44
    assert bus.writes == [(0x44, b"", b"")]


def test_init_fails_without_sensor():
    bus = FakeBus(present=False)
    with pytest.raises(OSError):
        HS3xxx(bus.interface())


def test_init_missing_write_checked_first():
    with pytest.raises(HalError) as info:
        HS3xxx(Interface())
    assert info.value.error == HalErrorCode.I2C_WRITE_MISSING
    assert info.value.scope == 0x44


def test_init_missing_read():
    bus = FakeBus()
    with pytest.raises(HalError) as info:
        HS3xxx(Interface(i2c_write=bus.write))
    assert info.value.error == HalErrorCode.I2C_READ_MISSING


def test_read_id_not_implemented():
    sensor = HS3xxx(FakeBus().interface())
    with pytest.raises(HalError) as info:
        sensor.read_id()
    assert info.value.error == HalErrorCode.NOT_IMPLEMENTED
    assert info.value.code == HAL_ERROR


def test_measure_zero():
    bus = FakeBus(response=bytes(4))
    result = HS3xxx(bus.interface()).measure()
    assert result.humidity == 0
    assert result.temperature == -40
    assert bus.sleeps == [35]
    assert bus.reads == [(0x44, b"", 4)]


def test_measure_full_scale():
    bus = FakeBus(response=bytes([0x3F, 0xFF, 0xFF, 0xFC]))
    result = HS3xxx(bus.interface()).measure_read()
    assert result.humidity == pytest.approx(100)
    assert result.temperature == pytest.approx(125)


def test_status_bits_are_masked():
    plain = HS3xxx(FakeBus(response=bytes([0x10, 0x20, 0x30, 0x40])).interface()).measure_read()
    masked = HS3xxx(FakeBus(response=bytes([0xD0, 0x20, 0x30, 0x42])).interface()).measure_read()
    assert plain == masked


def test_stale_data():
    bus = FakeBus(response=bytes([0, 0, 0, 0x01]))
    with pytest.raises(HalError) as info:
        HS3xxx(bus.interface()).measure_read()
    assert info.value.error == 1
    assert "Stale data" in info.value.message


def test_measure_needs_sleep():
    bus = FakeBus()
    sensor = HS3xxx(bus.interface(sleep=False))
    with pytest.raises(HalError) as info:
        sensor.measure()
    assert info.value.error == HalErrorCode.SLEEP_MISSING
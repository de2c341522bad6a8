import pytest

from zmodsense.config_no2_o3 import ZMOD4510_I2C_ADDR, make_no2_o3_device
from zmodsense.hal import HalError, HalErrorCode, Interface
from zmodsense.zmod4xxx_hal import attach_interface
from zmodsense.zmod_types import ZmodError, ZmodErrorCode


class FakeInterface:
    def __init__(self, fail_probe=False):
        self.fail_probe = fail_probe
        self.reads = []
        self.writes = []
        self.sleeps = []

    def i2c_read(self, handle, slave, write_data, size):
        self.reads.append((handle, slave, bytes(write_data), size))
        return bytes(range(size))

    def i2c_write(self, handle, slave, data1, data2):
        if self.fail_probe and not data1 and not data2:
            raise OSError("nack")
        self.writes.append((handle, slave, bytes(data1), bytes(data2)))

    def ms_sleep(self, ms):
        self.sleeps.append(ms)

    def interface(self):
        return Interface(
            handle="bus0",
            i2c_read=self.i2c_read,
            i2c_write=self.i2c_write,
            ms_sleep=self.ms_sleep,
        )


def test_attach_sets_callbacks_and_probes():
    fake = FakeInterface()
    dev = make_no2_o3_device()
    attach_interface(dev, fake.interface())
    assert fake.sleeps == [200]
    assert fake.writes == [("bus0", ZMOD4510_I2C_ADDR, b"", b"")]
    assert dev.read(ZMOD4510_I2C_ADDR, 0x94, 3) == bytes([0, 1, 2])
    assert fake.reads == [("bus0", ZMOD4510_I2C_ADDR, b"\x94", 3)]


def test_attached_write_prefixes_register():
    fake = FakeInterface()
    dev = make_no2_o3_device()
    attach_interface(dev, fake.interface())
    dev.write(ZMOD4510_I2C_ADDR, 0x93, b"\x80")
    assert fake.writes[-1] == ("bus0", ZMOD4510_I2C_ADDR, b"\x93", b"\x80")


@pytest.mark.parametrize(
    "missing, code",
    [
        ("i2c_read", HalErrorCode.I2C_READ_MISSING),
        ("i2c_write", HalErrorCode.I2C_WRITE_MISSING),
        ("ms_sleep", HalErrorCode.SLEEP_MISSING),
    ],
)
def test_missing_callback_raises_null_ptr(missing, code):
    hal = FakeInterface().interface()
    setattr(hal, missing, None)
    dev = make_no2_o3_device()
    with pytest.raises(ZmodError) as info:
        attach_interface(dev, hal)
    assert info.value.code is ZmodErrorCode.NULL_PTR
    assert isinstance(info.value.__cause__, HalError)
    assert info.value.__cause__.error == code
    assert dev.read is None


def test_probe_failure_raises_i2c():
    fake = FakeInterface(fail_probe=True)
    with pytest.raises(ZmodError) as info:
        attach_interface(make_no2_o3_device(), fake.interface())
    assert info.value.code is ZmodErrorCode.I2C
from zmodsense.humidity import (
    HS3XXX_ADDRESS,
    HS4XXX_ADDRESS,
    RAW_FULL_SCALE,
    HumidityResult,
    HumiditySensor,
)
from zmodsense.hal import HalError, HalErrorCode

import pytest


def test_measurement_duration_hs3():
    assert HumiditySensor(None, HS3XXX_ADDRESS).measurement_duration() == 35


def test_measurement_duration_hs4():
    assert HumiditySensor(None, HS4XXX_ADDRESS).measurement_duration() == 2


def test_measurement_duration_unknown():
    assert HumiditySensor(None, 0x10).measurement_duration() == 0


def test_from_raw_limits():
    low = HumidityResult.from_raw(0, 0)
    high = HumidityResult.from_raw(RAW_FULL_SCALE, RAW_FULL_SCALE)
    assert low.humidity == 0
    assert low.temperature == -40
    assert high.humidity == pytest.approx(100)
    assert high.temperature == pytest.approx(125)


def test_from_raw_monotonic():
    values = [HumidityResult.from_raw(r, r) for r in range(0, RAW_FULL_SCALE, 1000)]
    assert all(a.humidity < b.humidity for a, b in zip(values, values[1:]))
    assert all(a.temperature < b.temperature for a, b in zip(values, values[1:]))


def test_missing_interface_raises():
    sensor = HumiditySensor(None, HS3XXX_ADDRESS)
    with pytest.raises(HalError) as info:
        sensor._write()
    assert info.value.error == HalErrorCode.NO_INTERFACE
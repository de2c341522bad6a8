# zmodsense

Python drivers for ZMOD4xxx gas sensors, configured for the ZMOD4510
NO2/O3 measurement sequence, and for the HS3xxx/HS4xxx temperature and
humidity sensors. All bus access goes through an `Interface` object you
fill with your own I2C read, write and sleep callables. That lets the
drivers work with any bus library, or with a simulated bus in tests.

## Installation

    pip install zmodsense

## The hardware interface

`zmodsense.hal.Interface` holds the callables the drivers use:

- `i2c_read(handle, slave_address, write_data, read_size)`: writes
  `write_data` if it is not empty, then reads and returns `read_size`
  bytes.
- `i2c_write(handle, slave_address, data1, data2)`: sends both buffers
  in one transaction.
- `ms_sleep(ms)`: waits the given number of milliseconds.
- `reset(handle)`: optional; no driver in this package calls it.

A callable that fails should raise an exception.

`Interface.require("i2c_read", "i2c_write", ...)` raises a `HalError`
for the first named callable that is not set. A `HalError` carries:

- `error`: a `HalErrorCode` or a sensor-specific code.
- `scope`: an `ErrorScope` value or a sensor's I2C address.
- `message`: readable text.
- `code`: the error itself for sensor-scoped errors, and the generic
  `HAL_ERROR` (0x100) for all others.

`hal_error_string(error, scope)` returns the text for a HAL error code.

## Gas sensor (ZMOD4xxx)

`zmodsense.zmod_types` defines the `Device` record, the `SensorConfig`
and `ConfigSet` register blocks, and `ZmodError` with its
`ZmodErrorCode`. `zmodsense.config_no2_o3` holds the ZMOD4510
configuration: `INIT_CONFIG`, `MEASUREMENT_CONFIG`, the product id and
I2C address. `make_no2_o3_device(read, write, delay_ms)` returns a
`Device` set up with that configuration.

```python
from zmodsense.hal import Interface
from zmodsense.config_no2_o3 import make_no2_o3_device
from zmodsense.zmod4xxx import Zmod4xxx
from zmodsense.zmod4xxx_hal import attach_interface

hal = Interface(handle=bus, i2c_read=my_read, i2c_write=my_write, ms_sleep=my_sleep)
device = make_no2_o3_device()
attach_interface(device, hal)   # sets register callbacks, checks the sensor answers

sensor = Zmod4xxx(device)
sensor.read_sensor_info()       # checks the product id, reads config and production data
sensor.prepare_sensor()         # init sequence, then loads the measurement sequence
sensor.start_measurement()
# ... wait for the measurement to complete ...
sensor.check_error_event()
adc, rmox = sensor.read_rmox()  # raw ADC bytes and a list of MOx resistances
```

`Zmod4xxx` also offers these methods:

- `read_status()`
- `read_tracking_number()`
- `init_sensor()`
- `init_measurement()`
- `start_measurement_at(step)`
- `read_adc_result()`
- `calc_rmox(adc_result)`
- `calc_single_rmox(adc_result)`
- `check_callbacks()`

MOx resistances are limited to the range 1e2 to 1e12. The module-level
`calc_factor(conf, config)` computes the heater set-point bytes.

Failures raise `ZmodError`. Its `code` is a `ZmodErrorCode`, such as
`I2C`, `GAS_TIMEOUT`, `SENSOR_UNSUPPORTED`, `POR_EVENT`,
`ACCESS_CONFLICT`, `CONFIG_MISSING` or `NULL_PTR`.

## Humidity sensors

```python
from zmodsense.hs4xxx import HS4xxx

sensor = HS4xxx(hal)               # probes address 0x54; a bus error propagates
result = sensor.measure()          # HumidityResult
print(result.temperature, result.humidity)
print(hex(sensor.read_id()))
```

`HS4xxx` provides `measure`, `measure_hold`, `measure_start`,
`measure_read` and `read_id`. It checks every result with a CRC
(`compute_crc`) and raises `HalError` when the check fails.

`zmodsense.hs3xxx.HS3xxx` works at address 0x44. It provides
`measure`, `measure_start` and `measure_read`. It raises `HalError`
when the sensor reports stale data. Its `read_id` raises `HalError`
with `HalErrorCode.NOT_IMPLEMENTED`.

Both classes derive from `zmodsense.humidity.HumiditySensor`.
`measurement_duration()` gives the cycle time in milliseconds: 35 for
HS3xxx and 2 for HS4xxx.

## What this package does not do

- It does not turn MOx resistances into ozone or NO2 concentrations or
  air-quality index values. You get raw ADC bytes and resistances only.
- It does not pick between HS3xxx and HS4xxx for you. Create the class
  that matches your hardware.
- It ships no I2C bus implementation and no command-line tool. You
  supply the `Interface` callables.

## Running the tests

    pip install -e ".[test]"
    pytest
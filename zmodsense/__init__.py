"""Drivers for ZMOD4xxx gas sensors and HS3xxx/HS4xxx humidity sensors over a pluggable I2C interface."""

__version__ = "0.1.0"
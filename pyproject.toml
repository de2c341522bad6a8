[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zmodsense"
version = "0.1.0"
description = "Drivers for ZMOD4xxx gas sensors and HS3xxx/HS4xxx humidity sensors over a pluggable I2C interface"
requires-python = ">=3.10"
dependencies = []
keywords = ["zmod4510", "zmod4xxx", "gas sensor", "humidity", "temperature", "i2c", "air quality"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Atmospheric Science",
    "Topic :: System :: Hardware",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zmodsense"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ax25beacon"
version = "0.9.0"
description = "Generate AFSK audio for AX.25 APRS position beacons"
requires-python = ">=3.10"
dependencies = []
keywords = ["ax25", "aprs", "afsk", "ham radio", "beacon", "packet radio"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Ham Radio",
    "Topic :: Multimedia :: Sound/Audio",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ax25beacon = "ax25beacon.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ax25beacon"]

[tool.pytest.ini_options]
addopts = "-ra"

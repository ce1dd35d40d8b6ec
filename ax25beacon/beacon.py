"""APRS position beacons rendered as AFSK audio."""

from __future__ import annotations

import warnings
from array import array
from typing import Optional

from .ax25 import AX25, AudioCallback, Mode, base91_encode

LATITUDE_SCALE = 380926.0
LONGITUDE_SCALE = 190463.0
FEET_PER_METRE = 3.2808399


def _check_symbol(name: str, symbol: str) -> None:
    if len(symbol) != 1:
        raise ValueError(f"{name} must be a single character")


def format_position(
    latitude: float,
    longitude: float,
    altitude: float,
    comment: Optional[str] = None,
    symbol_table: str = "/",
    symbol_code: str = "O",
) -> str:
    """Return a compressed APRS position report with altitude in feet."""
    _check_symbol("symbol_table", symbol_table)
    _check_symbol("symbol_code", symbol_code)
    lat = base91_encode((90.0 - latitude) * LATITUDE_SCALE, 4)
    lon = base91_encode((180.0 + longitude) * LONGITUDE_SCALE, 4)
    feet = altitude * FEET_PER_METRE
    return "!%s%s%s%s   /A=%06.0f%s" % (
        symbol_table,
        lat,
        lon,
        symbol_code,
        feet,
        comment or "",
    )


def beacon(
    audio_callback: AudioCallback,
    source: str,
    destination: str,
    path1: str,
    path2: str,
    latitude: float,
    longitude: float,
    altitude: float,
    comment: Optional[str] = None,
    symbol_table: str = "/",
    symbol_code: str = "O",
) -> array:
    """Send an APRS position beacon as AFSK1200 audio to ``audio_callback``."""
    required = {
        "audio_callback": audio_callback,
        "source": source,
        "destination": destination,
        "path1": path1,
        "path2": path2,
    }
    for name, value in required.items():
        if value is None:
            raise ValueError(f"{name} is required")

    modem = AX25(Mode.AFSK1200, audio_callback)
    if modem.samplerate % modem.bitrate:
        warnings.warn(
            "The sample rate %d does not divide evenly into %d. The bit rate will be %.2f"
            % (modem.samplerate, modem.bitrate, modem.samplerate / modem.samples_per_bit)
        )

    data = format_position(latitude, longitude, altitude, comment, symbol_table, symbol_code)
    return modem.frame(source, destination, path1, path2, data)
"""AX.25 frame building and AFSK audio generation for APRS position beacons."""

__version__ = "0.9.0"
__all__ = ["ax25", "beacon", "cli"]
"""AX.25 UI frame assembly and AFSK audio modulation."""

from __future__ import annotations

import math
import re
from array import array
from dataclasses import dataclass
from enum import Enum
from functools import reduce
from typing import Callable, Optional, Union

# AX.25 sets no maximum packet size; this one keeps things sensible.
MAX_FRAME_LENGTH = 512

AMPLITUDE = 0.75 * 32768.0
FLAG = 0x7E
CONTROL_UI = 0x03
PID_NO_LAYER3 = 0xF0

AudioCallback = Callable[[array, int], None]
Text = Union[str, bytes]

_LEADING_INT = re.compile(rb"\s*([+-]?\d+)")


@dataclass(frozen=True)
class ModeSettings:
    """Audio and framing parameters of one modulation mode."""

    samplerate: int
    bitrate: int
    freq1: int
    freq2: int
    preamble: int
    rest: int


class Mode(Enum):
    """Supported AFSK modulation modes."""

    AFSK1200 = ModeSettings(48000, 1200, 1200, 2200, 25, 5)
    AFSK2400 = ModeSettings(48000, 2400, 2400, 4400, 25, 5)


def _to_bytes(text: Text) -> bytes:
    return text if isinstance(text, bytes) else text.encode("utf-8")


def _atoi(text: bytes) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def base91_encode(value: float, length: int) -> str:
    """Return the Base-91 representation of ``value``, ``length`` characters long."""
    if length < 0:
        raise ValueError("length must not be negative")
    remaining = int(value) % (1 << 32)
    digits = []
    for _ in range(length):
        remaining, digit = divmod(remaining, 91)
        digits.append(chr(digit + 33))
    return "".join(reversed(digits))


def _crc_update(crc: int, byte: int) -> int:
    d = (byte ^ crc) & 0xFF
    d = (d ^ (d << 4)) & 0xFF
    return (((d << 8) | (crc >> 8)) ^ (d >> 4) ^ (d << 3)) & 0xFFFF


def crc_ccitt(data: bytes) -> int:
    """Return the running CRC-CCITT register over ``data``, starting from 0xFFFF."""
    return reduce(_crc_update, data, 0xFFFF)


def encode_callsign(callsign: Text) -> bytes:
    """Encode a callsign such as ``N0CALL-7`` as a 7-byte AX.25 address field."""
    raw = _to_bytes(callsign).split(b"\0", 1)[0]
    base = raw.split(b"-", 1)[0][:6]
    rest = raw[len(base):]
    ssid = _atoi(rest[1:]) if rest.startswith(b"-") else 0
    ssid = ((ssid + 128) % 256) - 128
    address = bytes((c << 1) & 0xFF for c in base.ljust(6, b" "))
    return address + bytes([((ord("0") + ssid) << 1) & 0xFF])


def build_frame(
    source: Text,
    destination: Text,
    path1: Optional[Text] = None,
    path2: Optional[Text] = None,
    data: Text = b"",
) -> bytes:
    """Assemble an APRS UI frame with its frame check sequence appended."""
    header = bytearray(encode_callsign(destination) + encode_callsign(source))
    for path in (path1, path2):
        if path is not None:
            header += encode_callsign(path)
    header[-1] |= 1
    header += bytes((CONTROL_UI, PID_NO_LAYER3))

    room = MAX_FRAME_LENGTH - len(header) - 2
    payload = _to_bytes(data).split(b"\0", 1)[0][:max(room, 0)]
    body = bytes(header + payload).split(b"\0", 1)[0]

    fcs = crc_ccitt(body) ^ 0xFFFF
    return body + fcs.to_bytes(2, "little")


class AX25:
    """AFSK modulator that turns AX.25 frames into 16-bit audio samples."""

    def __init__(self, mode: Mode = Mode.AFSK1200, audio_callback: Optional[AudioCallback] = None):
        settings = mode.value
        self.mode = mode
        self.samplerate = settings.samplerate
        self.bitrate = settings.bitrate
        self.freq1 = settings.freq1
        self.freq2 = settings.freq2
        self.preamble = settings.preamble
        self.rest = settings.rest
        self.audio_callback = audio_callback

        self.phase = 0.0
        self.freq = self.freq1
        self.bit_count = 0

    @property
    def samples_per_bit(self) -> int:
        return self.samplerate // self.bitrate

    def _tx_bit(self, out: array, bit: int, stuff: bool) -> None:
        # A zero bit is encoded by a change in frequency.
        if not bit:
            self.freq ^= self.freq1 ^ self.freq2

        for _ in range(self.samples_per_bit):
            out.append(int(AMPLITUDE * math.sin(self.phase)))
            self.phase += 2 * math.pi * self.freq / self.samplerate

        if stuff:
            self.bit_count = self.bit_count + 1 if bit else 0
            # After five one bits, a zero bit is stuffed in.
            if self.bit_count == 5:
                self._tx_bit(out, 0, True)
        else:
            self.bit_count = 0

    def _tx_byte(self, out: array, byte: int, stuff: bool) -> None:
        for shift in range(8):
            self._tx_bit(out, (byte >> shift) & 1, stuff)

    def modulate(self, frame: bytes) -> array:
        """Return the samples for ``frame`` framed by preamble and trailing flags."""
        out = array("h")
        for _ in range(self.preamble):
            self._tx_byte(out, FLAG, False)
        for byte in frame:
            self._tx_byte(out, byte, True)
        for _ in range(self.rest):
            self._tx_byte(out, FLAG, False)
        return out

    def frame(
        self,
        source: Text,
        destination: Text,
        path1: Optional[Text] = None,
        path2: Optional[Text] = None,
        data: Text = b"",
    ) -> array:
        """Build and modulate a frame, pass the audio to the callback and return it."""
        samples = self.modulate(build_frame(source, destination, path1, path2, data))
        if self.audio_callback is not None:
            self.audio_callback(samples, self.samplerate)
        return samples
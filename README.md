# ax25beacon

Builds AX.25 UI frames that carry APRS position reports and turns them
into 1200 or 2400 baud AFSK audio as signed 16-bit samples. The samples
can be written to a WAV file. Only the standard library is used.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Command line

```
ax25beacon
```

This writes a sample beacon to `aprs.wav` in the current directory. It
prints the number of samples, the sample rate, and a Dire Wolf command
line you can use to decode the file.

Options (defaults in brackets):

| Option            | Meaning                                   |
|-------------------|-------------------------------------------|
| `-o`, `--output`  | WAV file to write [`aprs.wav`]            |
| `--source`        | source callsign [`SRC`]                   |
| `--destination`   | destination callsign [`DST`]              |
| `--path1`         | first path callsign [`PATH1`]             |
| `--path2`         | second path callsign [`PATH2`]            |
| `--latitude`      | latitude in degrees [`10.0`]              |
| `--longitude`     | longitude in degrees [`20.0`]             |
| `--altitude`      | altitude in metres [`100.0`]              |
| `--comment`       | comment text [`CALLSIGN-SRC is testing ...`] |
| `--symbol-table`  | APRS symbol table, one character [`/`]    |
| `--symbol-code`   | APRS symbol code, one character [`O`]     |

## Library use

`ax25beacon.beacon.beacon` sends a position beacon in AFSK1200. The audio
callback receives an `array('h')` of samples and the sample rate in Hz;
the samples are also returned. `audio_callback`, `source`, `destination`,
`path1` and `path2` are required; passing `None` for any of them raises
`ValueError`.

```python
from ax25beacon.beacon import beacon
from ax25beacon.cli import write_wav

def on_audio(samples, samplerate):
    write_wav("beacon.wav", samples, samplerate)

beacon(
    on_audio,
    "SRC", "DST",
    "WIDE1-1", "WIDE2-1",
    10.0, 20.0, 100.0,        # latitude, longitude, altitude in metres
    "testing",
    "/", "O",                 # APRS symbol table and symbol code
)
```

`format_position(latitude, longitude, altitude, comment, symbol_table,
symbol_code)` returns the compressed-position text on its own, with the
altitude converted to feet. Symbols that are not a single character raise
`ValueError`.

The lower-level interface in `ax25beacon.ax25`:

```python
from ax25beacon.ax25 import AX25, Mode, build_frame

frame = build_frame("SRC", "DST", "WIDE1-1", None, ">status text")
modem = AX25(Mode.AFSK1200, on_audio)
samples = modem.modulate(frame)
```

- `build_frame` encodes the callsigns (an SSID follows a `-`, as in
  `N0CALL-7`), adds the UI control and protocol bytes, and appends the
  frame check sequence. Frames are limited to 512 bytes; longer payloads
  are truncated, and a payload ends at its first NUL byte.
- `AX25.modulate` returns the samples for a frame, with bit stuffing,
  framed by preamble and trailing flag bytes.
- `AX25.frame(...)` does both steps, passes the samples to the callback
  if one was given, and returns them.
- `encode_callsign`, `base91_encode` and `crc_ccitt` are available as
  building blocks.

## Modes

| Mode              | Bit rate | Mark / space tones | Sample rate |
|-------------------|----------|--------------------|-------------|
| `Mode.AFSK1200`   | 1200     | 1200 / 2200 Hz     | 48000 Hz    |
| `Mode.AFSK2400`   | 2400     | 2400 / 4400 Hz     | 48000 Hz    |

Each transmission starts with 25 flag bytes of preamble and ends with 5.
`beacon` always uses `Mode.AFSK1200`.

## What it does not do

The package only generates audio samples. It does not play them through
a sound card or key a transmitter, and it does not receive or decode
AX.25 audio.
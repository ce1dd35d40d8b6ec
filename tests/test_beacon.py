import pytest

from ax25beacon.ax25 import AX25, build_frame
from ax25beacon.beacon import (
    LATITUDE_SCALE,
    LONGITUDE_SCALE,
    beacon,
    format_position,
)


def _base91_decode(text):
    value = 0
    for char in text:
        value = value * 91 + (ord(char) - 33)
    return value


def test_format_position_layout():
    report = format_position(10.0, 20.0, 100.0, "testing", "/", "O")
    assert report.startswith("!/")
    assert report[10] == "O"
    assert report[11:14] == "   "
    assert report.endswith("/A=000328testing")


def test_format_position_encodes_coordinates():
    report = format_position(10.0, 20.0, 0.0, None, "/", "O")
    assert _base91_decode(report[2:6]) == int((90.0 - 10.0) * LATITUDE_SCALE)
    assert _base91_decode(report[6:10]) == int((180.0 + 20.0) * LONGITUDE_SCALE)


def test_format_position_without_comment():
    report = format_position(10.0, 20.0, 100.0, None, "/", "O")
    assert report.endswith("/A=000328")


def test_format_position_rejects_long_symbol():
    with pytest.raises(ValueError):
        format_position(0.0, 0.0, 0.0, None, "//", "O")
    with pytest.raises(ValueError):
        format_position(0.0, 0.0, 0.0, None, "/", "")


@pytest.mark.parametrize("missing", ["audio_callback", "source", "destination", "path1", "path2"])
def test_beacon_requires_arguments(missing):
    args = {
        "audio_callback": lambda samples, rate: None,
        "source": "SRC",
        "destination": "DST",
        "path1": "PATH1",
        "path2": "PATH2",
    }
    args[missing] = None
    with pytest.raises(ValueError):
        beacon(
            args["audio_callback"],
            args["source"],
            args["destination"],
            args["path1"],
            args["path2"],
            10.0,
            20.0,
            100.0,
        )


def test_beacon_delivers_audio():
    received = []
    samples = beacon(
        lambda s, rate: received.append((s, rate)),
        "SRC",
        "DST",
        "PATH1",
        "PATH2",
        10.0,
        20.0,
        100.0,
        "CALLSIGN-SRC is testing ...",
        "/",
        "O",
    )
    data = format_position(10.0, 20.0, 100.0, "CALLSIGN-SRC is testing ...", "/", "O")
    expected = AX25().modulate(build_frame("SRC", "DST", "PATH1", "PATH2", data))
    assert len(received) == 1
    assert received[0][0] == samples
    assert received[0][1] == AX25().samplerate
    assert samples == expected
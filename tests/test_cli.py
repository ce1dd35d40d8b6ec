import struct
import wave

import pytest

from ax25beacon.beacon import beacon
from ax25beacon.cli import main, write_wav


def _read_wav(path):
    with wave.open(str(path), "rb") as wav:
        params = (wav.getnchannels(), wav.getsampwidth(), wav.getframerate())
        frames = wav.readframes(wav.getnframes())
    samples = list(struct.unpack("<%dh" % (len(frames) // 2), frames))
    return params, samples


def test_write_wav_round_trip(tmp_path):
    path = tmp_path / "out.wav"
    samples = [0, 1, -1, 32767, -32768, 1234]
    write_wav(path, samples, 48000)
    params, read_back = _read_wav(path)
    assert params == (1, 2, 48000)
    assert read_back == samples


def test_main_writes_default_beacon(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 0
    params, samples = _read_wav(tmp_path / "aprs.wav")

    captured = []
    beacon(
        lambda s, rate: captured.append((list(s), rate)),
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
    assert params == (1, 2, captured[0][1])
    assert samples == captured[0][0]

    out = capsys.readouterr().out
    assert "aprs.wav" in out
    assert str(len(samples)) in out


def test_main_custom_output(tmp_path):
    path = tmp_path / "custom.wav"
    assert main(["--output", str(path), "--comment", "hello", "--source", "N0CALL-7"]) == 0
    params, samples = _read_wav(path)
    assert params[0] == 1
    assert len(samples) > 0


def test_main_rejects_bad_symbol(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(["--output", str(tmp_path / "x.wav"), "--symbol-code", "XY"])
    assert excinfo.value.code == 2
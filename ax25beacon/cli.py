"""Command that writes an APRS position beacon to a WAV file."""

from __future__ import annotations

import argparse
import sys
import wave
from array import array
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

from .beacon import beacon


def write_wav(path: Union[str, Path], samples: Iterable[int], samplerate: int) -> None:
    """Write mono 16-bit PCM samples to a WAV file."""
    pcm = array("h", samples)
    if sys.byteorder == "big":
        pcm.byteswap()
    with wave.open(str(path), "wb") as out:
        out.setnchannels(1)
        out.setsampwidth(2)
        out.setframerate(samplerate)
        out.writeframes(pcm.tobytes())


def _single_char(text: str) -> str:
    if len(text) != 1:
        raise argparse.ArgumentTypeError("must be a single character")
    return text


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate an APRS position beacon as a WAV file.")
    parser.add_argument("-o", "--output", default="aprs.wav")
    parser.add_argument("--source", default="SRC")
    parser.add_argument("--destination", default="DST")
    parser.add_argument("--path1", default="PATH1")
    parser.add_argument("--path2", default="PATH2")
    parser.add_argument("--latitude", type=float, default=10.0)
    parser.add_argument("--longitude", type=float, default=20.0)
    parser.add_argument("--altitude", type=float, default=100.0, help="altitude in metres")
    parser.add_argument("--comment", default="CALLSIGN-SRC is testing ...")
    parser.add_argument("--symbol-table", type=_single_char, default="/")
    parser.add_argument("--symbol-code", type=_single_char, default="O")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parser().parse_args(argv)
    output = args.output

    def save(samples: array, samplerate: int) -> None:
        write_wav(output, samples, samplerate)
        print(f"File '{output}' has been generated.\n")
        print(f"Number of samples       : {len(samples)}")
        print(f"Sample rate (in Hz)     : {samplerate}")
        print(f"Run check by 'Dire Wolf': 'cat {output} | direwolf -r {samplerate} -D 1 -'")

    beacon(
        save,
        args.source,
        args.destination,
        args.path1,
        args.path2,
        args.latitude,
        args.longitude,
        args.altitude,
        args.comment,
        args.symbol_table,
        args.symbol_code,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
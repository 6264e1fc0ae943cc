"""
File access for WAV buffers.
Whole-file blocking reads and writes, plus path-level helpers that
combine them with the header and sample codecs.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from wavecodec.config import SampleMode
from wavecodec.header import WaveHeader, parse_header
from wavecodec.samples import decode_mono, decode_stereo, encode_mono, encode_stereo


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_file_bytes(path: PathLike) -> bytes:
    """
    Read a whole file into memory.

    Raises:
        OSError: If the file is missing, unreadable, or shorter
            than its reported size
    """
    path = Path(path)
    expected = path.stat().st_size
    with path.open("rb") as f:
        data = f.read()
    if len(data) < expected:
        raise OSError(f"Short read from {path}: {len(data)} of {expected} bytes")
    logger.info(f"Read {len(data)} bytes from {path}")
    return data


def write_file_bytes(data: bytes, path: PathLike) -> None:
    """
    Write a whole buffer to a file, replacing any existing content.

    Raises:
        OSError: If the file cannot be written or the write is short
    """
    path = Path(path)
    with path.open("wb") as f:
        written = f.write(data)
    if written != len(data):
        raise OSError(f"Short write to {path}: {written} of {len(data)} bytes")
    logger.info(f"Wrote {written} bytes to {path}")


def read_header(path: PathLike) -> WaveHeader:
    """Parse the header of a WAV file."""
    return parse_header(read_file_bytes(path))


def read_mono(path: PathLike, mode: Optional[SampleMode] = None) -> np.ndarray:
    """Read a mono WAV file into a float64 sample array."""
    return decode_mono(read_file_bytes(path), mode=mode)


def read_stereo(
    path: PathLike,
    mode: Optional[SampleMode] = None
) -> Tuple[np.ndarray, np.ndarray]:
    """Read a stereo WAV file into (left, right) sample arrays."""
    return decode_stereo(read_file_bytes(path), mode=mode)


def write_mono(
    samples: Sequence[float],
    path: PathLike,
    sample_rate: Optional[int] = None,
    bits_per_sample: Optional[int] = None,
    mode: Optional[SampleMode] = None,
) -> None:
    """Encode mono samples and write them as a WAV file."""
    data = encode_mono(samples, sample_rate, bits_per_sample, mode=mode)
    write_file_bytes(data, path)


def write_stereo(
    left: Sequence[float],
    right: Sequence[float],
    path: PathLike,
    sample_rate: Optional[int] = None,
    bits_per_sample: Optional[int] = None,
    mode: Optional[SampleMode] = None,
) -> None:
    """Encode two channels and write them as an interleaved stereo WAV file."""
    data = encode_stereo(left, right, sample_rate, bits_per_sample, mode=mode)
    write_file_bytes(data, path)

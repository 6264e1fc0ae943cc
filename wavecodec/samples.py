"""
PCM sample encoding and decoding.
Converts between normalized float sample arrays and complete WAV buffers.

Two sample modes are supported (see SampleMode):

- COMPATIBLE reads and writes one signed byte per sample slot, scaled by
  2^7 for 16-bit audio and 2^3 for 8-bit audio. In 16-bit audio the byte is
  written to both halves of the slot and only the first half is read back.
  Amplitudes are truncated to 8 bits without clamping, so out-of-range
  samples wrap around.
- STANDARD reads and writes regular PCM: signed little-endian int16 and
  unsigned offset-binary 8-bit, clamped to [-1, 1].
"""

import logging
from typing import Optional, Sequence, Tuple

import numpy as np

from wavecodec.config import HEADER_LENGTH, SUPPORTED_BIT_DEPTHS, SampleMode, config
from wavecodec.errors import (
    InvalidParametersError,
    LengthMismatchError,
    UnsupportedBitDepthError,
)
from wavecodec.header import build_header, parse_header


logger = logging.getLogger(__name__)

# Scale of one signed byte in COMPATIBLE mode, keyed by bit depth
COMPATIBLE_SCALE = {16: 2.0 ** 7, 8: 2.0 ** 3}


def _check_bit_depth(bits_per_sample: int) -> None:
    if bits_per_sample not in SUPPORTED_BIT_DEPTHS:
        raise UnsupportedBitDepthError(bits_per_sample)


def _resolve_mode(mode: Optional[SampleMode]) -> SampleMode:
    if mode is None:
        return config.mode
    if not isinstance(mode, SampleMode):
        raise InvalidParametersError(f"mode must be a SampleMode, got {mode!r}")
    return mode


def _as_samples(name: str, samples: Sequence[float]) -> np.ndarray:
    values = np.asarray(samples, dtype=np.float64)
    if values.ndim != 1:
        raise InvalidParametersError(
            f"{name} must be a one-dimensional sequence, got shape {values.shape}"
        )
    return values


def _read_frames(data: bytes, channels: int, mode: Optional[SampleMode]) -> np.ndarray:
    """
    Decode the payload of a WAV buffer into a (frames, channels) array.

    Trailing bytes that do not make up a whole frame are ignored.
    """
    header = parse_header(data)
    bits = header.bits_per_sample
    _check_bit_depth(bits)
    mode = _resolve_mode(mode)

    if header.num_channels != channels:
        logger.warning(
            f"Decoding {header.num_channels}-channel audio as {channels}-channel"
        )

    frame_size = channels * (bits // 8)
    payload = memoryview(data)[HEADER_LENGTH:]
    usable = len(payload) - len(payload) % frame_size
    payload = payload[:usable]

    if usable == 0:
        return np.zeros((0, channels), dtype=np.float64)
    if mode is SampleMode.COMPATIBLE:
        raw = np.frombuffer(payload, dtype=np.int8).astype(np.float64)
        if bits == 16:
            # First byte of every 2-byte slot
            raw = raw[0::2]
        values = raw / COMPATIBLE_SCALE[bits]
    elif bits == 16:
        values = np.frombuffer(payload, dtype='<i2').astype(np.float64) / 32768.0
    else:
        values = (np.frombuffer(payload, dtype=np.uint8).astype(np.float64) - 128.0) / 128.0

    frames = values.reshape(-1, channels)
    logger.debug(
        f"Decoded {len(frames)} frames ({channels}ch {bits}bit, {mode.name})"
    )
    return frames


def _write_payload(frames: np.ndarray, bits: int, mode: SampleMode) -> bytes:
    """Encode a (frames, channels) float array into payload bytes."""
    if mode is SampleMode.COMPATIBLE:
        amplitudes = np.rint(frames * COMPATIBLE_SCALE[bits]).astype(np.int64)
        # Keep the low 8 bits: two's complement wraparound, no clamping
        slots = (amplitudes & 0xFF).astype(np.uint8)
        if bits == 16:
            slots = np.repeat(slots, 2, axis=1)
        return slots.tobytes()

    clipped = np.clip(frames, -1.0, 1.0)
    if bits == 16:
        return np.rint(clipped * 32767.0).astype('<i2').tobytes()
    return (np.rint(clipped * 127.0) + 128.0).astype(np.uint8).tobytes()


def _encode(
    frames: np.ndarray,
    sample_rate: Optional[int],
    bits_per_sample: Optional[int],
    mode: Optional[SampleMode],
) -> bytes:
    bits = config.bits_per_sample if bits_per_sample is None else bits_per_sample
    rate = config.sample_rate if sample_rate is None else sample_rate
    mode = _resolve_mode(mode)
    _check_bit_depth(bits)

    channels = frames.shape[1]
    data_length = frames.shape[0] * channels * (bits // 8)
    header = build_header(channels, rate, bits, data_length)
    payload = _write_payload(frames, bits, mode)

    logger.debug(
        f"Encoded {frames.shape[0]} frames ({channels}ch {rate}Hz {bits}bit, {mode.name})"
    )
    return header + payload


def decode_mono(data: bytes, mode: Optional[SampleMode] = None) -> np.ndarray:
    """
    Decode a mono WAV buffer into sample values.

    Args:
        data: Complete WAV file contents
        mode: Sample mode, defaults to the configured mode

    Returns:
        1-D float64 array, one value per sample slot

    Raises:
        MalformedHeaderError: If the header is invalid
        UnsupportedBitDepthError: If bits per sample is not 8 or 16
    """
    return _read_frames(data, 1, mode)[:, 0].copy()


def decode_stereo(
    data: bytes,
    mode: Optional[SampleMode] = None
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Decode an interleaved stereo WAV buffer.

    Returns:
        (left, right) float64 arrays of equal length
    """
    frames = _read_frames(data, 2, mode)
    return frames[:, 0].copy(), frames[:, 1].copy()


def encode_mono(
    samples: Sequence[float],
    sample_rate: Optional[int] = None,
    bits_per_sample: Optional[int] = None,
    mode: Optional[SampleMode] = None,
) -> bytes:
    """
    Encode mono samples into a complete WAV buffer.

    Args:
        samples: Sample values, nominally in [-1, 1]
        sample_rate: Sample rate in Hz (default 44100)
        bits_per_sample: 8 or 16 (default 16)
        mode: Sample mode, defaults to the configured mode

    Returns:
        44-byte header followed by the PCM payload

    Raises:
        UnsupportedBitDepthError: If bits per sample is not 8 or 16
        InvalidParametersError: If the sample rate is invalid or samples
            is not one-dimensional
    """
    values = _as_samples("samples", samples)
    return _encode(values.reshape(-1, 1), sample_rate, bits_per_sample, mode)


def encode_stereo(
    left: Sequence[float],
    right: Sequence[float],
    sample_rate: Optional[int] = None,
    bits_per_sample: Optional[int] = None,
    mode: Optional[SampleMode] = None,
) -> bytes:
    """
    Encode left and right channels into an interleaved stereo WAV buffer.

    Raises:
        LengthMismatchError: If the channels differ in length
        UnsupportedBitDepthError: If bits per sample is not 8 or 16
        InvalidParametersError: If the sample rate is invalid
    """
    left_values = _as_samples("left", left)
    right_values = _as_samples("right", right)
    if len(left_values) != len(right_values):
        raise LengthMismatchError(len(left_values), len(right_values))

    frames = np.column_stack((left_values, right_values))
    return _encode(frames, sample_rate, bits_per_sample, mode)


"""
WAV header utilities.
Parses and builds the canonical 44-byte RIFF/WAVE PCM header.
"""

import logging
import operator
import struct
from typing import NamedTuple

from wavecodec.config import HEADER_LENGTH, SUPPORTED_BIT_DEPTHS, SUPPORTED_CHANNELS
from wavecodec.errors import InvalidParametersError, MalformedHeaderError


logger = logging.getLogger(__name__)

# RIFF id, chunk size, WAVE, fmt id, fmt size, audio format, channels,
# sample rate, byte rate, block align, bits per sample, data id, data size
HEADER_FORMAT = '<4sI4s4sIHHIIHH4sI'

_UINT16_MAX = 0xFFFF
_UINT32_MAX = 0xFFFFFFFF


class WaveHeader(NamedTuple):
    """Fields of the 44-byte header, in file order."""
    chunk_id: bytes
    chunk_size: int
    format: bytes
    subchunk1_id: bytes
    subchunk1_size: int
    audio_format: int
    num_channels: int
    sample_rate: int
    byte_rate: int
    block_align: int
    bits_per_sample: int
    subchunk2_id: bytes
    subchunk2_size: int

    @property
    def bytes_per_sample(self) -> int:
        return self.bits_per_sample // 8

    @property
    def frame_count(self) -> int:
        """Number of whole sample frames announced by the data chunk."""
        if self.block_align == 0:
            return 0
        return self.subchunk2_size // self.block_align

    @property
    def duration(self) -> float:
        """Playback length in seconds."""
        if self.sample_rate == 0:
            return 0.0
        return self.frame_count / self.sample_rate


_EXPECTED_TAGS = (
    ("chunk_id", b'RIFF'),
    ("format", b'WAVE'),
    ("subchunk1_id", b'fmt '),
    ("subchunk2_id", b'data'),
)


def parse_header(data: bytes) -> WaveHeader:
    """
    Parse the header at the start of a WAV buffer.

    All integer fields are read as unsigned little-endian values.
    Only the tags are validated; bit depth and channel count are
    returned as found.

    Args:
        data: Complete WAV file contents (header and payload)

    Returns:
        Parsed WaveHeader

    Raises:
        MalformedHeaderError: If the buffer is shorter than 44 bytes
            or a RIFF/WAVE/fmt/data tag does not match
    """
    if len(data) < HEADER_LENGTH:
        raise MalformedHeaderError(
            f"WAV header needs {HEADER_LENGTH} bytes, got {len(data)}"
        )

    header = WaveHeader._make(struct.unpack_from(HEADER_FORMAT, data, 0))

    for field_name, expected in _EXPECTED_TAGS:
        found = getattr(header, field_name)
        if found != expected:
            raise MalformedHeaderError(
                f"Bad {field_name}: expected {expected!r}, found {found!r}"
            )

    logger.debug(
        f"Parsed WAV header: {header.num_channels}ch "
        f"{header.sample_rate}Hz {header.bits_per_sample}bit "
        f"{header.subchunk2_size} data bytes"
    )
    return header


def _require_int(name: str, value, low: int, high: int) -> int:
    """Normalize an integer-like value (numpy integers included) and range-check it."""
    # bool is an int subclass but never a valid header value
    if isinstance(value, bool):
        raise InvalidParametersError(f"{name} must be an integer, got {value!r}")
    try:
        value = operator.index(value)
    except TypeError:
        raise InvalidParametersError(f"{name} must be an integer, got {value!r}") from None
    if not low <= value <= high:
        raise InvalidParametersError(
            f"{name} must be between {low} and {high}, got {value}"
        )
    return value


def build_header(
    num_channels: int,
    sample_rate: int,
    bits_per_sample: int,
    data_length: int
) -> bytes:
    """
    Create a standard WAV header with known data size.

    Args:
        num_channels: 1 (mono) or 2 (stereo)
        sample_rate: Audio sample rate in Hz
        bits_per_sample: Bits per sample (8 or 16)
        data_length: Size of the audio data in bytes

    Returns:
        44-byte WAV header

    Raises:
        InvalidParametersError: If any argument is out of range
    """
    num_channels = _require_int("num_channels", num_channels, 0, _UINT16_MAX)
    bits_per_sample = _require_int("bits_per_sample", bits_per_sample, 0, _UINT16_MAX)
    if num_channels not in SUPPORTED_CHANNELS:
        raise InvalidParametersError(
            f"num_channels must be 1 or 2, got {num_channels!r}"
        )
    if bits_per_sample not in SUPPORTED_BIT_DEPTHS:
        raise InvalidParametersError(
            f"bits_per_sample must be 8 or 16, got {bits_per_sample!r}"
        )
    sample_rate = _require_int("sample_rate", sample_rate, 1, _UINT32_MAX)
    data_length = _require_int("data_length", data_length, 0, _UINT32_MAX - 36)

    block_align = num_channels * (bits_per_sample // 8)
    byte_rate = sample_rate * block_align
    if byte_rate > _UINT32_MAX:
        raise InvalidParametersError(
            f"Byte rate {byte_rate} does not fit in 32 bits"
        )

    header = struct.pack(
        HEADER_FORMAT,
        b'RIFF',
        36 + data_length,  # Chunk size
        b'WAVE',
        b'fmt ',
        16,                # Subchunk1 size (PCM)
        1,                 # Audio format (PCM)
        num_channels,
        sample_rate,
        byte_rate,
        block_align,
        bits_per_sample,
        b'data',
        data_length,
    )

    return header


def get_sample_rate(data: bytes) -> int:
    """Sample rate in Hz."""
    return parse_header(data).sample_rate


def get_byte_rate(data: bytes) -> int:
    """Bytes of audio per second across all channels."""
    return parse_header(data).byte_rate


def get_bits_per_sample(data: bytes) -> int:
    """Bit depth of one channel's sample (8 or 16 for supported files)."""
    return parse_header(data).bits_per_sample


def get_total_channels(data: bytes) -> int:
    """Channel count: 1 for mono, 2 for stereo."""
    return parse_header(data).num_channels


def get_data_length(data: bytes) -> int:
    """Length of the sample payload announced by the data chunk."""
    return parse_header(data).subchunk2_size


def get_file_length(data: bytes) -> int:
    """RIFF chunk size: bytes in the file after the first 8."""
    return parse_header(data).chunk_size


def get_format_length(data: bytes) -> int:
    """Size of the fmt chunk body (16 for PCM)."""
    return parse_header(data).subchunk1_size


def get_pcm_value(data: bytes) -> int:
    """Audio format code (1 for PCM)."""
    return parse_header(data).audio_format


def get_bytes_per_sample(data: bytes) -> int:
    """Bytes per sample frame across all channels (the BlockAlign field)."""
    return parse_header(data).block_align

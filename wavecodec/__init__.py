"""
Codec for canonical PCM WAVE files.
"""

from wavecodec.config import config, CodecConfig, SampleMode, HEADER_LENGTH
from wavecodec.errors import (
    WaveError,
    MalformedHeaderError,
    InvalidParametersError,
    UnsupportedBitDepthError,
    LengthMismatchError,
)
from wavecodec.header import (
    WaveHeader,
    parse_header,
    build_header,
    get_sample_rate,
    get_byte_rate,
    get_bits_per_sample,
    get_total_channels,
    get_data_length,
    get_file_length,
    get_format_length,
    get_pcm_value,
    get_bytes_per_sample,
)
from wavecodec.samples import decode_mono, decode_stereo, encode_mono, encode_stereo
from wavecodec.file_access import (
    read_file_bytes,
    write_file_bytes,
    read_header,
    read_mono,
    read_stereo,
    write_mono,
    write_stereo,
)

__all__ = [
    # Configuration
    "config",
    "CodecConfig",
    "SampleMode",
    "HEADER_LENGTH",
    # Errors
    "WaveError",
    "MalformedHeaderError",
    "InvalidParametersError",
    "UnsupportedBitDepthError",
    "LengthMismatchError",
    # Header
    "WaveHeader",
    "parse_header",
    "build_header",
    "get_sample_rate",
    "get_byte_rate",
    "get_bits_per_sample",
    "get_total_channels",
    "get_data_length",
    "get_file_length",
    "get_format_length",
    "get_pcm_value",
    "get_bytes_per_sample",
    # Samples
    "decode_mono",
    "decode_stereo",
    "encode_mono",
    "encode_stereo",
    # Files
    "read_file_bytes",
    "write_file_bytes",
    "read_header",
    "read_mono",
    "read_stereo",
    "write_mono",
    "write_stereo",
]

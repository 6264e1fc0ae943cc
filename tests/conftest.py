import struct

import pytest

from wavecodec.header import HEADER_FORMAT


@pytest.fixture
def make_wav():
    """Build a WAV buffer field by field, bypassing build_header's checks."""

    def _make(
        payload: bytes = b"",
        channels: int = 1,
        sample_rate: int = 44100,
        bits_per_sample: int = 16,
        tags=(b"RIFF", b"WAVE", b"fmt ", b"data"),
    ) -> bytes:
        block_align = channels * bits_per_sample // 8
        header = struct.pack(
            HEADER_FORMAT,
            tags[0],
            36 + len(payload),
            tags[1],
            tags[2],
            16,
            1,
            channels,
            sample_rate,
            sample_rate * block_align,
            block_align,
            bits_per_sample,
            tags[3],
            len(payload),
        )
        return header + payload

    return _make

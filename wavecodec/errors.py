"""
Exceptions raised by the WAVE codec.
All codec errors share WaveError so callers can catch them in one place.
"""


class WaveError(ValueError):
    """Base class for codec errors."""


class MalformedHeaderError(WaveError):
    """Buffer is too short or a RIFF/WAVE tag does not match."""


class InvalidParametersError(WaveError):
    """Header or encode parameters are out of range."""


class UnsupportedBitDepthError(WaveError):
    """Bit depth other than 8 or 16."""

    def __init__(self, bits_per_sample: int):
        self.bits_per_sample = bits_per_sample
        super().__init__(
            f"Unsupported bits per sample: {bits_per_sample} (expected 8 or 16)"
        )


class LengthMismatchError(WaveError):
    """Left and right channels have different lengths."""

    def __init__(self, left_length: int, right_length: int):
        self.left_length = left_length
        self.right_length = right_length
        super().__init__(
            f"Stereo channels differ in length: left={left_length}, right={right_length}"
        )

"""
Codec defaults.
Centralized settings used when callers omit sample rate, bit depth or mode.
"""

from dataclasses import dataclass
from enum import Enum, auto


HEADER_LENGTH = 44
DEFAULT_SAMPLE_RATE = 44100
DEFAULT_BITS_PER_SAMPLE = 16
SUPPORTED_BIT_DEPTHS = (8, 16)
SUPPORTED_CHANNELS = (1, 2)


class SampleMode(Enum):
    """How sample values map to payload bytes."""
    COMPATIBLE = auto()   # One signed byte per slot, 2^7 / 2^3 scaling
    STANDARD = auto()     # Full int16 LE / unsigned 8-bit PCM


@dataclass(frozen=True)
class CodecConfig:
    """Default encode/decode settings."""
    sample_rate: int = DEFAULT_SAMPLE_RATE
    bits_per_sample: int = DEFAULT_BITS_PER_SAMPLE
    mode: SampleMode = SampleMode.COMPATIBLE
    
    @property
    def bytes_per_sample(self) -> int:
        return self.bits_per_sample // 8
    
    def block_align(self, channels: int) -> int:
        return channels * self.bytes_per_sample
    
    def byte_rate(self, channels: int) -> int:
        return self.sample_rate * self.block_align(channels)


# Global configuration instance
config = CodecConfig()

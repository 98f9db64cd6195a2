from dataclasses import dataclass
from typing import Optional

UNDEFINED = "undefined"


def size_in_bytes(bit_count: int) -> int:
    """
    Number of bytes needed to store `bit_count` bits once they are
    packed into whole bytes, i.e. ceil(bit_count / 8).
    """
    if bit_count < 0:
        raise ValueError(f"Bit count must be non-negative, got {bit_count}")
    return (bit_count + 7) // 8


def compression_ratio(original_bytes: int, encoded_bytes: int) -> Optional[float]:
    """
    Computes the encoded size as a percentage of the original size.

    original_bytes: size of the source in bytes
    encoded_bytes: size of the encoded payload in bytes

    returns
        ratio: encoded_bytes / original_bytes * 100, or None when the
            original is empty and the ratio is undefined
    """
    if original_bytes < 0 or encoded_bytes < 0:
        raise ValueError("Sizes must be non-negative.")
    if original_bytes == 0:
        return None
    return encoded_bytes / original_bytes * 100


def format_ratio(ratio: Optional[float]) -> str:
    return UNDEFINED if ratio is None else f"{ratio:.2f}"


@dataclass(frozen=True)
class CompressionStats:
    original_bytes: int
    encoded_bits: int
    encoded_bytes: int
    ratio: Optional[float]
    dropped: int = 0

    @classmethod
    def from_stream(cls, original_bytes, stream):
        encoded_bytes = size_in_bytes(stream.bit_count)
        return cls(
            original_bytes=original_bytes,
            encoded_bits=stream.bit_count,
            encoded_bytes=encoded_bytes,
            ratio=compression_ratio(original_bytes, encoded_bytes),
            dropped=stream.dropped,
        )

    def ratio_text(self) -> str:
        return format_ratio(self.ratio)

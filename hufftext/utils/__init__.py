from .io import read_text
from .metrics import size_in_bytes, compression_ratio, format_ratio, CompressionStats, UNDEFINED

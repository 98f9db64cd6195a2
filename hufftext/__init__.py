from .entropy import (
    FrequencyTable,
    HuffmanTree,
    HuffmanCoder,
    EncodedStream,
    count_symbols,
    build_tree,
    generate_codes,
    encode,
    is_prefix_free,
)
from .utils import size_in_bytes, compression_ratio, CompressionStats

__version__ = "0.1.0"

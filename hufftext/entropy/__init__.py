from .frequency import FrequencyTable, count_symbols, is_printable, UNICODE_RANGE
from .huffman import (
    TreeNode,
    HuffmanTree,
    EncodedStream,
    HuffmanCoder,
    build_tree,
    generate_codes,
    encode,
    is_prefix_free,
    weighted_code_length,
)
from .entropy import calc_entropy, average_code_length, code_efficiency

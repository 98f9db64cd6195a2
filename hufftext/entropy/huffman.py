from heapq import heappush, heappop, heapify
from typing import Dict, List, NamedTuple, Optional

from hufftext.entropy.frequency import FrequencyTable, count_symbols
from hufftext.utils.metrics import size_in_bytes


class TreeNode(NamedTuple):
    weight: int
    symbol: Optional[str] = None
    left: Optional[int] = None
    right: Optional[int] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class HuffmanTree:
    """
    Huffman tree stored as an arena of nodes addressed by index.

    Leaves occupy the first slots in ascending code point order,
    internal nodes follow in creation order and the root is the last
    node. Children are referenced by index, so the whole tree is
    released together with the `nodes` list.
    """

    def __init__(self, nodes: List[TreeNode]):
        if not nodes:
            raise ValueError("A Huffman tree needs at least one node.")
        self.nodes = nodes

    @property
    def root(self) -> int:
        return len(self.nodes) - 1

    def __getitem__(self, index) -> TreeNode:
        return self.nodes[index]

    def __len__(self):
        return len(self.nodes)

    @property
    def weight(self) -> int:
        return self.nodes[self.root].weight

    def leaves(self) -> List[TreeNode]:
        return [node for node in self.nodes if node.is_leaf]

    def children(self, index):
        node = self.nodes[index]
        return [child for child in (node.left, node.right) if child is not None]

    def depth(self) -> int:
        """Length of the longest root-to-leaf path, 0 for a lone leaf."""
        deepest = 0
        stack = [(self.root, 0)]
        while stack:
            index, level = stack.pop()
            deepest = max(deepest, level)
            stack.extend((child, level + 1) for child in self.children(index))
        return deepest


class EncodedStream(NamedTuple):
    bits: str
    dropped: int = 0

    @property
    def bit_count(self) -> int:
        return len(self.bits)

    @property
    def byte_count(self) -> int:
        return size_in_bytes(len(self.bits))


def build_tree(table: FrequencyTable) -> Optional[HuffmanTree]:
    """
    Builds the Huffman tree of a frequency table by repeatedly merging
    the two lightest nodes. The first node popped becomes the left
    child, the second one the right child.

    Ties are broken by arena index: leaves by ascending code point,
    then internal nodes by creation order.

    table: FrequencyTable with the symbol counts

    returns
        tree: HuffmanTree, or None when the table is empty
    """
    nodes = [TreeNode(weight=count, symbol=symbol) for symbol, count in table.items()]
    if not nodes:
        return None

    heap = [(node.weight, index) for index, node in enumerate(nodes)]
    heapify(heap)
    while len(heap) > 1:
        left_weight, left = heappop(heap)
        right_weight, right = heappop(heap)
        nodes.append(TreeNode(weight=left_weight + right_weight, left=left, right=right))
        heappush(heap, (left_weight + right_weight, len(nodes) - 1))

    return HuffmanTree(nodes)


def generate_codes(tree: Optional[HuffmanTree]) -> Dict[str, str]:
    """
    Assigns every leaf the bit string of its root-to-leaf path,
    '0' for a left branch and '1' for a right branch. A tree made of a
    single leaf maps its symbol to the empty string.
    """
    codebook = {}
    if tree is None:
        return codebook

    stack = [(tree.root, "")]
    while stack:
        index, prefix = stack.pop()
        node = tree[index]
        if node.is_leaf:
            codebook[node.symbol] = prefix
            continue
        stack.append((node.right, prefix + "1"))
        stack.append((node.left, prefix + "0"))
    return codebook


def is_prefix_free(codebook) -> bool:
    # after sorting, a code that prefixes another sorts right before one of its extensions
    codes = sorted(codebook.values())
    for shorter, longer in zip(codes, codes[1:]):
        if longer.startswith(shorter):
            return False
    return True


def encode(text, codebook) -> EncodedStream:
    """
    Concatenates the codes of the symbols of `text` in input order.
    Symbols without a code are skipped and counted as dropped.
    """
    chunks = []
    dropped = 0
    for symbol in text:
        code = codebook.get(symbol)
        if code is None:
            dropped += 1
            continue
        chunks.append(code)
    return EncodedStream(bits="".join(chunks), dropped=dropped)


def weighted_code_length(table: FrequencyTable, codebook) -> int:
    """Total number of bits needed to encode every counted symbol."""
    return sum(count * len(codebook[symbol]) for symbol, count in table.items())


class HuffmanCoder:

    def __init__(self):
        self.table = None
        self.tree = None
        self.codewords = {}
        self.codelengths = {}

    def train(self, table: FrequencyTable):
        """Build the tree and the codebook for the given symbol counts"""
        self.table = table
        self.tree = build_tree(table)
        self.codewords = generate_codes(self.tree)
        self.codelengths = {symbol: len(code) for symbol, code in self.codewords.items()}
        return self

    @classmethod
    def from_text(cls, text):
        table, _ = count_symbols(text)
        return cls().train(table)

    def encode(self, message) -> EncodedStream:
        if self.table is None:
            raise RuntimeError("Train the Huffman coder before encoding.")
        return encode(message, self.codewords)

    def is_prefix_free(self) -> bool:
        return is_prefix_free(self.codewords)

    def weighted_length(self) -> int:
        if self.table is None:
            raise RuntimeError("Train the Huffman coder before measuring it.")
        return weighted_code_length(self.table, self.codewords)

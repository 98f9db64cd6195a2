from collections import deque

from hufftext.utils.metrics import format_ratio


def tree_levels(tree):
    """
    Walks the tree breadth first and collects the leaves found on
    every level.

    tree: HuffmanTree or None

    returns
        levels: list with one list of (symbol, weight) per tree level
    """
    levels = []
    if tree is None:
        return levels
    queue = deque([tree.root])
    while queue:
        level = []
        for _ in range(len(queue)):
            index = queue.popleft()
            node = tree[index]
            if node.is_leaf:
                level.append((node.symbol, node.weight))
            queue.extend(tree.children(index))
        levels.append(level)
    return levels


def show_tree(tree):
    for level in tree_levels(tree):
        print(" ".join(f"{symbol} ({weight})" for symbol, weight in level))


def show_codes(codebook, table):
    print("Symbol - Frequency - Code")
    for symbol in table.symbols:
        print(f"{symbol} - {table[symbol]} - {codebook[symbol]}")


def show_summary(stats, entropy=None, average_length=None):
    print(f"Original file size: {stats.original_bytes} bytes")
    print(f"Estimated compressed size: {stats.encoded_bytes} bytes ({stats.encoded_bits} bits)")
    ratio = format_ratio(stats.ratio)
    print(f"Comparison between files: {ratio}{'' if stats.ratio is None else '%'}")
    if entropy is not None:
        print(f"Entropy: {entropy:.4f} bits/symbol")
    if average_length is not None:
        print(f"Average code length: {average_length:.4f} bits/symbol")

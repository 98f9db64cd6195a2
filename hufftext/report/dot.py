import logging
from collections import deque

import graphviz

logger = logging.getLogger(__name__)


def node_label(node):
    if node.is_leaf:
        # backslashes are escape sequences for dot, quotes are escaped by graphviz itself
        return graphviz.escape(f"{node.symbol} - {node.weight}")
    return str(node.weight)


def to_digraph(tree, name="G"):
    """
    Converts a Huffman tree into a graphviz Digraph. Nodes are visited
    breadth first and named after their arena index; edges carry the
    bit they stand for.

    tree: HuffmanTree or None (yields an empty graph)

    returns
        graph: graphviz.Digraph
    """
    graph = graphviz.Digraph(name=name)
    if tree is None:
        return graph

    queue = deque([tree.root])
    while queue:
        index = queue.popleft()
        node = tree[index]
        graph.node(f"node{index}", label=node_label(node))
        for bit, child in (("0", node.left), ("1", node.right)):
            if child is None:
                continue
            graph.edge(f"node{index}", f"node{child}", label=bit)
            queue.append(child)
    return graph


def export_dot(tree, path):
    graph = to_digraph(tree)
    with open(path, "w", encoding="utf-8") as f:
        f.write(graph.source)
    logger.debug("Wrote DOT description of %d nodes to %s", 0 if tree is None else len(tree), path)
    return path


def draw(tree, filename="huffman_tree", fmt="png", view=False):
    """
    Renders the tree with the Graphviz `dot` executable.

    filename: output path without extension, the image is written to
        `filename.fmt`
    fmt: any output format supported by dot (png, svg, pdf, ...)
    view: open the rendered file with the system viewer

    returns
        path: str, path of the rendered image

    Raises graphviz.ExecutableNotFound when dot is not installed.
    """
    graph = to_digraph(tree)
    path = graph.render(filename=filename, format=fmt, cleanup=True, view=view)
    logger.info("Rendered Huffman tree to %s", path)
    return path

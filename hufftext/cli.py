import argparse
import logging
import os
import sys

import graphviz

from hufftext.entropy import HuffmanCoder, count_symbols, calc_entropy, average_code_length
from hufftext.report import show_tree, show_codes, show_summary, write_csv, export_dot, draw, plot_code_statistics
from hufftext.utils import read_text, CompressionStats

logger = logging.getLogger(__name__)

DEFAULT_CSV = "Huffman_Codes.csv"
DEFAULT_DOT = "huffman_tree.dot"


def build_parser():
    ap = argparse.ArgumentParser(prog="hufftext", description="Huffman code statistics for a text file")
    ap.add_argument("input", help="path to the text file")
    ap.add_argument("--encoding", default="utf-8", help="text encoding of the input (default utf-8)")
    ap.add_argument("--csv", default=DEFAULT_CSV, help=f"code table output (default {DEFAULT_CSV})")
    ap.add_argument("--dot", default=DEFAULT_DOT, help=f"DOT tree output (default {DEFAULT_DOT})")
    ap.add_argument("--render", metavar="FMT", choices=sorted(graphviz.FORMATS),
                    help="render the tree with graphviz to this format, e.g. png")
    ap.add_argument("--view", action="store_true", help="open the rendered tree")
    ap.add_argument("--plot", metavar="PATH", help="save a frequency / code length chart")
    ap.add_argument("--quiet", action="store_true", help="only print the size summary")
    ap.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def run(args):
    try:
        raw_text, original_size = read_text(args.input, encoding=args.encoding)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read %s: %s", args.input, e)
        return 1

    table, text = count_symbols(raw_text)
    skipped = len(raw_text) - len(text)
    if skipped:
        logger.info("Skipped %d non-printable characters", skipped)

    coder = HuffmanCoder().train(table)
    if coder.tree is None:
        logger.warning("%s has no printable characters, nothing to code", args.input)

    if not args.quiet:
        print("\nHuffman tree (leaves per level):")
        show_tree(coder.tree)
        print("\nHuffman codes with frequencies:")
        show_codes(coder.codewords, table)

    stream = coder.encode(text)
    if stream.dropped:
        logger.warning("Dropped %d symbols without a code", stream.dropped)

    stats = CompressionStats.from_stream(original_size, stream)
    show_summary(
        stats,
        entropy=calc_entropy(table.pmf()),
        average_length=average_code_length(table, coder.codewords),
    )

    try:
        write_csv(args.csv, coder.codewords, table, stats)
        export_dot(coder.tree, args.dot)
    except OSError as e:
        logger.error("Cannot write the reports: %s", e)
        return 1
    logger.info("Wrote %s and %s", args.csv, args.dot)

    if args.render:
        stem = os.path.splitext(args.dot)[0]
        if stem == args.dot:
            # rendering deletes its temporary source file
            stem += "_render"
        try:
            draw(coder.tree, filename=stem, fmt=args.render, view=args.view)
        except (graphviz.ExecutableNotFound, graphviz.CalledProcessError) as e:
            logger.error("Cannot render the tree: %s", e)

    if args.plot:
        try:
            plot_code_statistics(table, coder.codewords, path=args.plot)
        except OSError as e:
            logger.error("Cannot save the chart: %s", e)
            return 1

    return 0


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    return run(args)


if __name__ == "__main__":
    sys.exit(main())

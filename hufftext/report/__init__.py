from .console import tree_levels, show_tree, show_codes, show_summary
from .table import write_csv
from .dot import to_digraph, export_dot, draw
from .plot import plot_code_statistics

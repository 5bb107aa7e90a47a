"""
Eth Merkle Tree - Graph Export

DOT, text and PNG renderings of a tree's lineage.
"""

from eth_merkle_tree.graph.visualizer import (
    VisualizationError,
    format_tree,
    render_png,
    to_dot,
)

__all__ = [
    "VisualizationError",
    "format_tree",
    "render_png",
    "to_dot",
]

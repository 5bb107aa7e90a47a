"""
Eth Merkle Tree - Tree Visualization

Renders a tree's nodes and parent->child edges as Graphviz DOT, as a
plain-text tree, or as a PNG via the external `dot` command.
"""

import os
import subprocess
import tempfile
from pathlib import Path

import structlog

from eth_merkle_tree.core.config import settings
from eth_merkle_tree.crypto.errors import MerkleTreeError
from eth_merkle_tree.crypto.merkle import MerkleTree

logger = structlog.get_logger(__name__)

PNG_FILENAME = "merkle_tree.png"


class VisualizationError(MerkleTreeError):
    """Graphviz rendering failed."""

    pass


def to_dot(tree: MerkleTree) -> str:
    """
    Render the tree as a Graphviz digraph.

    Nodes are keyed by arena index, since a carried node shares its
    digest with the node it was carried from. Edges are unlabeled.
    """
    lines = ["digraph {"]
    for node in tree.nodes:
        lines.append(f'    {node.index} [ label = "{node.digest}" ]')
    for parent, child in tree.edges():
        lines.append(f"    {parent} -> {child} [ ]")
    lines.append("}")
    return "\n".join(lines) + "\n"


def format_tree(tree: MerkleTree) -> str:
    """Render the tree top-down with box-drawing branches."""
    lines: list[str] = []

    def walk(index: int, prefix: str, branch: str) -> None:
        node = tree.nodes[index]
        lines.append(f"{prefix}{branch}{node.digest}")
        if branch == "└─ ":
            prefix += "   "
        elif branch:
            prefix += "│  "
        for i, child in enumerate(node.children):
            is_last = i == len(node.children) - 1
            walk(child, prefix, "└─ " if is_last else "├─ ")

    walk(tree.root.index, "", "")
    return "\n".join(lines)


def render_png(
    tree: MerkleTree,
    output_dir: str | os.PathLike | None = None,
    dot_binary: str | None = None,
) -> Path:
    """
    Render the tree to a PNG with Graphviz.

    Args:
        tree: Tree to render
        output_dir: Destination directory (defaults to settings)
        dot_binary: Graphviz executable (defaults to settings)

    Returns:
        Path of the written PNG

    Raises:
        VisualizationError: If dot is missing or exits non-zero
    """
    output_path = Path(output_dir or settings.GRAPHVIZ_OUTPUT_DIR).resolve()
    output_path.mkdir(parents=True, exist_ok=True)
    png_path = output_path / PNG_FILENAME
    binary = dot_binary or settings.GRAPHVIZ_DOT_BINARY

    fd, dot_file = tempfile.mkstemp(suffix=".dot")
    try:
        with os.fdopen(fd, "w") as f:
            f.write(to_dot(tree))

        try:
            result = subprocess.run(
                [binary, "-Tpng", dot_file, "-o", str(png_path)],
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            raise VisualizationError(f"Failed to execute {binary}: {e}") from e

        if result.returncode != 0:
            raise VisualizationError(
                f"{binary} exited with status {result.returncode}: {result.stderr.strip()}"
            )
    finally:
        os.remove(dot_file)

    logger.info("Tree rendered", path=str(png_path), node_count=tree.node_count)
    return png_path

"""
Eth Merkle Tree - Command Line Interface

Usage:
    emtr build leaves.txt
    emtr build leaves.txt --proof "0x5B38Da6a701c568545dCfcB03FcB875f56beddC4, 100" -v
    emtr verify --root 0x... --leaf 0xabc --proof 0x... --proof 0x...
    emtr hash 0xabc
"""

import sys
from pathlib import Path

import click
import structlog

from eth_merkle_tree import __version__
from eth_merkle_tree.cli.output import print_error, print_field, print_json
from eth_merkle_tree.core.config import settings
from eth_merkle_tree.core.logging import setup_logging
from eth_merkle_tree.crypto.errors import MerkleTreeError
from eth_merkle_tree.crypto.keccak import keccak256
from eth_merkle_tree.crypto.merkle import MerkleTree
from eth_merkle_tree.crypto.verify import verify_proof
from eth_merkle_tree.graph.visualizer import format_tree, render_png

logger = structlog.get_logger(__name__)


def load_leaves(path: str | Path) -> list[str]:
    """Read one leaf value per line, skipping blank lines."""
    with open(path, encoding="utf-8") as f:
        return [line.rstrip("\r\n") for line in f if line.strip()]


@click.group()
@click.version_option(version=__version__)
def cli():
    """Ethereum Merkle tree tool."""
    setup_logging()


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("-p", "--proof", "proof_value", help="Leaf value to generate a proof for.")
@click.option("-v", "--visualize", is_flag=True, help="Print the tree.")
@click.option("--graphviz", is_flag=True, help="Render the tree to PNG with Graphviz.")
@click.option("--json", "as_json", is_flag=True, help="Print JSON output.")
def build(path: str, proof_value: str | None, visualize: bool, graphviz: bool, as_json: bool):
    """Build a Merkle tree from a file of leaf values."""
    try:
        tree = MerkleTree.from_leaves(load_leaves(path))

        proof = None
        index = None
        if proof_value is not None:
            index = tree.locate_leaf(
                keccak256(proof_value),
                leaves_only=settings.LOCATE_LEAVES_ONLY,
            )
            if index is not None:
                proof = tree.generate_proof(index)

        png_path = render_png(tree) if graphviz else None
    except MerkleTreeError as e:
        logger.warning("Tree command failed", error=str(e))
        print_error(str(e))
        sys.exit(1)

    if as_json:
        data = {"root": tree.root_hex, "leaf_count": tree.leaf_count}
        if proof_value is not None:
            data["leaf"] = proof_value
            data["index"] = index
            data["proof"] = proof
        print_json(data)
        return

    print_field("Merkle Root", tree.root_hex)

    if proof_value is not None:
        if index is None:
            click.echo("Leaf not found in the tree")
        else:
            print_field(f"Merkle proof for '{proof_value}'", "[" + ", ".join(proof) + "]")
            print_field("index", str(index))

    if visualize:
        click.echo(format_tree(tree))

    if png_path is not None:
        print_field("PNG file saved to", str(png_path))


@cli.command()
@click.option("--root", required=True, help="Claimed Merkle root.")
@click.option("--leaf", required=True, help="Leaf value to check.")
@click.option("--proof", "proof", multiple=True, help="Sibling digest, leaf level first. Repeatable.")
def verify(root: str, leaf: str, proof: tuple[str, ...]):
    """Verify a leaf against a root using a proof."""
    try:
        valid = verify_proof(list(proof), root, leaf)
    except MerkleTreeError as e:
        print_error(str(e))
        sys.exit(1)

    if valid:
        click.echo(click.style("valid", fg="green"))
    else:
        click.echo(click.style("invalid", fg="red"))
        sys.exit(1)


@cli.command(name="hash")
@click.argument("value")
def hash_value(value: str):
    """Print the Keccak-256 leaf digest of a value."""
    try:
        click.echo("0x" + keccak256(value))
    except MerkleTreeError as e:
        print_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    cli()

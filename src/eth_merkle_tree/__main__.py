"""
Module execution entry point.

Allows running with: python -m eth_merkle_tree
"""

from eth_merkle_tree.cli.main import cli

if __name__ == "__main__":
    cli()

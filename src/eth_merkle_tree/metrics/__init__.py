"""
Eth Merkle Tree - Metrics Module

Prometheus metrics for tree building, proof generation and verification.
"""

from eth_merkle_tree.metrics.tree_metrics import (
    TreeMetrics,
    get_tree_metrics,
)

__all__ = [
    "TreeMetrics",
    "get_tree_metrics",
]

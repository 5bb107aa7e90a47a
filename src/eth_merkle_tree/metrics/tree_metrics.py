"""
Eth Merkle Tree - Tree Metrics

Prometheus metrics for tree construction, proof generation and
verification.
"""

from prometheus_client import Counter, Histogram

import structlog

logger = structlog.get_logger(__name__)


class TreeMetrics:
    """
    Centralized metrics for Merkle tree operations.

    Provides visibility into:
    - Tree build times and sizes
    - Proof generation times
    - Verification outcomes
    """

    def __init__(self) -> None:
        """Initialize all tree metrics."""
        self._init_build_metrics()
        self._init_proof_metrics()

    def _init_build_metrics(self) -> None:
        """Initialize tree build metrics."""
        self.build_duration = Histogram(
            "eth_merkle_build_duration_seconds",
            "Merkle tree build time",
            buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0],
        )

        self.tree_size = Histogram(
            "eth_merkle_tree_size",
            "Number of leaves in Merkle tree",
            buckets=[1, 10, 50, 100, 500, 1000, 5000, 10000, 50000],
        )

        self.trees_built = Counter(
            "eth_merkle_trees_built_total",
            "Total Merkle trees built",
        )

    def _init_proof_metrics(self) -> None:
        """Initialize proof metrics."""
        self.proof_duration = Histogram(
            "eth_merkle_proof_duration_seconds",
            "Merkle proof generation time",
            buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01],
        )

        self.proofs_generated = Counter(
            "eth_merkle_proofs_generated_total",
            "Total Merkle proofs generated",
        )

        self.verifications = Counter(
            "eth_merkle_verifications_total",
            "Merkle proof verifications",
            ["result"],
        )

    # Convenience methods

    def record_build(self, duration: float, leaf_count: int) -> None:
        """Record Merkle tree build."""
        self.trees_built.inc()
        self.build_duration.observe(duration)
        self.tree_size.observe(leaf_count)

    def record_proof(self, duration: float) -> None:
        """Record proof generation."""
        self.proofs_generated.inc()
        self.proof_duration.observe(duration)

    def record_verification(self, valid: bool) -> None:
        """Record Merkle proof verification."""
        result = "valid" if valid else "invalid"
        self.verifications.labels(result=result).inc()


# Singleton instance
_tree_metrics: TreeMetrics | None = None


def get_tree_metrics() -> TreeMetrics:
    """Get global tree metrics instance."""
    global _tree_metrics
    if _tree_metrics is None:
        _tree_metrics = TreeMetrics()
        logger.debug("Tree metrics registered")
    return _tree_metrics

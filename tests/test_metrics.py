"""
Unit tests for tree metrics.
"""

from prometheus_client import REGISTRY

from eth_merkle_tree.crypto.merkle import MerkleTree
from eth_merkle_tree.crypto.verify import verify_proof
from eth_merkle_tree.metrics import get_tree_metrics


def _sample(name: str, labels: dict[str, str] | None = None) -> float:
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


class TestTreeMetrics:
    """Tests for metric recording."""

    def test_singleton(self) -> None:
        assert get_tree_metrics() is get_tree_metrics()

    def test_build_recorded(self) -> None:
        get_tree_metrics()
        before = _sample("eth_merkle_trees_built_total")

        MerkleTree.from_leaves(["0xabc", "0xdef"])

        assert _sample("eth_merkle_trees_built_total") == before + 1

    def test_proof_recorded(self) -> None:
        tree = MerkleTree.from_leaves(["0xabc", "0xdef"])
        before = _sample("eth_merkle_proofs_generated_total")

        tree.generate_proof(0)

        assert _sample("eth_merkle_proofs_generated_total") == before + 1

    def test_verification_recorded(self) -> None:
        tree = MerkleTree.from_leaves(["0xabc", "0xdef"])
        proof = tree.generate_proof(0)
        valid_before = _sample("eth_merkle_verifications_total", {"result": "valid"})
        invalid_before = _sample("eth_merkle_verifications_total", {"result": "invalid"})

        verify_proof(proof, tree.root_hash, "0xabc")
        verify_proof(proof, "00" * 32, "0xabc")

        assert _sample("eth_merkle_verifications_total", {"result": "valid"}) == valid_before + 1
        assert _sample("eth_merkle_verifications_total", {"result": "invalid"}) == invalid_before + 1

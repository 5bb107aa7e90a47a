"""
Eth Merkle Tree - Proof Verification

Recomputes a root from a leaf and its proof. Pairs are hashed in sorted
order, so the proof needs no direction flags, the same as an on-chain
MerkleProof.verify().
"""

from collections.abc import Sequence

from eth_merkle_tree.core.config import settings
from eth_merkle_tree.crypto.bytes import hash_pair
from eth_merkle_tree.crypto.keccak import keccak256
from eth_merkle_tree.crypto.merkle import MerkleProof, strip_prefix
from eth_merkle_tree.metrics import get_tree_metrics


def compute_root_from_proof(leaf_hash: str, proof: Sequence[str]) -> str:
    """
    Compute the root digest from a leaf digest and proof.

    Args:
        leaf_hash: Digest of the leaf
        proof: Sibling digests, leaf level first, 0x prefix optional

    Returns:
        Computed root digest (hex, no prefix)
    """
    current_hash = strip_prefix(leaf_hash)

    for sibling in proof:
        current_hash = hash_pair(current_hash, strip_prefix(sibling))

    return current_hash


def verify_proof_against_root(
    leaf_hash: str,
    proof: Sequence[str],
    expected_root: str,
) -> bool:
    """
    Verify a proof for an already-hashed leaf.

    Returns:
        True if proof reconstructs to expected_root
    """
    valid = compute_root_from_proof(leaf_hash, proof) == strip_prefix(expected_root)

    if settings.METRICS_ENABLED:
        get_tree_metrics().record_verification(valid)

    return valid


def verify_proof(proof: Sequence[str], root: str, leaf_value: str) -> bool:
    """
    Verify that a leaf value belongs to the tree with the given root.

    Args:
        proof: Sibling digests, leaf level first
        root: Claimed root digest, 0x prefix optional
        leaf_value: Original leaf value (hex or address/amount pair)

    Returns:
        True if the proof is valid

    Raises:
        EncodingError: If leaf_value cannot be hashed
        BytesError: If a proof entry is not valid hex
    """
    return verify_proof_against_root(keccak256(leaf_value), proof, root)


def verify_merkle_proof(proof: MerkleProof) -> bool:
    """Verify a MerkleProof bundle against its own root."""
    return verify_proof_against_root(proof.leaf_hash, proof.proof_path, proof.root_hash)

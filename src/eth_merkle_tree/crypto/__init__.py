"""
Eth Merkle Tree - Cryptographic Utilities

Provides Keccak-256 leaf hashing, sorted-pair hashing, Merkle tree
construction, proof generation, and verification.
"""

from eth_merkle_tree.crypto.bytes import compare_bytes, concat_hex_strings, hash_pair
from eth_merkle_tree.crypto.errors import (
    BytesError,
    ComparisonError,
    ConcatenateError,
    EmptyInputError,
    EncodingError,
    IndexOutOfRange,
    MerkleTreeError,
)
from eth_merkle_tree.crypto.keccak import encode_address_amount, keccak256
from eth_merkle_tree.crypto.merkle import MerkleProof, MerkleTree, TreeNode
from eth_merkle_tree.crypto.verify import (
    compute_root_from_proof,
    verify_merkle_proof,
    verify_proof,
    verify_proof_against_root,
)

__all__ = [
    "BytesError",
    "ComparisonError",
    "ConcatenateError",
    "EmptyInputError",
    "EncodingError",
    "IndexOutOfRange",
    "MerkleProof",
    "MerkleTree",
    "MerkleTreeError",
    "TreeNode",
    "compare_bytes",
    "compute_root_from_proof",
    "concat_hex_strings",
    "encode_address_amount",
    "hash_pair",
    "keccak256",
    "verify_merkle_proof",
    "verify_proof",
    "verify_proof_against_root",
]

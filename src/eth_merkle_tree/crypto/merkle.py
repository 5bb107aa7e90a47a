"""
Eth Merkle Tree - Merkle Tree Implementation

Provides deterministic Merkle tree construction with Keccak-256 hashing,
leaf lookup, and inclusion proof generation compatible with on-chain
verification (sorted-pair hashing, as in OpenZeppelin's MerkleProof).

Every node at every level is kept in a flat arena, indexed by creation
order: all leaves first, then each level bottom-up, the root last. Each
node records its parent index and child indices, so proofs are derived
by walking parent links from a leaf to the root.

For odd numbers of nodes at a level, the last node is carried up (not
duplicated, not rehashed): a node with the same digest is created one
level higher with the carried node as its only child.
"""

import re
import time
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any

import structlog

from eth_merkle_tree.core.config import settings
from eth_merkle_tree.crypto.bytes import hash_pair
from eth_merkle_tree.crypto.errors import EmptyInputError, EncodingError, IndexOutOfRange
from eth_merkle_tree.crypto.keccak import keccak256
from eth_merkle_tree.metrics import get_tree_metrics

logger = structlog.get_logger(__name__)

_DIGEST_RE = re.compile(r"[0-9a-f]{64}")


def strip_prefix(digest: str) -> str:
    """Normalize a digest to lowercase hex without 0x prefix."""
    if digest.startswith(("0x", "0X")):
        digest = digest[2:]
    return digest.lower()


@dataclass(frozen=True)
class TreeNode:
    """
    Represents a node in the Merkle tree.

    Attributes:
        index: Position in the tree's node arena
        digest: Keccak-256 digest (hex, no prefix)
        level: Height above the leaves (0 for leaves)
        parent: Arena index of the parent (None for the root)
        children: Arena indices of the children (empty for leaves)
    """

    index: int
    digest: str
    level: int
    parent: int | None = None
    children: tuple[int, ...] = ()

    @property
    def is_leaf(self) -> bool:
        """Check if this node is a leaf."""
        return self.level == 0

    @property
    def is_root(self) -> bool:
        """Check if this node is the root."""
        return self.parent is None


@dataclass
class MerkleProof:
    """
    Merkle inclusion proof for a leaf.

    Attributes:
        leaf_hash: Digest of the leaf being proven
        leaf_index: Arena index of the leaf
        proof_path: 0x-prefixed sibling digests, leaf level first
        root_hash: Expected Merkle root (hex, no prefix)
    """

    leaf_hash: str
    leaf_index: int
    proof_path: list[str]
    root_hash: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize proof to dictionary."""
        return {
            "leaf_hash": "0x" + self.leaf_hash,
            "leaf_index": self.leaf_index,
            "proof": list(self.proof_path),
            "root": "0x" + self.root_hash,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MerkleProof":
        """Deserialize proof from dictionary."""
        return cls(
            leaf_hash=strip_prefix(data["leaf_hash"]),
            leaf_index=data["leaf_index"],
            proof_path=list(data["proof"]),
            root_hash=strip_prefix(data["root"]),
        )


class _TreeBuilder:
    """Accumulates arena entries while a tree is being built."""

    def __init__(self) -> None:
        self.digests: list[str] = []
        self.levels: list[int] = []
        self.parents: list[int | None] = []
        self.children: list[tuple[int, ...]] = []

    def add(self, digest: str, level: int, children: tuple[int, ...] = ()) -> int:
        index = len(self.digests)
        self.digests.append(digest)
        self.levels.append(level)
        self.parents.append(None)
        self.children.append(children)
        for child in children:
            self.parents[child] = index
        return index

    def freeze(self) -> list[TreeNode]:
        return [
            TreeNode(
                index=i,
                digest=self.digests[i],
                level=self.levels[i],
                parent=self.parents[i],
                children=self.children[i],
            )
            for i in range(len(self.digests))
        ]


class MerkleTree:
    """
    Merkle tree over Ethereum leaf values with Keccak-256 hashing.

    Features:
    - Deterministic construction from ordered leaves
    - Sorted-pair hashing, so proofs carry no left/right flags
    - Odd nodes carried up without rehashing
    - O(1) digest lookup
    - Immutable after construction

    Example:
        >>> tree = MerkleTree.from_leaves(["0xabc", "0xdef"])
        >>> index = tree.locate_leaf(keccak256("0xabc"))
        >>> proof = tree.generate_proof(index)
        >>> verify_proof(proof, tree.root_hash, "0xabc")
        True
    """

    def __init__(self, nodes: list[TreeNode]) -> None:
        """
        Initialize Merkle tree (internal use).

        Use from_leaves() or from_hashes() to construct trees.
        """
        self._nodes = tuple(nodes)
        self._leaves = tuple(node for node in self._nodes if node.is_leaf)
        self._root = self._nodes[-1]

        # First occurrence wins, so a leaf shadows any internal node
        # that happens to share its digest.
        self._lookup: dict[str, int] = {}
        for node in self._nodes:
            self._lookup.setdefault(node.digest, node.index)

    @classmethod
    def from_leaves(cls, values: Sequence[str]) -> "MerkleTree":
        """
        Construct a Merkle tree from leaf values.

        Args:
            values: Ordered leaf values (hex strings or address/amount pairs)

        Returns:
            Constructed MerkleTree

        Raises:
            EmptyInputError: If values is empty
            EncodingError: If any value cannot be hashed
        """
        if not values:
            raise EmptyInputError()

        start = time.perf_counter()
        tree = cls._build_tree([keccak256(value) for value in values])

        if settings.METRICS_ENABLED:
            get_tree_metrics().record_build(time.perf_counter() - start, tree.leaf_count)

        logger.debug(
            "Merkle tree built",
            leaf_count=tree.leaf_count,
            node_count=tree.node_count,
            root=tree.root_hex,
        )
        return tree

    @classmethod
    def from_hashes(cls, hashes: Sequence[str]) -> "MerkleTree":
        """
        Construct a Merkle tree from pre-computed leaf digests.

        Args:
            hashes: Hex-encoded 32-byte leaf digests, 0x prefix optional

        Returns:
            Constructed MerkleTree

        Raises:
            EmptyInputError: If hashes is empty
            EncodingError: If any entry is not a 32-byte hex digest
        """
        if not hashes:
            raise EmptyInputError()

        digests = []
        for value in hashes:
            digest = strip_prefix(value)
            if not _DIGEST_RE.fullmatch(digest):
                raise EncodingError(value, "not a 32-byte hex digest")
            digests.append(digest)

        return cls._build_tree(digests)

    @classmethod
    def _build_tree(cls, leaf_digests: list[str]) -> "MerkleTree":
        """Build tree from leaf digests."""
        builder = _TreeBuilder()
        current_level = [builder.add(digest, 0) for digest in leaf_digests]
        level = 0

        while len(current_level) > 1:
            level += 1
            next_level = []

            for i in range(0, len(current_level), 2):
                left = current_level[i]

                if i + 1 < len(current_level):
                    right = current_level[i + 1]
                    parent_hash = hash_pair(builder.digests[left], builder.digests[right])
                    next_level.append(builder.add(parent_hash, level, (left, right)))
                else:
                    # Odd case: carry the last node up unchanged
                    next_level.append(builder.add(builder.digests[left], level, (left,)))

            current_level = next_level

        return cls(builder.freeze())

    @property
    def root(self) -> TreeNode:
        """Get the root node."""
        return self._root

    @property
    def root_hash(self) -> str:
        """Get the root digest (hex, no prefix)."""
        return self._root.digest

    @property
    def root_hex(self) -> str:
        """Get the root digest with 0x prefix."""
        return "0x" + self._root.digest

    @property
    def nodes(self) -> tuple[TreeNode, ...]:
        """Get every node, in arena order."""
        return self._nodes

    @property
    def leaves(self) -> tuple[TreeNode, ...]:
        """Get all leaf nodes."""
        return self._leaves

    @property
    def leaf_count(self) -> int:
        """Get the number of leaves."""
        return len(self._leaves)

    @property
    def node_count(self) -> int:
        """Get the number of nodes across all levels."""
        return len(self._nodes)

    @property
    def height(self) -> int:
        """Get the level of the root (0 for a single leaf)."""
        return self._root.level

    def get_node(self, index: int) -> TreeNode:
        """
        Get a node by arena index.

        Raises:
            IndexOutOfRange: If index out of bounds
        """
        if index < 0 or index >= len(self._nodes):
            raise IndexOutOfRange(index, len(self._nodes))
        return self._nodes[index]

    def get_leaf_hash(self, index: int) -> str:
        """
        Get the digest of a leaf by its input position.

        Raises:
            IndexOutOfRange: If index out of bounds
        """
        if index < 0 or index >= len(self._leaves):
            raise IndexOutOfRange(index, len(self._leaves))
        return self._leaves[index].digest

    def level(self, level: int) -> list[str]:
        """Get the digests at one level, left to right."""
        return [node.digest for node in self._nodes if node.level == level]

    def edges(self) -> Iterator[tuple[int, int]]:
        """Yield (parent, child) arena index pairs."""
        for node in self._nodes:
            for child in node.children:
                yield node.index, child

    def locate_leaf(self, target_hash: str, *, leaves_only: bool = False) -> int | None:
        """
        Locate a node by digest.

        Args:
            target_hash: Digest to look for, 0x prefix and case ignored
            leaves_only: Only match level-0 nodes

        Returns:
            Arena index of the first node with that digest, or None
        """
        index = self._lookup.get(strip_prefix(target_hash))
        if index is None:
            return None
        if leaves_only and not self._nodes[index].is_leaf:
            return None
        return index

    def generate_proof(self, index: int) -> list[str]:
        """
        Generate an inclusion proof for a node.

        Walks parent links from the node to the root, collecting the
        sibling digest at each step. Carried steps have no sibling and
        contribute nothing.

        Args:
            index: Arena index of the node to prove

        Returns:
            0x-prefixed sibling digests, leaf level first

        Raises:
            IndexOutOfRange: If index out of bounds
        """
        start = time.perf_counter()
        current = self.get_node(index)
        proof = []

        while current.parent is not None:
            parent = self._nodes[current.parent]
            for child in parent.children:
                if child != current.index:
                    proof.append("0x" + self._nodes[child].digest)
            current = parent

        if settings.METRICS_ENABLED:
            get_tree_metrics().record_proof(time.perf_counter() - start)

        return proof

    def get_proof(self, leaf_index: int) -> MerkleProof:
        """
        Generate a proof bundle for a leaf.

        Args:
            leaf_index: Input position of the leaf

        Returns:
            MerkleProof for the leaf

        Raises:
            IndexOutOfRange: If leaf_index out of bounds
        """
        leaf_hash = self.get_leaf_hash(leaf_index)
        return MerkleProof(
            leaf_hash=leaf_hash,
            leaf_index=leaf_index,
            proof_path=self.generate_proof(leaf_index),
            root_hash=self.root_hash,
        )

    def get_all_proofs(self) -> list[MerkleProof]:
        """
        Generate proofs for all leaves.

        Returns:
            List of MerkleProof for each leaf
        """
        return [self.get_proof(i) for i in range(len(self._leaves))]

"""
Eth Merkle Tree - Error Types

Exceptions raised by the hashing primitives, byte utilities and tree
operations. All of them derive from MerkleTreeError so callers can catch
the whole family at once.
"""


class MerkleTreeError(Exception):
    """Base exception for Merkle tree errors."""

    pass


class EncodingError(MerkleTreeError, ValueError):
    """Input is not valid hex, or a packed amount is malformed."""

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Cannot encode {value!r}: {reason}")


class BytesError(MerkleTreeError):
    """Failure while comparing or concatenating two hex strings."""

    action = "Byte operation"

    def __init__(self, a: str, b: str) -> None:
        self.a = a
        self.b = b
        super().__init__(f"{self.action} failed between {a} and {b}")


class ComparisonError(BytesError):
    """Hex decode failed while ordering a pair."""

    action = "Comparison"


class ConcatenateError(BytesError):
    """Hex decode failed while concatenating a pair."""

    action = "Concatenation"


class EmptyInputError(MerkleTreeError, ValueError):
    """Tree requested over zero leaves."""

    def __init__(self) -> None:
        super().__init__("Cannot create Merkle tree from empty leaves")


class IndexOutOfRange(MerkleTreeError, IndexError):
    """Node index does not exist in the tree."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Node index {index} out of bounds for tree of {size} nodes")

"""
Eth Merkle Tree - Byte Utilities

Canonical ordering and concatenation of hex-encoded byte strings prior
to hashing. Pairs are sorted byte-lexicographically, so the combined
digest does not depend on which side of the tree each child sits on.
This matches keccak256(abi.encodePacked(min(a, b), max(a, b))) on-chain.
"""

import re

from eth_merkle_tree.crypto.errors import ComparisonError, ConcatenateError
from eth_merkle_tree.crypto.keccak import keccak256

_EVEN_HEX_RE = re.compile(r"(?:[0-9a-fA-F]{2})*")


def _decode(value: str) -> bytes:
    if value.startswith(("0x", "0X")):
        value = value[2:]
    if not _EVEN_HEX_RE.fullmatch(value):
        raise ValueError(f"Not an even-length hex string: {value!r}")
    return bytes.fromhex(value)


def compare_bytes(a: str, b: str) -> int:
    """
    Compare two hex strings as unsigned big-endian byte sequences.

    Returns:
        -1, 0 or 1 as a sorts before, equal to, or after b

    Raises:
        ComparisonError: If either value is not valid hex
    """
    try:
        a_bytes = _decode(a)
        b_bytes = _decode(b)
    except ValueError as e:
        raise ComparisonError(a, b) from e

    return (a_bytes > b_bytes) - (a_bytes < b_bytes)


def concat_hex_strings(a: str, b: str) -> str:
    """
    Concatenate two hex strings at the byte level.

    Returns:
        Hex encoding of bytes(a) + bytes(b), without prefix

    Raises:
        ConcatenateError: If either value is not valid hex
    """
    try:
        return (_decode(a) + _decode(b)).hex()
    except ValueError as e:
        raise ConcatenateError(a, b) from e


def hash_pair(a: str, b: str) -> str:
    """
    Hash two digests after placing the smaller one first.

    Args:
        a: First hex digest
        b: Second hex digest

    Returns:
        Keccak-256 of the ordered concatenation (hex, no prefix)

    Raises:
        ComparisonError: If the values cannot be ordered
        ConcatenateError: If the values cannot be concatenated
    """
    if compare_bytes(a, b) > 0:
        a, b = b, a
    return keccak256(concat_hex_strings(a, b))

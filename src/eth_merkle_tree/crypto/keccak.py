"""
Eth Merkle Tree - Keccak-256 Hash Primitive

Hashes leaf values the way a Solidity contract would recompute them.

Two input forms are accepted:
- Plain hex ("0xabc", "5B38Da6a..."): decoded as bytes, with a leading
  zero nibble inserted when the length is odd.
- Packed pair ("<0x-address>, <amount>"): laid out as
  abi.encode(address, uint256), i.e. two 32-byte big-endian words.
"""

import re

from eth_utils import keccak

from eth_merkle_tree.crypto.errors import EncodingError

WORD_SIZE = 32
MAX_UINT256 = 2**256 - 1

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


def normalize_hex(value: str) -> str:
    """
    Strip a 0x prefix and pad to an even number of nibbles.

    Args:
        value: Hex string with or without 0x prefix

    Returns:
        Hex string without prefix, even length
    """
    if value.startswith(("0x", "0X")):
        value = value[2:]
    if len(value) % 2 != 0:
        value = "0" + value
    return value


def _decode_hex(value: str, original: str) -> bytes:
    digits = normalize_hex(value)
    if not _HEX_RE.fullmatch(digits):
        raise EncodingError(original, "invalid hex")
    return bytes.fromhex(digits)


def _parse_amount(value: str, original: str) -> int:
    if not value.isdigit() or not value.isascii():
        raise EncodingError(original, f"amount {value!r} is not a non-negative integer")
    amount = int(value)
    if amount > MAX_UINT256:
        raise EncodingError(original, "amount does not fit in uint256")
    return amount


def encode_address_amount(address: str, amount: int) -> bytes:
    """
    Encode an address/amount pair as abi.encode(address, uint256).

    Args:
        address: Hex address, 0x prefix optional
        amount: Unsigned integer amount

    Returns:
        64 bytes: left-padded address word followed by the amount word

    Raises:
        EncodingError: If the address is not hex or is wider than a word,
            or the amount is out of uint256 range
    """
    address_bytes = _decode_hex(address, address)
    if len(address_bytes) > WORD_SIZE:
        raise EncodingError(address, f"address wider than {WORD_SIZE} bytes")
    if amount < 0 or amount > MAX_UINT256:
        raise EncodingError(str(amount), "amount does not fit in uint256")

    return address_bytes.rjust(WORD_SIZE, b"\x00") + amount.to_bytes(WORD_SIZE, "big")


def encode_leaf(value: str) -> bytes:
    """
    Convert a leaf value into the bytes that get hashed.

    Args:
        value: Plain hex string or "<address>, <amount>" pair

    Returns:
        Raw bytes to feed to Keccak-256

    Raises:
        EncodingError: If the value cannot be decoded
    """
    if "," not in value:
        return _decode_hex(value.strip(), value)

    parts = value.split(",")
    if len(parts) != 2:
        raise EncodingError(value, "expected '<address>, <amount>'")

    address, amount = (part.strip() for part in parts)
    return encode_address_amount(address, _parse_amount(amount, value))


def keccak256(value: str) -> str:
    """
    Compute the Keccak-256 digest of a leaf value.

    Args:
        value: Plain hex string or "<address>, <amount>" pair

    Returns:
        64-character lowercase hex digest without 0x prefix

    Raises:
        EncodingError: If the value cannot be decoded
    """
    return keccak(encode_leaf(value)).hex()

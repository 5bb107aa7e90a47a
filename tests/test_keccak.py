"""
Unit tests for the Keccak-256 hash primitive.
"""

import pytest
from eth_utils import keccak

from eth_merkle_tree.crypto.errors import EncodingError
from eth_merkle_tree.crypto.keccak import (
    MAX_UINT256,
    encode_address_amount,
    encode_leaf,
    keccak256,
    normalize_hex,
)

ADDRESS = "0x5B38Da6a701c568545dCfcB03FcB875f56beddC4"
EMPTY_KECCAK = "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"


class TestNormalizeHex:
    """Tests for hex normalization."""

    def test_strips_prefix(self) -> None:
        assert normalize_hex("0xabcd") == "abcd"
        assert normalize_hex("0XABCD") == "ABCD"

    def test_pads_odd_length(self) -> None:
        assert normalize_hex("0xabc") == "0abc"
        assert normalize_hex("f") == "0f"

    def test_even_length_untouched(self) -> None:
        assert normalize_hex("deadbeef") == "deadbeef"


class TestRawHexMode:
    """Tests for plain hex leaves."""

    def test_empty_input(self) -> None:
        """The bare prefix hashes the empty byte string."""
        assert keccak256("0x") == EMPTY_KECCAK

    def test_odd_length_gets_leading_zero(self) -> None:
        assert keccak256("0xabc") == keccak(bytes.fromhex("0abc")).hex()

    def test_prefix_optional(self) -> None:
        assert keccak256("0xdeadbeef") == keccak256("deadbeef")

    def test_case_insensitive(self) -> None:
        assert keccak256(ADDRESS) == keccak256(ADDRESS.lower())

    def test_output_format(self) -> None:
        """Digest is 64 lowercase hex characters without prefix."""
        digest = keccak256(ADDRESS)

        assert len(digest) == 64
        assert digest == digest.lower()
        assert not digest.startswith("0x")

    def test_deterministic(self) -> None:
        assert keccak256("0xabc") == keccak256("0xabc")

    @pytest.mark.parametrize("value", ["0xzz", "hello", "0x12 34", "0x-1"])
    def test_invalid_hex_raises(self, value: str) -> None:
        with pytest.raises(EncodingError, match="invalid hex"):
            keccak256(value)

    def test_encoding_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            keccak256("0xnothex")


class TestPackedMode:
    """Tests for address/amount leaves."""

    def test_matches_abi_encode(self) -> None:
        """Layout matches abi.encode(address, uint256)."""
        expected = (
            b"\x00" * 12
            + bytes.fromhex(ADDRESS[2:])
            + (100).to_bytes(32, "big")
        )

        assert encode_leaf(f"{ADDRESS}, 100") == expected
        assert keccak256(f"{ADDRESS}, 100") == keccak(expected).hex()

    def test_encoded_length(self) -> None:
        assert len(encode_address_amount(ADDRESS, 1)) == 64

    def test_whitespace_tolerated(self) -> None:
        assert keccak256(f"{ADDRESS},100") == keccak256(f"  {ADDRESS} ,  100 ")

    def test_amount_changes_digest(self) -> None:
        assert keccak256(f"{ADDRESS}, 100") != keccak256(f"{ADDRESS}, 101")

    def test_differs_from_address_only(self) -> None:
        assert keccak256(f"{ADDRESS}, 0") != keccak256(ADDRESS)

    def test_zero_amount(self) -> None:
        encoded = encode_leaf(f"{ADDRESS}, 0")
        assert encoded[32:] == b"\x00" * 32

    def test_max_amount(self) -> None:
        encoded = encode_leaf(f"{ADDRESS}, {MAX_UINT256}")
        assert encoded[32:] == b"\xff" * 32

    @pytest.mark.parametrize("amount", ["abc", "-1", "1.5", "", "1e3"])
    def test_malformed_amount_raises(self, amount: str) -> None:
        with pytest.raises(EncodingError, match="amount"):
            keccak256(f"{ADDRESS}, {amount}")

    def test_amount_overflow_raises(self) -> None:
        with pytest.raises(EncodingError, match="uint256"):
            keccak256(f"{ADDRESS}, {MAX_UINT256 + 1}")

    def test_invalid_address_raises(self) -> None:
        with pytest.raises(EncodingError, match="invalid hex"):
            keccak256("0xnotanaddress, 100")

    def test_address_too_wide_raises(self) -> None:
        with pytest.raises(EncodingError, match="wider"):
            encode_address_amount("0x" + "ab" * 33, 1)

    def test_extra_field_raises(self) -> None:
        with pytest.raises(EncodingError, match="expected"):
            keccak256(f"{ADDRESS}, 100, 7")

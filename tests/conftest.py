"""
Pytest configuration and shared fixtures for Merkle tree tests.
"""

from pathlib import Path

import pytest

from eth_merkle_tree.crypto.merkle import MerkleTree


@pytest.fixture
def hex_leaves() -> list[str]:
    """Plain hex leaf values."""
    return ["0xabc", "0xdef", "0x123", "0x456", "0x789"]


@pytest.fixture
def airdrop_leaves() -> list[str]:
    """Address/amount leaf values, as fed to an airdrop contract."""
    return [
        "0x901Ab22EdCA65188686C9742F2C88c946698bc90, 100",
        "0x7b95d138cD923476b6e697391DD2aA01D15BAB27, 100",
        "0xaBA8e3eB6D782e3B85Aa1Dd6E5B07136D4F98236, 100",
        "0x519cD54891B30157f526485CCA49e9D0fa32BD86, 100",
        "0xBd5760bf0A1cA1879881351018383c00B126e23D, 100",
        "0x71a40d4D0110c99fe2f804378DD21D6aed50FFe8, 100",
        "0x5a3281D2d5b81C0c6591627617d6374fF6D8AD63, 100",
        "0xb1397d10bd332dbe3b0009DFB1732D86F9dF5653, 100",
        "0xcD7Ee7cb8A87816ddb21Caec344767Ca8D51902b, 100",
        "0x110d697D5921d22c3C581eCd660dfb0Cd00d0212, 100",
        "0x6Ffa3Ff180c26F58aE21aDD80Dd6D3C971c22c6D, 100",
        "0xd1D0DeD9Bd888F4754CB2fdA8B3250b8b06ac2aF, 100",
        "0x86015C5C3d6a882B025FA7428BF784B2dAd8e0CE, 100",
        "0x5271089D698fab4C6400d3BF53b0e9Bd947A5592, 100",
        "0x324152a714E266f85dBfbeEDe0CE6F1f91D8346f, 100",
        "0x667aC3f4283aa327D34F8E62742E4759F6ff9E72, 100",
        "0xEcaaDb6B56601CA05030647dCA9fAaf6426F8FB0, 100",
        "0xB184FEd855c51245711Ee4F5A3b13B928aE9a9A6, 100",
        "0x5B38Da6a701c568545dCfcB03FcB875f56beddC4, 100",
    ]


@pytest.fixture
def airdrop_tree(airdrop_leaves: list[str]) -> MerkleTree:
    """Tree over the airdrop leaves (19 leaves, odd at several levels)."""
    return MerkleTree.from_leaves(airdrop_leaves)


@pytest.fixture
def leaves_file(tmp_path: Path, airdrop_leaves: list[str]) -> Path:
    """Leaf file with blank lines mixed in."""
    path = tmp_path / "leaves.txt"
    path.write_text("\n".join(airdrop_leaves[:3]) + "\n\n" + "\n".join(airdrop_leaves[3:]) + "\n\n")
    return path

"""
Eth Merkle Tree

Keccak-256 Merkle trees over Ethereum addresses and address/amount
pairs, with inclusion proofs that verify on-chain.
"""

__version__ = "0.1.0"

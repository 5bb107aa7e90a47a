"""
Eth Merkle Tree - CLI

Build trees from leaf files, print proofs, and verify them.
"""

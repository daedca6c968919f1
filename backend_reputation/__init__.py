"""
Backend Reputation — on-chain reputation profiles for Ethereum wallets.

Validates a wallet address, queries the chain RPC, token contracts, an NFT
indexer and a governance snapshot hub concurrently, and merges the results
into one best-effort profile served over HTTP.
"""

__version__ = "0.1.0"

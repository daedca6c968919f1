"""
Chain package — Ethereum address handling and read-only JSON-RPC access.

Everything here is a thin wrapper over the RPC wire format; policy about
which failures matter lives in the fetchers and the aggregator.
"""

from backend_reputation.chain.address import InvalidAddress, validate_address
from backend_reputation.chain.rpc import EthereumRpcClient, RpcError

__all__ = ["EthereumRpcClient", "InvalidAddress", "RpcError", "validate_address"]

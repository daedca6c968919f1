"""
ENS reverse resolution over raw eth_call.

lookup_name() follows the reverse record of an address and then checks the
forward record of the returned name, so a name is only reported when it
resolves back to the same address.
"""

from __future__ import annotations

from web3 import Web3

from backend_reputation.chain.rpc import ZERO_ADDRESS, EthereumRpcClient

# ENS registry (same address on mainnet and the public testnets)
ENS_REGISTRY = "0x00000000000C2E074eC69A0dFb2997BA6C7d2e1e"

RESOLVER_SELECTOR = bytes(Web3.keccak(text="resolver(bytes32)")[:4])
NAME_SELECTOR = bytes(Web3.keccak(text="name(bytes32)")[:4])
ADDR_SELECTOR = bytes(Web3.keccak(text="addr(bytes32)")[:4])


def namehash(name: str) -> bytes:
    """EIP-137 namehash. Labels are lower-cased; full ENSIP-15 normalization is not applied."""
    node = b"\x00" * 32
    if not name:
        return node
    for label in reversed(name.lower().split(".")):
        node = bytes(Web3.keccak(node + Web3.keccak(text=label)))
    return node


def reverse_node(address: str) -> bytes:
    return namehash(f"{address.lower()[2:]}.addr.reverse")


async def _resolver(rpc: EthereumRpcClient, node: bytes) -> str | None:
    (resolver,) = await rpc.call_decoded(ENS_REGISTRY, RESOLVER_SELECTOR + node, ["address"])
    if resolver.lower() == ZERO_ADDRESS:
        return None
    return resolver


async def lookup_name(rpc: EthereumRpcClient, address: str) -> str | None:
    """
    Return the primary ENS name of address, or None when it has none.

    Raises RpcError when any of the underlying calls fails; callers treat the
    name as decorative and decide how to degrade.
    """
    node = reverse_node(address)
    resolver = await _resolver(rpc, node)
    if resolver is None:
        return None
    (name,) = await rpc.call_decoded(resolver, NAME_SELECTOR + node, ["string"])
    if not name:
        return None

    forward_node = namehash(name)
    forward_resolver = await _resolver(rpc, forward_node)
    if forward_resolver is None:
        return None
    (resolved,) = await rpc.call_decoded(forward_resolver, ADDR_SELECTOR + forward_node, ["address"])
    if resolved.lower() != address.lower():
        return None
    return name

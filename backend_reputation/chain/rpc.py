"""
Read-only Ethereum JSON-RPC client over a shared httpx.AsyncClient.

One instance is built at startup and reused by every request; it holds no
per-request state. Each method issues exactly one POST (no retries) and
raises RpcError on transport failures, HTTP errors, JSON-RPC error objects
or malformed results.
"""

from __future__ import annotations

from typing import Any

import httpx
from eth_abi import decode, encode
from web3 import Web3


ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# ERC-20 selectors
BALANCE_OF_SELECTOR = bytes(Web3.keccak(text="balanceOf(address)")[:4])
DECIMALS_SELECTOR = bytes(Web3.keccak(text="decimals()")[:4])


class RpcError(RuntimeError):
    """JSON-RPC call failed (transport, HTTP status, error object or bad payload)."""

    def __init__(self, method: str, message: str) -> None:
        super().__init__(f"{method}: {message}")
        self.method = method


def _hex_to_int(method: str, value: Any) -> int:
    if not isinstance(value, str) or not value.startswith("0x"):
        raise RpcError(method, f"expected hex quantity, got {value!r}")
    try:
        return int(value, 16)
    except ValueError:
        raise RpcError(method, f"expected hex quantity, got {value!r}") from None


class EthereumRpcClient:
    """Thin async wrapper for the handful of eth_* reads the fetchers need."""

    def __init__(self, client: httpx.AsyncClient, rpc_url: str) -> None:
        self._client = client
        self._rpc_url = rpc_url

    @property
    def rpc_url(self) -> str:
        return self._rpc_url

    async def call(self, method: str, params: list[Any]) -> Any:
        body = {"jsonrpc": "2.0", "id": 1, "method": method, "params": params}
        try:
            r = await self._client.post(self._rpc_url, json=body)
            r.raise_for_status()
            data = r.json()
        except httpx.HTTPError as e:
            raise RpcError(method, f"transport error: {e}") from e
        except ValueError as e:
            raise RpcError(method, "response is not JSON") from e
        if not isinstance(data, dict):
            raise RpcError(method, "response is not a JSON-RPC object")
        if data.get("error"):
            err = data["error"]
            message = err.get("message", str(err)) if isinstance(err, dict) else str(err)
            raise RpcError(method, message)
        if "result" not in data:
            raise RpcError(method, "response has no result")
        return data["result"]

    async def get_balance(self, address: str) -> int:
        """Native balance in wei at the latest block."""
        result = await self.call("eth_getBalance", [address, "latest"])
        return _hex_to_int("eth_getBalance", result)

    async def get_transaction_count(self, address: str) -> int:
        result = await self.call("eth_getTransactionCount", [address, "latest"])
        return _hex_to_int("eth_getTransactionCount", result)

    async def get_code(self, address: str) -> bytes:
        result = await self.call("eth_getCode", [address, "latest"])
        if not isinstance(result, str) or not result.startswith("0x"):
            raise RpcError("eth_getCode", f"expected hex data, got {result!r}")
        return Web3.to_bytes(hexstr=result)

    async def eth_call(self, to: str, data: bytes) -> bytes:
        result = await self.call(
            "eth_call",
            [{"to": to, "data": Web3.to_hex(data)}, "latest"],
        )
        if not isinstance(result, str) or not result.startswith("0x"):
            raise RpcError("eth_call", f"expected hex data, got {result!r}")
        return Web3.to_bytes(hexstr=result)

    async def call_decoded(self, to: str, data: bytes, output_types: list[str]) -> tuple[Any, ...]:
        """eth_call and ABI-decode the return data; empty or short data is an error."""
        raw = await self.eth_call(to, data)
        try:
            return decode(output_types, raw)
        except Exception as e:
            raise RpcError("eth_call", f"cannot decode {output_types} from {len(raw)} bytes") from e

    async def erc20_balance_of(self, token: str, owner: str) -> int:
        data = BALANCE_OF_SELECTOR + encode(["address"], [owner])
        (balance,) = await self.call_decoded(token, data, ["uint256"])
        return int(balance)

    async def erc20_decimals(self, token: str) -> int:
        (decimals,) = await self.call_decoded(token, DECIMALS_SELECTOR, ["uint8"])
        return int(decimals)

"""
Chain backend: the read-only capability the resolver core runs on.

A backend executes a contract call against the latest block and reports the
code deployed at an address. The core never writes and never retries; any
retry or timeout policy belongs to the backend's transport.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

from .errors import RpcError
from .rpc.http import RpcClient
from .utils.bytes import from_hex, to_hex

log = logging.getLogger(__name__)

__all__ = ["ChainBackend", "RpcBackend"]


@runtime_checkable
class ChainBackend(Protocol):
    def call_contract(self, address: bytes, data: bytes) -> bytes: ...
    def code_at(self, address: bytes) -> bytes: ...


class RpcBackend:
    """
    `ChainBackend` over Ethereum JSON-RPC (`eth_call`, `eth_getCode`).

    The backend borrows its `RpcClient`; closing the client is the caller's job
    unless the backend was created with `RpcBackend.from_url`, in which case
    `close()` (or the context manager) closes it.
    """

    def __init__(self, rpc: RpcClient, *, block: str = "latest") -> None:
        self._rpc = rpc
        self._block = block
        self._owns_rpc = False

    @classmethod
    def from_url(cls, url: str, **kwargs: Any) -> "RpcBackend":
        backend = cls(RpcClient(url, **kwargs))
        backend._owns_rpc = True
        return backend

    def __enter__(self) -> "RpcBackend":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.close()

    def close(self) -> None:
        if self._owns_rpc:
            self._rpc.close()

    def call_contract(self, address: bytes, data: bytes) -> bytes:
        to = to_hex(address)
        log.debug("eth_call to=%s data=%s", to, to_hex(data[:4]))
        result = self._rpc.request("eth_call", [{"to": to, "data": to_hex(data)}, self._block])
        return self._decode_hex(result, "eth_call", to)

    def code_at(self, address: bytes) -> bytes:
        to = to_hex(address)
        result = self._rpc.request("eth_getCode", [to, self._block])
        return self._decode_hex(result, "eth_getCode", to)

    @staticmethod
    def _decode_hex(result: Any, method: str, to: str) -> bytes:
        if not isinstance(result, str):
            raise RpcError(message=f"unexpected {method} payload", method=method, address=to, data=result)
        try:
            return from_hex(result)
        except ValueError as e:
            raise RpcError(message=f"invalid hex in {method} result: {e}", method=method, address=to) from e

"""
ens_reverse.contracts.base
==========================

A thin read-only contract binding:
- builds calldata as ``selector(signature) || abi.encode(args)`` with eth_abi
- executes it through a `ChainBackend`
- decodes the return data with the same types

Empty return data is ambiguous on EVM chains: a call to an address without
code succeeds and returns nothing. When that happens the binding checks the
target's code and raises `NoCodeError` if there is none, so callers can tell
"nothing deployed here" apart from other failures without matching messages.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Sequence, Tuple

from eth_abi import decode, encode
from eth_abi.exceptions import DecodingError, EncodingError

from ..address import to_address_bytes, to_checksum_address
from ..backend import ChainBackend
from ..errors import ChainQueryError, NoCodeError
from ..utils.hash import keccak256

__all__ = ["BoundContract", "selector"]


@lru_cache(maxsize=64)
def selector(signature: str) -> bytes:
    """4-byte function selector, e.g. ``selector("name(bytes32)") == 0x691f3431``."""
    return keccak256(signature.encode("ascii"))[:4]


class BoundContract:
    """Contract handle bound to an address and a borrowed backend. Creating one does no I/O."""

    def __init__(self, address: Any, backend: ChainBackend) -> None:
        self._address = to_address_bytes(address)
        self._backend = backend

    def __repr__(self) -> str:
        return f"{type(self).__name__}({to_checksum_address(self._address)})"

    @property
    def address(self) -> bytes:
        return self._address

    @property
    def backend(self) -> ChainBackend:
        return self._backend

    def call(
        self,
        signature: str,
        arg_types: Sequence[str],
        args: Sequence[Any],
        return_types: Sequence[str],
    ) -> Tuple[Any, ...]:
        """Execute a read-only call and return the decoded tuple."""
        hex_addr = to_checksum_address(self._address)
        try:
            data = selector(signature) + encode(list(arg_types), list(args))
        except EncodingError as e:
            raise ChainQueryError(f"cannot encode arguments: {e}", address=hex_addr, method=signature) from e

        output = self._backend.call_contract(self._address, data)
        if not output:
            if not self._backend.code_at(self._address):
                raise NoCodeError(address=hex_addr, method=signature)
            raise ChainQueryError("empty return data", address=hex_addr, method=signature)
        try:
            return tuple(decode(list(return_types), output))
        except (DecodingError, UnicodeDecodeError) as e:
            raise ChainQueryError(f"cannot decode return data: {e}", address=hex_addr, method=signature) from e

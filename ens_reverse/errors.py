"""
Typed error classes for reverse resolution.

Every failure raised by the library derives from `EnsError`, so callers can
catch one base class while still being able to tell the failure modes apart:

- `UnsupportedChainError`  unknown chain id at registry lookup
- `InvalidNameError`       label rejected by namehash
- `ChainQueryError`        transport / contract-execution failure
  - `RpcError`             JSON-RPC error object or transport failure
  - `NoCodeError`          call target has no contract code
- `NotAResolverError`      validity check hit an address without code
- `RegistrarNotFoundError` no reverse registrar owns the chain's suffix
- `NoResolutionError`      resolver answered with an empty name
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional

__all__ = [
    "EnsError",
    "AddressError",
    "UnsupportedChainError",
    "InvalidNameError",
    "ChainQueryError",
    "RpcError",
    "NoCodeError",
    "NotAResolverError",
    "RegistrarNotFoundError",
    "NoResolutionError",
    "JsonRpcCode",
]


class EnsError(Exception):
    """Base class for all ens-reverse errors."""


class AddressError(EnsError, ValueError):
    """Raised for malformed account addresses."""


class JsonRpcCode(IntEnum):
    # JSON-RPC 2.0 spec
    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603

    # Implementation-defined server range
    SERVER_ERROR = -32000
    TRANSPORT_ERROR = -32098


@dataclass(slots=True)
class UnsupportedChainError(EnsError):
    """Raised when a chain id has no known registry deployment."""

    chain_id: Any

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"unsupported chain id: {self.chain_id!r}"


@dataclass(slots=True)
class InvalidNameError(EnsError):
    """Raised when a name cannot be hashed (empty or oversized label)."""

    name: str
    reason: str = "invalid name"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.reason}: {self.name!r}"


@dataclass(slots=True)
class ChainQueryError(EnsError):
    """
    Raised when reading chain state fails.

    Fields:
      - message: human-readable description
      - address: hex address of the call target, if known
      - method: contract function or JSON-RPC method, if known
    """

    message: str
    address: Optional[str] = None
    method: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        where = []
        if self.method:
            where.append(f"method={self.method}")
        if self.address:
            where.append(f"to={self.address}")
        where_s = (" [" + ", ".join(where) + "]") if where else ""
        return f"{self.message}{where_s}"


@dataclass(slots=True)
class RpcError(ChainQueryError):
    """Raised when a JSON-RPC call returns an error object or cannot be sent."""

    code: int = JsonRpcCode.INTERNAL_ERROR
    data: Optional[Any] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        parts = [f"RPC[{self.method or '-'}] code={self.code} msg={self.message!r}"]
        if self.data is not None:
            parts.append(f"data={self.data!r}")
        return " ".join(parts)

    @property
    def code_enum(self) -> Optional[JsonRpcCode]:
        try:
            return JsonRpcCode(self.code)
        except ValueError:
            return None


@dataclass(slots=True)
class NoCodeError(ChainQueryError):
    """Raised when a call returns nothing and the target holds no contract code."""

    message: str = "no contract code at given address"


@dataclass(slots=True)
class NotAResolverError(EnsError):
    """Raised when an address does not host a contract answering `name(bytes32)`."""

    address: str

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"not a resolver: {self.address}"


@dataclass(slots=True)
class RegistrarNotFoundError(EnsError):
    """Raised when the registry reports no owner for the reverse suffix."""

    chain_id: int
    domain: str

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"no registrar for domain {self.domain!r} on chain {self.chain_id}"


@dataclass(slots=True)
class NoResolutionError(EnsError):
    """Raised when a resolver exists but returns an empty name for an address."""

    address: str

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"no resolution for {self.address}"

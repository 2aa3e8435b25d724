"""
Client configuration: RPC endpoint, default chain id, and retry/timeouts.

- Loads sane defaults and supports overrides via environment variables (ENS_*).
- Only the CLI reads the default chain id; library functions always take an
  explicit chain id.
"""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional

from .backend import RpcBackend
from .chains import ChainId, parse_chain_id
from .version import __version__

_DEFAULT_RPC = "http://127.0.0.1:8545"


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name)
    return v if v not in (None, "") else default


def _ensure_scheme(url: str, allowed: tuple[str, ...] = ("http", "https")) -> str:
    lower = url.lower()
    if not any(lower.startswith(f"{sch}://") for sch in allowed):
        raise ValueError(f"URL must start with {allowed}, got: {url!r}")
    return url


@dataclass(slots=True)
class Config:
    rpc_url: str = _DEFAULT_RPC
    chain_id: ChainId = ChainId.MAINNET
    request_timeout: float = 10.0
    max_retries: int = 3
    backoff_base: float = 0.15
    user_agent: str = field(default_factory=lambda: f"ens-reverse/{__version__}")

    def __post_init__(self) -> None:
        _ensure_scheme(self.rpc_url)
        self.chain_id = parse_chain_id(self.chain_id)
        if self.max_retries < 0:
            raise ValueError("max_retries must be >= 0")

    @classmethod
    def from_env(cls, prefix: str = "ENS_") -> "Config":
        """
        Create config from environment variables:

        ENS_RPC_URL      (http/https)
        ENS_CHAIN_ID     (int or 0x-hex)
        ENS_TIMEOUT      (float seconds)
        ENS_MAX_RETRIES  (int)
        ENS_BACKOFF      (float seconds, first retry delay)
        ENS_USER_AGENT   (str)
        """
        return cls(
            rpc_url=_env(f"{prefix}RPC_URL", _DEFAULT_RPC),
            chain_id=parse_chain_id(_env(f"{prefix}CHAIN_ID", "1")),
            request_timeout=float(_env(f"{prefix}TIMEOUT", "10.0")),
            max_retries=int(_env(f"{prefix}MAX_RETRIES", "3")),
            backoff_base=float(_env(f"{prefix}BACKOFF", "0.15")),
            user_agent=_env(f"{prefix}USER_AGENT", f"ens-reverse/{__version__}"),
        )

    @classmethod
    def with_overrides(cls, base: Optional["Config"] = None, **overrides: Any) -> "Config":
        """
        Build from an existing config plus keyword overrides.
        Unknown keys and None values are ignored.
        """
        base = base or cls.from_env()
        data = base.to_dict()
        data.update({k: v for k, v in overrides.items() if k in data and v is not None})
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["chain_id"] = int(self.chain_id)
        return data

    def backend(self) -> RpcBackend:
        return RpcBackend.from_url(
            self.rpc_url,
            timeout=self.request_timeout,
            max_retries=self.max_retries,
            backoff_base=self.backoff_base,
            user_agent=self.user_agent,
        )


__all__ = ["Config"]

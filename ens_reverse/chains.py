"""
Registry locator: per-chain registry deployment and reverse suffix.

Only explicitly enumerated chains are supported; any other id raises
`UnsupportedChainError` instead of silently falling back to mainnet.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, List

from .errors import UnsupportedChainError
from .utils.bytes import from_hex

__all__ = [
    "ChainId",
    "ChainConfig",
    "parse_chain_id",
    "chain_config",
    "get_registry_address",
    "registry_contract_address",
    "supported_chains",
]


class ChainId(IntEnum):
    MAINNET = 1
    HOLESKY = 17000
    SEPOLIA = 11155111
    BASE = 8453


@dataclass(frozen=True)
class ChainConfig:
    chain_id: ChainId
    name: str
    registry: bytes
    reverse_suffix: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "chainId": int(self.chain_id),
            "name": self.name,
            "registry": "0x" + self.registry.hex(),
            "reverseSuffix": self.reverse_suffix,
        }


_ENS_REGISTRY = from_hex("0x00000000000c2e074ec69a0dfb2997ba6c7d2e1e")
_BASENAMES_REGISTRY = from_hex("0xb94704422c2a1e396835a571837aa5ae53285a95")

_CHAINS: Dict[ChainId, ChainConfig] = {
    ChainId.MAINNET: ChainConfig(ChainId.MAINNET, "mainnet", _ENS_REGISTRY, "addr.reverse"),
    ChainId.HOLESKY: ChainConfig(ChainId.HOLESKY, "holesky", _ENS_REGISTRY, "addr.reverse"),
    ChainId.SEPOLIA: ChainConfig(ChainId.SEPOLIA, "sepolia", _ENS_REGISTRY, "addr.reverse"),
    # ENSIP-19 coin type: 0x80000000 | 8453
    ChainId.BASE: ChainConfig(ChainId.BASE, "base", _BASENAMES_REGISTRY, "80002105.reverse"),
}

_HEX_RE = re.compile(r"^0x[0-9a-f]+$", re.IGNORECASE)


def parse_chain_id(value: Any) -> ChainId:
    """
    Accepts ChainId, int, decimal str, or 0x-hex str and returns the ChainId.

    Raises UnsupportedChainError for unknown or unparsable ids.
    """
    if isinstance(value, ChainId):
        return value
    if isinstance(value, bool):
        raise UnsupportedChainError(value)
    if isinstance(value, int):
        raw = value
    elif isinstance(value, str):
        s = value.strip()
        try:
            raw = int(s, 16) if _HEX_RE.match(s) else int(s, 10)
        except ValueError:
            raise UnsupportedChainError(value) from None
    else:
        raise UnsupportedChainError(value)
    try:
        return ChainId(raw)
    except ValueError:
        raise UnsupportedChainError(value) from None


def chain_config(chain_id: Any) -> ChainConfig:
    return _CHAINS[parse_chain_id(chain_id)]


def get_registry_address(chain_id: Any) -> str:
    """Reverse-registration suffix domain for the chain, e.g. ``addr.reverse``."""
    return chain_config(chain_id).reverse_suffix


def registry_contract_address(chain_id: Any) -> bytes:
    """Address of the chain's name registry contract (20 bytes)."""
    return chain_config(chain_id).registry


def supported_chains() -> List[ChainConfig]:
    return [_CHAINS[c] for c in sorted(_CHAINS)]

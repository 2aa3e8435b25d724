"""Binding for the name registry contract (`resolver(bytes32)`, `owner(bytes32)`)."""

from __future__ import annotations

import logging
from typing import Any

from ..address import to_address_bytes, to_checksum_address
from ..backend import ChainBackend
from ..chains import registry_contract_address
from ..namehash import namehash
from .base import BoundContract

log = logging.getLogger(__name__)

__all__ = ["Registry", "new_registry"]


class Registry(BoundContract):
    def resolver(self, node: bytes) -> bytes:
        (addr,) = self.call("resolver(bytes32)", ["bytes32"], [node], ["address"])
        return to_address_bytes(addr)

    def owner(self, node: bytes) -> bytes:
        (addr,) = self.call("owner(bytes32)", ["bytes32"], [node], ["address"])
        return to_address_bytes(addr)

    def resolver_address(self, name: str) -> bytes:
        """Resolver registered for `name`; the zero address when none is set."""
        node = namehash(name)
        addr = self.resolver(node)
        log.debug("registry resolver(%s) node=0x%s -> %s", name, node.hex(), to_checksum_address(addr))
        return addr

    def owner_address(self, name: str) -> bytes:
        return self.owner(namehash(name))


def new_registry(backend: ChainBackend, chain_id: Any) -> Registry:
    return Registry(registry_contract_address(chain_id), backend)

"""
Binding for the reverse registrar.

The registrar is not configured per chain: it is whoever owns the chain's
reverse suffix (e.g. ``addr.reverse``) in the registry.
"""

from __future__ import annotations

import logging
from typing import Any

from ..address import ZERO_ADDRESS, to_address_bytes, to_checksum_address
from ..backend import ChainBackend
from ..chains import get_registry_address, parse_chain_id
from ..errors import RegistrarNotFoundError
from .base import BoundContract
from .registry import new_registry

log = logging.getLogger(__name__)

__all__ = ["ReverseRegistrar", "new_reverse_registrar"]


class ReverseRegistrar(BoundContract):
    def default_resolver(self) -> bytes:
        (addr,) = self.call("defaultResolver()", [], [], ["address"])
        return to_address_bytes(addr)

    def default_resolver_address(self) -> bytes:
        addr = self.default_resolver()
        log.debug("reverse registrar %s default resolver -> %s", self, to_checksum_address(addr))
        return addr


def new_reverse_registrar(backend: ChainBackend, chain_id: Any) -> ReverseRegistrar:
    cid = parse_chain_id(chain_id)
    domain = get_registry_address(cid)
    owner = new_registry(backend, cid).owner_address(domain)
    if owner == ZERO_ADDRESS:
        raise RegistrarNotFoundError(int(cid), domain)
    return ReverseRegistrar(owner, backend)

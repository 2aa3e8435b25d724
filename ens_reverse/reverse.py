"""
ens_reverse.reverse
===================

Reverse resolution: account address -> primary name.

Discovery has two paths that both end in `new_reverse_resolver_at`, which is
the only place a resolver address gets validated:

- `new_reverse_resolver_for(backend, address, chain_id)` asks the registry
  for the resolver of ``<hex address>.<suffix>``.
- `new_reverse_resolver(backend, chain_id)` asks the chain's reverse
  registrar for its default resolver.

Validation issues one ``name()`` query for ``0.<suffix>``. A target without
code (including the zero address the registry returns when nothing is set)
raises `NotAResolverError`; every other failure propagates unchanged. The
name returned by that query is not checked.

Example
-------
    from ens_reverse import RpcBackend, reverse_resolve, format_address

    with RpcBackend.from_url("https://eth.example") as backend:
        reverse_resolve(backend, "0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045", 1)
        format_address(backend, "0x000000000000000000000000000000000000dEaD", 1)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .address import AddressLike, to_address_bytes, to_checksum_address
from .backend import ChainBackend
from .chains import ChainId, parse_chain_id
from .contracts.registry import new_registry
from .contracts.resolver import ResolverContract
from .contracts.reverse_registrar import new_reverse_registrar
from .errors import EnsError, NoCodeError, NoResolutionError, NotAResolverError
from .namehash import namehash, resolver_check_name, reverse_name

log = logging.getLogger(__name__)

__all__ = [
    "ReverseResolver",
    "new_reverse_resolver_at",
    "new_reverse_resolver_for",
    "new_reverse_resolver",
    "reverse_resolve",
    "format_address",
]


@dataclass(frozen=True)
class ReverseResolver:
    """A validated resolver contract for one chain. Immutable; safe to share between threads."""

    contract: ResolverContract
    contract_address: bytes
    chain_id: ChainId

    def name(self, address: AddressLike) -> str:
        """
        Name recorded for `address`, verbatim. An empty string means the
        resolver has no record; this method does not treat that as an error.
        """
        node = namehash(reverse_name(address, self.chain_id))
        return self.contract.name(node)


def new_reverse_resolver_at(backend: ChainBackend, address: AddressLike, chain_id: Any) -> ReverseResolver:
    cid = parse_chain_id(chain_id)
    contract = ResolverContract(address, backend)

    check_node = namehash(resolver_check_name(cid))
    try:
        contract.name(check_node)
    except NoCodeError as e:
        raise NotAResolverError(to_checksum_address(contract.address)) from e

    return ReverseResolver(contract=contract, contract_address=contract.address, chain_id=cid)


def new_reverse_resolver_for(backend: ChainBackend, address: AddressLike, chain_id: Any) -> ReverseResolver:
    cid = parse_chain_id(chain_id)
    registry = new_registry(backend, cid)
    resolver = registry.resolver_address(reverse_name(address, cid))
    return new_reverse_resolver_at(backend, resolver, cid)


def new_reverse_resolver(backend: ChainBackend, chain_id: Any) -> ReverseResolver:
    cid = parse_chain_id(chain_id)
    registrar = new_reverse_registrar(backend, cid)
    return new_reverse_resolver_at(backend, registrar.default_resolver_address(), cid)


def reverse_resolve(backend: ChainBackend, address: AddressLike, chain_id: Any) -> str:
    """
    Primary name of `address`.

    Raises NotAResolverError when the address has no reverse record and
    NoResolutionError when its resolver returns an empty name.
    """
    raw = to_address_bytes(address)
    resolver = new_reverse_resolver_for(backend, raw, chain_id)
    name = resolver.name(raw)
    if name == "":
        raise NoResolutionError(to_checksum_address(raw))
    return name


def format_address(backend: ChainBackend, address: AddressLike, chain_id: Any) -> str:
    """Display form of `address`: its primary name if one resolves, else its EIP-55 hex."""
    text = to_checksum_address(address)
    try:
        return reverse_resolve(backend, address, chain_id)
    except EnsError as e:
        log.debug("reverse resolution of %s failed: %s", text, e)
        return text

"""
EIP-137 namehash and reverse-name construction.

    namehash("")        = 0x00..00
    namehash(label.rest) = keccak256(namehash(rest) || keccak256(label))

Labels are lower-cased before hashing. Full ENSIP-15 normalisation is out
of scope: reverse names are built from hex digits and fixed ASCII suffixes.
"""

from __future__ import annotations

from typing import Any

from .address import AddressLike, reverse_node_label
from .chains import get_registry_address
from .errors import InvalidNameError
from .utils.hash import keccak256

MAX_LABEL_BYTES = 255

__all__ = ["MAX_LABEL_BYTES", "namehash", "reverse_name", "reverse_namehash", "resolver_check_name"]


def namehash(name: str) -> bytes:
    if not isinstance(name, str):
        raise TypeError("namehash expects a string")
    node = b"\x00" * 32
    if name == "":
        return node
    for label in reversed(name.lower().split(".")):
        encoded = label.encode("utf-8")
        if not encoded:
            raise InvalidNameError(name, "empty label")
        if len(encoded) > MAX_LABEL_BYTES:
            raise InvalidNameError(name, "label too long")
        node = keccak256(node + keccak256(encoded))
    return node


def reverse_name(address: AddressLike, chain_id: Any) -> str:
    """``<lower hex address>.<reverse suffix>``, e.g. ``abcd...ef.addr.reverse``."""
    return f"{reverse_node_label(address)}.{get_registry_address(chain_id)}"


def reverse_namehash(address: AddressLike, chain_id: Any) -> bytes:
    return namehash(reverse_name(address, chain_id))


def resolver_check_name(chain_id: Any) -> str:
    """Placeholder name queried to check that a contract speaks the resolver interface."""
    return f"0.{get_registry_address(chain_id)}"

"""
ens_reverse.address
===================

Account address helpers.

Addresses are 20 raw bytes. The library accepts either raw bytes or a
``0x``-prefixed hex string in any letter case and always hands raw bytes to
the contract bindings. For display we use EIP-55 mixed-case checksums.

This module provides:
- to_address_bytes(value) -> bytes
- to_checksum_address(value) -> str
- is_zero_address(value) -> bool
- reverse_node_label(value) -> str
"""

from __future__ import annotations

from typing import Union

import eth_utils

from .errors import AddressError
from .utils.bytes import from_hex


ADDRESS_LENGTH = 20
ZERO_ADDRESS = b"\x00" * ADDRESS_LENGTH

AddressLike = Union[bytes, bytearray, str]

__all__ = [
    "ADDRESS_LENGTH",
    "ZERO_ADDRESS",
    "AddressLike",
    "to_address_bytes",
    "to_checksum_address",
    "is_zero_address",
    "reverse_node_label",
]


def to_address_bytes(value: AddressLike) -> bytes:
    """
    Normalize an address to its 20 raw bytes.

    Checksums in mixed-case input are not enforced; the library only reads
    chain state, so a mistyped address merely resolves to nothing.
    """
    if isinstance(value, (bytes, bytearray)):
        raw = bytes(value)
    elif isinstance(value, str):
        s = value.strip()
        if not s.startswith(("0x", "0X")):
            raise AddressError(f"address must be 0x-prefixed hex: {value!r}")
        try:
            raw = from_hex(s)
        except ValueError as e:
            raise AddressError(f"invalid address hex {value!r}: {e}") from e
    else:
        raise AddressError(f"unsupported address type: {type(value).__name__}")
    if len(raw) != ADDRESS_LENGTH:
        raise AddressError(f"address must be {ADDRESS_LENGTH} bytes, got {len(raw)}")
    return raw


def to_checksum_address(value: AddressLike) -> str:
    """Render an address in EIP-55 mixed-case form (``0x``-prefixed)."""
    return str(eth_utils.to_checksum_address(to_address_bytes(value)))


def is_zero_address(value: AddressLike) -> bool:
    return to_address_bytes(value) == ZERO_ADDRESS


def reverse_node_label(value: AddressLike) -> str:
    """Lower-case hex of the address bytes, without ``0x``; the reverse record's leaf label."""
    return to_address_bytes(value).hex()

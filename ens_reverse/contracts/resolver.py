"""Binding for the reverse resolver interface (`name(bytes32) -> string`)."""

from __future__ import annotations

from .base import BoundContract

__all__ = ["ResolverContract"]


class ResolverContract(BoundContract):
    def name(self, node: bytes) -> str:
        (value,) = self.call("name(bytes32)", ["bytes32"], [node], ["string"])
        return value

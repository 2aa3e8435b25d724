from .base import BoundContract, selector  # noqa: F401
from .registry import Registry, new_registry  # noqa: F401
from .resolver import ResolverContract  # noqa: F401
from .reverse_registrar import ReverseRegistrar, new_reverse_registrar  # noqa: F401

__all__ = [
    "BoundContract",
    "selector",
    "Registry",
    "new_registry",
    "ResolverContract",
    "ReverseRegistrar",
    "new_reverse_registrar",
]

"""
ens-reverse: reverse name resolution for ENS-style registries.
Convenience exports for the most common APIs.
"""

from .version import __version__  # noqa: F401

# Core config & errors
from .config import Config  # noqa: F401
from .errors import (  # noqa: F401
    EnsError,
    AddressError,
    UnsupportedChainError,
    InvalidNameError,
    ChainQueryError,
    RpcError,
    NoCodeError,
    NotAResolverError,
    RegistrarNotFoundError,
    NoResolutionError,
)

# Chains & names
from .chains import ChainId, get_registry_address, registry_contract_address  # noqa: F401
from .namehash import namehash, reverse_name  # noqa: F401
from .address import to_checksum_address  # noqa: F401

# Backends
from .backend import ChainBackend, RpcBackend  # noqa: F401
from .rpc.http import RpcClient  # noqa: F401

# Reverse resolution
from .reverse import (  # noqa: F401
    ReverseResolver,
    new_reverse_resolver_at,
    new_reverse_resolver_for,
    new_reverse_resolver,
    reverse_resolve,
    format_address,
)

__all__ = [
    "__version__",
    # Core
    "Config",
    "EnsError", "AddressError", "UnsupportedChainError", "InvalidNameError",
    "ChainQueryError", "RpcError", "NoCodeError",
    "NotAResolverError", "RegistrarNotFoundError", "NoResolutionError",
    # Chains & names
    "ChainId", "get_registry_address", "registry_contract_address",
    "namehash", "reverse_name", "to_checksum_address",
    # Backends
    "ChainBackend", "RpcBackend", "RpcClient",
    # Reverse resolution
    "ReverseResolver",
    "new_reverse_resolver_at", "new_reverse_resolver_for", "new_reverse_resolver",
    "reverse_resolve", "format_address",
]

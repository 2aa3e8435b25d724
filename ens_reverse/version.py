"""
Version helpers for ens-reverse.
We keep a static __version__ (PEP 440); bump it when publishing.
"""

from __future__ import annotations

__version__ = "0.3.0"


def version() -> str:
    """Human-friendly version string."""
    return __version__


__all__ = ["__version__", "version"]

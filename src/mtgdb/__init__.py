# noqa: D104
"""Top-level package for mtgdb."""
from __future__ import annotations

__version__ = "0.1.0"
__all__ = [
    "MtgDbClient",
    "ClientSettings",
    "Card",
    "CardSet",
    "MtgDbError",
    "InvalidArgumentError",
    "TransportError",
    "DecodeError",
]

_LAZY = {
    "MtgDbClient": ".client",
    "ClientSettings": ".config",
    "Card": ".models",
    "CardSet": ".models",
    "MtgDbError": ".errors",
    "InvalidArgumentError": ".errors",
    "TransportError": ".errors",
    "DecodeError": ".errors",
}


def __getattr__(name):  # type: ignore[override]
    if name in _LAZY:
        from importlib import import_module

        return getattr(import_module(_LAZY[name], __name__), name)
    raise AttributeError(name)

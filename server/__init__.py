"""HTTP front-end serving one checkers session."""

from __future__ import annotations

from importlib import import_module

__all__ = ["app", "create_app", "GameSession"]

_EXPORTS = {"app": ".app", "create_app": ".app", "GameSession": ".session"}


def __getattr__(name: str):
    if name in _EXPORTS:
        module = import_module(_EXPORTS[name], __name__)
        return getattr(module, name)
    raise AttributeError(name)

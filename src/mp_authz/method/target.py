"""Method authorization – Target cache key."""
from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any


def type_name(cls: type | None, method: Callable[..., Any] | None = None) -> str:
    if cls is not None:
        return f"{cls.__module__}.{cls.__qualname__}"
    return getattr(method, "__module__", None) or "<unknown>"


def signature_text(method: Callable[..., Any]) -> str:
    name = getattr(method, "__qualname__", None) or getattr(method, "__name__", None) or type(method).__qualname__
    try:
        params = str(inspect.signature(method))
    except (TypeError, ValueError):
        params = "(...)"
    return f"{name}{params}"


class Target:
    """Identity of an invocable unit: the class it runs on and the resolved callable.

    Both parts compare by identity, so two classes built by the same factory,
    or two closures of the same function, are distinct targets even though
    their names match. The same method reached through different bound-method
    objects still maps to one target. The target keeps both objects alive,
    which keeps their ``id`` stable for as long as it is cached.
    """

    __slots__ = ("_target_class", "_method", "_hash")

    def __init__(self, target_class: type | None, method: Callable[..., Any]) -> None:
        object.__setattr__(self, "_target_class", target_class)
        object.__setattr__(self, "_method", method)
        object.__setattr__(self, "_hash", hash((id(target_class), id(method))))

    @classmethod
    def of(cls, method: Callable[..., Any], target_class: type | None = None) -> Target:
        return cls(target_class, method)

    @property
    def target_class(self) -> type | None:
        return self._target_class

    @property
    def method(self) -> Callable[..., Any]:
        return self._method

    @property
    def declaring_type(self) -> str:
        return type_name(self._target_class, self._method)

    @property
    def signature(self) -> str:
        return signature_text(self._method)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Target):
            return NotImplemented
        return self._target_class is other._target_class and self._method is other._method

    def __hash__(self) -> int:
        return self._hash

    def __repr__(self) -> str:
        return f"Target({self})"

    def __str__(self) -> str:
        return f"{self.declaring_type}#{self.signature}"


__all__ = ["Target"]

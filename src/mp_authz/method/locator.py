"""Method authorization – PreAuthorizeLocator.

Finds the one ``@pre_authorize`` expression that applies to a method, in
this order (first hit wins, expressions are never combined):

1. the method itself, following ``__wrapped__`` chains;
2. the same-named member on the classes of ``target_class.__mro__``, i.e. a
   declaration on a method this one overrides;
3. the class that declares the method, then that class's own bases.
"""
from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from mp_authz.method.annotations import PRE_AUTHORIZE_ATTR


def _plain(member: Any) -> Any:
    if isinstance(member, (staticmethod, classmethod)):
        return member.__func__
    return member


def _own_declaration(obj: Any) -> str | None:
    value = getattr(obj, "__dict__", {}).get(PRE_AUTHORIZE_ATTR)
    return value if isinstance(value, str) else None


def _unwrapped(function: Any) -> Iterator[Any]:
    seen: set[int] = set()
    while function is not None and id(function) not in seen:
        seen.add(id(function))
        function = _plain(function)
        yield function
        function = getattr(function, "__wrapped__", None)


class PreAuthorizeLocator:
    """Pure lookup of the applicable raw expression string; no caching."""

    def locate(self, method: Callable[..., Any], target_class: type | None = None) -> str | None:
        expression = self.find_on_method(method, target_class)
        if expression is not None:
            return expression
        return self.find_on_type(self.declaring_class(method, target_class))

    def find_on_method(self, method: Callable[..., Any], target_class: type | None) -> str | None:
        for function in _unwrapped(method):
            expression = _own_declaration(function)
            if expression is not None:
                return expression
        if target_class is None:
            return None
        name = getattr(method, "__name__", None)
        for klass in target_class.__mro__:
            member = vars(klass).get(name) if name else None
            if member is None or _plain(member) is method:
                continue
            for function in _unwrapped(member):
                expression = _own_declaration(function)
                if expression is not None:
                    return expression
        return None

    def find_on_type(self, declaring_class: type | None) -> str | None:
        if declaring_class is None:
            return None
        for klass in declaring_class.__mro__:
            if klass is object:
                continue
            expression = _own_declaration(klass)
            if expression is not None:
                return expression
        return None

    @staticmethod
    def declaring_class(method: Callable[..., Any], target_class: type | None) -> type | None:
        """The class in ``target_class.__mro__`` that defines *method*."""
        if target_class is None:
            return None
        name = getattr(method, "__name__", None)
        for klass in target_class.__mro__:
            member = vars(klass).get(name) if name else None
            if member is not None and _plain(member) is method:
                return klass
        return target_class


__all__ = ["PreAuthorizeLocator"]

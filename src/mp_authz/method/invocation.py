"""Method authorization – MethodInvocation.

The invocation is what an interceptor hands to the authorization manager:
the concrete method, the class it is invoked on, the receiver and the call
arguments. It is built per call and never cached.
"""
from __future__ import annotations

import dataclasses
import functools
import inspect
import sys
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from mp_authz.method.target import Target


def _plain_function(member: Any) -> Any:
    if isinstance(member, (staticmethod, classmethod)):
        return member.__func__
    return member


def most_specific_method(method: Callable[..., Any], target_class: type | None) -> Callable[..., Any]:
    """Return the implementation of *method* that *target_class* actually runs.

    Falls back to *method* when the class does not expose a member of the
    same name (e.g. free functions).
    """
    if target_class is None:
        return method
    name = getattr(method, "__name__", None)
    if name is None:
        return method
    try:
        member = inspect.getattr_static(target_class, name)
    except AttributeError:
        return method
    member = _plain_function(member)
    return member if callable(member) else method


def owner_class(function: Callable[..., Any]) -> type | None:
    """Best-effort lookup of the class a plain function was defined in."""
    qualname = getattr(function, "__qualname__", "")
    parts = qualname.split(".")
    if len(parts) < 2 or "<locals>" in parts:
        return None
    obj: Any = sys.modules.get(getattr(function, "__module__", ""), None)
    for part in parts[:-1]:
        obj = getattr(obj, part, None)
        if obj is None:
            return None
    return obj if isinstance(obj, type) else None


@dataclasses.dataclass(frozen=True)
class MethodInvocation:
    """A single pending call of ``method`` on ``target_class``.

    ``receiver`` is the instance (or class, for classmethods) the call is
    bound to; it is ``None`` for free functions and staticmethods.
    """

    method: Callable[..., Any]
    target_class: type | None = None
    receiver: Any = None
    args: tuple[Any, ...] = ()
    kwargs: Mapping[str, Any] = dataclasses.field(default_factory=dict)

    @classmethod
    def of(cls, func: Callable[..., Any], /, *args: Any, **kwargs: Any) -> MethodInvocation:
        """Describe calling *func* with the given arguments.

        Bound methods resolve to the implementation on the receiver's class;
        plain functions use the class named in their ``__qualname__``.
        """
        if inspect.ismethod(func):
            receiver = func.__self__
            target_class = receiver if isinstance(receiver, type) else type(receiver)
            method = most_specific_method(func.__func__, target_class)
            return cls(method, target_class, receiver, args, MappingProxyType(dict(kwargs)))
        return cls(func, owner_class(func), None, args, MappingProxyType(dict(kwargs)))

    @property
    def target(self) -> Target:
        return Target.of(self.method, self.target_class)

    @property
    def method_name(self) -> str:
        return getattr(self.method, "__name__", repr(self.method))

    @functools.cached_property
    def arguments(self) -> Mapping[str, Any]:
        """Call arguments by parameter name, defaults applied, receiver excluded."""
        try:
            signature = inspect.signature(self.method)
        except (TypeError, ValueError):
            return MappingProxyType({f"arg{i}": value for i, value in enumerate(self.args)})
        positional = self.args if self.receiver is None else (self.receiver, *self.args)
        bound = signature.bind_partial(*positional, **self.kwargs)
        bound.apply_defaults()
        values = dict(bound.arguments)
        if self.receiver is not None and signature.parameters:
            values.pop(next(iter(signature.parameters)), None)
        return MappingProxyType(values)

    def __str__(self) -> str:
        return str(self.target)


__all__ = ["MethodInvocation", "most_specific_method", "owner_class"]

"""Expression – EvaluationContext."""
from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from mp_authz.expression.root import MethodSecurityExpressionRoot


class _Namespace(Mapping[str, Any]):
    def __init__(self, context: EvaluationContext) -> None:
        self._context = context

    def __getitem__(self, name: str) -> Any:
        return self._context.lookup(name)

    def __iter__(self) -> Iterator[str]:
        yield from self._context.variables
        yield from self._context.functions

    def __len__(self) -> int:
        return len(self._context.variables) + len(self._context.functions)


class EvaluationContext:
    """Names visible to one evaluation of one policy; built per call.

    Lookup order is: reserved variables (``principal``, ``authentication``,
    ``target``, ``args``), then method arguments by parameter name, then
    root functions. A method argument can therefore never shadow the
    principal.
    """

    RESERVED = frozenset({"principal", "authentication", "target", "args"})

    def __init__(
        self,
        root: MethodSecurityExpressionRoot,
        *,
        target: Any = None,
        arguments: Mapping[str, Any] | None = None,
    ) -> None:
        self.root = root
        self.functions = root.functions()
        arguments = dict(arguments or {})
        self.variables: dict[str, Any] = {k: v for k, v in arguments.items() if k not in self.RESERVED}
        self.variables.update(
            principal=root.principal,
            authentication=root.principal,
            target=target,
            args=arguments,
        )

    def set_variable(self, name: str, value: Any) -> None:
        self.variables[name] = value

    def lookup(self, name: str) -> Any:
        if name in self.variables:
            return self.variables[name]
        if name in self.functions:
            return self.functions[name]
        raise KeyError(name)

    def namespace(self) -> Mapping[str, Any]:
        return _Namespace(self)


__all__ = ["EvaluationContext"]

"""Expression – SafeExpressionParser.

Policies use Python expression syntax restricted to a whitelist of AST
nodes. Only whitelisted functions may be called, and only by bare name;
attribute access to names starting with ``_`` is rejected.

Example policies::

    hasRole('ADMIN')
    isAuthenticated() and owner == principal.subject
    hasAnyRole('EDITOR', 'ADMIN') or args['draft'] is True
"""
from __future__ import annotations

import ast
import dataclasses
from collections.abc import Iterable
from types import CodeType
from typing import Any

from mp_authz.kernel.errors import ExpressionParseError

_ALLOWED_NODES: tuple[type[ast.AST], ...] = (
    ast.Expression, ast.BoolOp, ast.BinOp, ast.UnaryOp, ast.IfExp,
    ast.Compare, ast.Call, ast.keyword, ast.Load, ast.Name, ast.Attribute,
    ast.Subscript, ast.Slice, ast.Constant, ast.List, ast.Tuple, ast.Set, ast.Dict,
    ast.And, ast.Or, ast.Not, ast.USub, ast.UAdd,
    ast.Add, ast.Sub, ast.Mult, ast.Mod,
    ast.Eq, ast.NotEq, ast.Lt, ast.LtE, ast.Gt, ast.GtE,
    ast.In, ast.NotIn, ast.Is, ast.IsNot,
)


@dataclasses.dataclass(frozen=True)
class CompiledExpression:
    """A validated, compiled policy. Immutable and safe to share between threads."""

    expression_string: str
    code: CodeType = dataclasses.field(repr=False, compare=False)

    def get_value(self, context: Any) -> Any:
        """Evaluate against an :class:`EvaluationContext`."""
        return eval(self.code, {"__builtins__": {}}, context.namespace())  # noqa: S307


class SafeExpressionParser:
    """Turn policy strings into :class:`CompiledExpression` objects."""

    def __init__(self, functions: Iterable[str]) -> None:
        self._functions = frozenset(functions)

    @property
    def functions(self) -> frozenset[str]:
        return self._functions

    def parse_expression(self, expression: str) -> CompiledExpression:
        if not isinstance(expression, str) or not expression.strip():
            raise ExpressionParseError("Expression must be a non-empty string", expression=expression)
        try:
            tree = ast.parse(expression.strip(), mode="eval")
        except (SyntaxError, ValueError) as exc:
            raise ExpressionParseError(
                f"Malformed expression '{expression}': {exc}", expression=expression, cause=exc
            ) from exc
        self._validate(tree, expression)
        return CompiledExpression(expression, compile(tree, filename="<pre_authorize>", mode="eval"))

    def _validate(self, tree: ast.AST, expression: str) -> None:
        for node in ast.walk(tree):
            if not isinstance(node, _ALLOWED_NODES):
                raise ExpressionParseError(
                    f"Disallowed syntax {type(node).__name__} in '{expression}'", expression=expression
                )
            if isinstance(node, ast.Call):
                if not isinstance(node.func, ast.Name) or node.func.id not in self._functions:
                    raise ExpressionParseError(
                        f"Unknown function in '{expression}': {ast.unparse(node.func)}", expression=expression
                    )
                if any(kw.arg is None for kw in node.keywords):
                    raise ExpressionParseError(f"'**' is not allowed in '{expression}'", expression=expression)
            elif isinstance(node, ast.Attribute) and node.attr.startswith("_"):
                raise ExpressionParseError(
                    f"Private attribute '{node.attr}' is not accessible in '{expression}'", expression=expression
                )
            elif isinstance(node, ast.Name) and node.id.startswith("__"):
                raise ExpressionParseError(f"Name '{node.id}' is not accessible", expression=expression)


__all__ = ["CompiledExpression", "SafeExpressionParser"]

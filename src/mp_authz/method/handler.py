"""Method authorization – expression handler port.

The authorization manager never interprets policy text itself; it delegates
to a :class:`MethodSecurityExpressionHandler`, which the host may replace.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from mp_authz.kernel.errors import ExpressionError, ExpressionEvaluationError

if TYPE_CHECKING:
    from mp_authz.kernel.security import Principal
    from mp_authz.method.invocation import MethodInvocation


@runtime_checkable
class Expression(Protocol):
    """Pre-parsed expression owned by an expression handler."""

    @property
    def expression_string(self) -> str: ...

    def get_value(self, context: Any) -> Any: ...


@runtime_checkable
class MethodSecurityExpressionHandler(Protocol):
    """Port: parse policies and evaluate them against one invocation."""

    def parse_expression(self, expression: str) -> Expression:
        """Raise :class:`ExpressionParseError` on malformed input."""
        ...

    def create_evaluation_context(self, principal: Principal | None, invocation: MethodInvocation) -> Any: ...

    def evaluate_as_boolean(self, expression: Expression, context: Any) -> bool:
        """Raise :class:`ExpressionEvaluationError` unless the result is a ``bool``."""
        ...


def evaluate_as_boolean(expression: Expression, context: Any) -> bool:
    """Evaluate *expression* and insist on a real ``bool`` result."""
    try:
        value = expression.get_value(context)
    except ExpressionError:
        raise
    except Exception as exc:
        raise ExpressionEvaluationError(
            f"Failed to evaluate expression '{expression.expression_string}': {exc}",
            expression=expression.expression_string,
            cause=exc,
        ) from exc
    if not isinstance(value, bool):
        raise ExpressionEvaluationError(
            f"Expression '{expression.expression_string}' evaluated to "
            f"{type(value).__name__}, expected bool",
            expression=expression.expression_string,
        )
    return value


__all__ = ["Expression", "MethodSecurityExpressionHandler", "evaluate_as_boolean"]

"""Expression – DefaultMethodSecurityExpressionHandler."""
from __future__ import annotations

from typing import Any

from mp_authz.config.settings import MethodSecuritySettings
from mp_authz.expression.context import EvaluationContext
from mp_authz.expression.parser import CompiledExpression, SafeExpressionParser
from mp_authz.expression.root import MethodSecurityExpressionRoot
from mp_authz.kernel.errors import ExpressionEvaluationError
from mp_authz.kernel.security import Principal
from mp_authz.method.handler import Expression, evaluate_as_boolean
from mp_authz.method.invocation import MethodInvocation


class DefaultMethodSecurityExpressionHandler:
    """Parses policies with :class:`SafeExpressionParser` and evaluates them
    against a :class:`MethodSecurityExpressionRoot`.

    A missing principal is replaced by an anonymous one, so ``isAnonymous()``
    holds and ``principal.subject`` stays readable.
    """

    def __init__(self, *, role_prefix: str = "", anonymous_subject: str = "anonymous") -> None:
        self.role_prefix = role_prefix
        self.anonymous_subject = anonymous_subject
        self._parser = SafeExpressionParser(MethodSecurityExpressionRoot.function_names())

    @classmethod
    def from_settings(cls, settings: MethodSecuritySettings) -> DefaultMethodSecurityExpressionHandler:
        return cls(role_prefix=settings.role_prefix, anonymous_subject=settings.anonymous_subject)

    def parse_expression(self, expression: str) -> CompiledExpression:
        return self._parser.parse_expression(expression)

    def create_evaluation_context(
        self, principal: Principal | None, invocation: MethodInvocation
    ) -> EvaluationContext:
        if principal is None:
            principal = Principal.anonymous(self.anonymous_subject)
        try:
            arguments = invocation.arguments
        except TypeError as exc:
            raise ExpressionEvaluationError(
                f"Arguments do not match {invocation.method_name}: {exc}", cause=exc
            ) from exc
        root = MethodSecurityExpressionRoot(principal, role_prefix=self.role_prefix)
        return EvaluationContext(root, target=invocation.receiver, arguments=arguments)

    def evaluate_as_boolean(self, expression: Expression, context: Any) -> bool:
        return evaluate_as_boolean(expression, context)


__all__ = ["DefaultMethodSecurityExpressionHandler"]

"""Expression – the default policy language for ``@pre_authorize``."""
from mp_authz.expression.context import EvaluationContext
from mp_authz.expression.handler import DefaultMethodSecurityExpressionHandler
from mp_authz.expression.parser import CompiledExpression, SafeExpressionParser
from mp_authz.expression.root import MethodSecurityExpressionRoot

__all__ = [
    "CompiledExpression",
    "DefaultMethodSecurityExpressionHandler",
    "EvaluationContext",
    "MethodSecurityExpressionRoot",
    "SafeExpressionParser",
]

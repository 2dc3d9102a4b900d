"""Kernel – framework-agnostic building blocks."""

from mp_authz.kernel.errors import (
    AccessDeniedError,
    ApplicationError,
    BaseError,
    ExpressionError,
    ExpressionEvaluationError,
    ExpressionParseError,
    ForbiddenError,
    UnauthorizedError,
)

__all__ = [
    "AccessDeniedError",
    "ApplicationError",
    "BaseError",
    "ExpressionError",
    "ExpressionEvaluationError",
    "ExpressionParseError",
    "ForbiddenError",
    "UnauthorizedError",
]

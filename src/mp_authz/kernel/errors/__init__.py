"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError          (application.py)
    │   ├── UnauthorizedError
    │   └── ForbiddenError
    │       └── AccessDeniedError
    ├── ExpressionError           (expression.py)
    │   ├── ExpressionParseError
    │   └── ExpressionEvaluationError
    └── ConfigError               (mp_authz.config.validation)
"""

from mp_authz.kernel.errors.application import (
    AccessDeniedError,
    ApplicationError,
    ForbiddenError,
    UnauthorizedError,
)
from mp_authz.kernel.errors.base import BaseError
from mp_authz.kernel.errors.expression import (
    ExpressionError,
    ExpressionEvaluationError,
    ExpressionParseError,
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

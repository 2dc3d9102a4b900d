"""Expression errors — malformed policies and failed evaluations.

A parse fault is a configuration defect of the offending method and is never
cached; an evaluation fault belongs to a single call.
"""

from __future__ import annotations

from typing import Any

from mp_authz.kernel.errors.base import BaseError


class ExpressionError(BaseError):
    """Base class for policy expression faults."""

    default_code = "expression_error"

    def __init__(self, message: str, *, expression: str | None = None, **kwargs: Any) -> None:
        detail = dict(kwargs.pop("detail", None) or {})
        if expression is not None:
            detail.setdefault("expression", expression)
        super().__init__(message, detail=detail, **kwargs)
        self.expression = expression


class ExpressionParseError(ExpressionError):
    """The policy string is not a valid expression."""

    default_code = "expression_parse_error"


class ExpressionEvaluationError(ExpressionError):
    """Evaluation raised, referenced unknown data or did not yield a bool."""

    default_code = "expression_evaluation_error"


__all__ = ["ExpressionError", "ExpressionEvaluationError", "ExpressionParseError"]

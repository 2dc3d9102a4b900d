"""Application-layer errors raised around an authorization check."""

from __future__ import annotations

from typing import Any

from mp_authz.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class UnauthorizedError(ApplicationError):
    """No authenticated principal is available."""

    default_code = "unauthorized"


class ForbiddenError(ApplicationError):
    """Authenticated principal is not allowed to perform the operation."""

    default_code = "forbidden"


class AccessDeniedError(ForbiddenError):
    """A ``@pre_authorize`` expression evaluated to ``False``.

    ``target`` is the string form of the method that was refused and
    ``expression`` the policy that refused it.
    """

    default_code = "access_denied"

    def __init__(
        self,
        message: str = "Access denied",
        *,
        target: str | None = None,
        expression: str | None = None,
        **kwargs: Any,
    ) -> None:
        detail = dict(kwargs.pop("detail", None) or {})
        if target is not None:
            detail.setdefault("target", target)
        if expression is not None:
            detail.setdefault("expression", expression)
        super().__init__(message, detail=detail, **kwargs)
        self.target = target
        self.expression = expression


__all__ = [
    "AccessDeniedError",
    "ApplicationError",
    "ForbiddenError",
    "UnauthorizedError",
]

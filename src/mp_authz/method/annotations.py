"""Method authorization – the ``@pre_authorize`` declaration."""
from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from mp_authz.config.validation import ConfigError

PRE_AUTHORIZE_ATTR = "__pre_authorize__"

T = TypeVar("T")


def pre_authorize(expression: str) -> Callable[[T], T]:
    """Attach a policy expression to a function, method or class.

    The decorated object is returned unchanged apart from the recorded
    expression; nothing is enforced here. A class-level declaration is the
    default for every method of that class that does not declare its own.

    Example::

        @pre_authorize("isAuthenticated()")
        class OrderService:

            @pre_authorize("hasRole('ADMIN')")
            def cancel(self, order_id: str) -> None: ...
    """
    if not isinstance(expression, str) or not expression.strip():
        raise ConfigError("pre_authorize expression must be a non-empty string")

    def decorator(obj: T) -> T:
        target: Any = obj.__func__ if isinstance(obj, (staticmethod, classmethod)) else obj
        setattr(target, PRE_AUTHORIZE_ATTR, expression)
        return obj

    return decorator


__all__ = ["PRE_AUTHORIZE_ATTR", "pre_authorize"]

"""Kernel security – SecurityContext using contextvars."""

from __future__ import annotations

import contextvars
from collections.abc import Callable

from mp_authz.kernel.errors import UnauthorizedError
from mp_authz.kernel.security.principal import Principal

_VAR: contextvars.ContextVar[Principal | None] = contextvars.ContextVar(
    "_authz_security_context", default=None
)

AuthenticationSupplier = Callable[[], "Principal | None"]


class SecurityContext:
    """Holds the current :class:`Principal` per thread / asyncio task.

    It is the default authentication supplier handed to
    :meth:`PreAuthorizeAuthorizationManager.check`::

        manager.check(SecurityContext.get_current, invocation)
    """

    @staticmethod
    def get_current() -> Principal | None:
        """Return the current principal, or ``None`` if absent."""
        return _VAR.get()

    @staticmethod
    def set_current(principal: Principal) -> contextvars.Token[Principal | None]:
        """Set the current principal and return a reset token."""
        return _VAR.set(principal)

    @staticmethod
    def reset(token: contextvars.Token[Principal | None]) -> None:
        _VAR.reset(token)

    @staticmethod
    def clear() -> None:
        _VAR.set(None)

    @staticmethod
    def require() -> Principal:
        """Return the current principal or raise ``UnauthorizedError``."""
        principal = _VAR.get()
        if principal is None:
            raise UnauthorizedError("No authenticated principal in context")
        return principal


__all__ = ["AuthenticationSupplier", "SecurityContext"]

"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog

from mp_authz.kernel.security.security_context import SecurityContext


class PrincipalProcessor:
    """structlog processor that injects the current principal.

    Adds ``subject`` and, when set, ``tenant_id`` from
    :class:`SecurityContext`. Existing keys are never overwritten.

    Usage::

        structlog.configure(processors=[PrincipalProcessor(), ...])
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        principal = SecurityContext.get_current()
        if principal is not None:
            event_dict.setdefault("subject", principal.subject)
            if principal.tenant_id is not None:
                event_dict.setdefault("tenant_id", principal.tenant_id)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["PrincipalProcessor", "get_logger"]

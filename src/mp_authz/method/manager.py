"""Method authorization – PreAuthorizeAuthorizationManager."""
from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from mp_authz.config.validation import ConfigError
from mp_authz.kernel.errors import AccessDeniedError
from mp_authz.kernel.security import Principal
from mp_authz.method.attribute import NULL_ATTRIBUTE, PolicyAttribute
from mp_authz.method.decision import AuthorizationDecision
from mp_authz.method.handler import MethodSecurityExpressionHandler
from mp_authz.method.invocation import MethodInvocation
from mp_authz.method.registry import PreAuthorizeExpressionAttributeRegistry

if TYPE_CHECKING:
    from mp_authz.config.settings import MethodSecuritySettings


def _default_handler() -> MethodSecurityExpressionHandler:
    from mp_authz.expression import DefaultMethodSecurityExpressionHandler

    return DefaultMethodSecurityExpressionHandler()


class PreAuthorizeAuthorizationManager:
    """Decides whether a principal may invoke a method, from its ``@pre_authorize`` expression.

    The expression is resolved and parsed once per method and class; each
    :meth:`check` then only builds an evaluation context and evaluates it.

    Example::

        manager = PreAuthorizeAuthorizationManager()
        decision = manager.check(SecurityContext.get_current, MethodInvocation.of(svc.cancel, "o-1"))
        if decision is not None and not decision.granted:
            ...
    """

    def __init__(
        self,
        expression_handler: MethodSecurityExpressionHandler | None = None,
        *,
        log_resolutions: bool = True,
    ) -> None:
        handler = expression_handler if expression_handler is not None else _default_handler()
        self._validate_handler(handler)
        self._expression_handler = handler
        self._registry = PreAuthorizeExpressionAttributeRegistry(handler, log_resolutions=log_resolutions)

    @classmethod
    def from_settings(cls, settings: MethodSecuritySettings) -> PreAuthorizeAuthorizationManager:
        """Build a manager with the default handler configured from *settings*."""
        from mp_authz.expression import DefaultMethodSecurityExpressionHandler

        return cls(
            DefaultMethodSecurityExpressionHandler.from_settings(settings),
            log_resolutions=settings.log_resolutions,
        )

    @property
    def expression_handler(self) -> MethodSecurityExpressionHandler:
        return self._expression_handler

    @property
    def registry(self) -> PreAuthorizeExpressionAttributeRegistry:
        return self._registry

    def set_expression_handler(self, expression_handler: MethodSecurityExpressionHandler) -> None:
        """Replace the expression handler; intended for application setup."""
        self._validate_handler(expression_handler)
        self._expression_handler = expression_handler
        self._registry.expression_handler = expression_handler

    def check(
        self,
        authentication: Callable[[], Principal | None],
        invocation: MethodInvocation,
    ) -> AuthorizationDecision | None:
        """Return a decision, or ``None`` when the method carries no policy.

        *authentication* is only called when a policy applies.
        """
        return self._decide(authentication, invocation)[1]

    def verify(
        self,
        authentication: Callable[[], Principal | None],
        invocation: MethodInvocation,
    ) -> None:
        """Like :meth:`check` but raise :class:`AccessDeniedError` on a denial."""
        attribute, decision = self._decide(authentication, invocation)
        if decision is not None and not decision.granted:
            raise AccessDeniedError(
                f"Access denied to {invocation.method_name}",
                target=str(invocation.target),
                expression=attribute.expression_string,
            )

    def _decide(
        self,
        authentication: Callable[[], Principal | None],
        invocation: MethodInvocation,
    ) -> tuple[PolicyAttribute, AuthorizationDecision | None]:
        attribute = self._registry.get_attribute(invocation)
        if attribute is NULL_ATTRIBUTE:
            return attribute, None
        handler = self._expression_handler
        context = handler.create_evaluation_context(authentication(), invocation)
        granted = handler.evaluate_as_boolean(attribute.expression, context)
        return attribute, AuthorizationDecision(granted)

    @staticmethod
    def _validate_handler(handler: object) -> None:
        if handler is None:
            raise ConfigError("expression_handler cannot be None")
        if not isinstance(handler, MethodSecurityExpressionHandler):
            raise ConfigError(
                f"expression_handler must implement MethodSecurityExpressionHandler, "
                f"got {type(handler).__name__}"
            )


__all__ = ["PreAuthorizeAuthorizationManager"]

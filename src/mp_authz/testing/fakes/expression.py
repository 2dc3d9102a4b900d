"""Testing fakes – RecordingExpressionHandler."""
from __future__ import annotations

import threading
from typing import Any

from mp_authz.kernel.security import Principal
from mp_authz.method.handler import Expression, MethodSecurityExpressionHandler
from mp_authz.method.invocation import MethodInvocation


class RecordingExpressionHandler:
    """Wraps a real handler and counts calls, thread-safely.

    Defaults to :class:`DefaultMethodSecurityExpressionHandler`. Useful to
    assert that a policy is parsed once no matter how often it is checked::

        handler = RecordingExpressionHandler()
        manager = PreAuthorizeAuthorizationManager(handler)
        ...
        assert handler.parse_count("hasRole('ADMIN')") == 1
    """

    def __init__(self, delegate: MethodSecurityExpressionHandler | None = None) -> None:
        if delegate is None:
            from mp_authz.expression import DefaultMethodSecurityExpressionHandler

            delegate = DefaultMethodSecurityExpressionHandler()
        self._delegate = delegate
        self._lock = threading.Lock()
        self.parsed: list[str] = []
        self.principals: list[Principal | None] = []
        self.evaluations = 0

    def parse_expression(self, expression: str) -> Expression:
        with self._lock:
            self.parsed.append(expression)
        return self._delegate.parse_expression(expression)

    def create_evaluation_context(self, principal: Principal | None, invocation: MethodInvocation) -> Any:
        with self._lock:
            self.principals.append(principal)
        return self._delegate.create_evaluation_context(principal, invocation)

    def evaluate_as_boolean(self, expression: Expression, context: Any) -> bool:
        with self._lock:
            self.evaluations += 1
        return self._delegate.evaluate_as_boolean(expression, context)

    def parse_count(self, expression: str | None = None) -> int:
        with self._lock:
            if expression is None:
                return len(self.parsed)
            return self.parsed.count(expression)

    def reset(self) -> None:
        with self._lock:
            self.parsed.clear()
            self.principals.clear()
            self.evaluations = 0


__all__ = ["RecordingExpressionHandler"]

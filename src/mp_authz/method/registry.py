"""Method authorization – expression attribute registry.

Resolving a policy means locating the declaration and parsing it. The
registry does this once per :class:`Target` and serves every later lookup
from a plain dict read that never takes a lock.

Concurrent first lookups of the same target serialise on a per-target lock
and re-check the cache once they hold it, so only one resolution runs and
every caller sees the same stored attribute. A resolution that raises
stores nothing; the next lookup resolves again.
"""
from __future__ import annotations

import abc
import threading
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from mp_authz.method.attribute import NULL_ATTRIBUTE, ExpressionAttribute, PolicyAttribute
from mp_authz.method.handler import MethodSecurityExpressionHandler
from mp_authz.method.invocation import MethodInvocation
from mp_authz.method.locator import PreAuthorizeLocator
from mp_authz.method.target import Target
from mp_authz.observability.logging import get_logger

A = TypeVar("A")

_MISSING: Any = object()

logger = get_logger(__name__)


class AbstractExpressionAttributeRegistry(abc.ABC, Generic[A]):
    """Append-only, thread-safe ``Target -> attribute`` cache."""

    def __init__(self) -> None:
        self._cache: dict[Target, A] = {}
        self._locks: dict[Target, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def get_attribute(self, invocation: MethodInvocation) -> A:
        return self.get(invocation.method, invocation.target_class)

    def get(self, method: Callable[..., Any], target_class: type | None = None) -> A:
        key = Target.of(method, target_class)
        cached = self._cache.get(key, _MISSING)
        if cached is not _MISSING:
            return cached
        with self._lock_for(key):
            cached = self._cache.get(key, _MISSING)
            if cached is not _MISSING:
                return cached
            attribute = self.resolve_attribute(method, target_class)
            self._cache[key] = attribute
        with self._locks_guard:
            self._locks.pop(key, None)
        self._on_resolved(key, attribute)
        return attribute

    @abc.abstractmethod
    def resolve_attribute(self, method: Callable[..., Any], target_class: type | None) -> A:
        """Compute the attribute for a target seen for the first time."""

    def _on_resolved(self, key: Target, attribute: A) -> None:  # noqa: B027
        """Hook called once per target after its attribute is published."""

    def _lock_for(self, key: Target) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = self._locks[key] = threading.Lock()
            return lock

    def __contains__(self, key: object) -> bool:
        return key in self._cache

    def __len__(self) -> int:
        return len(self._cache)


class PreAuthorizeExpressionAttributeRegistry(AbstractExpressionAttributeRegistry[PolicyAttribute]):
    """Caches the parsed ``@pre_authorize`` expression of each target.

    Parsing goes through ``expression_handler``, which the owning manager
    may swap at setup time.
    """

    def __init__(
        self,
        expression_handler: MethodSecurityExpressionHandler,
        *,
        locator: PreAuthorizeLocator | None = None,
        log_resolutions: bool = True,
    ) -> None:
        super().__init__()
        self.expression_handler = expression_handler
        self._locator = locator or PreAuthorizeLocator()
        self._log_resolutions = log_resolutions

    @property
    def log_resolutions(self) -> bool:
        return self._log_resolutions

    def resolve_attribute(self, method: Callable[..., Any], target_class: type | None) -> PolicyAttribute:
        raw = self._locator.locate(method, target_class)
        if raw is None:
            return NULL_ATTRIBUTE
        return ExpressionAttribute(self.expression_handler.parse_expression(raw))

    def _on_resolved(self, key: Target, attribute: PolicyAttribute) -> None:
        if not self._log_resolutions:
            return
        if attribute is NULL_ATTRIBUTE:
            logger.debug("pre_authorize.attribute_resolved", target=str(key), present=False)
        else:
            logger.debug(
                "pre_authorize.attribute_resolved",
                target=str(key),
                present=True,
                expression=attribute.expression_string,
            )


__all__ = ["AbstractExpressionAttributeRegistry", "PreAuthorizeExpressionAttributeRegistry"]

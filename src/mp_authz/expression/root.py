"""Expression – MethodSecurityExpressionRoot.

The functions a policy can call. They are exposed under the camelCase names
policy authors use (``hasRole``) and under snake_case aliases.
"""
from __future__ import annotations

from collections.abc import Callable
from typing import Any

from mp_authz.kernel.security import Principal


class MethodSecurityExpressionRoot:
    FUNCTIONS: dict[str, str] = {
        "hasRole": "has_role",
        "hasAnyRole": "has_any_role",
        "hasAuthority": "has_authority",
        "hasAnyAuthority": "has_any_authority",
        "hasPermission": "has_permission",
        "isAuthenticated": "is_authenticated",
        "isFullyAuthenticated": "is_fully_authenticated",
        "isAnonymous": "is_anonymous",
        "permitAll": "permit_all",
        "denyAll": "deny_all",
    }

    def __init__(self, principal: Principal, *, role_prefix: str = "") -> None:
        self.principal = principal
        self.role_prefix = role_prefix

    @classmethod
    def function_names(cls) -> frozenset[str]:
        return frozenset(cls.FUNCTIONS) | frozenset(cls.FUNCTIONS.values())

    def functions(self) -> dict[str, Callable[..., Any]]:
        bound = {name: getattr(self, attr) for name, attr in self.FUNCTIONS.items()}
        bound.update({attr: getattr(self, attr) for attr in self.FUNCTIONS.values()})
        return bound

    def _with_prefix(self, role: str) -> str:
        if not self.role_prefix or role.startswith(self.role_prefix):
            return role
        return self.role_prefix + role

    @property
    def authorities(self) -> frozenset[str]:
        """Role names plus permission values held by the principal."""
        return self.principal.role_names | frozenset(p.value for p in self.principal.permissions)

    def has_role(self, role: str) -> bool:
        return self.has_any_role(role)

    def has_any_role(self, *roles: str) -> bool:
        if self.principal.is_anonymous:
            return False
        held = self.principal.role_names
        return any(self._with_prefix(r) in held for r in roles)

    def has_authority(self, authority: str) -> bool:
        return self.has_any_authority(authority)

    def has_any_authority(self, *authorities: str) -> bool:
        if self.principal.is_anonymous:
            return False
        held = self.authorities
        return any(a in held for a in authorities)

    def has_permission(self, permission: str) -> bool:
        """Permission check honouring ``*`` and ``resource:*`` wildcards."""
        return self.principal.is_authenticated and self.principal.has_permission(permission)

    def is_authenticated(self) -> bool:
        return self.principal.is_authenticated

    def is_fully_authenticated(self) -> bool:
        return self.principal.is_authenticated and self.principal.claims.get("remember_me") is not True

    def is_anonymous(self) -> bool:
        return self.principal.is_anonymous

    def permit_all(self) -> bool:
        return True

    def deny_all(self) -> bool:
        return False


__all__ = ["MethodSecurityExpressionRoot"]

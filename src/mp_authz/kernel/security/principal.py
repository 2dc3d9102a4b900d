"""Kernel security – Principal, Role, Permission."""
from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass(frozen=True)
class Role:
    """Named role (e.g. ADMIN, VIEWER)."""
    name: str

    def __str__(self) -> str:
        return self.name


@dataclasses.dataclass(frozen=True)
class Permission:
    """Fine-grained authority string (e.g. ``'orders:write'``).

    A stored permission *implies* a required one when it is equal to it,
    when it is ``"*"``, or when it is ``"resource:*"`` and the required
    permission starts with ``"resource:"``.
    """
    value: str

    def __str__(self) -> str:
        return self.value

    def implies(self, required: str | Permission) -> bool:
        wanted = required.value if isinstance(required, Permission) else required
        if self.value == "*" or self.value == wanted:
            return True
        if self.value.endswith(":*"):
            return wanted.startswith(self.value[:-1])
        return False


@dataclasses.dataclass(frozen=True)
class Principal:
    """Identity of the caller, as handed over by the authentication supplier.

    ``is_anonymous`` marks the placeholder identity some hosts install for
    unauthenticated requests; such a principal is present but not
    authenticated.
    """
    subject: str
    tenant_id: str | None = None
    roles: frozenset[Role] = frozenset()
    permissions: frozenset[Permission] = frozenset()
    claims: dict[str, Any] = dataclasses.field(default_factory=dict)
    is_service_account: bool = False
    is_anonymous: bool = False

    @classmethod
    def anonymous(cls, subject: str = "anonymous") -> Principal:
        return cls(subject=subject, is_anonymous=True)

    @property
    def is_authenticated(self) -> bool:
        return not self.is_anonymous

    @property
    def role_names(self) -> frozenset[str]:
        return frozenset(r.name for r in self.roles)

    def has_role(self, role: str | Role) -> bool:
        name = role.name if isinstance(role, Role) else role
        return any(r.name == name for r in self.roles)

    def has_permission(self, permission: str | Permission) -> bool:
        """Exact or wildcard match against the principal's permissions."""
        return any(p.implies(permission) for p in self.permissions)


__all__ = ["Permission", "Principal", "Role"]

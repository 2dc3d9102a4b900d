"""Kernel security – Principal, Roles, Permissions, SecurityContext."""
from mp_authz.kernel.security.principal import Permission, Principal, Role
from mp_authz.kernel.security.security_context import AuthenticationSupplier, SecurityContext

__all__ = [
    "AuthenticationSupplier",
    "Permission",
    "Principal",
    "Role",
    "SecurityContext",
]

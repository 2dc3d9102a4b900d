"""
mp_authz – Pre-invocation method authorization.

Import path convention::

    from mp_authz.method import PreAuthorizeAuthorizationManager, pre_authorize
    from mp_authz.kernel.security import Principal, SecurityContext
    from mp_authz.expression import DefaultMethodSecurityExpressionHandler
"""

__version__ = "0.1.0"
__all__ = ["__version__"]

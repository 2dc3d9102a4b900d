"""Method authorization – ``@pre_authorize`` resolution, caching and decisions."""
from mp_authz.method.annotations import PRE_AUTHORIZE_ATTR, pre_authorize
from mp_authz.method.attribute import (
    NULL_ATTRIBUTE,
    ExpressionAttribute,
    NullAttribute,
    PolicyAttribute,
)
from mp_authz.method.decision import AuthorizationDecision
from mp_authz.method.handler import Expression, MethodSecurityExpressionHandler, evaluate_as_boolean
from mp_authz.method.invocation import MethodInvocation
from mp_authz.method.locator import PreAuthorizeLocator
from mp_authz.method.manager import PreAuthorizeAuthorizationManager
from mp_authz.method.registry import (
    AbstractExpressionAttributeRegistry,
    PreAuthorizeExpressionAttributeRegistry,
)
from mp_authz.method.target import Target

__all__ = [
    "AbstractExpressionAttributeRegistry",
    "AuthorizationDecision",
    "Expression",
    "ExpressionAttribute",
    "MethodInvocation",
    "MethodSecurityExpressionHandler",
    "NULL_ATTRIBUTE",
    "NullAttribute",
    "PRE_AUTHORIZE_ATTR",
    "PolicyAttribute",
    "PreAuthorizeAuthorizationManager",
    "PreAuthorizeExpressionAttributeRegistry",
    "PreAuthorizeLocator",
    "Target",
    "evaluate_as_boolean",
]

"""Unit tests for the default expression engine."""

from __future__ import annotations

import pytest

from mp_authz.config.settings import MethodSecuritySettings
from mp_authz.expression import (
    DefaultMethodSecurityExpressionHandler,
    EvaluationContext,
    MethodSecurityExpressionRoot,
    SafeExpressionParser,
)
from mp_authz.kernel.errors import ExpressionEvaluationError, ExpressionParseError
from mp_authz.kernel.security import Permission, Principal, Role
from mp_authz.method import MethodInvocation, evaluate_as_boolean


class Invoice:
    def __init__(self, owner: str) -> None:
        self.owner = owner

    def approve(self, amount: int, principal: str = "n/a") -> None: ...


def transfer(amount: int, currency: str = "EUR") -> None: ...


ALICE = Principal(
    subject="alice",
    roles=frozenset({Role("ADMIN"), Role("EDITOR")}),
    permissions=frozenset({Permission("orders:*"), Permission("reports:read")}),
)


@pytest.fixture
def handler() -> DefaultMethodSecurityExpressionHandler:
    return DefaultMethodSecurityExpressionHandler()


def evaluate(handler, expression, principal=ALICE, invocation=None):
    invocation = invocation or MethodInvocation.of(transfer, 10)
    ctx = handler.create_evaluation_context(principal, invocation)
    return handler.evaluate_as_boolean(handler.parse_expression(expression), ctx)


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


class TestSafeExpressionParser:
    @pytest.fixture
    def parser(self) -> SafeExpressionParser:
        return SafeExpressionParser(MethodSecurityExpressionRoot.function_names())

    def test_parses_once_into_reusable_expression(self, parser) -> None:
        expr = parser.parse_expression("hasRole('ADMIN') and amount < 100")
        assert expr.expression_string == "hasRole('ADMIN') and amount < 100"

    @pytest.mark.parametrize(
        "source",
        [
            "",
            "   ",
            "hasRole('ADMIN'",
            "amount <",
            "__import__('os')",
            "principal.__class__",
            "principal._secret",
            "open('/etc/passwd')",
            "principal.has_role('ADMIN')",
            "lambda: True",
            "[x for x in args]",
            "(x := 1)",
            "hasRole(**args)",
        ],
    )
    def test_rejects(self, parser, source) -> None:
        with pytest.raises(ExpressionParseError):
            parser.parse_expression(source)

    def test_parse_error_keeps_expression(self, parser) -> None:
        with pytest.raises(ExpressionParseError) as exc_info:
            parser.parse_expression("hasRole(")
        assert exc_info.value.expression == "hasRole("
        assert exc_info.value.code == "expression_parse_error"


# ---------------------------------------------------------------------------
# Root functions
# ---------------------------------------------------------------------------


class TestRootFunctions:
    @pytest.mark.parametrize(
        ("expression", "expected"),
        [
            ("hasRole('ADMIN')", True),
            ("hasRole('AUDITOR')", False),
            ("has_role('EDITOR')", True),
            ("hasAnyRole('AUDITOR', 'EDITOR')", True),
            ("hasAnyRole('AUDITOR', 'GUEST')", False),
            ("hasAuthority('reports:read')", True),
            ("hasAuthority('ADMIN')", True),
            ("hasAuthority('orders:cancel')", False),
            ("hasAnyAuthority('x', 'reports:read')", True),
            ("hasPermission('orders:cancel')", True),
            ("hasPermission('reports:write')", False),
            ("isAuthenticated()", True),
            ("isFullyAuthenticated()", True),
            ("isAnonymous()", False),
            ("permitAll()", True),
            ("denyAll()", False),
            ("not denyAll() and (permitAll() or denyAll())", True),
        ],
    )
    def test_authenticated_principal(self, handler, expression, expected) -> None:
        assert evaluate(handler, expression) is expected

    @pytest.mark.parametrize(
        ("expression", "expected"),
        [
            ("isAnonymous()", True),
            ("isAuthenticated()", False),
            ("hasRole('ADMIN')", False),
            ("hasPermission('orders:cancel')", False),
            ("principal.subject == 'anonymous'", True),
            ("permitAll()", True),
        ],
    )
    def test_missing_principal_is_anonymous(self, handler, expression, expected) -> None:
        assert evaluate(handler, expression, principal=None) is expected

    def test_anonymous_principal_with_roles_has_no_role(self, handler) -> None:
        anon = Principal(subject="guest", roles=frozenset({Role("ADMIN")}), is_anonymous=True)
        assert evaluate(handler, "hasRole('ADMIN')", principal=anon) is False

    def test_remember_me_not_fully_authenticated(self, handler) -> None:
        remembered = Principal(subject="r", claims={"remember_me": True})
        assert evaluate(handler, "isAuthenticated()", principal=remembered) is True
        assert evaluate(handler, "isFullyAuthenticated()", principal=remembered) is False

    def test_role_prefix(self) -> None:
        handler = DefaultMethodSecurityExpressionHandler(role_prefix="ROLE_")
        principal = Principal(subject="p", roles=frozenset({Role("ROLE_ADMIN")}))
        assert evaluate(handler, "hasRole('ADMIN')", principal=principal) is True
        assert evaluate(handler, "hasRole('ROLE_ADMIN')", principal=principal) is True
        assert evaluate(handler, "hasRole('EDITOR')", principal=principal) is False

    def test_from_settings(self) -> None:
        settings = MethodSecuritySettings(role_prefix="ROLE_", anonymous_subject="nobody")
        handler = DefaultMethodSecurityExpressionHandler.from_settings(settings)
        assert handler.role_prefix == "ROLE_"
        assert evaluate(handler, "principal.subject == 'nobody'", principal=None) is True


# ---------------------------------------------------------------------------
# Evaluation context
# ---------------------------------------------------------------------------


class TestEvaluationContext:
    def test_arguments_by_name_with_defaults(self, handler) -> None:
        inv = MethodInvocation.of(transfer, 250)
        assert evaluate(handler, "amount > 100 and currency == 'EUR'", invocation=inv) is True

    def test_receiver_is_target(self, handler) -> None:
        inv = MethodInvocation.of(Invoice("alice").approve, 5)
        assert evaluate(handler, "target.owner == principal.subject", invocation=inv) is True

    def test_argument_cannot_shadow_principal(self, handler) -> None:
        inv = MethodInvocation.of(Invoice("x").approve, 5, principal="mallory")
        assert evaluate(handler, "principal.subject == 'alice'", invocation=inv) is True
        assert evaluate(handler, "args['principal'] == 'mallory'", invocation=inv) is True

    def test_authentication_alias(self, handler) -> None:
        assert evaluate(handler, "authentication is principal") is True

    def test_set_variable(self, handler) -> None:
        ctx = handler.create_evaluation_context(ALICE, MethodInvocation.of(transfer, 1))
        ctx.set_variable("limit", 5)
        assert handler.evaluate_as_boolean(handler.parse_expression("amount < limit"), ctx) is True

    def test_lookup_unknown_raises_key_error(self) -> None:
        ctx = EvaluationContext(MethodSecurityExpressionRoot(ALICE))
        with pytest.raises(KeyError):
            ctx.lookup("nope")

    def test_mismatched_arguments(self, handler) -> None:
        inv = MethodInvocation.of(transfer, 1, 2, 3)
        with pytest.raises(ExpressionEvaluationError):
            handler.create_evaluation_context(ALICE, inv)


# ---------------------------------------------------------------------------
# Boolean coercion
# ---------------------------------------------------------------------------


class TestEvaluateAsBoolean:
    @pytest.mark.parametrize("expression", ["amount", "principal.subject", "None", "1"])
    def test_non_boolean_is_a_fault(self, handler, expression) -> None:
        with pytest.raises(ExpressionEvaluationError, match="expected bool"):
            evaluate(handler, expression)

    def test_unknown_name_is_a_fault(self, handler) -> None:
        with pytest.raises(ExpressionEvaluationError) as exc_info:
            evaluate(handler, "no_such_name == 1")
        assert isinstance(exc_info.value.cause, NameError)

    def test_runtime_error_is_wrapped(self, handler) -> None:
        with pytest.raises(ExpressionEvaluationError):
            evaluate(handler, "principal.claims['missing'] == 1")

    def test_module_helper_with_custom_expression(self) -> None:
        class Constant:
            expression_string = "constant"

            def get_value(self, context):
                return context

        assert evaluate_as_boolean(Constant(), True) is True
        with pytest.raises(ExpressionEvaluationError):
            evaluate_as_boolean(Constant(), "yes")

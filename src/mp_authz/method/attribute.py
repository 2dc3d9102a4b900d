"""Method authorization – cached policy attribute values."""
from __future__ import annotations

import dataclasses
import enum
from typing import Final, Union

from mp_authz.method.handler import Expression


class NullAttribute(enum.Enum):
    """Marker stored for methods without any policy declaration."""

    NULL = "NULL"

    def __repr__(self) -> str:
        return "NULL_ATTRIBUTE"


NULL_ATTRIBUTE: Final = NullAttribute.NULL


@dataclasses.dataclass(frozen=True)
class ExpressionAttribute:
    """A parsed policy expression, ready to be evaluated on every call."""

    expression: Expression

    @property
    def expression_string(self) -> str:
        return self.expression.expression_string


PolicyAttribute = Union[ExpressionAttribute, NullAttribute]

__all__ = ["ExpressionAttribute", "NULL_ATTRIBUTE", "NullAttribute", "PolicyAttribute"]

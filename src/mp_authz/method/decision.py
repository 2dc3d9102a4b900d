"""Method authorization – AuthorizationDecision."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class AuthorizationDecision:
    """Outcome of a policy evaluation.

    Abstention is not a decision: managers return ``None`` instead, so a
    denial (``granted=False``) can never be mistaken for "no policy".
    """

    granted: bool

    @property
    def denied(self) -> bool:
        return not self.granted


__all__ = ["AuthorizationDecision"]

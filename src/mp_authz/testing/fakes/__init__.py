"""Testing fakes."""
from mp_authz.testing.fakes.expression import RecordingExpressionHandler

__all__ = ["RecordingExpressionHandler"]

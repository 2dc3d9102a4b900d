"""Testing helpers for applications that use mp_authz."""
from mp_authz.testing.fakes import RecordingExpressionHandler

__all__ = ["RecordingExpressionHandler"]

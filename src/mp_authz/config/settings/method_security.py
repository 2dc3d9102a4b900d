"""Config settings – MethodSecuritySettings."""
from __future__ import annotations

import dataclasses

from mp_authz.config.settings.base import Settings
from mp_authz.config.validation import InvalidSettingValueError


@dataclasses.dataclass(frozen=True)
class MethodSecuritySettings(Settings):
    """Tunables of the default expression handler.

    Loaded from ``MP_AUTHZ_ROLE_PREFIX``, ``MP_AUTHZ_ANONYMOUS_SUBJECT`` and
    ``MP_AUTHZ_LOG_RESOLUTIONS`` by :class:`EnvSettingsLoader`.
    """

    _prefix = "MP_AUTHZ"

    role_prefix: str = ""
    anonymous_subject: str = "anonymous"
    log_resolutions: bool = True

    def _validate(self) -> None:
        if any(ch.isspace() for ch in self.role_prefix):
            raise InvalidSettingValueError("role_prefix", self.role_prefix, "must not contain whitespace")
        if not self.anonymous_subject.strip():
            raise InvalidSettingValueError("anonymous_subject", self.anonymous_subject, "must not be blank")


__all__ = ["MethodSecuritySettings"]

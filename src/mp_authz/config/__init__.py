"""Config – settings and validation errors."""
from mp_authz.config.settings import (
    EnvSettingsLoader,
    MethodSecuritySettings,
    Settings,
    SettingsLoader,
)
from mp_authz.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MethodSecuritySettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]

"""Config settings – env-based configuration."""
from mp_authz.config.settings.base import Settings
from mp_authz.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from mp_authz.config.settings.method_security import MethodSecuritySettings

__all__ = ["EnvSettingsLoader", "MethodSecuritySettings", "Settings", "SettingsLoader"]

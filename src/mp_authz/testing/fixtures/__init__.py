"""Testing fixtures – register with ``pytest_plugins = ["mp_authz.testing.fixtures"]``."""
from mp_authz.testing.fixtures.principal import fake_principal, recording_handler, security_context

__all__ = ["fake_principal", "recording_handler", "security_context"]

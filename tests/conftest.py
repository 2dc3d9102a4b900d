pytest_plugins = ["mp_authz.testing.fixtures"]

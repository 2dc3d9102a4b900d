"""Observability – logging."""
from mp_authz.observability.logging import JsonLoggerFactory, PrincipalProcessor, get_logger

__all__ = ["JsonLoggerFactory", "PrincipalProcessor", "get_logger"]

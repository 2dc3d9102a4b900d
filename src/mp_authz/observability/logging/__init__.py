"""Observability – structured logging helpers."""
from mp_authz.observability.logging.factory import JsonLoggerFactory
from mp_authz.observability.logging.processors import PrincipalProcessor, get_logger

__all__ = ["JsonLoggerFactory", "PrincipalProcessor", "get_logger"]

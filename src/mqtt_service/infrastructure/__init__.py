"""
Infrastructure Layer
Framework-bound concerns shared across the service
"""
from mqtt_service.infrastructure.observability import (
    bind_context,
    clear_context,
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)

__all__ = [
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
    "bind_context",
    "clear_context",
]

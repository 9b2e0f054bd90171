"""
MQTT Service - power strip persistence mapping
Domain values, persistence entities and the mappers between them
"""

from mqtt_service.domain import BaseValueObject, PowerStrip
from mqtt_service.exceptions import (
    ConfigurationError,
    MappingError,
    MqttServiceError,
    PowerStripMappingError,
)
from mqtt_service.persistence import Base, Mapper, PowerStripEntity, PowerStripMapper

__all__ = [
    # Domain
    "BaseValueObject",
    "PowerStrip",
    # Persistence
    "Base",
    "PowerStripEntity",
    "Mapper",
    "PowerStripMapper",
    # Errors
    "MqttServiceError",
    "ConfigurationError",
    "MappingError",
    "PowerStripMappingError",
]

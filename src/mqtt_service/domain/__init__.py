"""
Domain Layer
Pure domain values with no framework dependencies
"""
from mqtt_service.domain.base_value_object import BaseValueObject
from mqtt_service.domain.power_strip import PowerStrip

__all__ = [
    "BaseValueObject",
    "PowerStrip",
]

"""
Persistence Layer
Storage-shaped entities and the mappers that translate them to domain values
"""
from mqtt_service.persistence.entity import Base, PowerStripEntity
from mqtt_service.persistence.mapper import Mapper, PowerStripMapper

__all__ = [
    "Base",
    "PowerStripEntity",
    "Mapper",
    "PowerStripMapper",
]

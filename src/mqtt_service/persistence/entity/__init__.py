from mqtt_service.persistence.entity.base_model import Base
from mqtt_service.persistence.entity.power_strip_entity import PowerStripEntity

__all__ = ["Base", "PowerStripEntity"]

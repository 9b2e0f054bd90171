from mqtt_service.persistence.mapper.base_mapper import Mapper
from mqtt_service.persistence.mapper.power_strip_mapper import PowerStripMapper

__all__ = ["Mapper", "PowerStripMapper"]

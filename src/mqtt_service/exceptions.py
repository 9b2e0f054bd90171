from typing import Any, Dict, Optional


# ───────────────────────── Base & Domain Exceptions ─────────────────────────
class MqttServiceError(Exception):
    """Base class for service-level errors. Carries a stable machine-readable code."""
    code: str = "mqtt_service_error"
    message: str
    details: Optional[Dict[str, Any]]

    def __init__(
        self,
        message: str = "",
        *,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message or self.__class__.__name__)
        if code is not None:
            self.code = code
        self.message = message or self.__class__.__name__
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ConfigurationError(MqttServiceError):
    code = "configuration_error"


class MappingError(MqttServiceError):
    # raised by persistence mappers on input they refuse to convert
    code = "mapping_error"


class PowerStripMappingError(MappingError):
    code = "power_strip_mapping_error"


__all__ = [
    "MqttServiceError",
    "ConfigurationError",
    "MappingError",
    "PowerStripMappingError",
]

from __future__ import annotations

from mqtt_service.domain.base_value_object import BaseValueObject


class PowerStrip(BaseValueObject):
    """
    A switchable power strip as seen by the application layer.

    Attributes:
        device_id: Opaque identifier of the strip, unique across the fleet
        powered: Whether the strip is currently switched on
    """

    device_id: str
    powered: bool

    def __init__(self, device_id: str, powered: bool) -> None:
        self.device_id = device_id
        self.powered = powered
        self._finalize_init()

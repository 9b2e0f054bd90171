from __future__ import annotations

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from mqtt_service.persistence.entity.base_model import Base


class PowerStripEntity(Base):
    """SQLAlchemy model for the power_strips table."""

    __tablename__ = "power_strips"

    device_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    powered: Mapped[bool] = mapped_column(Boolean, nullable=False)

    def __repr__(self) -> str:
        return f"<PowerStripEntity(device_id={self.device_id!r}, powered={self.powered})>"

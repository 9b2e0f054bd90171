from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Optional

from mqtt_service.domain.power_strip import PowerStrip
from mqtt_service.exceptions import PowerStripMappingError
from mqtt_service.infrastructure.observability.logger import get_logger
from mqtt_service.persistence.entity.power_strip_entity import PowerStripEntity

logger = get_logger(__name__)


class PowerStripMapper:
    """
    Converts between the domain value `PowerStrip` and the SQLAlchemy `PowerStripEntity`.
    Compatible with the Mapper protocol (to_domain / to_orm).

    The mapper holds no state; one instance may be shared freely between callers.
    Missing or mistyped input is rejected with PowerStripMappingError instead of
    being skipped, so a collection is either mapped completely or not at all.
    """

    # --- domain -> persistence ---

    def map_one(self, power_strip: PowerStrip) -> PowerStripEntity:
        """Domain -> ORM (detached instance; not yet added to any session)."""
        self._check(power_strip, PowerStrip)
        logger.debug("power_strip_mapped_to_entity", device_id=power_strip.device_id)
        return self._build_entity(power_strip)

    # Mapper protocol name for the domain -> ORM direction
    to_orm = map_one

    def to_orm_list(self, power_strips: Iterable[PowerStrip]) -> List[PowerStripEntity]:
        """Map a collection of domain values, keeping input order."""
        entities = []
        for index, power_strip in enumerate(self._iterate(power_strips, PowerStrip)):
            self._check(power_strip, PowerStrip, index=index)
            entities.append(self._build_entity(power_strip))
        logger.debug("power_strips_mapped_to_entities", count=len(entities))
        return entities

    # --- persistence -> domain ---

    def to_domain(self, model: PowerStripEntity) -> PowerStrip:
        """ORM -> Domain"""
        self._check(model, PowerStripEntity)
        logger.debug("power_strip_entity_mapped", device_id=model.device_id)
        return self._build_power_strip(model)

    def map_many(self, entities: Iterable[PowerStripEntity]) -> List[PowerStrip]:
        """
        Map persistence entities to domain values.

        The result is a list built eagerly, one PowerStrip per entity, in the
        order the entities were yielded. An empty input gives an empty list.
        """
        power_strips = []
        for index, model in enumerate(self._iterate(entities, PowerStripEntity)):
            self._check(model, PowerStripEntity, index=index)
            power_strips.append(self._build_power_strip(model))
        logger.debug("power_strip_entities_mapped", count=len(power_strips))
        return power_strips

    # --- helpers ---

    @staticmethod
    def _build_entity(power_strip: PowerStrip) -> PowerStripEntity:
        return PowerStripEntity(
            device_id=power_strip.device_id,
            powered=power_strip.powered,
        )

    @staticmethod
    def _build_power_strip(model: PowerStripEntity) -> PowerStrip:
        return PowerStrip(device_id=model.device_id, powered=model.powered)

    def _iterate(self, collection: Iterable[Any], expected: type) -> Iterator[Any]:
        if collection is None:
            raise self._reject(f"Cannot map a missing {expected.__name__} collection", expected=expected.__name__)
        try:
            return iter(collection)
        except TypeError:
            raise self._reject(
                f"Expected an iterable of {expected.__name__}, got {type(collection).__name__}",
                expected=expected.__name__,
                actual=type(collection).__name__,
                device_id=getattr(collection, "device_id", None),
            ) from None

    def _check(self, value: Any, expected: type, *, index: Optional[int] = None) -> None:
        if value is None:
            raise self._reject(
                f"Cannot map a missing {expected.__name__}",
                expected=expected.__name__,
                index=index,
            )
        if not isinstance(value, expected):
            raise self._reject(
                f"Expected {expected.__name__}, got {type(value).__name__}",
                expected=expected.__name__,
                actual=type(value).__name__,
                index=index,
                device_id=getattr(value, "device_id", None),
            )

    @staticmethod
    def _reject(message: str, **details: Any) -> PowerStripMappingError:
        details = {k: v for k, v in details.items() if v is not None}
        error = PowerStripMappingError(message, details=details or None)
        logger.warning("power_strip_mapping_rejected", code=error.code, reason=message, **details)
        return error

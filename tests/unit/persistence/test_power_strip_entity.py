from sqlalchemy import Boolean, String, inspect

from mqtt_service.persistence import Base, PowerStripEntity


def test_table_layout():
    table = PowerStripEntity.__table__
    assert table.name == "power_strips"
    assert set(table.columns.keys()) == {"device_id", "powered"}
    assert [c.name for c in table.primary_key.columns] == ["device_id"]
    assert isinstance(table.c.device_id.type, String)
    assert isinstance(table.c.powered.type, Boolean)
    assert table.c.powered.nullable is False


def test_registered_on_shared_metadata():
    assert Base.metadata.tables["power_strips"] is PowerStripEntity.__table__


def test_new_instance_is_transient():
    entity = PowerStripEntity(device_id="strip-9", powered=True)
    assert inspect(entity).transient
    assert repr(entity) == "<PowerStripEntity(device_id='strip-9', powered=True)>"

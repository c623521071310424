import pytest
from catalogue.entity.entity import Entity, EntityStatus
from catalogue.entity.events import EntityAdded, EntityDetailsUpdated, EntityRemoved
from protean.exceptions import ValidationError


def _entity(**overrides):
    defaults = {"name": "Blue Bottle Cafe", "category_id": "cat-1", "sector_id": "sec-1"}
    defaults.update(overrides)
    return Entity.add(**defaults)


class TestEntityAdd:
    def test_defaults(self):
        entity = _entity()
        assert entity.status == EntityStatus.ACTIVE.value
        assert entity.created_at is not None

    def test_raises_entity_added(self):
        entity = _entity()
        event = entity._events[0]
        assert isinstance(event, EntityAdded)
        assert event.entity_id == str(entity.id)
        assert event.category_id == "cat-1"
        assert event.sector_id == "sec-1"


class TestEntityUpdate:
    def test_partial_update(self):
        entity = _entity(description="Coffee")
        entity._events.clear()

        entity.update_details(picture="/photos/file/cafe.png")

        assert entity.description == "Coffee"
        assert entity.picture == "/photos/file/cafe.png"
        assert isinstance(entity._events[0], EntityDetailsUpdated)

    def test_blank_name_is_rejected(self):
        entity = _entity()
        with pytest.raises(ValidationError):
            entity.update_details(name="  ")


class TestEntityRemoval:
    def test_remove(self):
        entity = _entity()
        entity._events.clear()

        entity.remove()

        assert entity.status == EntityStatus.REMOVED.value
        assert isinstance(entity._events[0], EntityRemoved)

    def test_removed_entity_cannot_change(self):
        entity = _entity()
        entity.remove()
        with pytest.raises(ValidationError):
            entity.update_details(name="New name")
        with pytest.raises(ValidationError):
            entity.remove()

"""Entity aggregate: a reviewable product, place or service.

State Machine:
    ACTIVE → REMOVED (terminal)
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, String, Text

from catalogue.domain import catalogue
from catalogue.entity.events import EntityAdded, EntityDetailsUpdated, EntityRemoved


class EntityStatus(Enum):
    ACTIVE = "Active"
    REMOVED = "Removed"


@catalogue.aggregate
class Entity:
    name: String(required=True, max_length=200)
    description: Text()
    category_id: Identifier(required=True)
    sector_id: Identifier()
    picture: String(max_length=500)
    created_by: Identifier()
    status: String(choices=EntityStatus, default=EntityStatus.ACTIVE.value)
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def add(cls, name, category_id, sector_id=None, description=None, picture=None, created_by=None):
        now = datetime.now(UTC)
        entity = cls(
            name=name.strip(),
            description=description,
            category_id=category_id,
            sector_id=sector_id,
            picture=picture,
            created_by=created_by,
            status=EntityStatus.ACTIVE.value,
            created_at=now,
            updated_at=now,
        )
        entity.raise_(
            EntityAdded(
                entity_id=str(entity.id),
                name=entity.name,
                category_id=str(category_id),
                sector_id=str(sector_id) if sector_id else None,
                added_at=now,
            )
        )
        return entity

    def _assert_active(self):
        if self.status != EntityStatus.ACTIVE.value:
            raise ValidationError({"status": ["Entity has been removed"]})

    def update_details(self, name=None, description=None, picture=None):
        self._assert_active()

        if name is not None:
            if not name.strip():
                raise ValidationError({"name": ["Entity name is required"]})
            self.name = name.strip()
        if description is not None:
            self.description = description
        if picture is not None:
            self.picture = picture

        now = datetime.now(UTC)
        self.updated_at = now

        self.raise_(
            EntityDetailsUpdated(
                entity_id=str(self.id),
                name=self.name,
                description=self.description,
                picture=self.picture,
                updated_at=now,
            )
        )

    def remove(self):
        self._assert_active()

        now = datetime.now(UTC)
        self.status = EntityStatus.REMOVED.value
        self.updated_at = now

        self.raise_(
            EntityRemoved(
                entity_id=str(self.id),
                category_id=str(self.category_id),
                removed_at=now,
            )
        )

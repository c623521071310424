"""Sector and Category aggregates: the top two levels of the catalogue.

The catalogue is a fixed three-level hierarchy: sector → category →
entity. Sectors group categories; a category may be left unassigned.
Names are unique within their level, compared case-insensitively; the
management handlers enforce that because it spans instances.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, String, Text

from catalogue.category.events import CategoryCreated, CategoryDetailsUpdated, SectorCreated
from catalogue.domain import catalogue


@catalogue.aggregate
class Sector:
    """A broad area of the catalogue, such as Food or Technology."""

    name: String(required=True, max_length=100)
    description: Text()
    created_at: DateTime()

    @classmethod
    def create(cls, name, description=None):
        now = datetime.now(UTC)
        sector = cls(name=name.strip(), description=description, created_at=now)
        sector.raise_(
            SectorCreated(
                sector_id=str(sector.id),
                name=sector.name,
                description=description,
                created_at=now,
            )
        )
        return sector


@catalogue.aggregate
class Category:
    """A grouping of reviewable entities inside a sector."""

    name: String(required=True, max_length=100)
    description: Text()
    sector_id: Identifier()
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def name_must_not_be_blank(self):
        if self.name is not None and not self.name.strip():
            raise ValidationError({"name": ["Category name is required"]})

    @classmethod
    def create(cls, name, description=None, sector_id=None):
        now = datetime.now(UTC)
        category = cls(
            name=name.strip(),
            description=description,
            sector_id=sector_id,
            created_at=now,
            updated_at=now,
        )
        category.raise_(
            CategoryCreated(
                category_id=str(category.id),
                name=category.name,
                description=description,
                sector_id=str(sector_id) if sector_id else None,
                created_at=now,
            )
        )
        return category

    def update_details(self, name=None, description=None, sector_id=None):
        if name is not None:
            self.name = name.strip()
        if description is not None:
            self.description = description
        if sector_id is not None:
            self.sector_id = sector_id

        now = datetime.now(UTC)
        self.updated_at = now

        self.raise_(
            CategoryDetailsUpdated(
                category_id=str(self.id),
                name=self.name,
                description=self.description,
                sector_id=str(self.sector_id) if self.sector_id else None,
                updated_at=now,
            )
        )

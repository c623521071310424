"""Domain events for the Sector and Category aggregates."""

from protean.fields import DateTime, Identifier, String, Text

from catalogue.domain import catalogue


@catalogue.event(part_of="Sector")
class SectorCreated:
    __version__ = 1

    sector_id = Identifier(required=True)
    name = String(required=True)
    description = Text()
    created_at = DateTime(required=True)


@catalogue.event(part_of="Category")
class CategoryCreated:
    __version__ = 1

    category_id = Identifier(required=True)
    name = String(required=True)
    description = Text()
    sector_id = Identifier()
    created_at = DateTime(required=True)


@catalogue.event(part_of="Category")
class CategoryDetailsUpdated:
    __version__ = 1

    category_id = Identifier(required=True)
    name = String(required=True)
    description = Text()
    sector_id = Identifier()
    updated_at = DateTime(required=True)


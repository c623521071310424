"""Domain events for the Entity aggregate.

EntityAdded and EntityRemoved are also published to other domains; their
shapes match the contracts in shared/events/catalogue.py.
"""

from protean.fields import DateTime, Identifier, String, Text

from catalogue.domain import catalogue


@catalogue.event(part_of="Entity")
class EntityAdded:
    """A reviewable entity was added to the catalogue."""

    __version__ = 1

    entity_id = Identifier(required=True)
    name = String(required=True)
    category_id = Identifier(required=True)
    sector_id = Identifier()
    added_at = DateTime(required=True)


@catalogue.event(part_of="Entity")
class EntityDetailsUpdated:
    __version__ = 1

    entity_id = Identifier(required=True)
    name = String(required=True)
    description = Text()
    picture = String()
    updated_at = DateTime(required=True)


@catalogue.event(part_of="Entity")
class EntityRemoved:
    """An entity was removed from the catalogue."""

    __version__ = 1

    entity_id = Identifier(required=True)
    category_id = Identifier(required=True)
    removed_at = DateTime(required=True)

"""Cross-domain event contracts for Catalogue domain events.

Consumed by the Community domain (to drop reviews of removed entities) and
the Moderation domain (dashboard counters).

The source-of-truth events are in src/catalogue/entity/events.py and
src/catalogue/entity_request/events.py.
"""

from protean.core.event import BaseEvent
from protean.fields import Boolean, DateTime, Identifier, String


class EntityAdded(BaseEvent):
    """A reviewable entity was added to the catalogue."""

    __version__ = 1

    entity_id = Identifier(required=True)
    name = String(required=True)
    category_id = Identifier(required=True)
    sector_id = Identifier()
    added_at = DateTime(required=True)


class EntityRemoved(BaseEvent):
    """An entity was removed from the catalogue."""

    __version__ = 1

    entity_id = Identifier(required=True)
    category_id = Identifier(required=True)
    removed_at = DateTime(required=True)


class EntityRequestSubmitted(BaseEvent):
    """A user proposed a new entity for the catalogue."""

    __version__ = 1

    request_id = Identifier(required=True)
    user_id = Identifier(required=True)
    item_name = String(required=True)
    requested_at = DateTime(required=True)


class EntityRequestApproved(BaseEvent):
    """An admin approved an entity request."""

    __version__ = 1

    request_id = Identifier(required=True)
    entity_id = Identifier(required=True)
    admin_id = Identifier(required=True)
    approved_at = DateTime(required=True)


class EntityRequestRejected(BaseEvent):
    """An admin rejected an entity request."""

    __version__ = 1

    request_id = Identifier(required=True)
    admin_id = Identifier(required=True)
    admin_notes = String()
    rejected_at = DateTime(required=True)


class EntityRequestDeleted(BaseEvent):
    """An entity request was deleted, whatever its status."""

    __version__ = 1

    request_id = Identifier(required=True)
    was_pending = Boolean(default=False)
    deleted_at = DateTime(required=True)

"""Domain events for the EntityRequest aggregate."""

from protean.fields import Boolean, DateTime, Identifier, String

from catalogue.domain import catalogue


@catalogue.event(part_of="EntityRequest")
class EntityRequestSubmitted:
    """A user proposed a new entity for the catalogue."""

    __version__ = 1

    request_id = Identifier(required=True)
    user_id = Identifier(required=True)
    item_name = String(required=True)
    requested_at = DateTime(required=True)


@catalogue.event(part_of="EntityRequest")
class EntityRequestApproved:
    """An admin approved an entity request."""

    __version__ = 1

    request_id = Identifier(required=True)
    entity_id = Identifier(required=True)
    admin_id = Identifier(required=True)
    approved_at = DateTime(required=True)


@catalogue.event(part_of="EntityRequest")
class EntityRequestRejected:
    """An admin rejected an entity request."""

    __version__ = 1

    request_id = Identifier(required=True)
    admin_id = Identifier(required=True)
    admin_notes = String()
    rejected_at = DateTime(required=True)


@catalogue.event(part_of="EntityRequest")
class EntityRequestDeleted:
    """An entity request was deleted, whatever its status."""

    __version__ = 1

    request_id = Identifier(required=True)
    was_pending = Boolean(default=False)
    deleted_at = DateTime(required=True)

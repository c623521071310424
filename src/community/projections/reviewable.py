"""Reviewable: the catalogue entities that can currently be reviewed.

Filled by the inbound Catalogue event handler in
``community.review.catalogue_events``.
"""

from protean.fields import DateTime, Identifier, String

from community.domain import community


@community.projection
class Reviewable:
    entity_id = Identifier(identifier=True, required=True)
    name = String(required=True)
    added_at = DateTime()

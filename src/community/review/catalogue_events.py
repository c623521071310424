"""Inbound cross-domain event handler: Community reacts to Catalogue events.

Tracks which entities can be reviewed and deletes the reviews of entities
removed from the catalogue.
"""

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from protean.utils.mixins import handle
from shared.events.catalogue import EntityAdded, EntityRemoved

from community.domain import community
from community.projections.reviewable import Reviewable
from community.review.authoring import active_reviews
from community.review.review import Review

logger = structlog.get_logger(__name__)

community.register_external_event(EntityAdded, "Catalogue.EntityAdded.v1")
community.register_external_event(EntityRemoved, "Catalogue.EntityRemoved.v1")


@community.event_handler(part_of=Review, stream_category="catalogue::entity")
class CatalogueEventsHandler:
    @handle(EntityAdded)
    def on_entity_added(self, event: EntityAdded) -> None:
        current_domain.repository_for(Reviewable).add(
            Reviewable(
                entity_id=str(event.entity_id),
                name=event.name,
                added_at=event.added_at,
            )
        )

    @handle(EntityRemoved)
    def on_entity_removed(self, event: EntityRemoved) -> None:
        repo = current_domain.repository_for(Reviewable)
        try:
            repo._dao.delete(repo.get(str(event.entity_id)))
        except ObjectNotFoundError:
            pass

        reviews = current_domain.repository_for(Review)
        removed = active_reviews(entity_id=str(event.entity_id))
        for review in removed:
            review.delete()
            reviews.add(review)

        logger.info(
            "Reviews removed with entity",
            entity_id=str(event.entity_id),
            review_count=len(removed),
        )

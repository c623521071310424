"""Inbound cross-domain event handlers: photos follow their review or entity.

A deleted review or a removed entity takes its photos with it.
"""

import structlog
from protean.utils.mixins import handle
from shared.events.catalogue import EntityRemoved
from shared.events.community import ReviewDeleted

from media.domain import media
from media.photo.photo import Photo, PhotoType
from media.photo.recording import discard_photos

logger = structlog.get_logger(__name__)

media.register_external_event(ReviewDeleted, "Community.ReviewDeleted.v1")
media.register_external_event(EntityRemoved, "Catalogue.EntityRemoved.v1")


@media.event_handler(part_of=Photo, stream_category="community::review")
class CommunityReviewEventsHandler:
    @handle(ReviewDeleted)
    def on_review_deleted(self, event: ReviewDeleted) -> None:
        count = discard_photos(PhotoType.REVIEWS.value, event.review_id)
        if count:
            logger.info("Review photos removed", review_id=str(event.review_id), count=count)


@media.event_handler(part_of=Photo, stream_category="catalogue::entity")
class CatalogueEntityEventsHandler:
    @handle(EntityRemoved)
    def on_entity_removed(self, event: EntityRemoved) -> None:
        count = discard_photos(PhotoType.ENTITIES.value, event.entity_id)
        if count:
            logger.info("Entity photos removed", entity_id=str(event.entity_id), count=count)

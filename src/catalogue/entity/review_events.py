"""Inbound cross-domain event handler: Catalogue reacts to Community review events.

Keeps the rating summary on EntityCard in step with reviews written,
edited and deleted in the Community domain.
"""

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from protean.utils.mixins import handle
from shared.events.community import ReviewDeleted, ReviewEdited, ReviewSubmitted

from catalogue.domain import catalogue
from catalogue.entity.entity import Entity
from catalogue.projections.entity_card import EntityCard, apply_rating_change

logger = structlog.get_logger(__name__)

catalogue.register_external_event(ReviewSubmitted, "Community.ReviewSubmitted.v1")
catalogue.register_external_event(ReviewEdited, "Community.ReviewEdited.v1")
catalogue.register_external_event(ReviewDeleted, "Community.ReviewDeleted.v1")


def _card(entity_id):
    try:
        return current_domain.repository_for(EntityCard).get(str(entity_id))
    except ObjectNotFoundError:
        logger.warning("Review event for unknown entity", entity_id=str(entity_id))
        return None


@catalogue.event_handler(part_of=Entity, stream_category="community::review")
class CommunityReviewEventHandler:
    """Maintains entity rating averages from review events."""

    @handle(ReviewSubmitted)
    def on_review_submitted(self, event: ReviewSubmitted) -> None:
        card = _card(event.entity_id)
        if card is None:
            return
        apply_rating_change(card, added=event.rating, count_delta=1)
        current_domain.repository_for(EntityCard).add(card)

    @handle(ReviewEdited)
    def on_review_edited(self, event: ReviewEdited) -> None:
        card = _card(event.entity_id)
        if card is None:
            return
        apply_rating_change(card, added=event.rating, removed=event.previous_rating)
        current_domain.repository_for(EntityCard).add(card)

    @handle(ReviewDeleted)
    def on_review_deleted(self, event: ReviewDeleted) -> None:
        card = _card(event.entity_id)
        if card is None:
            return
        apply_rating_change(card, removed=event.rating, count_delta=-1)
        current_domain.repository_for(EntityCard).add(card)

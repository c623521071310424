"""Inbound cross-domain event handlers: dashboard counters from Catalogue events."""

from protean.utils.mixins import handle
from shared.events.catalogue import (
    EntityAdded,
    EntityRemoved,
    EntityRequestApproved,
    EntityRequestDeleted,
    EntityRequestRejected,
    EntityRequestSubmitted,
)

from moderation.domain import moderation
from moderation.projections.platform_stats import bump
from moderation.report.report import Report

moderation.register_external_event(EntityAdded, "Catalogue.EntityAdded.v1")
moderation.register_external_event(EntityRemoved, "Catalogue.EntityRemoved.v1")
moderation.register_external_event(EntityRequestSubmitted, "Catalogue.EntityRequestSubmitted.v1")
moderation.register_external_event(EntityRequestApproved, "Catalogue.EntityRequestApproved.v1")
moderation.register_external_event(EntityRequestRejected, "Catalogue.EntityRequestRejected.v1")
moderation.register_external_event(EntityRequestDeleted, "Catalogue.EntityRequestDeleted.v1")


@moderation.event_handler(part_of=Report, stream_category="catalogue::entity")
class CatalogueEntityEventsHandler:
    @handle(EntityAdded)
    def on_entity_added(self, event: EntityAdded) -> None:
        bump("total_entities")

    @handle(EntityRemoved)
    def on_entity_removed(self, event: EntityRemoved) -> None:
        bump("total_entities", -1)


@moderation.event_handler(part_of=Report, stream_category="catalogue::entity_request")
class CatalogueEntityRequestEventsHandler:
    @handle(EntityRequestSubmitted)
    def on_request_submitted(self, event: EntityRequestSubmitted) -> None:
        bump("pending_entity_requests")

    @handle(EntityRequestApproved)
    def on_request_approved(self, event: EntityRequestApproved) -> None:
        bump("pending_entity_requests", -1)

    @handle(EntityRequestRejected)
    def on_request_rejected(self, event: EntityRequestRejected) -> None:
        bump("pending_entity_requests", -1)

    @handle(EntityRequestDeleted)
    def on_request_deleted(self, event: EntityRequestDeleted) -> None:
        if event.was_pending:
            bump("pending_entity_requests", -1)

"""Inbound cross-domain event handler: Moderation reacts to Identity events."""

import structlog
from protean.utils.globals import current_domain
from protean.utils.mixins import handle
from shared.events.identity import UserRegistered

from moderation.domain import moderation
from moderation.projections.member import Member
from moderation.projections.platform_stats import bump
from moderation.report.report import Report

logger = structlog.get_logger(__name__)

moderation.register_external_event(UserRegistered, "Identity.UserRegistered.v1")


@moderation.event_handler(part_of=Report, stream_category="identity::user")
class IdentityEventsHandler:
    @handle(UserRegistered)
    def on_user_registered(self, event: UserRegistered) -> None:
        current_domain.repository_for(Member).add(
            Member(
                user_id=str(event.user_id),
                username=event.username,
                is_admin=bool(event.is_admin),
                registered_at=event.registered_at,
            )
        )
        bump("total_users")
        logger.info("Member added", user_id=str(event.user_id), is_admin=bool(event.is_admin))

"""Inbound cross-domain event handler: Media reacts to Identity events."""

from protean.utils.globals import current_domain
from protean.utils.mixins import handle
from shared.events.identity import UserRegistered

from media.domain import media
from media.photo.photo import Photo
from media.projections.uploader import Uploader

media.register_external_event(UserRegistered, "Identity.UserRegistered.v1")


@media.event_handler(part_of=Photo, stream_category="identity::user")
class IdentityEventsHandler:
    @handle(UserRegistered)
    def on_user_registered(self, event: UserRegistered) -> None:
        current_domain.repository_for(Uploader).add(
            Uploader(
                user_id=str(event.user_id),
                username=event.username,
                is_admin=bool(event.is_admin),
            )
        )

"""Uploader: who may upload what, keyed by user id.

Filled from Identity.UserRegistered by ``media.identity_events``.
"""

from protean.fields import Boolean, Identifier, String

from media.domain import media


@media.projection
class Uploader:
    user_id: Identifier(identifier=True, required=True)
    username: String(required=True)
    is_admin: Boolean(default=False)

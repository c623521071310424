"""EntityRequest aggregate: a user's proposal for a new catalogue entity.

State Machine (3 states):
    PENDING → APPROVED | REJECTED
    APPROVED, REJECTED → (terminal)

Re-applying the current decision is a no-op, so a double-clicked approve
button never creates a second entity. Deletion is a soft flag so the
EntityRequestDeleted event flows through the unit of work.
"""

from datetime import UTC, datetime
from enum import Enum

from protean import atomic_change
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Identifier, String, Text

from catalogue.domain import catalogue
from catalogue.entity_request.events import (
    EntityRequestApproved,
    EntityRequestDeleted,
    EntityRequestRejected,
    EntityRequestSubmitted,
)


class EntityRequestStatus(Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


_VALID_TRANSITIONS = {
    EntityRequestStatus.PENDING: {EntityRequestStatus.APPROVED, EntityRequestStatus.REJECTED},
    EntityRequestStatus.APPROVED: set(),
    EntityRequestStatus.REJECTED: set(),
}


@catalogue.aggregate
class EntityRequest:
    user_id: Identifier(required=True)
    item_name: String(required=True, max_length=200)
    description: Text()
    category_id: Identifier()
    picture: String(max_length=500)
    status: String(choices=EntityRequestStatus, default=EntityRequestStatus.PENDING.value)
    requested_at: DateTime()
    reviewed_by: Identifier()
    reviewed_at: DateTime()
    admin_notes: Text()
    entity_id: Identifier()
    is_deleted: Boolean(default=False)

    @classmethod
    def submit(cls, user_id, item_name, description=None, category_id=None, picture=None):
        if not item_name or not item_name.strip():
            raise ValidationError({"item_name": ["Item name is required"]})

        now = datetime.now(UTC)
        request = cls(
            user_id=user_id,
            item_name=item_name.strip(),
            description=description,
            category_id=category_id,
            picture=picture,
            status=EntityRequestStatus.PENDING.value,
            requested_at=now,
        )
        request.raise_(
            EntityRequestSubmitted(
                request_id=str(request.id),
                user_id=str(user_id),
                item_name=request.item_name,
                requested_at=now,
            )
        )
        return request

    def assert_can_transition(self, target_status):
        """Raise ValidationError unless the request may move to ``target_status``."""
        current = EntityRequestStatus(self.status)
        if target_status not in _VALID_TRANSITIONS.get(current, set()):
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target_status.value}"]})

    @property
    def is_pending(self):
        return self.status == EntityRequestStatus.PENDING.value

    def approve(self, admin_id, entity_id, admin_notes=None):
        """Mark the request approved, pointing at the entity created for it."""
        if self.status == EntityRequestStatus.APPROVED.value:
            return
        self.assert_can_transition(EntityRequestStatus.APPROVED)

        now = datetime.now(UTC)
        with atomic_change(self):
            self.status = EntityRequestStatus.APPROVED.value
            self.reviewed_by = admin_id
            self.reviewed_at = now
            self.admin_notes = admin_notes
            self.entity_id = entity_id

        self.raise_(
            EntityRequestApproved(
                request_id=str(self.id),
                entity_id=str(entity_id),
                admin_id=str(admin_id),
                approved_at=now,
            )
        )

    def reject(self, admin_id, admin_notes=None):
        if self.status == EntityRequestStatus.REJECTED.value:
            return
        self.assert_can_transition(EntityRequestStatus.REJECTED)

        now = datetime.now(UTC)
        with atomic_change(self):
            self.status = EntityRequestStatus.REJECTED.value
            self.reviewed_by = admin_id
            self.reviewed_at = now
            self.admin_notes = admin_notes

        self.raise_(
            EntityRequestRejected(
                request_id=str(self.id),
                admin_id=str(admin_id),
                admin_notes=admin_notes,
                rejected_at=now,
            )
        )

    def delete(self):
        if self.is_deleted:
            return

        self.is_deleted = True
        self.raise_(
            EntityRequestDeleted(
                request_id=str(self.id),
                was_pending=self.is_pending,
                deleted_at=datetime.now(UTC),
            )
        )

"""Report aggregate: a user's flag against a post, comment or review.

State Machine:
    PENDING → REVIEWED | RESOLVED | DISMISSED
    REVIEWED → RESOLVED | DISMISSED
    RESOLVED, DISMISSED → (terminal)

Moving to the status a report already holds is a no-op.
"""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, String, Text

from moderation.domain import moderation
from moderation.report.events import ReportedContentRemoved, ReportFiled, ReportStatusChanged


class ReportReason(Enum):
    SPAM = "Spam"
    HARASSMENT = "Harassment"
    HATE_SPEECH = "Hate speech"
    MISINFORMATION = "Misinformation"
    INAPPROPRIATE_CONTENT = "Inappropriate content"
    OTHER = "Other"


class ReportStatus(Enum):
    PENDING = "pending"
    REVIEWED = "reviewed"
    RESOLVED = "resolved"
    DISMISSED = "dismissed"


class ReportedItemType(Enum):
    POST = "post"
    COMMENT = "comment"
    REVIEW = "review"


_VALID_TRANSITIONS = {
    ReportStatus.PENDING: {ReportStatus.REVIEWED, ReportStatus.RESOLVED, ReportStatus.DISMISSED},
    ReportStatus.REVIEWED: {ReportStatus.RESOLVED, ReportStatus.DISMISSED},
    ReportStatus.RESOLVED: set(),
    ReportStatus.DISMISSED: set(),
}


@moderation.aggregate
class Report:
    reporter_user_id = Identifier(required=True)
    reported_item_type = String(choices=ReportedItemType, required=True)
    reported_item_id = Identifier(required=True)
    reported_user_id = Identifier()
    reason = String(choices=ReportReason, required=True)
    description = Text()
    status = String(choices=ReportStatus, default=ReportStatus.PENDING.value)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def cannot_report_yourself(self):
        if self.reported_user_id is not None and str(self.reported_user_id) == str(self.reporter_user_id):
            raise ValidationError({"report": ["You cannot report your own content"]})

    @classmethod
    def file(
        cls,
        reporter_user_id,
        reported_item_type,
        reported_item_id,
        reason,
        reported_user_id=None,
        description=None,
    ):
        now = datetime.now(UTC)
        report = cls(
            reporter_user_id=reporter_user_id,
            reported_item_type=reported_item_type,
            reported_item_id=reported_item_id,
            reported_user_id=reported_user_id,
            reason=reason,
            description=description,
            status=ReportStatus.PENDING.value,
            created_at=now,
            updated_at=now,
        )
        report.raise_(
            ReportFiled(
                report_id=str(report.id),
                reporter_user_id=str(reporter_user_id),
                reported_item_type=reported_item_type,
                reported_item_id=str(reported_item_id),
                reported_user_id=str(reported_user_id) if reported_user_id else None,
                reason=reason,
                filed_at=now,
            )
        )
        return report

    @property
    def is_closed(self):
        return not _VALID_TRANSITIONS[ReportStatus(self.status)]

    def change_status(self, status):
        """Move to ``status``; returns False when the report already holds it."""
        current = ReportStatus(self.status)
        target = ReportStatus(status)
        if current == target:
            return False
        if target not in _VALID_TRANSITIONS[current]:
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target.value}"]})

        now = datetime.now(UTC)
        self.status = target.value
        self.updated_at = now

        self.raise_(
            ReportStatusChanged(
                report_id=str(self.id),
                previous_status=current.value,
                status=target.value,
                changed_at=now,
            )
        )
        return True

    def remove_content(self, admin_id):
        now = datetime.now(UTC)
        self.raise_(
            ReportedContentRemoved(
                report_id=str(self.id),
                admin_id=str(admin_id),
                content_type=self.reported_item_type,
                content_id=str(self.reported_item_id),
                removed_at=now,
            )
        )

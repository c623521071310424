"""FileReport / UpdateReportStatus / DeleteReport: commands and handler."""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from moderation.domain import moderation
from moderation.report.report import Report, ReportedItemType, ReportReason, ReportStatus

logger = structlog.get_logger(__name__)


@moderation.command(part_of="Report")
class FileReport:
    reporter_user_id = Identifier(required=True)
    reported_item_type = String(choices=ReportedItemType, required=True)
    reported_item_id = Identifier(required=True)
    reported_user_id = Identifier()
    reason = String(choices=ReportReason, required=True)
    description = Text()


@moderation.command(part_of="Report")
class UpdateReportStatus:
    report_id = Identifier(required=True)
    status = String(choices=ReportStatus, required=True)


@moderation.command(part_of="Report")
class DeleteReport:
    report_id = Identifier(required=True)


def reports(**filters):
    repo = current_domain.repository_for(Report)
    return repo._dao.query.filter(**filters).order_by("-created_at").all().items


def report_stats():
    counts = {status.value: 0 for status in ReportStatus}
    everything = reports()
    for report in everything:
        counts[report.status] += 1
    return {"total": len(everything), **counts}


@moderation.command_handler(part_of=Report)
class ReportFilingHandler:
    @handle(FileReport)
    def file_report(self, command):
        duplicates = reports(
            reporter_user_id=command.reporter_user_id,
            reported_item_type=command.reported_item_type,
            reported_item_id=command.reported_item_id,
        )
        if duplicates:
            raise ValidationError({"report": ["You have already reported this item"]})

        report = Report.file(
            reporter_user_id=command.reporter_user_id,
            reported_item_type=command.reported_item_type,
            reported_item_id=command.reported_item_id,
            reported_user_id=command.reported_user_id,
            reason=command.reason,
            description=command.description,
        )
        current_domain.repository_for(Report).add(report)

        logger.info(
            "Report filed",
            report_id=str(report.id),
            item_type=command.reported_item_type,
            reason=command.reason,
        )
        return str(report.id)

    @handle(UpdateReportStatus)
    def update_report_status(self, command):
        repo = current_domain.repository_for(Report)
        report = repo.get(command.report_id)
        if report.change_status(command.status):
            repo.add(report)

    @handle(DeleteReport)
    def delete_report(self, command):
        repo = current_domain.repository_for(Report)
        repo._dao.delete(repo.get(command.report_id))
        logger.info("Report deleted", report_id=str(command.report_id))

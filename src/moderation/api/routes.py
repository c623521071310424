"""FastAPI routes for the Moderation bounded context.

``/reports`` is open to any user for filing and browsing reports.
``/admin`` requires an admin named by the ``X-User-Id`` header.
"""

from fastapi import APIRouter, Depends, Path, Query
from protean.utils.globals import current_domain

from moderation.action.admin_action import AdminAction
from moderation.api.dependencies import require_admin
from moderation.api.schemas import (
    ActionIdResponse,
    AdminActionResponse,
    BanResponse,
    BanStatusResponse,
    ContentInfoResponse,
    DashboardStatsResponse,
    FileReportRequest,
    ReasonListResponse,
    ReportActionRequest,
    ReportIdResponse,
    ReportListResponse,
    ReportResponse,
    ReportStatsResponse,
    StatusResponse,
    UpdateReportStatusRequest,
    WarningResponse,
)
from moderation.projections.member import Member, usernames
from moderation.projections.platform_stats import load_stats
from moderation.projections.reported_content import content_info
from moderation.report.filing import DeleteReport, FileReport, UpdateReportStatus, report_stats, reports
from moderation.report.handling import HandleReportAction
from moderation.report.report import Report, ReportReason, ReportStatus
from moderation.sanction.sanction import bans_for, is_banned, warnings_for

report_router = APIRouter(prefix="/reports", tags=["reports"])
admin_router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])

_STATUS_PATTERN = "^(pending|reviewed|resolved|dismissed)$"


def _report(report, names=None) -> ReportResponse:
    if names is None:
        names = usernames([report.reporter_user_id, report.reported_user_id])
    return ReportResponse(
        report_id=str(report.id),
        reporter_user_id=str(report.reporter_user_id),
        reported_item_type=report.reported_item_type,
        reported_item_id=str(report.reported_item_id),
        reported_user_id=str(report.reported_user_id) if report.reported_user_id else None,
        reporter_name=names.get(str(report.reporter_user_id)),
        reported_user_name=names.get(str(report.reported_user_id)),
        reason=report.reason,
        description=report.description,
        status=report.status,
        created_at=report.created_at,
        updated_at=report.updated_at,
    )


def _reports(items) -> ReportListResponse:
    names = usernames([r.reporter_user_id for r in items] + [r.reported_user_id for r in items])
    return ReportListResponse(reports=[_report(r, names) for r in items], count=len(items))


def _status_filter(status):
    return {"status": status} if status else {}


# ---------------------------------------------------------------------------
# Reports
# ---------------------------------------------------------------------------
@report_router.post("", status_code=201, response_model=ReportIdResponse)
async def file_report(body: FileReportRequest) -> ReportIdResponse:
    command = FileReport(
        reporter_user_id=body.reporter_user_id,
        reported_item_type=body.reported_item_type,
        reported_item_id=body.reported_item_id,
        reported_user_id=body.reported_user_id,
        reason=body.reason,
        description=body.description,
    )
    report_id = current_domain.process(command, asynchronous=False)
    return ReportIdResponse(report_id=report_id)


@report_router.get("", response_model=ReportListResponse)
async def list_reports(status: str | None = Query(default=None, pattern=_STATUS_PATTERN)) -> ReportListResponse:
    return _reports(reports(**_status_filter(status)))


@report_router.get("/reasons", response_model=ReasonListResponse)
async def list_reasons() -> ReasonListResponse:
    return ReasonListResponse(reasons=[reason.value for reason in ReportReason])


@report_router.get("/stats", response_model=ReportStatsResponse)
async def get_report_stats() -> ReportStatsResponse:
    return ReportStatsResponse(**report_stats())


@report_router.get("/item/{item_type}/{item_id}", response_model=ReportListResponse)
async def list_item_reports(item_type: str, item_id: str) -> ReportListResponse:
    return _reports(reports(reported_item_type=item_type, reported_item_id=item_id))


@report_router.get("/reporter/{user_id}", response_model=ReportListResponse)
async def list_reporter_reports(user_id: str) -> ReportListResponse:
    return _reports(reports(reporter_user_id=user_id))


@report_router.get("/{report_id}", response_model=ReportResponse)
async def get_report(report_id: str) -> ReportResponse:
    return _report(current_domain.repository_for(Report).get(report_id))


# ---------------------------------------------------------------------------
# Admin
# ---------------------------------------------------------------------------
@admin_router.get("/dashboard", response_model=DashboardStatsResponse)
async def dashboard() -> DashboardStatsResponse:
    stats = load_stats()
    counts = report_stats()
    return DashboardStatsResponse(
        total_users=stats.total_users or 0,
        total_entities=stats.total_entities or 0,
        total_reviews=stats.total_reviews or 0,
        total_reports=counts["total"],
        pending_reports=counts[ReportStatus.PENDING.value],
        pending_entity_requests=stats.pending_entity_requests or 0,
    )


@admin_router.get("/reports", response_model=ReportListResponse)
async def admin_list_reports(
    status: str | None = Query(default=None, pattern=_STATUS_PATTERN),
) -> ReportListResponse:
    return _reports(reports(**_status_filter(status)))


@admin_router.get("/content/{content_type}/{content_id}", response_model=ContentInfoResponse)
async def get_content_info(
    content_type: str = Path(pattern="^(post|comment|review)$"),
    content_id: str = Path(),
) -> ContentInfoResponse:
    content = content_info(content_type, content_id)
    return ContentInfoResponse(
        content_type=content.content_type,
        content_id=str(content.content_id),
        user_id=str(content.user_id),
        user_name=usernames([content.user_id]).get(str(content.user_id)),
        text=content.text,
        title=content.title,
        rating=content.rating,
        entity_type=content.entity_type,
        entity_id=str(content.entity_id) if content.entity_id else None,
        created_at=content.created_at,
        updated_at=content.updated_at,
    )


@admin_router.put("/reports/{report_id}/status", response_model=StatusResponse)
async def update_report_status(report_id: str, body: UpdateReportStatusRequest) -> StatusResponse:
    current_domain.process(UpdateReportStatus(report_id=report_id, status=body.status), asynchronous=False)
    return StatusResponse()


@admin_router.post("/reports/{report_id}/action", response_model=ActionIdResponse)
async def handle_report_action(
    report_id: str,
    body: ReportActionRequest,
    admin: Member = Depends(require_admin),
) -> ActionIdResponse:
    command = HandleReportAction(
        report_id=report_id,
        admin_id=str(admin.user_id),
        action_type=body.action_type,
        reason=body.reason,
        ban_type=body.ban_type,
        expires_at=body.expires_at,
    )
    action_id = current_domain.process(command, asynchronous=False)
    return ActionIdResponse(action_id=action_id)


@admin_router.get("/reports/{report_id}/actions", response_model=list[AdminActionResponse])
async def list_report_actions(report_id: str) -> list[AdminActionResponse]:
    current_domain.repository_for(Report).get(report_id)
    repo = current_domain.repository_for(AdminAction)
    actions = repo._dao.query.filter(report_id=report_id).order_by("-created_at").all().items
    return [
        AdminActionResponse(
            action_id=str(a.id),
            admin_id=str(a.admin_id),
            report_id=str(a.report_id),
            action_type=a.action_type,
            content_type=a.content_type,
            content_id=str(a.content_id) if a.content_id else None,
            target_user_id=str(a.target_user_id) if a.target_user_id else None,
            details=a.details_dict,
            created_at=a.created_at,
        )
        for a in actions
    ]


@admin_router.delete("/reports/{report_id}", response_model=StatusResponse)
async def delete_report(report_id: str) -> StatusResponse:
    current_domain.process(DeleteReport(report_id=report_id), asynchronous=False)
    return StatusResponse()


@admin_router.get("/users/{user_id}/warnings", response_model=list[WarningResponse])
async def list_user_warnings(user_id: str) -> list[WarningResponse]:
    return [
        WarningResponse(
            warning_id=str(w.id),
            user_id=str(w.user_id),
            admin_id=str(w.admin_id),
            reason=w.reason,
            content_type=w.content_type,
            content_id=str(w.content_id) if w.content_id else None,
            expires_at=w.expires_at,
            created_at=w.created_at,
        )
        for w in warnings_for(user_id)
    ]


@admin_router.get("/users/{user_id}/bans", response_model=list[BanResponse])
async def list_user_bans(user_id: str) -> list[BanResponse]:
    return [
        BanResponse(
            ban_id=str(b.id),
            user_id=str(b.user_id),
            admin_id=str(b.admin_id),
            reason=b.reason,
            ban_type=b.ban_type,
            expires_at=b.expires_at,
            is_active=b.is_active,
            created_at=b.created_at,
        )
        for b in bans_for(user_id)
    ]


@admin_router.get("/users/{user_id}/ban-status", response_model=BanStatusResponse)
async def get_ban_status(user_id: str) -> BanStatusResponse:
    return BanStatusResponse(user_id=user_id, is_banned=is_banned(user_id))

"""Integration tests for the Moderation API endpoints."""

from datetime import UTC, datetime

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from moderation.api import admin_router, report_router
from moderation.community_events import CommunityReviewEventsHandler
from moderation.identity_events import IdentityEventsHandler
from protean.integrations.fastapi import register_exception_handlers
from shared.events.community import ReviewSubmitted
from shared.events.identity import UserRegistered

ADMIN = {"X-User-Id": "admin-1"}


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(report_router)
    app.include_router(admin_router)
    register_exception_handlers(app)
    return TestClient(app)


@pytest.fixture(autouse=True)
def members():
    handler = IdentityEventsHandler()
    for user_id, is_admin in (("admin-1", True), ("member-1", False)):
        handler.on_user_registered(
            UserRegistered(
                user_id=user_id,
                username=user_id,
                email=f"{user_id}@example.com",
                is_admin=is_admin,
                registered_at=datetime.now(UTC),
            )
        )


@pytest.fixture()
def report_id(client):
    response = client.post(
        "/reports",
        json={
            "reporter_user_id": "member-1",
            "reported_item_type": "comment",
            "reported_item_id": "comment-1",
            "reported_user_id": "troll",
            "reason": "Spam",
        },
    )
    assert response.status_code == 201, response.text
    return response.json()["report_id"]


class TestReports:
    def test_reasons(self, client):
        assert "Hate speech" in client.get("/reports/reasons").json()["reasons"]

    def test_list_by_status(self, client, report_id):
        assert client.get("/reports", params={"status": "pending"}).json()["count"] == 1
        assert client.get("/reports", params={"status": "resolved"}).json()["count"] == 0

    def test_item_and_reporter_listings(self, client, report_id):
        assert client.get("/reports/item/comment/comment-1").json()["count"] == 1
        assert client.get("/reports/reporter/member-1").json()["reports"][0]["report_id"] == report_id

    def test_unknown_reason(self, client):
        response = client.post(
            "/reports",
            json={
                "reporter_user_id": "member-1",
                "reported_item_type": "post",
                "reported_item_id": "p",
                "reason": "Dull",
            },
        )
        assert response.status_code == 400

    def test_missing_report(self, client):
        assert client.get("/reports/nope").status_code == 404


class TestAdminAccess:
    def test_requires_header(self, client):
        assert client.get("/admin/dashboard").status_code == 401

    def test_unknown_user(self, client):
        assert client.get("/admin/dashboard", headers={"X-User-Id": "ghost"}).status_code == 404

    def test_non_admin(self, client):
        assert client.get("/admin/dashboard", headers={"X-User-Id": "member-1"}).status_code == 403


class TestAdmin:
    def test_dashboard(self, client, report_id):
        data = client.get("/admin/dashboard", headers=ADMIN).json()
        assert data["total_users"] == 2
        assert data["total_reports"] == 1
        assert data["pending_reports"] == 1

    def test_update_status(self, client, report_id):
        response = client.put(f"/admin/reports/{report_id}/status", json={"status": "reviewed"}, headers=ADMIN)
        assert response.status_code == 200
        assert client.get(f"/reports/{report_id}").json()["status"] == "reviewed"

    def test_invalid_transition(self, client, report_id):
        client.put(f"/admin/reports/{report_id}/status", json={"status": "dismissed"}, headers=ADMIN)
        response = client.put(f"/admin/reports/{report_id}/status", json={"status": "reviewed"}, headers=ADMIN)
        assert response.status_code == 400

    def test_ban_action_and_trail(self, client, report_id):
        response = client.post(
            f"/admin/reports/{report_id}/action",
            json={"action_type": "ban_user", "ban_type": "temporary", "reason": "Spam bot"},
            headers=ADMIN,
        )
        assert response.status_code == 200, response.text

        actions = client.get(f"/admin/reports/{report_id}/actions", headers=ADMIN).json()
        assert actions[0]["admin_id"] == "admin-1"
        assert actions[0]["details"]["ban_type"] == "temporary"

        assert client.get("/admin/users/troll/ban-status", headers=ADMIN).json()["is_banned"] is True
        assert len(client.get("/admin/users/troll/bans", headers=ADMIN).json()) == 1

    def test_warning_listing(self, client, report_id):
        client.post(f"/admin/reports/{report_id}/action", json={"action_type": "warning"}, headers=ADMIN)
        warnings = client.get("/admin/users/troll/warnings", headers=ADMIN).json()
        assert warnings[0]["reason"] == "Content violation"

    def test_delete_report(self, client, report_id):
        assert client.delete(f"/admin/reports/{report_id}", headers=ADMIN).status_code == 200
        assert client.get(f"/reports/{report_id}").status_code == 404


class TestReporterNames:
    def test_report_carries_member_names(self, client, report_id):
        report = client.get(f"/reports/{report_id}").json()
        assert report["reporter_name"] == "member-1"
        assert report["reported_user_name"] is None

    def test_admin_listing_carries_member_names(self, client):
        client.post(
            "/reports",
            json={
                "reporter_user_id": "member-1",
                "reported_item_type": "review",
                "reported_item_id": "review-1",
                "reported_user_id": "admin-1",
                "reason": "Spam",
            },
        )

        report = client.get("/admin/reports", headers=ADMIN).json()["reports"][0]
        assert (report["reporter_name"], report["reported_user_name"]) == ("member-1", "admin-1")


class TestContentInfo:
    @pytest.fixture()
    def review(self):
        CommunityReviewEventsHandler().on_review_submitted(
            ReviewSubmitted(
                review_id="review-1",
                entity_id="entity-1",
                user_id="member-1",
                rating=1,
                title="Awful",
                review_text="Buy from my shop instead",
                submitted_at=datetime.now(UTC),
            )
        )

    def test_review_content(self, client, review):
        response = client.get("/admin/content/review/review-1", headers=ADMIN)

        assert response.status_code == 200, response.text
        data = response.json()
        assert data["text"] == "Buy from my shop instead"
        assert data["title"] == "Awful"
        assert data["rating"] == 1
        assert data["user_id"] == "member-1"
        assert data["user_name"] == "member-1"

    def test_wrong_type_is_not_found(self, client, review):
        assert client.get("/admin/content/post/review-1", headers=ADMIN).status_code == 404

    def test_missing_content(self, client):
        assert client.get("/admin/content/comment/nope", headers=ADMIN).status_code == 404

    def test_unknown_content_type(self, client):
        assert client.get("/admin/content/photo/review-1", headers=ADMIN).status_code == 422

    def test_admin_only(self, client, review):
        response = client.get("/admin/content/review/review-1", headers={"X-User-Id": "member-1"})
        assert response.status_code == 403

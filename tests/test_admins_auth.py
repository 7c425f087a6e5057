"""Tests for admin accounts, login/password flows, role gates and the password policy."""
from datetime import datetime, timedelta, timezone

import pytest

from app.config.permissions_config import get_role_matrix, role_can_access
from app.core.dependencies import password_change_required
from app.modules.admins.schemas import AdminResponse
from app.modules.system.schemas import SystemSettingsResponse
from tests.conftest import make_admin

ADMINS = "/api/admin/admins"


class TestAdminAccounts:
    def test_create_returns_temporary_password_once(self, client, fake_db, super_admin_headers):
        response = client.post(ADMINS, json={"email": "new@example.com", "name": "신규", "role": "editor"},
                               headers=super_admin_headers)
        assert response.status_code == 201
        body = response.json()
        assert len(body["temp_password"]) == 12
        assert body["admin"]["must_change_password"] is True
        assert body["admin"]["role"] == "editor"

        listed = client.get(ADMINS, headers=super_admin_headers).json()
        assert "temp_password" not in listed[0]
        assert {a["email"] for a in listed} == {"super_admin@example.com", "new@example.com"}

    def test_failed_row_insert_deletes_auth_user(self, client, fake_db, super_admin_headers):
        fake_db.fail_on("admins", "insert")
        response = client.post(ADMINS, json={"email": "new@example.com", "name": "신규"},
                               headers=super_admin_headers)
        assert response.status_code == 500
        assert all(u.email != "new@example.com" for u in fake_db.auth.users.values())
        assert len(fake_db.auth.deleted_user_ids) == 1

    def test_duplicate_email_is_conflict(self, client, super_admin_headers):
        response = client.post(ADMINS, json={"email": "super_admin@example.com", "name": "중복"},
                               headers=super_admin_headers)
        assert response.status_code == 409

    def test_update_role(self, client, fake_db, super_admin_headers):
        editor, _ = make_admin(fake_db, "editor")
        response = client.put(f"{ADMINS}/{editor['id']}", json={"role": "admin"}, headers=super_admin_headers)
        assert response.status_code == 200
        assert response.json()["role"] == "admin"
        assert response.json()["name"] == "Editor"

    def test_delete_removes_auth_user_and_row(self, client, fake_db, super_admin_headers):
        editor, _ = make_admin(fake_db, "editor")
        assert client.delete(f"{ADMINS}/{editor['id']}", headers=super_admin_headers).status_code == 204
        assert editor["id"] not in fake_db.auth.users
        assert client.get(f"{ADMINS}/{editor['id']}", headers=super_admin_headers).status_code == 404


class TestRoleGates:
    def test_unauthenticated_is_401(self, client):
        assert client.get("/api/admin/notices").status_code == 401

    def test_invalid_token_is_401(self, client):
        response = client.get("/api/admin/notices", headers={"Authorization": "Bearer nope"})
        assert response.status_code == 401

    def test_user_without_admin_row_is_403(self, client, fake_db):
        user = fake_db.auth.add_user("visitor@example.com")
        token = fake_db.auth.issue_token(user.id)
        response = client.get("/api/admin/notices", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 403

    def test_editor_limited_to_notices(self, client, editor_headers):
        assert client.get("/api/admin/notices", headers=editor_headers).status_code == 200
        assert client.get("/api/admin/notice-categories", headers=editor_headers).status_code == 200
        assert client.get("/api/admin/products", headers=editor_headers).status_code == 403
        assert client.get("/api/admin/company", headers=editor_headers).status_code == 403

    def test_admin_cannot_manage_admins_or_system(self, client, admin_headers):
        assert client.get("/api/admin/partners", headers=admin_headers).status_code == 200
        assert client.get(ADMINS, headers=admin_headers).status_code == 403
        assert client.get("/api/admin/system", headers=admin_headers).status_code == 403

    def test_super_admin_reads_system_settings(self, client, super_admin_headers):
        response = client.get("/api/admin/system", headers=super_admin_headers)
        assert response.status_code == 200
        assert response.json()["password_expiration_days"] == 90

    @pytest.mark.parametrize("role,section,allowed", [
        ("super_admin", "admins", True),
        ("admin", "admins", False),
        ("admin", "home", True),
        ("editor", "notices", True),
        ("editor", "partners", False),
        (None, "products", True),
        (None, "system", False),
    ])
    def test_role_can_access(self, role, section, allowed):
        assert role_can_access(role, section) is allowed

    def test_role_matrix_lists_every_role(self):
        names = [role["name"] for role in get_role_matrix()["roles"]]
        assert names == ["super_admin", "admin", "editor"]


class TestPasswordPolicy:
    def test_flagged_admin_is_locked_out_except_password_change(self, client, fake_db):
        _, headers = make_admin(fake_db, "admin", must_change_password=True)
        assert client.get("/api/admin/notices", headers=headers).status_code == 403
        assert client.get("/api/auth/me", headers=headers).status_code == 200

        response = client.post("/api/auth/password", json={"new_password": "a-much-better-one"}, headers=headers)
        assert response.status_code == 200
        assert client.get("/api/admin/notices", headers=headers).status_code == 200

    def test_expired_password_requires_change(self):
        now = datetime(2025, 6, 1, tzinfo=timezone.utc)
        admin = AdminResponse(id="1", email="a@example.com", password_changed_at=now - timedelta(days=91))
        policy = SystemSettingsResponse(password_expiration_enabled=True, password_expiration_days=90)
        assert password_change_required(admin, policy, now=now) is True
        assert password_change_required(admin, SystemSettingsResponse(), now=now) is False

    def test_recent_password_is_fine(self):
        now = datetime(2025, 6, 1, tzinfo=timezone.utc)
        admin = AdminResponse(id="1", email="a@example.com", password_changed_at=now - timedelta(days=10))
        policy = SystemSettingsResponse(password_expiration_enabled=True, password_expiration_days=90)
        assert password_change_required(admin, policy, now=now) is False

    def test_set_password_expiration(self, client, super_admin_headers):
        response = client.put("/api/admin/system/password-expiration", json={"enabled": True, "days": 30},
                              headers=super_admin_headers)
        assert response.status_code == 200
        assert response.json()["password_expiration_enabled"] is True
        assert response.json()["password_expiration_days"] == 30


class TestAuthFlows:
    def test_login_sets_session_cookie(self, client, fake_db):
        make_admin(fake_db, "admin", email="login@example.com")
        response = client.post("/api/auth/login", json={"email": "login@example.com", "password": "password123"})
        assert response.status_code == 200
        assert response.json()["must_change_password"] is False
        assert "sb-access-token" in response.headers["set-cookie"]

        me = client.get("/api/auth/me")
        assert me.status_code == 200
        assert "products" in me.json()["sections"]

    def test_wrong_password_is_401(self, client, fake_db):
        make_admin(fake_db, "admin", email="login@example.com")
        response = client.post("/api/auth/login", json={"email": "login@example.com", "password": "wrong"})
        assert response.status_code == 401

    def test_password_reset_emails_temporary_password(self, client, fake_db, mailer):
        admin, _ = make_admin(fake_db, "admin", email="forgot@example.com")
        response = client.post("/api/auth/password-reset", json={"email": "forgot@example.com"})
        assert response.status_code == 200
        assert mailer.sent[0]["to"] == ["forgot@example.com"]
        temp_password = fake_db.auth.passwords[admin["id"]]
        assert temp_password in mailer.sent[0]["body"]
        assert fake_db.rows("admins")[0]["must_change_password"] is True

    def test_password_reset_unknown_email_is_404(self, client):
        response = client.post("/api/auth/password-reset", json={"email": "nobody@example.com"})
        assert response.status_code == 404

    def test_password_reset_mail_failure_is_502(self, client, fake_db, mailer):
        make_admin(fake_db, "admin", email="forgot@example.com")
        mailer.succeed = False
        response = client.post("/api/auth/password-reset", json={"email": "forgot@example.com"})
        assert response.status_code == 502

    def test_password_reset_is_rate_limited(self, client, fake_db):
        make_admin(fake_db, "admin", email="forgot@example.com")
        statuses = [
            client.post("/api/auth/password-reset", json={"email": "forgot@example.com"}).status_code
            for _ in range(4)
        ]
        assert statuses[:3] == [200, 200, 200]
        assert statuses[3] == 429


class TestInquiries:
    def test_submit_stores_and_notifies(self, client, fake_db, mailer):
        response = client.post("/api/inquiries", json={
            "person_name": "홍길동",
            "email": "hong@example.com",
            "phone": "010-0000-0000",
            "inquiry_type": "quote",
            "message": "<b>견적</b> 요청합니다",
        })
        assert response.status_code == 201
        assert fake_db.rows("inquiries")[0]["person_name"] == "홍길동"
        assert mailer.sent[0]["subject"] == "[New Inquiry] quote - 홍길동"
        assert "&lt;b&gt;" in mailer.sent[0]["html"]

    def test_mail_failure_still_succeeds(self, client, fake_db, mailer):
        mailer.succeed = False
        response = client.post("/api/inquiries", json={
            "person_name": "홍길동", "email": "hong@example.com", "phone": "1",
            "inquiry_type": "quote", "message": "hi",
        })
        assert response.status_code == 201
        assert len(fake_db.rows("inquiries")) == 1

    def test_invalid_email_rejected(self, client, fake_db):
        response = client.post("/api/inquiries", json={
            "person_name": "홍길동", "email": "not-an-email", "phone": "1",
            "inquiry_type": "quote", "message": "hi",
        })
        assert response.status_code == 422
        assert fake_db.rows("inquiries") == []

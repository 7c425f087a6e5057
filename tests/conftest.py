import pytest
from fastapi.testclient import TestClient

from app.core.email import get_email_service
from app.core.rate_limit import limiter
from app.database.supabase_client import get_service_supabase, get_supabase
from app.main import app
from app.modules.auth.service import clear_auth_cache
from app.modules.history_document.routes import get_history_store
from app.modules.history_document.store import JsonDocumentStore
from tests.fakes import FakeMailer, FakeSupabase


@pytest.fixture(autouse=True)
def reset_process_state():
    """Rate-limit counters and the auth user cache live for the whole process."""
    limiter.reset()
    clear_auth_cache()
    yield
    clear_auth_cache()


@pytest.fixture
def fake_db():
    return FakeSupabase()


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def history_path(tmp_path):
    return tmp_path / "data" / "history.json"


@pytest.fixture
def client(fake_db, mailer, history_path):
    """Test client wired to the in-memory store (one client per test: cookies do not leak)."""
    app.dependency_overrides[get_supabase] = lambda: fake_db
    app.dependency_overrides[get_service_supabase] = lambda: fake_db
    app.dependency_overrides[get_email_service] = lambda: mailer
    app.dependency_overrides[get_history_store] = lambda: JsonDocumentStore(history_path)

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()


def make_admin(fake_db, role="super_admin", email=None, **fields):
    """Create an auth user with an admins row; returns (admin row, auth headers)."""
    email = email or f"{role}@example.com"
    user = fake_db.auth.add_user(email)
    row = fake_db.seed("admins", {
        "id": user.id,
        "email": email,
        "name": role.replace("_", " ").title(),
        "role": role,
        "must_change_password": False,
        **fields,
    })[0]
    token = fake_db.auth.issue_token(user.id)
    return row, {"Authorization": f"Bearer {token}"}


@pytest.fixture
def super_admin_headers(fake_db):
    return make_admin(fake_db, "super_admin")[1]


@pytest.fixture
def admin_headers(fake_db):
    return make_admin(fake_db, "admin")[1]


@pytest.fixture
def editor_headers(fake_db):
    return make_admin(fake_db, "editor")[1]

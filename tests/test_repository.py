"""Tests for the generic Supabase repository and the single-row settings repository."""
import pytest
from httpx import ConnectError

from app.core.exceptions import ConflictError, NotFoundError, PersistenceError
from app.core.repository import SingletonRepository, SupabaseRepository
from app.modules.notices.schemas import NoticeResponse
from app.modules.product_categories.schemas import ProductCategoryResponse
from app.modules.system.schemas import SystemSettingsResponse
from tests.fakes import FakeSupabase


@pytest.fixture
def db():
    return FakeSupabase()


@pytest.fixture
def notices(db):
    return SupabaseRepository(db, "notices", NoticeResponse)


class TestSupabaseRepository:
    def test_create_then_get_returns_same_fields(self, notices):
        created = notices.create({"title_ko": "공지", "title_en": "Notice", "status": "draft"})
        fetched = notices.get(created.id)
        assert fetched.id == created.id
        assert fetched.title_ko == "공지"
        assert fetched.title_en == "Notice"
        assert fetched.created_at is not None

    def test_get_absent_key_is_not_found(self, notices):
        with pytest.raises(NotFoundError) as exc_info:
            notices.get("00000000-0000-0000-0000-000000000000")
        assert exc_info.value.detail == "Notice not found"

    def test_delete_then_get_is_not_found(self, notices):
        created = notices.create({"title_ko": "삭제"})
        assert notices.delete(created.id) == 1
        with pytest.raises(NotFoundError):
            notices.get(created.id)

    def test_delete_unknown_key_removes_nothing(self, notices):
        assert notices.delete("missing") == 0

    def test_malformed_key_is_not_found(self, db, notices):
        db.fail_on("notices", "select", code="22P02", message='invalid input syntax for type uuid: "abc"')
        with pytest.raises(NotFoundError):
            notices.get("abc")

    def test_list_orders_newest_first_and_skips_none_filters(self, notices):
        first = notices.create({"title_ko": "first", "status": "published"})
        second = notices.create({"title_ko": "second", "status": "draft"})
        assert [n.id for n in notices.list(status=None)] == [second.id, first.id]
        assert [n.id for n in notices.list(status="published")] == [first.id]

    def test_list_empty_table(self, notices):
        assert notices.list() == []

    def test_update_only_sends_given_fields(self, notices):
        created = notices.create({"title_ko": "원본", "title_en": "Original"})
        updated = notices.update(created.id, {"title_en": "Changed"})
        assert updated.title_ko == "원본"
        assert updated.title_en == "Changed"

    def test_update_unknown_key_is_not_found(self, notices):
        with pytest.raises(NotFoundError):
            notices.update("missing", {"title_ko": "x"})

    def test_store_failure_is_persistence_error(self, db, notices):
        db.fail_on("notices", "select")
        with pytest.raises(PersistenceError) as exc_info:
            notices.list()
        assert exc_info.value.code == "42501"
        assert exc_info.value.status_code == 500

    def test_unreachable_store_is_persistence_error(self, db, notices, monkeypatch):
        def unreachable(table, action):
            raise ConnectError("connection refused")

        monkeypatch.setattr(db, "check_failure", unreachable)
        with pytest.raises(PersistenceError):
            notices.create({"title_ko": "x"})

    def test_unique_violation_is_conflict(self, db):
        categories = SupabaseRepository(db, "product_categories", ProductCategoryResponse, key="code")
        categories.create({"code": "pumps", "name_ko": "펌프"})
        with pytest.raises(ConflictError):
            categories.create({"code": "pumps", "name_ko": "중복"})

    def test_custom_key_column(self, db):
        categories = SupabaseRepository(db, "product_categories", ProductCategoryResponse, key="code")
        categories.create({"code": "pumps", "name_ko": "펌프"})
        assert categories.get("pumps").name_ko == "펌프"
        assert categories.delete("pumps") == 1

    def test_count(self, notices):
        notices.create({"title_ko": "a", "category": "뉴스"})
        notices.create({"title_ko": "b", "category": "뉴스"})
        notices.create({"title_ko": "c", "category": "공지"})
        assert notices.count(category="뉴스") == 2
        assert notices.count() == 3


class TestSingletonRepository:
    def test_get_on_empty_table_is_none(self, db):
        assert SingletonRepository(db, "system_settings", SystemSettingsResponse).get() is None

    def test_save_inserts_then_updates_the_same_row(self, db):
        repo = SingletonRepository(db, "system_settings", SystemSettingsResponse)
        first = repo.save({"password_expiration_enabled": True, "password_expiration_days": 30})
        second = repo.save({"password_expiration_days": 60})
        assert first.id == second.id
        assert len(db.rows("system_settings")) == 1
        assert second.password_expiration_enabled is True
        assert second.password_expiration_days == 60

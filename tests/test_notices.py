"""Tests for notice and notice-category admin endpoints and the public notice pages."""

NOTICES = "/api/admin/notices"
CATEGORIES = "/api/admin/notice-categories"


class TestNoticeEndpoints:
    def test_create_then_get(self, client, admin_headers):
        created = client.post(NOTICES, json={"title_ko": "신제품 출시", "title_en": "New product"}, headers=admin_headers)
        assert created.status_code == 201
        notice = created.json()
        assert notice["status"] == "draft"
        assert notice["published_at"] is None

        fetched = client.get(f"{NOTICES}/{notice['id']}", headers=admin_headers)
        assert fetched.status_code == 200
        assert fetched.json()["title_ko"] == "신제품 출시"

    def test_get_absent_id_is_404(self, client, admin_headers):
        response = client.get(f"{NOTICES}/does-not-exist", headers=admin_headers)
        assert response.status_code == 404
        assert response.json() == {"detail": "Notice not found"}

    def test_delete_then_get_is_404(self, client, admin_headers):
        notice_id = client.post(NOTICES, json={"title_ko": "삭제 예정"}, headers=admin_headers).json()["id"]
        assert client.delete(f"{NOTICES}/{notice_id}", headers=admin_headers).status_code == 204
        assert client.get(f"{NOTICES}/{notice_id}", headers=admin_headers).status_code == 404

    def test_body_is_sanitized_on_write(self, client, admin_headers):
        response = client.post(NOTICES, json={
            "title_ko": "본문",
            "body_ko": "<p>안녕하세요</p><script>alert(1)</script>",
        }, headers=admin_headers)
        assert response.json()["body_ko"] == "<p>안녕하세요</p>"

    def test_publishing_stamps_published_at(self, client, admin_headers):
        notice_id = client.post(NOTICES, json={"title_ko": "초안"}, headers=admin_headers).json()["id"]
        response = client.put(f"{NOTICES}/{notice_id}", json={"status": "published"}, headers=admin_headers)
        assert response.status_code == 200
        assert response.json()["published_at"] is not None
        assert response.json()["title_ko"] == "초안"

    def test_pinned_notices_listed_first(self, client, admin_headers):
        client.post(NOTICES, json={"title_ko": "pinned", "is_pinned": True}, headers=admin_headers)
        client.post(NOTICES, json={"title_ko": "newest"}, headers=admin_headers)
        titles = [n["title_ko"] for n in client.get(NOTICES, headers=admin_headers).json()]
        assert titles == ["pinned", "newest"]

    def test_missing_title_is_rejected(self, client, admin_headers):
        response = client.post(NOTICES, json={"title_ko": ""}, headers=admin_headers)
        assert response.status_code == 422

    def test_store_failure_is_500(self, client, fake_db, admin_headers):
        fake_db.fail_on("notices", "insert")
        response = client.post(NOTICES, json={"title_ko": "x"}, headers=admin_headers)
        assert response.status_code == 500
        assert "notices" in response.json()["detail"]


class TestNoticeCategories:
    def test_list_includes_post_count(self, client, fake_db, admin_headers):
        client.post(CATEGORIES, json={"name_ko": "뉴스", "name_en": "News"}, headers=admin_headers)
        fake_db.seed("notices", {"title_ko": "a", "category": "뉴스"}, {"title_ko": "b", "category": "뉴스"})
        categories = client.get(CATEGORIES, headers=admin_headers).json()
        assert categories[0]["name_ko"] == "뉴스"
        assert categories[0]["post_count"] == 2
        assert categories[0]["is_active"] is True

    def test_delete_in_use_category_is_conflict(self, client, fake_db, admin_headers):
        category_id = client.post(CATEGORIES, json={"name_ko": "뉴스"}, headers=admin_headers).json()["id"]
        fake_db.seed("notices", {"title_ko": "a", "category": "뉴스"})
        response = client.delete(f"{CATEGORIES}/{category_id}", headers=admin_headers)
        assert response.status_code == 409
        assert len(fake_db.rows("notice_categories")) == 1

    def test_delete_unused_category(self, client, fake_db, admin_headers):
        category_id = client.post(CATEGORIES, json={"name_ko": "전시회"}, headers=admin_headers).json()["id"]
        assert client.delete(f"{CATEGORIES}/{category_id}", headers=admin_headers).status_code == 204
        assert fake_db.rows("notice_categories") == []

    def test_delete_absent_category_is_404(self, client, admin_headers):
        assert client.delete(f"{CATEGORIES}/missing", headers=admin_headers).status_code == 404

    def test_reorder(self, client, admin_headers):
        first = client.post(CATEGORIES, json={"name_ko": "A", "sort_order": 1}, headers=admin_headers).json()
        second = client.post(CATEGORIES, json={"name_ko": "B", "sort_order": 2}, headers=admin_headers).json()
        response = client.put(f"{CATEGORIES}/order", json={"items": [
            {"id": first["id"], "sort_order": 2},
            {"id": second["id"], "sort_order": 1},
        ]}, headers=admin_headers)
        assert response.status_code == 200
        assert [c["name_ko"] for c in response.json()] == ["B", "A"]


class TestPublicNoticePages:
    def test_published_notice_detail_counts_views(self, client, fake_db):
        notice = fake_db.seed("notices", {
            "title_ko": "공지", "title_en": "Notice", "status": "published", "views": 4,
            "body_ko": "<p>본문</p>", "body_en": None,
        })[0]
        response = client.get(f"/en/notices/{notice['id']}")
        assert response.status_code == 200
        body = response.json()["notice"]
        assert body["title"] == "Notice"
        assert body["body"] == "<p>본문</p>"
        assert body["views"] == 5

    def test_draft_notice_is_404(self, client, fake_db):
        notice = fake_db.seed("notices", {"title_ko": "초안", "status": "draft"})[0]
        assert client.get(f"/ko/notices/{notice['id']}").status_code == 404

    def test_list_shows_only_published(self, client, fake_db):
        fake_db.seed("notices",
                     {"title_ko": "공개", "status": "published"},
                     {"title_ko": "비공개", "status": "draft"})
        notices = client.get("/ko/notices").json()["notices"]
        assert [n["title"] for n in notices] == ["공개"]

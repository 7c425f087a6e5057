"""Tests for product, product-category and partner admin endpoints."""
import json

PRODUCTS = "/api/admin/products"
PRODUCT_CATEGORIES = "/api/admin/product-categories"
PARTNERS = "/api/admin/partners"


def seed_links(fake_db):
    partner = fake_db.seed("partners", {"name_ko": "한국화학", "name_en": "Korea Chem"})[0]
    notice = fake_db.seed("notices", {"title_ko": "출시 안내", "status": "published"})[0]
    fake_db.seed("product_categories", {"code": "blow-molding", "name_ko": "블로우 몰딩기", "name_en": "Blow Molding"})
    return partner, notice


class TestProductEndpoints:
    def test_create_with_images_and_links(self, client, fake_db, admin_headers):
        partner, notice = seed_links(fake_db)
        response = client.post(PRODUCTS, data={
            "name_ko": "블로우 성형기 DC-700",
            "category_code": "blow-molding",
            "is_featured": "on",
            "specs": json.dumps({"clamping force": "70 ton"}),
            "features": json.dumps(["servo drive"]),
            "partner_ids": json.dumps([partner["id"]]),
            "notice_ids": json.dumps([notice["id"]]),
        }, files=[
            ("images", ("front.png", b"png-bytes", "image/png")),
            ("images", ("side view.png", b"png-bytes", "image/png")),
        ], headers=admin_headers)

        assert response.status_code == 201
        product = response.json()
        assert product["status"] == "active"
        assert product["is_featured"] is True
        assert product["specs"] == {"clamping force": "70 ton"}
        assert len(product["images"]) == 2
        assert product["images"][1].endswith("-sideview.png")
        assert [p["name_ko"] for p in product["partners"]] == ["한국화학"]
        assert [n["title_ko"] for n in product["notices"]] == ["출시 안내"]
        assert product["category"]["name_en"] == "Blow Molding"
        links = [(r["product_id"], r["partner_id"]) for r in fake_db.rows("product_partners")]
        assert links == [(product["id"], partner["id"])]

    def test_failed_upload_is_skipped(self, client, fake_db, admin_headers):
        fake_db.storage.fail_uploads = True
        response = client.post(PRODUCTS, data={"name_ko": "이미지 없음"},
                               files=[("images", ("a.png", b"x", "image/png"))], headers=admin_headers)
        assert response.status_code == 201
        assert response.json()["images"] == []

    def test_link_failure_removes_the_new_product(self, client, fake_db, admin_headers):
        partner, _ = seed_links(fake_db)
        fake_db.fail_on("product_partners", "insert")
        response = client.post(PRODUCTS, data={
            "name_ko": "연결 실패",
            "partner_ids": json.dumps([partner["id"]]),
        }, headers=admin_headers)
        assert response.status_code == 500
        assert fake_db.rows("products") == []

    def test_invalid_json_field_is_400(self, client, admin_headers):
        response = client.post(PRODUCTS, data={"name_ko": "x", "specs": "{oops"}, headers=admin_headers)
        assert response.status_code == 400
        assert "specs" in response.json()["detail"]

    def test_invalid_status_is_400(self, client, admin_headers):
        response = client.post(PRODUCTS, data={"name_ko": "x", "status": "sold"}, headers=admin_headers)
        assert response.status_code == 400

    def test_update_keeps_current_images_and_replaces_links(self, client, fake_db, admin_headers):
        partner, notice = seed_links(fake_db)
        other = fake_db.seed("partners", {"name_ko": "두번째"})[0]
        product = client.post(PRODUCTS, data={
            "name_ko": "원본",
            "partner_ids": json.dumps([partner["id"]]),
            "notice_ids": json.dumps([notice["id"]]),
        }, files=[("images", ("a.png", b"x", "image/png"))], headers=admin_headers).json()
        kept = product["images"][0]

        response = client.put(f"{PRODUCTS}/{product['id']}", data={
            "name_ko": "수정",
            "current_images": json.dumps([kept]),
            "partner_ids": json.dumps([other["id"]]),
        }, files=[("images", ("b.png", b"y", "image/png"))], headers=admin_headers)

        assert response.status_code == 200
        updated = response.json()
        assert updated["name_ko"] == "수정"
        assert updated["images"][0] == kept
        assert len(updated["images"]) == 2
        assert [p["id"] for p in updated["partners"]] == [other["id"]]
        assert updated["notices"] == []

    def test_set_featured_and_recommended_on_home(self, client, fake_db, admin_headers):
        product_id = client.post(PRODUCTS, data={"name_ko": "추천"}, headers=admin_headers).json()["id"]
        response = client.patch(f"{PRODUCTS}/{product_id}/featured", json={"is_featured": True}, headers=admin_headers)
        assert response.json()["is_featured"] is True
        home = client.get("/en").json()
        assert [p["name"] for p in home["products"]] == ["추천"]

    def test_delete_then_get_is_404(self, client, admin_headers):
        product_id = client.post(PRODUCTS, data={"name_ko": "삭제"}, headers=admin_headers).json()["id"]
        assert client.delete(f"{PRODUCTS}/{product_id}", headers=admin_headers).status_code == 204
        assert client.get(f"{PRODUCTS}/{product_id}", headers=admin_headers).status_code == 404


class TestProductCategories:
    def test_duplicate_code_is_conflict(self, client, admin_headers):
        body = {"code": "extrusion", "name_ko": "압출 라인"}
        assert client.post(PRODUCT_CATEGORIES, json=body, headers=admin_headers).status_code == 201
        response = client.post(PRODUCT_CATEGORIES, json=body, headers=admin_headers)
        assert response.status_code == 409
        assert response.json()["detail"] == "Category code 'extrusion' already exists"

    def test_list_counts_products(self, client, fake_db, admin_headers):
        client.post(PRODUCT_CATEGORIES, json={"code": "extrusion", "name_ko": "압출 라인"}, headers=admin_headers)
        fake_db.seed("products", {"name_ko": "a", "category_code": "extrusion"})
        categories = client.get(PRODUCT_CATEGORIES, headers=admin_headers).json()
        assert categories[0]["product_count"] == 1

    def test_delete_in_use_category_is_conflict(self, client, fake_db, admin_headers):
        client.post(PRODUCT_CATEGORIES, json={"code": "extrusion", "name_ko": "압출 라인"}, headers=admin_headers)
        fake_db.seed("products", {"name_ko": "a", "category_code": "extrusion"})
        assert client.delete(f"{PRODUCT_CATEGORIES}/extrusion", headers=admin_headers).status_code == 409

    def test_delete_unused_category(self, client, fake_db, admin_headers):
        client.post(PRODUCT_CATEGORIES, json={"code": "extrusion", "name_ko": "압출 라인"}, headers=admin_headers)
        assert client.delete(f"{PRODUCT_CATEGORIES}/extrusion", headers=admin_headers).status_code == 204
        assert fake_db.rows("product_categories") == []


class TestPartners:
    def test_create_with_logo(self, client, fake_db, admin_headers):
        response = client.post(PARTNERS, data={"name_ko": "협력사", "type": "supplier"},
                               files={"logo": ("logo.png", b"img", "image/png")}, headers=admin_headers)
        assert response.status_code == 201
        partner = response.json()
        assert partner["logo_url"].startswith("https://storage.test/partners/")
        assert partner["type"] == "supplier"

    def test_unknown_type_is_400(self, client, admin_headers):
        response = client.post(PARTNERS, data={"name_ko": "협력사", "type": "reseller"}, headers=admin_headers)
        assert response.status_code == 400

    def test_update_without_logo_keeps_existing(self, client, fake_db, admin_headers):
        partner = fake_db.seed("partners", {"name_ko": "협력사", "logo_url": "https://cdn/logo.png"})[0]
        response = client.put(f"{PARTNERS}/{partner['id']}", data={"name_en": "Partner"}, headers=admin_headers)
        assert response.status_code == 200
        assert response.json()["logo_url"] == "https://cdn/logo.png"
        assert response.json()["name_en"] == "Partner"

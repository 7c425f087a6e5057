import logging
from typing import Any, Dict, List, Optional

from supabase import Client

from app.core.exceptions import AppError
from app.core.repository import SupabaseRepository, run_query
from app.modules.notices.schemas import NoticeSummary
from app.modules.partners.schemas import PartnerSummary
from app.modules.products.schemas import (
    ProductCategorySummary, ProductCreate, ProductResponse, ProductUpdate
)

logger = logging.getLogger(__name__)

RECOMMENDED_LIMIT = 6
LINK_FIELDS = ("partner_ids", "notice_ids")


class ProductService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.products = SupabaseRepository(supabase, "products", ProductResponse)

    def _select_in(self, table: str, columns: str, column: str, values: List[str]) -> List[Dict[str, Any]]:
        if not values:
            return []
        query = self.supabase.table(table).select(columns).in_(column, values)
        return run_query(query, table, "list").data or []

    def _links(self, table: str, column: str, product_ids: List[str]) -> Dict[str, List[str]]:
        """product_id -> linked ids, in link insertion order"""
        links: Dict[str, List[str]] = {}
        for row in self._select_in(table, f"product_id,{column}", "product_id", product_ids):
            links.setdefault(row["product_id"], []).append(row[column])
        return links

    def _attach_partners(self, products: List[ProductResponse]) -> List[ProductResponse]:
        links = self._links("product_partners", "partner_id", [p.id for p in products])
        partner_ids = sorted({pid for ids in links.values() for pid in ids})
        partners = {
            row["id"]: PartnerSummary(**row)
            for row in self._select_in("partners", "id,name_ko,name_en,logo_url", "id", partner_ids)
        }
        return [
            p.model_copy(update={"partners": [partners[i] for i in links.get(p.id, []) if i in partners]})
            for p in products
        ]

    def _attach_categories(self, products: List[ProductResponse]) -> List[ProductResponse]:
        codes = sorted({p.category_code for p in products if p.category_code})
        categories = {
            row["code"]: ProductCategorySummary(**row)
            for row in self._select_in("product_categories", "code,name_ko,name_en", "code", codes)
        }
        return [p.model_copy(update={"category": categories.get(p.category_code)}) for p in products]

    def _attach_notices(self, product: ProductResponse) -> ProductResponse:
        links = self._links("product_notices", "notice_id", [product.id])
        notice_ids = links.get(product.id, [])
        notices = {
            row["id"]: NoticeSummary(**row)
            for row in self._select_in("notices", "id,title_ko,title_en", "id", notice_ids)
        }
        return product.model_copy(update={"notices": [notices[i] for i in notice_ids if i in notices]})

    def list_products(
        self,
        status: Optional[str] = None,
        category_code: Optional[str] = None,
        limit: Optional[int] = None
    ) -> List[ProductResponse]:
        """Newest first, with partners and category attached"""
        products = self.products.list(limit=limit, status=status, category_code=category_code)
        return self._attach_categories(self._attach_partners(products))

    def list_recommended(self) -> List[ProductResponse]:
        """Active featured products for the home page"""
        products = self.products.list(limit=RECOMMENDED_LIMIT, status="active", is_featured=True)
        return self._attach_categories(products)

    def get_product(self, product_id: str) -> ProductResponse:
        product = self.products.get(product_id)
        product = self._attach_categories(self._attach_partners([product]))[0]
        return self._attach_notices(product)

    def _replace_links(self, product_id: str, partner_ids: List[str], notice_ids: List[str]):
        """Delete-then-insert the link rows for one product"""
        for table, column, ids in (
            ("product_partners", "partner_id", partner_ids),
            ("product_notices", "notice_id", notice_ids),
        ):
            run_query(self.supabase.table(table).delete().eq("product_id", product_id), table, "delete")
            if ids:
                rows = [{"product_id": product_id, column: linked_id} for linked_id in dict.fromkeys(ids)]
                run_query(self.supabase.table(table).insert(rows), table, "create")

    def create_product(self, product_data: ProductCreate, image_urls: Optional[List[Optional[str]]] = None) -> ProductResponse:
        """Insert the product row, then its partner/notice links.

        A failed link insert removes the new product row again before re-raising.
        """
        fields = product_data.model_dump(exclude=set(LINK_FIELDS))
        fields["images"] = [url for url in image_urls or [] if url]
        product = self.products.create(fields)
        try:
            self._replace_links(product.id, product_data.partner_ids, product_data.notice_ids)
        except AppError:
            logger.error("Linking product %s failed; removing the product row", product.id)
            self.products.delete(product.id)
            raise
        logger.info("Product created: %s", product.id)
        return self.get_product(product.id)

    def update_product(
        self,
        product_id: str,
        product_data: ProductUpdate,
        image_urls: Optional[List[Optional[str]]] = None
    ) -> ProductResponse:
        # Row update and link replacement are separate writes; a link failure leaves the row updated
        fields = product_data.model_dump(exclude=set(LINK_FIELDS) | {"current_images"})
        fields["images"] = list(product_data.current_images) + [url for url in image_urls or [] if url]
        self.products.update(product_id, fields)
        self._replace_links(product_id, product_data.partner_ids, product_data.notice_ids)
        return self.get_product(product_id)

    def delete_product(self, product_id: str) -> bool:
        """Link rows go with the product (on delete cascade)"""
        return self.products.delete(product_id) > 0

    def set_featured(self, product_id: str, is_featured: bool) -> ProductResponse:
        return self.products.update(product_id, {"is_featured": is_featured})

from collections import Counter
from typing import List

from supabase import Client

from app.core.exceptions import ConflictError
from app.core.repository import SupabaseRepository, run_query
from app.modules.product_categories.schemas import ProductCategoryCreate, ProductCategoryResponse


class ProductCategoryService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.categories = SupabaseRepository(
            supabase, "product_categories", ProductCategoryResponse,
            key="code", order_by=(("created_at", False),),
        )

    def list_categories(self) -> List[ProductCategoryResponse]:
        """Oldest first, with the number of products in each"""
        categories = self.categories.list()
        result = run_query(self.supabase.table("products").select("category_code"), "products", "list")
        counts = Counter(row.get("category_code") for row in result.data or [])
        return [c.model_copy(update={"product_count": counts.get(c.code, 0)}) for c in categories]

    def create_category(self, category_data: ProductCategoryCreate) -> ProductCategoryResponse:
        try:
            return self.categories.create(category_data.model_dump())
        except ConflictError:
            raise ConflictError(f"Category code '{category_data.code}' already exists")

    def delete_category(self, code: str) -> bool:
        """Refuses while products still use the category"""
        in_use = run_query(
            self.supabase.table("products").select("id", count="exact").eq("category_code", code),
            "products", "count",
        ).count or 0
        if in_use > 0:
            raise ConflictError(
                f"{in_use} product(s) use this category. Delete them or change their category first."
            )
        return self.categories.delete(code) > 0

from collections import Counter
from typing import List

from supabase import Client

from app.core.exceptions import ConflictError
from app.core.repository import SupabaseRepository, run_query
from app.modules.notice_categories.schemas import (
    NoticeCategoryCreate, NoticeCategoryUpdate, NoticeCategoryResponse, NoticeCategoryOrder
)
from app.modules.notices.schemas import NoticeResponse


class NoticeCategoryService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.categories = SupabaseRepository(
            supabase, "notice_categories", NoticeCategoryResponse,
            order_by=(("sort_order", False), ("created_at", False)),
        )
        self.notices = SupabaseRepository(supabase, "notices", NoticeResponse)

    def _post_counts(self) -> Counter:
        """Notices per category name (notices.category holds name_ko)"""
        result = run_query(self.supabase.table("notices").select("category"), "notices", "list")
        return Counter(row.get("category") for row in result.data or [])

    def list_categories(self) -> List[NoticeCategoryResponse]:
        categories = self.categories.list()
        counts = self._post_counts()
        return [c.model_copy(update={"post_count": counts.get(c.name_ko, 0)}) for c in categories]

    def create_category(self, category_data: NoticeCategoryCreate) -> NoticeCategoryResponse:
        fields = category_data.model_dump()
        fields["is_active"] = True
        return self.categories.create(fields)

    def update_category(self, category_id: str, category_data: NoticeCategoryUpdate) -> NoticeCategoryResponse:
        # Renaming does not rewrite notices.category; old notices keep the old name
        fields = category_data.model_dump(exclude_unset=True)
        if not fields:
            return self.categories.get(category_id)
        return self.categories.update(category_id, fields)

    def delete_category(self, category_id: str) -> bool:
        """Refuses while any notice still uses the category"""
        category = self.categories.get(category_id)
        in_use = self.notices.count(category=category.name_ko)
        if in_use > 0:
            raise ConflictError(
                f"{in_use} notice(s) use this category. Delete them or change their category first."
            )
        return self.categories.delete(category_id) > 0

    def reorder_categories(self, items: List[NoticeCategoryOrder]) -> List[NoticeCategoryResponse]:
        # One update per row; a failure part-way leaves earlier rows reordered
        for item in items:
            self.categories.update(item.id, {"sort_order": item.sort_order})
        return self.list_categories()

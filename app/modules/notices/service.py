import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from supabase import Client

from app.core.repository import SupabaseRepository
from app.core.sanitize import sanitize
from app.modules.notices.schemas import NoticeCreate, NoticeResponse, NoticeUpdate

logger = logging.getLogger(__name__)

RICH_TEXT_FIELDS = ("body_ko", "body_en")


def _sanitize_bodies(fields: Dict[str, Any]) -> Dict[str, Any]:
    for field in RICH_TEXT_FIELDS:
        if fields.get(field):
            fields[field] = sanitize(fields[field])
    return fields


class NoticeService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.notices = SupabaseRepository(
            supabase, "notices", NoticeResponse,
            order_by=(("is_pinned", True), ("created_at", True)),
        )

    def list_notices(
        self,
        status: Optional[str] = None,
        category: Optional[str] = None,
        limit: Optional[int] = None
    ) -> List[NoticeResponse]:
        """Pinned first, then newest first"""
        return self.notices.list(limit=limit, status=status, category=category)

    def get_notice(self, notice_id: str) -> NoticeResponse:
        return self.notices.get(notice_id)

    def create_notice(self, notice_data: NoticeCreate) -> NoticeResponse:
        fields = _sanitize_bodies(notice_data.model_dump(mode="json"))
        if fields["status"] == "published" and not fields.get("published_at"):
            fields["published_at"] = datetime.now(timezone.utc).isoformat()
        notice = self.notices.create(fields)
        logger.info("Notice created: %s", notice.id)
        return notice

    def update_notice(self, notice_id: str, notice_data: NoticeUpdate) -> NoticeResponse:
        """Partial update: only submitted fields are written"""
        fields = _sanitize_bodies(notice_data.model_dump(mode="json", exclude_unset=True))
        now = datetime.now(timezone.utc).isoformat()
        if fields.get("status") == "published" and "published_at" not in fields:
            current = self.notices.get(notice_id)
            if not current.published_at:
                fields["published_at"] = now
        fields["updated_at"] = now
        return self.notices.update(notice_id, fields)

    def delete_notice(self, notice_id: str) -> bool:
        return self.notices.delete(notice_id) > 0

    def increment_views(self, notice: NoticeResponse) -> NoticeResponse:
        # read-modify-write; concurrent readers may lose an increment
        return self.notices.update(notice.id, {"views": (notice.views or 0) + 1})

from typing import List

from supabase import Client

from app.core.repository import SupabaseRepository
from app.modules.history.schemas import HistoryCreate, HistoryUpdate, HistoryResponse


def _zero_pad(fields: dict) -> dict:
    """Months and days are stored two-digit so text ordering matches calendar ordering"""
    for field in ("month", "day"):
        if fields.get(field):
            fields[field] = fields[field].zfill(2)
    return fields


class HistoryService:
    def __init__(self, supabase: Client):
        self.history = SupabaseRepository(
            supabase, "history", HistoryResponse,
            order_by=(("year", True), ("month", True)),
        )

    def list_history(self) -> List[HistoryResponse]:
        """Newest year first, then newest month"""
        return self.history.list()

    def get_history(self, history_id: str) -> HistoryResponse:
        return self.history.get(history_id)

    def create_history(self, history_data: HistoryCreate) -> HistoryResponse:
        return self.history.create(_zero_pad(history_data.model_dump()))

    def update_history(self, history_id: str, history_data: HistoryUpdate) -> HistoryResponse:
        fields = _zero_pad(history_data.model_dump(exclude_unset=True))
        if not fields:
            return self.history.get(history_id)
        return self.history.update(history_id, fields)

    def delete_history(self, history_id: str) -> bool:
        return self.history.delete(history_id) > 0

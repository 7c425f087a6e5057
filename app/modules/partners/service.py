from typing import List, Optional

from supabase import Client

from app.core.repository import SupabaseRepository
from app.modules.partners.schemas import PartnerCreate, PartnerUpdate, PartnerResponse


class PartnerService:
    def __init__(self, supabase: Client):
        self.partners = SupabaseRepository(supabase, "partners", PartnerResponse)

    def list_partners(self, type: Optional[str] = None) -> List[PartnerResponse]:
        return self.partners.list(type=type)

    def get_partner(self, partner_id: str) -> PartnerResponse:
        return self.partners.get(partner_id)

    def create_partner(self, partner_data: PartnerCreate, logo_url: Optional[str] = None) -> PartnerResponse:
        fields = partner_data.model_dump()
        fields["logo_url"] = logo_url
        return self.partners.create(fields)

    def update_partner(self, partner_id: str, partner_data: PartnerUpdate, logo_url: Optional[str] = None) -> PartnerResponse:
        """Partial update; the logo is replaced only when a new one was uploaded"""
        fields = partner_data.model_dump(exclude_unset=True)
        if logo_url:
            fields["logo_url"] = logo_url
        if not fields:
            return self.partners.get(partner_id)
        return self.partners.update(partner_id, fields)

    def delete_partner(self, partner_id: str) -> bool:
        return self.partners.delete(partner_id) > 0

from typing import List, Optional

from supabase import Client

from app.core.repository import SupabaseRepository
from app.modules.facilities.schemas import FacilityCreate, FacilityUpdate, FacilityResponse


class FacilityService:
    def __init__(self, supabase: Client):
        self.facilities = SupabaseRepository(supabase, "facilities", FacilityResponse)

    def list_facilities(self, status: Optional[str] = None) -> List[FacilityResponse]:
        return self.facilities.list(status=status)

    def get_facility(self, facility_id: str) -> FacilityResponse:
        return self.facilities.get(facility_id)

    def create_facility(self, facility_data: FacilityCreate, image_url: Optional[str] = None) -> FacilityResponse:
        fields = facility_data.model_dump()
        fields["status"] = fields.get("status") or "active"
        fields["image_url"] = image_url
        return self.facilities.create(fields)

    def update_facility(self, facility_id: str, facility_data: FacilityUpdate, image_url: Optional[str] = None) -> FacilityResponse:
        fields = facility_data.model_dump(exclude_unset=True)
        if image_url:
            fields["image_url"] = image_url
        if not fields:
            return self.facilities.get(facility_id)
        return self.facilities.update(facility_id, fields)

    def delete_facility(self, facility_id: str) -> bool:
        return self.facilities.delete(facility_id) > 0

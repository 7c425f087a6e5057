import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from supabase import Client

from app.core.exceptions import NotFoundError
from app.core.repository import SingletonRepository
from app.core.sanitize import sanitize
from app.modules.company.schemas import (
    CompanySettingsResponse, CompanySettingsUpdate, FactoryImage
)

logger = logging.getLogger(__name__)

RICH_TEXT_FIELDS = ("ceo_message_content_ko", "ceo_message_content_en")

# Canonical company profile written by sync_defaults
DEFAULT_COMPANY_PROFILE: Dict[str, str] = {
    "company_name_ko": "대창기계산업(주)",
    "company_name_en": "DAECHANG MACHINERY Co., Ltd.",
    "ceo_name_ko": "김주훈",
    "ceo_name_en": "Ju-Hoon Kim",
    "establishment_ko": "2004년 03월 03일",
    "establishment_en": "March 3, 2004",
    "employees_ko": "16명 (2024년 기준)",
    "employees_en": "16 (as of 2024)",
    "revenue_ko": "약 49억 4,151만원 (2024년 기준)",
    "revenue_en": "Approx. 4.9 Billion KRW (as of 2024)",
    "address_ko": "경기도 화성시 양감면 토성로 553",
    "address_en": "553, Toseong-ro, Yanggam-myeon, Hwaseong-si, Gyeonggi-do, Korea",
}


class CompanyService:
    def __init__(self, supabase: Client):
        self.settings = SingletonRepository(supabase, "company_settings", CompanySettingsResponse)

    def get_settings(self) -> CompanySettingsResponse:
        company = self.settings.get()
        if company is None:
            raise NotFoundError("Company settings not found")
        return company

    def _save(self, fields: Dict[str, Any]) -> CompanySettingsResponse:
        fields["updated_at"] = datetime.now(timezone.utc).isoformat()
        return self.settings.save(fields)

    def update_settings(self, settings_data: CompanySettingsUpdate) -> CompanySettingsResponse:
        """Write only the submitted fields; creates the row on first save"""
        fields = settings_data.model_dump(exclude_unset=True)
        for field in RICH_TEXT_FIELDS:
            if fields.get(field):
                fields[field] = sanitize(fields[field])
        return self._save(fields)

    def sync_defaults(self) -> CompanySettingsResponse:
        company = self._save(dict(DEFAULT_COMPANY_PROFILE))
        logger.info("Company profile reset to defaults")
        return company

    def set_factory_images(self, images: List[FactoryImage]) -> CompanySettingsResponse:
        ordered = sorted(images, key=lambda image: image.sort_order)
        return self._save({"factory_images": [image.model_dump() for image in ordered]})

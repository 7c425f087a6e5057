from datetime import datetime, timezone
from typing import List, Optional

from supabase import Client

from app.core.repository import SingletonRepository
from app.modules.home.schemas import HomeSettingsResponse, HomeSettingsUpdate

NEW_FILE_PREFIX = "new_file_"

DEFAULT_HOME_SETTINGS = HomeSettingsResponse(
    hero_headline="산업 기계의 미래를 혁신하다",
    hero_subheadline="블로우 몰딩기 및 압출 라인의 신뢰할 수 있는 파트너.",
    hero_images=["/hero-bg.png", "/hero-bg-2.png", "/hero-bg-3.png"],
    show_products_section=True,
)


def resolve_hero_images(
    image_layout: Optional[List[str]],
    current_images: List[str],
    uploaded_urls: List[Optional[str]]
) -> List[str]:
    """Build the final hero image order.

    image_layout mixes existing URLs with "new_file_<i>" placeholders, where i is
    the position of the file in the upload list. Placeholders whose upload failed
    (or that point past the list) are dropped. Without a layout, successful
    uploads are appended to current_images.
    """
    if image_layout is None:
        return list(current_images) + [url for url in uploaded_urls if url]

    resolved = []
    for item in image_layout:
        if item.startswith(NEW_FILE_PREFIX):
            index = item[len(NEW_FILE_PREFIX):]
            if index.isdigit() and int(index) < len(uploaded_urls) and uploaded_urls[int(index)]:
                resolved.append(uploaded_urls[int(index)])
        else:
            resolved.append(item)
    return resolved


class HomeService:
    def __init__(self, supabase: Client):
        self.settings = SingletonRepository(supabase, "home_settings", HomeSettingsResponse)

    def get_settings(self) -> HomeSettingsResponse:
        """Stored settings, or the built-in defaults before the first save"""
        return self.settings.get() or DEFAULT_HOME_SETTINGS.model_copy(deep=True)

    def update_settings(
        self,
        settings_data: HomeSettingsUpdate,
        uploaded_urls: Optional[List[Optional[str]]] = None
    ) -> HomeSettingsResponse:
        hero_images = resolve_hero_images(
            settings_data.image_layout, settings_data.current_images, uploaded_urls or []
        )
        return self.settings.save({
            "hero_headline": settings_data.hero_headline,
            "hero_subheadline": settings_data.hero_subheadline,
            "hero_images": hero_images,
            "show_products_section": True,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        })
